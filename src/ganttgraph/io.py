import yaml
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .api import GanttChart
from .errors import CorruptionError, FileOperationError
from .models import PlanFile
from .logs import get_logger

log = get_logger("io")

def load_plan_file(file_path: Union[Path, str]) -> PlanFile:
    """
    Read and validate a YAML plan file.

    Args:
        file_path: Path to the plan file

    Returns:
        The parsed plan

    Raises:
        FileOperationError: If the file is missing or cannot be read
        CorruptionError: If the file is not valid YAML or not a valid plan
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileOperationError(f"Plan file not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CorruptionError(f"YAML syntax error in {file_path}: {e}") from e
    except (IOError, OSError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise CorruptionError(f"File {file_path} does not contain a plan mapping")

    try:
        return PlanFile.model_validate(data)
    except ValidationError as e:
        raise CorruptionError(f"Invalid plan in {file_path}: {e}") from e

def build_chart(plan: PlanFile, root_name: str = None) -> GanttChart:
    """Create a chart and insert the plan's tasks in file order."""
    chart = GanttChart(plan.id, plan.start_date, root_name=root_name)
    if plan.default_color is not None:
        chart.set_default_color(plan.default_color)

    for task in plan.tasks:
        chart.put_task(
            task.name,
            duration=task.duration,
            parents=task.parents or None,
            start=task.start,
            end=task.end,
            color=task.color,
        )
    return chart

def load_plan(file_path: Union[Path, str]) -> GanttChart:
    """Load a YAML plan file into a new chart. The file is never written back."""
    plan = load_plan_file(file_path)
    chart = build_chart(plan)
    log.info(f"Loaded plan '{plan.id}' with {len(plan.tasks)} tasks from {file_path}")
    return chart
