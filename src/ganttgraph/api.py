"""
GanttChart - the public entry point.

Cleans user input before it reaches the graph and reports every failure as an
ApiError naming the operation that failed.
"""
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterable, List, Optional

from .constants import Color
from .dates import parse_date
from .errors import ApiError, ApiOperation, GanttError, InputError
from .graph import GraphStore, KEEP
from .models import GanttElement, TaskNode
from .schedule import create_render_map
from .search import is_relevant
from .security import sanitize
from .logs import get_logger

log = get_logger("api")

@contextmanager
def _wrap(operation: ApiOperation):
    try:
        yield
    except GanttError as e:
        log.warning(f"{operation.value}{e}")
        raise ApiError(operation, e) from e

def _validate_color(color) -> Optional[Color]:
    if color is None:
        return None
    try:
        return Color(color)
    except ValueError as e:
        raise InputError(f"Unknown color: {color!r}") from e

def _duration_from_dates(duration: Optional[int], start: Optional[date], end: Optional[date]) -> Optional[int]:
    # Inclusive day count, so Mon..Fri is 5 days
    if start is not None and end is not None and start <= end:
        return (end - start).days + 1
    return duration

def _clean_names(names: Optional[Iterable[str]]) -> Optional[List[str]]:
    if names is None:
        return None
    return [sanitize(name) for name in names]

class GanttChart:
    """A single Gantt chart: a task graph plus its schedule."""

    def __init__(self, graph_id: str, start_date=None, root_name: Optional[str] = None):
        with _wrap(ApiOperation.GRAPH_CREATION):
            clean_id = sanitize(graph_id)
            clean_start = parse_date(start_date) if start_date is not None else date.today()
            self.graph = GraphStore(clean_id, clean_start, root_name=root_name)
        log.info(f"Created chart '{clean_id}' starting {clean_start}")

    @property
    def id(self) -> str:
        return self.graph.get_id()

    def get_start_date(self) -> date:
        return self.graph.get_start_date()

    def set_start_date(self, start_date) -> None:
        with _wrap(ApiOperation.START_DATE_SETTING):
            self.graph.set_start_date(parse_date(start_date))

    def get_default_color(self) -> Color:
        return self.graph.get_default_color()

    def set_default_color(self, color) -> None:
        with _wrap(ApiOperation.DEFAULT_COLOR_SETTING):
            if color is None:
                raise InputError("Color cannot be null")
            self.graph.set_default_color(_validate_color(color))

    def render(self, start_node: Optional[str] = None) -> Dict[str, GanttElement]:
        """Schedule the chart from a snapshot of the graph."""
        with _wrap(ApiOperation.RENDER_MAP_GENERATION):
            if start_node is not None:
                start_node = sanitize(start_node)
            return create_render_map(
                self.graph.snapshot(),
                self.graph.get_root_name(),
                self.graph.get_start_date(),
                start_node,
            )

    def find_tasks(self, pattern: str) -> List[str]:
        """Names of tasks containing ``pattern``, ignoring case. An empty pattern matches all tasks."""
        clean_pattern = sanitize(pattern)
        root_name = self.graph.get_root_name()
        return [
            name for name in self.graph.get_list()
            if name != root_name and is_relevant(clean_pattern, name)
        ]

    def put_task(self, name: str, duration: Optional[int] = None, parents: Optional[Iterable[str]] = None,
                 start=None, end=None, color=None) -> TaskNode:
        """
        Add a task.

        When both ``start`` and ``end`` are given the duration is the inclusive
        number of days between them; otherwise ``duration`` is used, 1 by default.
        """
        with _wrap(ApiOperation.TASK_PUTTING):
            clean_start = parse_date(start) if start is not None else None
            clean_end = parse_date(end) if end is not None else None
            task_duration = _duration_from_dates(duration, clean_start, clean_end)
            return self.graph.add_node(
                sanitize(name),
                1 if task_duration is None else task_duration,
                _clean_names(parents),
                None,
                _validate_color(color),
                clean_start,
            )

    def get_task(self, name: str) -> Optional[TaskNode]:
        with _wrap(ApiOperation.TASK_GETTING):
            return self.graph.get_node(sanitize(name))

    def update_task(self, name: str, new_name: Optional[str] = None, duration: Optional[int] = None,
                    parents: Optional[Iterable[str]] = None, children: Optional[Iterable[str]] = None,
                    start=KEEP, end=None, color=None) -> TaskNode:
        """
        Replace a task. Arguments left as None keep their current value.

        An omitted ``start`` keeps the requested start date; ``start=None``
        clears it.
        """
        with _wrap(ApiOperation.TASK_UPDATING):
            clean_start = parse_date(start) if start is not KEEP and start is not None else None
            clean_end = parse_date(end) if end is not None else None
            return self.graph.update_node(
                sanitize(name),
                sanitize(new_name) if new_name is not None else None,
                _duration_from_dates(duration, clean_start, clean_end),
                _clean_names(parents),
                _clean_names(children),
                _validate_color(color),
                KEEP if start is KEEP else clean_start,
            )

    def delete_task(self, name: str) -> None:
        with _wrap(ApiOperation.TASK_DELETING):
            self.graph.remove_node(sanitize(name))

    def get_tasks_count(self) -> int:
        return self.graph.get_node_count()

    def get_remaining_capacity(self) -> int:
        return self.graph.get_remaining_capacity()

    def is_at_capacity(self) -> bool:
        return self.graph.is_at_capacity()
