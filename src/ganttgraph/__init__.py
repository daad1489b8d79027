"""
ganttgraph - task dependency graphs and Gantt schedules.

Tasks live in a bounded acyclic graph anchored by a synthetic root. The
schedule builder walks that graph and derives start and end dates for every
task, waiting at join points until all parents are known.
"""

from .version import VERSION
from .constants import Color, MAX_NODES, MAX_NAME_LENGTH
from .errors import (
    GanttError,
    GraphError,
    GraphErrorKind,
    InputError,
    ApiError,
    ApiOperation,
    FileOperationError,
    CorruptionError,
)
from .models import TaskNode, GanttElement, PlanFile
from .graph import GraphStore
from .schedule import ScheduleBuilder, create_render_map
from .search import relevance, is_relevant
from .api import GanttChart
from .io import load_plan

__version__ = VERSION

__all__ = [
    "VERSION",
    "Color",
    "MAX_NODES",
    "MAX_NAME_LENGTH",
    "GanttError",
    "GraphError",
    "GraphErrorKind",
    "InputError",
    "ApiError",
    "ApiOperation",
    "FileOperationError",
    "CorruptionError",
    "TaskNode",
    "GanttElement",
    "PlanFile",
    "GraphStore",
    "ScheduleBuilder",
    "create_render_map",
    "relevance",
    "is_relevant",
    "GanttChart",
    "load_plan",
]
