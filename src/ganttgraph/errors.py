from enum import Enum


class GraphErrorKind(Enum):
    ROOT_CHANGE = "root name cannot be changed."
    ROOT_REMOVAL = "root node cannot be removed."
    ENTRY_DUPLICATE = "task name cannot be duplicated."
    EMPTY_NAME = "task name cannot be empty."
    ZERO_DURATION = "task duration cannot be zero."
    NEGATIVE_DURATION = "task duration cannot be negative."
    MISSING_ENTRY = "cannot find task with this name."
    MISSING_PARENT = "cannot find parent task with this name."
    MISSING_CHILD = "cannot find child task with this name."
    SELF_REFERENCE = "task cannot be its own parent or child."
    ROOT_REFERENCE = "root node cannot be a child."
    GRAPH_LOOP = "prevented operation that would cause a loop."
    NODE_LIMIT_EXCEEDED = "maximum number of nodes (10,000) exceeded."


class ApiOperation(Enum):
    GRAPH_CREATION = "Failed to create gantt chart graph: "
    START_DATE_SETTING = "Failed to set new start date for gantt chart graph: "
    DEFAULT_COLOR_SETTING = "Failed to set new default color for gantt chart graph: "
    RENDER_MAP_GENERATION = "Failed to generate render map for gantt chart graph: "
    TASK_PUTTING = "Failed to put task into gantt chart graph: "
    TASK_GETTING = "Failed to get task from gantt chart graph: "
    TASK_UPDATING = "Failed to update task in gantt chart graph: "
    TASK_DELETING = "Failed to delete task from gantt chart graph: "


class GanttError(Exception):
    """Base exception for all ganttgraph errors."""
    pass

class GraphError(GanttError):
    """A graph operation was rejected. ``kind`` names the violated rule."""

    def __init__(self, kind: GraphErrorKind):
        super().__init__(kind.value)
        self.kind = kind

class InputError(GanttError):
    """User supplied text, date or color could not be accepted."""
    pass

class ApiError(GanttError):
    """A facade call failed; the message carries the operation prefix."""

    def __init__(self, operation: ApiOperation, cause: Exception):
        super().__init__(f"{operation.value}{cause}")
        self.operation = operation
        self.cause = cause

class FileOperationError(GanttError):
    """Plan file could not be read. Can be retried."""
    pass

class CorruptionError(GanttError):
    """Plan file is not valid YAML or does not describe a plan."""
    pass
