from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from datetime import date
from typing import Optional, List, Set, FrozenSet

from .constants import Color, DEFAULT_COLOR


class TaskNode(BaseModel):
    """A task stored in the graph. Edges are kept as name sets on both ends."""

    name: str = Field(description="Unique task name")
    duration: int = Field(description="Task length in whole days, 0 only for the root")
    parents: Set[str] = Field(default_factory=set, description="Names of parent tasks")
    children: Set[str] = Field(default_factory=set, description="Names of child tasks")
    color: Color = Field(default=DEFAULT_COLOR, description="Palette identifier for the UI")
    start: Optional[date] = Field(default=None, description="User requested start date")


class GanttElement(BaseModel):
    """A scheduled task ready to be drawn."""

    model_config = ConfigDict(frozen=True)

    name: str
    start: date
    end: date
    parents: FrozenSet[str] = frozenset()
    children: FrozenSet[str] = frozenset()
    color: Color = DEFAULT_COLOR
    overlapping_start: Optional[date] = Field(
        default=None,
        description="User requested start that was rejected for preceding the earliest feasible start"
    )

    @property
    def duration(self) -> int:
        return (self.end - self.start).days

    def is_leaf(self) -> bool:
        return not self.children


class PlanFile(BaseModel):
    """A YAML plan describing a chart and its tasks, in insertion order."""

    id: str = Field(description="Chart identifier")
    start_date: Optional[date] = Field(default=None, description="Project start, today when omitted")
    default_color: Optional[Color] = Field(default=None, description="Color for tasks that do not name one")
    tasks: List['PlanFile.Task'] = Field(default_factory=list, description="Tasks, parents before children")

    @model_validator(mode='after')
    def validate_unique_names(self):
        seen = set()
        for task in self.tasks:
            if task.name in seen:
                raise ValueError(f"Duplicate task name in plan: {task.name}")
            seen.add(task.name)
        return self

    class Task(BaseModel):
        name: str = Field(description="Task name")
        duration: Optional[int] = Field(default=None, description="Length in days, 1 when omitted")
        parents: List[str] = Field(default_factory=list, description="Parent task names")
        start: Optional[date] = Field(default=None, description="Requested start date")
        end: Optional[date] = Field(default=None, description="Requested inclusive end date")
        color: Optional[Color] = Field(default=None, description="Palette identifier")

        @field_validator('parents', mode='before')
        @classmethod
        def coerce_single_parent(cls, v):
            if v is None:
                return []
            if isinstance(v, str):
                return [v]
            return v

        @model_validator(mode='after')
        def validate_dates(self):
            if self.start and self.end and self.end < self.start:
                raise ValueError("end must not be before start")
            return self

PlanFile.model_rebuild()
