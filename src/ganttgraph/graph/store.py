"""
GraphStore - owner of the task graph and all of its structural invariants.

Tasks are nodes keyed by name. Every edge is stored on both ends (parent lists
the child, child lists the parent). A synthetic root anchors tasks that have no
other parent, and no operation may introduce a cycle.

The store is not thread-safe; callers serialize access.
"""
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..constants import Color, DEFAULT_COLOR, MAX_NODES
from ..errors import GraphError, GraphErrorKind
from ..models import TaskNode
from ..naming import generate_root_name
from ..logs import get_logger
from .binding import bind_root
from .validate import validate_node

log = get_logger("graph")

# Marks an update argument that was not given, where None is a meaningful value
KEEP = object()

class GraphStore:
    MAX_NODES = MAX_NODES

    def __init__(self, graph_id: str, start_date: Optional[date] = None,
                 root_name: Optional[str] = None, default_color: Color = DEFAULT_COLOR):
        self._id = graph_id
        self._nodes: dict = {}
        self._default_color = default_color
        self._start_date = start_date or date.today()
        self._root_name = root_name or generate_root_name()
        self._nodes[self._root_name] = TaskNode(name=self._root_name, duration=0, color=default_color)
        log.debug(f"Created graph '{graph_id}' starting {self._start_date}")

    # ---- simple accessors ----

    def get_id(self) -> str:
        return self._id

    def get_default_color(self) -> Color:
        return self._default_color

    def set_default_color(self, color: Color) -> None:
        self._default_color = Color(color)

    def get_start_date(self) -> date:
        return self._start_date

    def set_start_date(self, start_date: date) -> None:
        self._start_date = start_date

    def get_root_name(self) -> str:
        return self._root_name

    def get_list(self) -> Mapping[str, TaskNode]:
        """Live, read-only view of the node collection."""
        return MappingProxyType(self._nodes)

    def snapshot(self) -> Mapping[str, TaskNode]:
        """Read-only copy of the node collection, unaffected by later mutations."""
        return MappingProxyType({name: node.model_copy(deep=True) for name, node in self._nodes.items()})

    def get_node(self, name: str) -> Optional[TaskNode]:
        return self._nodes.get(name)

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def get_node_count(self) -> int:
        return len(self._nodes)

    def get_remaining_capacity(self) -> int:
        return self.MAX_NODES - len(self._nodes)

    def is_at_capacity(self) -> bool:
        return len(self._nodes) >= self.MAX_NODES

    # ---- mutations ----

    def add_node(self, name: str, duration: int, parents: Optional[Iterable[str]] = None,
                 children: Optional[Iterable[str]] = None, color: Optional[Color] = None,
                 start: Optional[date] = None, validate: bool = True) -> TaskNode:
        """
        Insert a new task.

        Args:
            name: Unique task name.
            duration: Length in days.
            parents: Parent names. None or empty binds the task to the root.
            children: Child names, None or empty for none.
            color: Palette identifier, the graph default when None.
            start: Requested start date. Overridden by the schedule when it
                precedes the earliest feasible start.
            validate: Run the validation chain. Only internal callers that
                already validated the same state may pass False.

        Returns:
            The stored node.

        Raises:
            GraphError: NodeLimitExceeded, EntryDuplicate or any validation
                failure. Nothing is changed when an error is raised.
        """
        if self.is_at_capacity():
            raise GraphError(GraphErrorKind.NODE_LIMIT_EXCEEDED)
        if name in self._nodes:
            raise GraphError(GraphErrorKind.ENTRY_DUPLICATE)

        parents = list(parents) if parents else None
        children = list(children) if children else None
        if validate:
            validate_node(self._nodes, self._root_name, name, duration, parents, children)

        if parents is None:
            parents = [self._root_name]

        node = TaskNode(
            name=name,
            duration=duration,
            color=color if color is not None else self._default_color,
            start=start,
        )
        self._nodes[name] = node

        for parent in parents:
            self._bind_child(name, parent)
        for child in children or ():
            self._bind_child(child, name)

        log.debug(f"Added '{name}' duration={duration} parents={sorted(node.parents)} children={sorted(node.children)}")
        return node

    def update_node(self, name: str, new_name: Optional[str] = None, duration: Optional[int] = None,
                    parents: Optional[Iterable[str]] = None, children: Optional[Iterable[str]] = None,
                    color: Optional[Color] = None, start=KEEP) -> TaskNode:
        """
        Replace a task with a new version of itself.

        Arguments left as None keep the task's current value, except ``start``:
        it is kept when omitted and cleared when passed as None. The whole new
        state is validated against the graph as it will look after the swap
        before anything is touched, so a failed update changes nothing.
        Children the task no longer lists are not re-linked to its parents.

        Raises:
            GraphError: RootChange, EntryDuplicate, MissingEntry or any
                validation failure.
        """
        if name == self._root_name:
            raise GraphError(GraphErrorKind.ROOT_CHANGE)
        if new_name is not None and new_name != name and new_name in self._nodes:
            raise GraphError(GraphErrorKind.ENTRY_DUPLICATE)
        current = self._nodes.get(name)
        if current is None:
            raise GraphError(GraphErrorKind.MISSING_ENTRY)

        new_name = name if new_name is None else new_name
        duration = current.duration if duration is None else duration
        parents = list(current.parents) if parents is None else list(parents)
        children = list(current.children) if children is None else list(children)
        color = current.color if color is None else color
        start = current.start if start is KEEP else start

        validate_node(self._nodes, self._root_name, new_name, duration,
                      parents or None, children or None, previous_name=name)

        self.remove_node(name, is_update=True)
        node = self.add_node(new_name, duration, parents, children, color, start, validate=False)
        if new_name != name:
            log.debug(f"Renamed '{name}' to '{new_name}'")
        return node

    def remove_node(self, name: str, is_update: bool = False) -> None:
        """
        Delete a task.

        Each former parent inherits the task's children so reachability through
        the removed task is preserved. ``is_update`` suppresses that re-linking
        because the caller re-inserts the task straight away.

        Raises:
            GraphError: RootRemoval or MissingEntry.
        """
        if name == self._root_name:
            raise GraphError(GraphErrorKind.ROOT_REMOVAL)
        node = self._nodes.get(name)
        if node is None:
            raise GraphError(GraphErrorKind.MISSING_ENTRY)

        parents = sorted(node.parents)
        children = sorted(node.children)

        for parent in parents:
            self._unbind_child(name, parent, rebind=False)
        for child in children:
            self._unbind_child(child, name)
            if not is_update:
                for parent in parents:
                    self._bind_child(child, parent)

        del self._nodes[name]
        self._nodes[self._root_name].children.discard(name)
        log.debug(f"Removed '{name}'" + (" for update" if is_update else f", relinked {children} to {parents}"))

    # ---- edge maintenance ----

    def _bind_child(self, child_name: str, parent_name: str) -> None:
        parent = self._nodes.get(parent_name)
        child = self._nodes.get(child_name)
        if parent is None or child is None:
            return

        parent.children.add(child_name)
        child.parents.add(parent_name)
        self._ensure_root_binding(child_name)

    def _unbind_child(self, child_name: str, parent_name: str, rebind: bool = True) -> None:
        parent = self._nodes.get(parent_name)
        child = self._nodes.get(child_name)
        if parent is None or child is None:
            return

        parent.children.discard(child_name)
        child.parents.discard(parent_name)
        if rebind and parent_name != self._root_name:
            self._ensure_root_binding(child_name)

    def _ensure_root_binding(self, name: str) -> None:
        """Apply the root rule to ``name`` and keep the root's child set in step."""
        if name == self._root_name:
            return
        node = self._nodes.get(name)
        if node is None:
            return

        node.parents = bind_root(node.parents, self._root_name)
        root = self._nodes[self._root_name]
        if self._root_name in node.parents:
            root.children.add(name)
        else:
            root.children.discard(name)
