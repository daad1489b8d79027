"""
Validation shared by node insertion and node replacement.

Checks run in a fixed order and stop at the first violated rule, so callers
always see the same error for the same input.
"""
from typing import Iterable, Mapping, Optional

from ..errors import GraphError, GraphErrorKind
from ..models import TaskNode
from ..logs import get_logger

log = get_logger("graph.validate")

def find_loop(nodes: Mapping[str, TaskNode], parents: Optional[Iterable[str]],
              children: Optional[Iterable[str]], exclude: Optional[str] = None) -> bool:
    """
    Check whether linking ``parents`` -> new node -> ``children`` closes a cycle.

    Walks existing child edges depth first from every proposed child and stops
    as soon as a proposed parent is reached.

    Args:
        nodes: Current node collection.
        parents: Proposed parent names.
        children: Proposed child names.
        exclude: Node that will not exist once the operation completes; it is
            never entered during the walk.

    Returns:
        True if a proposed parent is reachable from a proposed child.
    """
    if not parents or not children:
        return False

    parent_set = set(parents)
    dfs_stack = [child for child in children if child != exclude]
    visited = set()

    while dfs_stack:
        current = dfs_stack.pop()
        if current in parent_set:
            return True
        visited.add(current)

        node = nodes.get(current)
        if node is None:
            continue
        for child in node.children:
            if child not in visited and child != exclude:
                dfs_stack.append(child)

    return False

def validate_node(nodes: Mapping[str, TaskNode], root_name: str, name: str, duration: int,
                  parents: Optional[Iterable[str]], children: Optional[Iterable[str]],
                  previous_name: Optional[str] = None) -> None:
    """
    Validate a proposed node before any mutation happens.

    Args:
        nodes: Current node collection.
        root_name: Name of the graph root.
        name: Name the node will carry.
        duration: Proposed duration in days.
        parents: Proposed parent names, None when absent.
        children: Proposed child names, None when absent.
        previous_name: Current name of a node being replaced. It counts as a
            self reference and is left out of the cycle walk.

    Raises:
        GraphError: With the kind of the first rule that is violated.
    """
    own_names = {name} if previous_name is None else {name, previous_name}
    parents = list(parents) if parents is not None else None
    children = list(children) if children is not None else None

    if len(name) == 0:
        raise GraphError(GraphErrorKind.EMPTY_NAME)
    if duration == 0 and name != root_name:
        raise GraphError(GraphErrorKind.ZERO_DURATION)
    if duration < 0:
        raise GraphError(GraphErrorKind.NEGATIVE_DURATION)

    for parent in parents or ():
        if parent not in nodes:
            raise GraphError(GraphErrorKind.MISSING_PARENT)
        if parent in own_names:
            raise GraphError(GraphErrorKind.SELF_REFERENCE)

    for child in children or ():
        if child not in nodes:
            raise GraphError(GraphErrorKind.MISSING_CHILD)
        if child in own_names:
            raise GraphError(GraphErrorKind.SELF_REFERENCE)
        if child == root_name:
            raise GraphError(GraphErrorKind.ROOT_REFERENCE)

    if find_loop(nodes, parents, children, exclude=previous_name):
        log.debug(f"Rejected '{name}': parents {parents} reachable from children {children}")
        raise GraphError(GraphErrorKind.GRAPH_LOOP)
