"""
ScheduleBuilder - derives concrete dates for every task from the graph.

The walk is a depth-first traversal with an explicit stack. A task with
several parents (a join) is deferred until the last of its parents has been
expanded, so its start is the latest end among all of them.
"""
from datetime import date, timedelta
from typing import Dict, List, Mapping, Optional

from .models import GanttElement, TaskNode
from .logs import get_logger

log = get_logger("schedule")

def _sort_key(element: GanttElement):
    # Tasks with children first, leaves below them; earlier end first within each group
    return (element.is_leaf(), element.end)

class ScheduleBuilder:
    """Builds render maps from a read-only node mapping. Holds no state between builds."""

    def __init__(self, nodes: Mapping[str, TaskNode], root_name: str, project_start: date):
        self.nodes = nodes
        self.root_name = root_name
        self.project_start = project_start

    def build(self, start_node: Optional[str] = None) -> Dict[str, GanttElement]:
        """
        Schedule every task reachable from ``start_node``.

        Args:
            start_node: Task to build from, the root by default. The start node
                itself is not part of the result.

        Returns:
            Mapping of task name to element, in the order tasks became ready.
        """
        start_node = self.root_name if start_node is None else start_node
        dfs_stack = [start_node]
        render_map: Dict[str, GanttElement] = {}
        pending: Dict[str, int] = {}

        while dfs_stack:
            current = self.nodes.get(dfs_stack.pop())
            if current is None:
                continue

            ready: List[GanttElement] = []
            for child_name in sorted(current.children):
                child = self.nodes.get(child_name)
                if child is None:
                    continue

                if len(child.parents) == 1 or pending.get(child_name) == 1:
                    ready.append(self._schedule(child, current.name, render_map))
                elif child_name in pending:
                    pending[child_name] -= 1
                else:
                    pending[child_name] = len(child.parents) - 1

            ready.sort(key=_sort_key)
            for element in ready:
                if not element.is_leaf():
                    dfs_stack.append(element.name)
                render_map[element.name] = element

        log.debug(f"Scheduled {len(render_map)} tasks from '{start_node}'")
        return render_map

    def _earliest_start(self, node: TaskNode, expanded_from: str,
                        render_map: Mapping[str, GanttElement]) -> date:
        if expanded_from == self.root_name:
            return self.project_start

        earliest = None
        for parent in node.parents:
            element = render_map.get(parent)
            end = element.end if element is not None else self.project_start
            if earliest is None or end > earliest:
                earliest = end
        return earliest or self.project_start

    def _schedule(self, node: TaskNode, expanded_from: str,
                  render_map: Mapping[str, GanttElement]) -> GanttElement:
        start = self._earliest_start(node, expanded_from, render_map)
        overlapping_start = None

        if node.start is not None:
            if node.start >= start:
                start = node.start
            else:
                overlapping_start = node.start

        return GanttElement(
            name=node.name,
            start=start,
            end=start + timedelta(days=node.duration),
            parents=frozenset(node.parents),
            children=frozenset(node.children),
            color=node.color,
            overlapping_start=overlapping_start,
        )

def create_render_map(nodes: Mapping[str, TaskNode], root_name: str, project_start: date,
                      start_node: Optional[str] = None) -> Dict[str, GanttElement]:
    """Build a fresh render map; see :meth:`ScheduleBuilder.build`."""
    return ScheduleBuilder(nodes, root_name, project_start).build(start_node)
