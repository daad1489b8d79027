"""
Root binding rule.

Every non-root task keeps at least one parent. The root is only a placeholder
parent: it is attached when a task has no other parent and dropped as soon as
the task gains a second one.
"""
from typing import AbstractSet, Set


def bind_root(parents: AbstractSet[str], root_name: str) -> Set[str]:
    """Return the parent set ``parents`` should have once the root rule is applied."""
    if len(parents) > 1:
        return set(parents) - {root_name}
    if not parents:
        return {root_name}
    return set(parents)
