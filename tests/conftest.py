import os
import tempfile

# Keep log files out of the user's home while testing
os.environ.setdefault("GANTTGRAPH_LOG_DIR", tempfile.mkdtemp(prefix="ganttgraph-logs-"))

from datetime import date

import pytest

from ganttgraph.graph import GraphStore

ROOT = "__root__"
PROJECT_START = date(2026, 1, 1)


@pytest.fixture
def graph():
    """An empty graph with a predictable root name."""
    return GraphStore("test-graph", PROJECT_START, root_name=ROOT)


def assert_invariants(store: GraphStore):
    """Check the structural invariants every graph state must satisfy."""
    nodes = store.get_list()
    root_name = store.get_root_name()

    assert store.get_node_count() <= GraphStore.MAX_NODES
    assert nodes[root_name].parents == set()

    for name, node in nodes.items():
        assert node.name == name
        if name != root_name:
            assert node.parents, f"{name} has no parent"
            assert root_name not in node.parents or len(node.parents) == 1
        assert root_name not in node.children
        for parent in node.parents:
            assert name in nodes[parent].children, f"{parent} does not list child {name}"
        for child in node.children:
            assert name in nodes[child].parents, f"{child} does not list parent {name}"

    # Acyclic: repeatedly strip nodes with no remaining parents
    in_degree = {name: len(node.parents) for name, node in nodes.items()}
    ready = [name for name, degree in in_degree.items() if degree == 0]
    seen = 0
    while ready:
        current = ready.pop()
        seen += 1
        for child in nodes[current].children:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                ready.append(child)
    assert seen == len(nodes), "graph contains a cycle"
