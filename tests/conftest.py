# ruff: noqa: E402
import sys
from pathlib import Path

# ensure src is on PYTHONPATH
src_path = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(src_path))

import pytest
from pathgraph import DirectedGraph, GridGraph, Position, reset


@pytest.fixture(autouse=True)
def default_config():
    reset()
    yield
    reset()


@pytest.fixture
def tree_graph() -> DirectedGraph:
    graph = DirectedGraph("abcdefg")
    for start, end in ["ab", "ac", "bd", "be", "cf", "cg"]:
        graph.set_edge(start, end, 0)
    return graph


WEIGHTED_EDGES = [
    ("A", "B", 3), ("A", "F", 2), ("B", "C", 17), ("B", "D", 16),
    ("C", "D", 8), ("C", "I", 18), ("D", "E", 11), ("D", "I", 4),
    ("E", "F", 1), ("E", "G", 6), ("E", "H", 5), ("E", "I", 10),
    ("F", "G", 7), ("G", "H", 15), ("H", "I", 12), ("H", "J", 13),
    ("I", "J", 9),
]


@pytest.fixture
def weighted_graph() -> DirectedGraph:
    """Ten vertices A..J, every edge present in both directions."""
    graph = DirectedGraph("ABCDEFGHIJ")
    for start, end, weight in WEIGHTED_EDGES:
        graph.set_edge(start, end, weight)
    for start, end, weight in WEIGHTED_EDGES:
        graph.set_edge(end, start, weight)
    return graph


@pytest.fixture
def dag() -> DirectedGraph:
    graph = DirectedGraph(str(i) for i in range(9))
    for start, end in ["01", "12", "13", "23", "42", "45", "67", "78", "64"]:
        graph.set_edge(start, end, 0)
    return graph


@pytest.fixture
def grid_factory():
    def _make(width: int, height: int, *, skip=(), **kwargs) -> GridGraph:
        grid = GridGraph(width, height, **kwargs)
        for row in range(height):
            for column in range(width):
                if (row, column) not in skip:
                    grid.set_vertex(Position(row, column), Position(row, column))
        return grid

    return _make
