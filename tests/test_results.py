import pytest
from pathgraph import (
    INFINITY,
    AlgorithmState,
    DirectedGraph,
    MinimumSpanTree,
    Pathway,
    Vertex,
    floyd_warshall,
)


def _chain():
    graph = DirectedGraph("abc", [("a", "b", 2), ("b", "c", 3)])
    return graph, Pathway(graph.vertices, 5, AlgorithmState.PATH_FOUND)


@pytest.mark.unit
def test_pathway_is_a_sequence():
    graph, pathway = _chain()
    assert len(pathway) == 3
    assert pathway[0] is graph["a"]
    assert pathway[-1] is graph["c"]
    assert pathway.values == ["a", "b", "c"]
    assert pathway.found
    assert "distance=5" in repr(pathway)


@pytest.mark.unit
def test_pathway_cursor():
    graph, pathway = _chain()
    assert pathway.current is graph["a"]
    assert pathway.previous() is Vertex.EMPTY
    assert pathway.next() is graph["a"]
    assert pathway.next() is graph["b"]
    assert pathway.next() is graph["c"]
    assert pathway.next() is Vertex.EMPTY
    assert pathway.next() is Vertex.EMPTY
    assert pathway.previous() is graph["c"]


@pytest.mark.unit
def test_empty_pathway():
    pathway = Pathway([], INFINITY, AlgorithmState.PATH_DOES_NOT_EXIST)
    assert not pathway.found
    assert pathway.current is Vertex.EMPTY
    assert pathway.next() is Vertex.EMPTY


@pytest.mark.unit
def test_minimum_span_tree_iterates_edges():
    graph, _ = _chain()
    tree = MinimumSpanTree(graph.edges, 5)
    assert len(tree) == 2
    assert list(tree) == list(graph.edges)
    assert tree.distance == 5


@pytest.mark.unit
def test_roadmap_lookup():
    graph, _ = _chain()
    roadmap = floyd_warshall(graph)
    assert roadmap[graph["a"], graph["c"]] == 5
    assert roadmap.get(graph["c"], graph["a"]) == INFINITY
    assert len(roadmap) == 9
    assert {(s.value, e.value) for (s, e), _ in roadmap.items()} == {(s, e) for s in "abc" for e in "abc"}
