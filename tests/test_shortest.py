import random

import pytest
from pathgraph import (
    INFINITY,
    AlgorithmState,
    DirectedGraph,
    InvalidArgumentError,
    NegativeCostCycleError,
    Vertex,
    bellman_ford,
    dijkstra,
    dijkstra_path,
    floyd_warshall,
)


@pytest.mark.parametrize(
    "end, path, distance",
    [
        ("B", "AB", 3),
        ("C", "ABC", 20),
        ("D", "AFED", 14),
        ("E", "AFE", 3),
        ("F", "AF", 2),
        ("G", "AFG", 9),
        ("H", "AFEH", 8),
        ("I", "AFEI", 13),
        ("J", "AFEHJ", 21),
    ],
)
def test_dijkstra_paths_from_a(weighted_graph, end, path, distance):
    result = dijkstra_path(weighted_graph, weighted_graph["A"], weighted_graph[end])
    assert "".join(result.values) == path
    assert result.distance == distance
    assert result.state is AlgorithmState.PATH_FOUND


def test_bellman_ford_matches_dijkstra_on_weighted_graph(weighted_graph):
    start = weighted_graph["A"]
    assert bellman_ford(weighted_graph, start).distances() == dijkstra(weighted_graph, start).distances()
    assert bellman_ford(weighted_graph, start)[weighted_graph["D"]].distance == 14


def test_bellman_ford_paths_are_consistent(weighted_graph):
    collection = bellman_ford(weighted_graph, weighted_graph["A"])
    pathway = collection[weighted_graph["J"]]
    assert pathway.values[0] == "A" and pathway.values[-1] == "J"
    walked = sum(
        weighted_graph[a.value, b.value].weight for a, b in zip(pathway, pathway[1:])
    )
    assert walked == pathway.distance == 21


def test_source_and_unreachable_pathways():
    graph = DirectedGraph("abc", [("a", "b", 4)])
    collection = dijkstra(graph, graph["a"])

    own = collection[graph["a"]]
    assert own.values == ["a"]
    assert own.distance == 0
    assert own.found

    lost = collection[graph["c"]]
    assert list(lost) == []
    assert lost.distance == INFINITY
    assert lost.state is AlgorithmState.PATH_DOES_NOT_EXIST
    assert graph["c"] not in collection
    assert graph["b"] in collection
    assert collection.reachable_count == 2


def test_pathways_are_cached(weighted_graph):
    collection = dijkstra(weighted_graph, weighted_graph["A"])
    assert collection[weighted_graph["J"]] is collection[weighted_graph["J"]]


def test_pathway_cache_is_bounded(weighted_graph):
    collection = dijkstra(weighted_graph, weighted_graph["A"], cache_size=1)
    first = collection[weighted_graph["J"]]
    collection[weighted_graph["I"]]
    again = collection[weighted_graph["J"]]
    assert first is not again
    assert first.values == again.values


def test_bellman_ford_handles_negative_edges():
    graph = DirectedGraph("sabc", [("s", "a", 4), ("s", "b", 5), ("b", "a", -3), ("a", "c", 2)])
    collection = bellman_ford(graph, graph["s"])
    assert collection.distances() == {"s": 0, "a": 2, "b": 5, "c": 4}
    assert collection[graph["c"]].values == ["s", "b", "a", "c"]


def test_bellman_ford_detects_negative_cycle():
    graph = DirectedGraph("sabc", [("s", "a", 1), ("a", "b", 2), ("b", "c", -4), ("c", "a", 1)])
    with pytest.raises(NegativeCostCycleError):
        bellman_ford(graph, graph["s"])


def test_bellman_ford_ignores_unreachable_negative_edges():
    graph = DirectedGraph("sxy", [("x", "y", -5)])
    collection = bellman_ford(graph, graph["s"])
    assert collection.distance(graph["y"]) == INFINITY


def test_floyd_warshall_on_weighted_graph(weighted_graph):
    roadmap = floyd_warshall(weighted_graph)
    assert roadmap[weighted_graph["A"], weighted_graph["D"]] == 14
    assert roadmap[weighted_graph["J"], weighted_graph["A"]] == 21
    assert roadmap[weighted_graph["C"], weighted_graph["C"]] == 0
    assert len(roadmap) == 100


def test_floyd_warshall_unreachable_pairs():
    graph = DirectedGraph("ab", [("a", "b", 3)])
    roadmap = floyd_warshall(graph)
    assert roadmap[graph["a"], graph["b"]] == 3
    assert roadmap[graph["b"], graph["a"]] == INFINITY
    assert roadmap.get(graph["b"], graph["a"]) == INFINITY
    assert {(s.value, e.value): d for (s, e), d in roadmap.items()} == {
        ("a", "a"): 0,
        ("a", "b"): 3,
        ("b", "a"): INFINITY,
        ("b", "b"): 0,
    }


def _random_graph(seed: int, size: int = 7, density: float = 0.35) -> DirectedGraph:
    rng = random.Random(seed)
    graph = DirectedGraph(range(size))
    for start in range(size):
        for end in range(size):
            if start != end and rng.random() < density:
                graph.set_edge(start, end, rng.randint(0, 9))
    return graph


@pytest.mark.parametrize("seed", range(8))
def test_dijkstra_and_bellman_ford_agree(seed):
    graph = _random_graph(seed)
    for vertex in graph.vertices:
        assert dijkstra(graph, vertex).distances() == bellman_ford(graph, vertex).distances()


@pytest.mark.parametrize("seed", range(8))
def test_floyd_warshall_matches_dijkstra_from_every_vertex(seed):
    graph = _random_graph(seed)
    roadmap = floyd_warshall(graph)
    for start in graph.vertices:
        collection = dijkstra(graph, start)
        for end in graph.vertices:
            assert roadmap[start, end] == collection.distance(end)


def test_missing_vertices_are_rejected(weighted_graph):
    with pytest.raises(InvalidArgumentError):
        dijkstra(weighted_graph, None)
    with pytest.raises(InvalidArgumentError):
        bellman_ford(weighted_graph, weighted_graph["missing"])
    with pytest.raises(InvalidArgumentError):
        dijkstra_path(weighted_graph, weighted_graph["A"], None)


def test_dijkstra_skips_edges_into_removed_vertices():
    graph = DirectedGraph("abc", [("a", "b", 1), ("b", "c", 1)])
    graph.remove_vertex("b")
    # a still lists its edge to the removed b in its adjacency
    assert len(graph["a"].outbound_edges) == 1
    collection = dijkstra(graph, graph["a"])
    assert collection.distances() == {"a": 0, "c": INFINITY}
    assert graph["c"] not in collection


def test_shortest_paths_agree_after_removal():
    graph = DirectedGraph("abcd", [("a", "b", 1), ("b", "c", 1), ("a", "d", 5), ("d", "c", 5)])
    graph.remove_vertex("b")
    start = graph["a"]
    assert dijkstra(graph, start).distances() == bellman_ford(graph, start).distances()
    assert dijkstra(graph, start).distance(graph["c"]) == 10
    assert floyd_warshall(graph)[start, graph["c"]] == 10


def test_distances_follow_readded_vertex():
    graph = DirectedGraph("abc", [("a", "b", 1), ("b", "c", 1)])
    graph.remove_vertex("b")
    readded = graph.set_vertex("b")
    collection = dijkstra(graph, graph["a"])
    assert collection.distances()["b"] == collection.distance(readded) == INFINITY
    assert not collection[readded].found

    graph.set_edge("a", "b", 4)
    assert dijkstra(graph, graph["a"]).distances() == {"a": 0, "b": 4, "c": INFINITY}


@pytest.mark.parametrize("target", [None, Vertex.EMPTY, "A"])
def test_collection_rejects_missing_targets(weighted_graph, target):
    collection = dijkstra(weighted_graph, weighted_graph["A"])
    with pytest.raises(InvalidArgumentError):
        collection[target]
    with pytest.raises(InvalidArgumentError):
        collection.distance(target)
    assert target not in collection
