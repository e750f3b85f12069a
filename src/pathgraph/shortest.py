"""Shortest-path algorithms over integer edge weights."""
from __future__ import annotations

from typing import Any

from .exceptions import NegativeCostCycleError
from .graph import GraphLike, require_vertex
from .logger import logger
from .model import INFINITY, Vertex
from .results import Pathway, PathwayCollection, Roadmap
from .structures import PriorityQueue

__all__ = ["dijkstra", "dijkstra_path", "bellman_ford", "floyd_warshall"]


def dijkstra(graph: GraphLike, start: Vertex[Any], *, cache_size: int | None = None) -> PathwayCollection:
    """Shortest paths from ``start`` to every vertex.

    Edge weights must be non-negative; this is not checked. Only vertices
    the graph currently holds are reached; adjacency entries into removed
    vertices are skipped.

    Parameters
    ----------
    graph:
        Graph to search.
    start:
        Source vertex, owned by ``graph``.
    cache_size:
        Bound for the reconstructed-pathway cache of the result.

    Returns
    -------
    PathwayCollection
        Lazily reconstructs the pathway to any target.
    """
    require_vertex(graph, start, "start")
    vertices = {vertex.handle: vertex for vertex in graph.vertices}
    distances = dict.fromkeys(vertices, INFINITY)
    distances[start.handle] = 0
    predecessors: dict[int, int] = {}

    queue: PriorityQueue[int] = PriorityQueue()
    queue.insert(0, start.handle)

    while queue:
        distance, handle = queue.pop()
        # stale entry: a shorter distance was settled after it was queued
        if distance > distances.get(handle, INFINITY):
            continue
        for edge in vertices[handle].outbound_edges:
            # adjacency may still name vertices the graph has dropped
            if edge.end_handle not in vertices:
                continue
            alternative = distance + edge.weight
            if alternative < distances.get(edge.end_handle, INFINITY):
                distances[edge.end_handle] = alternative
                predecessors[edge.end_handle] = handle
                queue.insert(alternative, edge.end_handle)

    logger.debug(
        "dijkstra from {} reached {} of {} vertices",
        start.value,
        sum(1 for d in distances.values() if d < INFINITY),
        len(distances),
    )
    return PathwayCollection(start, predecessors, distances, vertices, cache_size=cache_size)


def dijkstra_path(graph: GraphLike, start: Vertex[Any], end: Vertex[Any]) -> Pathway:
    """Shortest pathway from ``start`` to ``end``."""
    require_vertex(graph, end, "end")
    return dijkstra(graph, start)[end]


def bellman_ford(graph: GraphLike, start: Vertex[Any], *, cache_size: int | None = None) -> PathwayCollection:
    """Shortest paths from ``start`` allowing negative edge weights.

    Every vertex relaxes its inbound edges, in graph vertex order, for
    ``|V| - 1`` rounds (fewer when a round changes nothing). One more pass
    that still improves a distance means a negative cost cycle.

    Raises
    ------
    NegativeCostCycleError
        If a negative cost cycle is reachable from ``start``.
    """
    require_vertex(graph, start, "start")
    order = graph.vertices
    vertices = {vertex.handle: vertex for vertex in order}
    distances = dict.fromkeys(vertices, INFINITY)
    distances[start.handle] = 0
    predecessors: dict[int, int] = {}

    def relax(vertex: Vertex[Any]) -> bool:
        improved = False
        for edge in vertex.inbound_edges:
            source = distances.get(edge.start_handle, INFINITY)
            if source >= INFINITY:
                continue
            alternative = source + edge.weight
            if alternative < distances[vertex.handle]:
                distances[vertex.handle] = alternative
                predecessors[vertex.handle] = edge.start_handle
                improved = True
        return improved

    rounds = 0
    for rounds in range(1, len(order)):
        changed = False
        for vertex in order:
            changed |= relax(vertex)
        if not changed:
            break

    for vertex in order:
        for edge in vertex.inbound_edges:
            source = distances.get(edge.start_handle, INFINITY)
            if source < INFINITY and source + edge.weight < distances[vertex.handle]:
                logger.debug("bellman-ford from {} found a negative cost cycle at {}", start.value, vertex.value)
                raise NegativeCostCycleError(
                    f"negative cost cycle reachable from {start.value!r} through {vertex.value!r}"
                )

    logger.debug("bellman-ford from {} settled after {} rounds", start.value, rounds)
    return PathwayCollection(start, predecessors, distances, vertices, cache_size=cache_size)


def floyd_warshall(graph: GraphLike) -> Roadmap:
    """All-pairs shortest distances.

    Negative weights are allowed; negative cycles are not detected and
    leave negative values on the diagonal.
    """
    vertices = {vertex.handle: vertex for vertex in graph.vertices}
    handles = list(vertices)
    distances: dict[tuple[int, int], int] = {
        (i, j): 0 if i == j else INFINITY for i in handles for j in handles
    }
    for edge in graph.edges:
        key = (edge.start_handle, edge.end_handle)
        if key in distances:
            distances[key] = edge.weight

    for k in handles:
        for i in handles:
            through = distances[(i, k)]
            if through >= INFINITY:
                continue
            for j in handles:
                rest = distances[(k, j)]
                if rest < INFINITY and through + rest < distances[(i, j)]:
                    distances[(i, j)] = through + rest

    logger.debug("floyd-warshall computed {} pairs", len(distances))
    return Roadmap(distances, vertices)
