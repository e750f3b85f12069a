"""Breadth-first and depth-first walks over outbound adjacency."""
from __future__ import annotations

from collections import deque
from typing import Any

from .graph import GraphLike, require_vertex
from .logger import logger
from .model import Vertex

__all__ = ["breadth_first_search", "depth_first_search"]


def _walk(graph: GraphLike, start: Vertex[Any], lifo: bool) -> list[Vertex[Any]]:
    """Return every vertex reachable from ``start`` in visit order.

    A vertex is marked visited when it leaves the frontier. Neighbours already
    visited at that time are not queued, but one vertex may sit in the
    frontier several times; the later copies are skipped on removal. Edges
    into vertices the graph no longer holds are not followed.
    """
    frontier: deque[Vertex[Any]] = deque([start])
    take = frontier.pop if lifo else frontier.popleft
    visited: set[int] = set()
    order: list[Vertex[Any]] = []

    while frontier:
        current = take()
        if current.handle in visited:
            continue
        visited.add(current.handle)
        order.append(current)
        frontier.extend(
            edge.end_vertex
            for edge in current.outbound_edges
            if edge.end_handle not in visited and graph.owns(edge.end_vertex)
        )
    return order


def breadth_first_search(
    graph: GraphLike, start: Vertex[Any], end: Vertex[Any] | None = None
) -> list[Vertex[Any]]:
    """Traverse ``graph`` breadth first from ``start``.

    ``end`` is accepted for symmetry with the path searches; the walk always
    covers the whole reachable set.
    """
    require_vertex(graph, start, "start")
    order = _walk(graph, start, lifo=False)
    logger.debug("bfs from {} visited {} vertices", start.value, len(order))
    return order


def depth_first_search(
    graph: GraphLike, start: Vertex[Any], end: Vertex[Any] | None = None
) -> list[Vertex[Any]]:
    """Traverse ``graph`` depth first from ``start``; ``end`` does not stop the walk."""
    require_vertex(graph, start, "start")
    order = _walk(graph, start, lifo=True)
    logger.debug("dfs from {} visited {} vertices", start.value, len(order))
    return order
