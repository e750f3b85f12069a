"""Greedy minimum spanning tree construction."""
from __future__ import annotations

from typing import Any

from .exceptions import SpanningTreeError
from .graph import GraphLike
from .logger import logger
from .model import Edge
from .results import MinimumSpanTree
from .structures import DisjointSet, PriorityQueue

__all__ = ["prims_minimum_spanning_tree", "kruskals_minimum_spanning_tree"]


def _exhausted(algorithm: str, selected: int, needed: int) -> SpanningTreeError:
    logger.debug("{} ran out of edges after {} of {}", algorithm, selected, needed)
    return SpanningTreeError(
        f"spanning tree not constructible: only {selected} of {needed} edges could be selected"
    )


def prims_minimum_spanning_tree(graph: GraphLike) -> MinimumSpanTree:
    """Grow a tree from the first vertex, always taking the lightest crossing edge.

    Candidates are the outbound edges of tree vertices, so on a directed
    graph every vertex must be reachable from the first one.

    Raises
    ------
    SpanningTreeError
        If no crossing edge is left before ``|V| - 1`` edges were taken.
    """
    vertices = graph.vertices
    if not vertices:
        return MinimumSpanTree((), 0)

    live = {vertex.handle for vertex in vertices}
    needed = len(vertices) - 1
    known: dict[int, Edge[Any]] = {}
    candidates: PriorityQueue[int] = PriorityQueue()
    visited: set[int] = set()
    tree: list[Edge[Any]] = []
    distance = 0
    current = vertices[0]

    while len(tree) < needed:
        visited.add(current.handle)
        for edge in current.outbound_edges:
            if edge.end_handle in live:
                known[edge.handle] = edge
                candidates.insert(edge.weight, edge.handle)

        chosen = None
        while candidates:
            edge = known[candidates.remove_minimum()]
            if (edge.start_handle in visited) != (edge.end_handle in visited):
                chosen = edge
                break
        if chosen is None:
            raise _exhausted("prim", len(tree), needed)

        tree.append(chosen)
        distance += chosen.weight
        current = chosen.start_vertex if chosen.end_handle in visited else chosen.end_vertex

    logger.debug("prim selected {} edges, total weight {}", len(tree), distance)
    return MinimumSpanTree(tree, distance)


def kruskals_minimum_spanning_tree(graph: GraphLike) -> MinimumSpanTree:
    """Take edges lightest first, skipping those whose endpoints are already joined.

    Raises
    ------
    SpanningTreeError
        If the edges run out before ``|V| - 1`` were accepted.
    """
    vertices = graph.vertices
    if not vertices:
        return MinimumSpanTree((), 0)

    live = [vertex.handle for vertex in vertices]
    needed = len(live) - 1
    components: DisjointSet[int] = DisjointSet(live)
    known: dict[int, Edge[Any]] = {}
    candidates: PriorityQueue[int] = PriorityQueue()
    for edge in graph.edges:
        if edge.start_handle in components and edge.end_handle in components:
            known[edge.handle] = edge
            candidates.insert(edge.weight, edge.handle)

    tree: list[Edge[Any]] = []
    distance = 0
    while len(tree) < needed:
        chosen = None
        while candidates:
            edge = known[candidates.remove_minimum()]
            if components.find(edge.start_handle) != components.find(edge.end_handle):
                chosen = edge
                break
        if chosen is None:
            raise _exhausted("kruskal", len(tree), needed)

        tree.append(chosen)
        distance += chosen.weight
        components.union(chosen.start_handle, chosen.end_handle)

    logger.debug("kruskal selected {} edges, total weight {}", len(tree), distance)
    return MinimumSpanTree(tree, distance)
