"""A* heuristic search on unit-step graphs."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple

from .exceptions import InvalidArgumentError
from .graph import GraphLike, require_vertex
from .logger import logger
from .model import Vertex
from .results import AlgorithmState, Pathway
from .structures import PriorityQueue

__all__ = ["Estimate", "a_star", "manhattan_distance"]

Estimate = Callable[[Vertex[Any], Vertex[Any]], int]


def manhattan_distance(source: Vertex[Any], target: Vertex[Any]) -> int:
    """Grid distance between vertices whose values expose ``row`` and ``column``."""
    if source is None or target is None:
        raise InvalidArgumentError("manhattan distance needs two vertices")
    a, b = source.value, target.value
    return abs(a.row - b.row) + abs(a.column - b.column)


class _PathStep(NamedTuple):
    parent: int | None
    movement_cost: int  # g
    estimated_cost: int  # h

    @property
    def total_cost(self) -> int:
        return self.movement_cost + self.estimated_cost


def _next_candidate(opened: PriorityQueue[int], visited: PriorityQueue[int]) -> int | None:
    while opened:
        handle = opened.remove_minimum()
        if not visited.contains(handle):
            return handle
    return None


def a_star(
    graph: GraphLike,
    start: Vertex[Any],
    target: Vertex[Any],
    estimate: Estimate,
) -> Pathway:
    """Find a path from ``start`` to ``target`` guided by ``estimate``.

    Every step costs 1 regardless of edge weight, and a vertex keeps the
    parent it was first discovered from. On a 4-neighbour grid with
    :func:`manhattan_distance` the result is a minimal hop path. On an
    8-neighbour grid Manhattan overstates diagonal moves, so a branch that
    looks closer can claim a vertex first and the path may be longer than
    the fewest hops.

    Parameters
    ----------
    graph:
        Graph to search, typically a ``GridGraph``.
    start, target:
        Endpoints, owned by ``graph``.
    estimate:
        ``estimate(vertex, target)`` returning a non-negative integer.

    Returns
    -------
    Pathway
        State ``PATH_FOUND`` with the path to ``target``, or
        ``PATH_DOES_NOT_EXIST`` with the chain leading to the last vertex
        examined before the candidates ran out.
    """
    if estimate is None or not callable(estimate):
        raise InvalidArgumentError("a distance estimate function is required")
    require_vertex(graph, start, "start")
    require_vertex(graph, target, "target")

    opened: PriorityQueue[int] = PriorityQueue()
    visited: PriorityQueue[int] = PriorityQueue()
    vertices: dict[int, Vertex[Any]] = {start.handle: start}
    path: dict[int, _PathStep] = {start.handle: _PathStep(None, 0, estimate(start, target))}
    opened.insert(path[start.handle].total_cost, start.handle)

    state = AlgorithmState.SEARCHING
    last: int | None = None

    while state is AlgorithmState.SEARCHING:
        current = _next_candidate(opened, visited)
        if current is None:
            state = AlgorithmState.PATH_DOES_NOT_EXIST
            break

        last = current
        visited.insert(path[current].total_cost, current)
        if current == target.handle:
            state = AlgorithmState.PATH_FOUND
            break

        step = path[current]
        for edge in vertices[current].outbound_edges:
            neighbor = edge.end_handle
            # first discovery fixes the parent and costs
            if visited.contains(neighbor) or opened.contains(neighbor):
                continue
            if not graph.owns(edge.end_vertex):
                continue
            vertices[neighbor] = edge.end_vertex
            path[neighbor] = _PathStep(current, step.movement_cost + 1, estimate(edge.end_vertex, target))
            opened.insert(path[neighbor].total_cost, neighbor)

    chain: list[Vertex[Any]] = []
    handle = last
    while handle is not None:
        chain.append(vertices[handle])
        handle = path[handle].parent
    chain.reverse()
    distance = path[last].movement_cost if last is not None else 0

    logger.debug(
        "a* from {} to {} ended {} after expanding {} vertices",
        start.value,
        target.value,
        state.name,
        len(visited),
    )
    return Pathway(chain, distance, state)
