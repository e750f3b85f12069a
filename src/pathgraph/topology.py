"""Cycle-checked depth-first topological ordering."""
from __future__ import annotations

import enum
from typing import Any

from .config import get_config
from .exceptions import CyclicGraphError
from .graph import GraphLike
from .logger import logger
from .model import Vertex

__all__ = ["tarjan", "topological_sort"]


class _Status(enum.Enum):
    NOT_VISITED = 0
    IN_PROGRESS = 1
    RESOLVED = 2


def _cycle(vertex: Vertex[Any], target: Vertex[Any]) -> CyclicGraphError:
    logger.debug("edge {} -> {} closes a cycle", vertex.value, target.value)
    return CyclicGraphError(f"graph is not acyclic: edge {vertex.value!r} -> {target.value!r} closes a cycle")


def _visit_recursive(vertex: Vertex[Any], status: dict[int, _Status], order: list[Vertex[Any]]) -> None:
    status[vertex.handle] = _Status.IN_PROGRESS
    for edge in vertex.outbound_edges:
        state = status.get(edge.end_handle)
        if state is _Status.IN_PROGRESS:
            raise _cycle(vertex, edge.end_vertex)
        if state is _Status.NOT_VISITED:
            _visit_recursive(edge.end_vertex, status, order)
    status[vertex.handle] = _Status.RESOLVED
    order.append(vertex)


def _visit_stack(vertex: Vertex[Any], status: dict[int, _Status], order: list[Vertex[Any]]) -> None:
    status[vertex.handle] = _Status.IN_PROGRESS
    stack = [(vertex, iter(vertex.outbound_edges))]
    while stack:
        current, edges = stack[-1]
        for edge in edges:
            state = status.get(edge.end_handle)
            if state is _Status.IN_PROGRESS:
                raise _cycle(current, edge.end_vertex)
            if state is _Status.NOT_VISITED:
                child = edge.end_vertex
                status[child.handle] = _Status.IN_PROGRESS
                stack.append((child, iter(child.outbound_edges)))
                break
        else:
            stack.pop()
            status[current.handle] = _Status.RESOLVED
            order.append(current)


def tarjan(graph: GraphLike, recursive: bool | None = None) -> list[Vertex[Any]]:
    """Depth-first post-order of every vertex, dependencies first.

    Roots are taken in graph vertex order and children in edge insertion
    order. Edges into vertices no longer indexed by the graph are ignored.

    Parameters
    ----------
    graph:
        Graph to order.
    recursive:
        Use Python recursion instead of an explicit stack. Both produce the
        same order; the recursive form is bounded by the interpreter
        recursion limit. Defaults to ``topology.recursive``.

    Raises
    ------
    CyclicGraphError
        As soon as an edge reaches a vertex whose visit is still in progress.
    """
    if recursive is None:
        recursive = bool(get_config().topology.recursive)
    visit = _visit_recursive if recursive else _visit_stack

    vertices = graph.vertices
    status = {vertex.handle: _Status.NOT_VISITED for vertex in vertices}
    order: list[Vertex[Any]] = []
    for vertex in vertices:
        if status[vertex.handle] is _Status.NOT_VISITED:
            visit(vertex, status, order)

    logger.debug("ordered {} vertices ({})", len(order), "recursive" if recursive else "stack")
    return order


def topological_sort(graph: GraphLike, recursive: bool | None = None) -> list[Vertex[Any]]:
    """Linearization in which every edge points forward: reversed :func:`tarjan`."""
    order = tarjan(graph, recursive=recursive)
    order.reverse()
    return order
