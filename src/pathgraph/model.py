"""Vertex, edge and position primitives backed by a handle arena."""

from __future__ import annotations

import sys
from collections.abc import Hashable
from typing import Any, ClassVar, Generic, NamedTuple, TypeVar

__all__ = ["INFINITY", "Position", "Vertex", "Edge", "Arena"]

T = TypeVar("T", bound=Hashable)

# distance sentinel for unreachable vertices
INFINITY = sys.maxsize


class Position(NamedTuple):
    """Row/column address of a grid slot."""

    row: int
    column: int


class Vertex(Generic[T]):
    """Graph node identified by its value.

    Adjacency is stored as edge handles into the owning :class:`Arena`; only
    graph factories append to it. Two vertices are equal when their values are
    equal *and* their inbound and outbound edge counts match, so a vertex that
    gains an edge stops comparing equal to an edge-less vertex of the same
    value. The hash depends on the value only.
    """

    __slots__ = ("value", "handle", "_arena", "_inbound", "_outbound")

    EMPTY: ClassVar["Vertex[Any]"]

    def __init__(self, value: T, *, handle: int = -1, arena: "Arena | None" = None):
        self.value = value
        self.handle = handle
        self._arena = arena
        self._inbound: list[int] = []
        self._outbound: list[int] = []

    def __repr__(self) -> str:
        if self is Vertex.EMPTY:
            return "Vertex.EMPTY"
        return f"Vertex({self.value!r})"

    def __bool__(self) -> bool:
        return self is not Vertex.EMPTY

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return (
            self.value == other.value
            and len(self._inbound) == len(other._inbound)
            and len(self._outbound) == len(other._outbound)
        )

    @property
    def inbound_edges(self) -> tuple["Edge[T]", ...]:
        if self._arena is None:
            return ()
        return tuple(self._arena.edge(h) for h in self._inbound)

    @property
    def outbound_edges(self) -> tuple["Edge[T]", ...]:
        if self._arena is None:
            return ()
        return tuple(self._arena.edge(h) for h in self._outbound)

    @property
    def neighbors(self) -> list["Vertex[T]"]:
        """End vertices of the outbound edges, in edge insertion order."""
        return [edge.end_vertex for edge in self.outbound_edges]


Vertex.EMPTY = Vertex(None)


class Edge(Generic[T]):
    """Directed weighted arc between two vertices of the same arena.

    Edges are created by :meth:`Arena.connect`, which also registers them in
    the endpoint adjacency lists exactly once.
    """

    __slots__ = ("handle", "_arena", "start_handle", "end_handle", "weight")

    def __init__(self, arena: "Arena", handle: int, start_handle: int, end_handle: int, weight: int):
        self._arena = arena
        self.handle = handle
        self.start_handle = start_handle
        self.end_handle = end_handle
        self.weight = weight

    @property
    def start_vertex(self) -> Vertex[T]:
        return self._arena.vertex(self.start_handle)

    @property
    def end_vertex(self) -> Vertex[T]:
        return self._arena.vertex(self.end_handle)

    def __repr__(self) -> str:
        return f"Edge({self.start_vertex.value!r} -> {self.end_vertex.value!r}, {self.weight})"

    def __hash__(self) -> int:
        return hash((self.start_vertex.value, self.end_vertex.value, self.weight))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.start_vertex == other.start_vertex
            and self.end_vertex == other.end_vertex
            and self.weight == other.weight
        )


class Arena(Generic[T]):
    """Append-only store of the vertices and edges of one graph.

    Objects live as long as the arena; index removals in the owning graph do
    not free them, so stale handles in adjacency lists stay resolvable.
    Removed, replaced and retracted vertices and edges are never reclaimed,
    so memory grows with every mutation until the graph is cleared
    (``DirectedGraph.clear``) or dropped. Long-lived graphs under heavy churn
    should be rebuilt periodically.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex[T]] = []
        self._edges: list[Edge[T]] = []

    def __len__(self) -> int:
        return len(self._vertices)

    def vertex(self, handle: int) -> Vertex[T]:
        return self._vertices[handle]

    def edge(self, handle: int) -> Edge[T]:
        return self._edges[handle]

    def owns(self, vertex: Vertex[Any]) -> bool:
        return vertex._arena is self

    def new_vertex(self, value: T) -> Vertex[T]:
        vertex = Vertex(value, handle=len(self._vertices), arena=self)
        self._vertices.append(vertex)
        return vertex

    def connect(self, start: Vertex[T], end: Vertex[T], weight: int) -> Edge[T]:
        """Create an edge and append it to ``start`` outbound and ``end`` inbound."""
        edge = Edge(self, len(self._edges), start.handle, end.handle, weight)
        self._edges.append(edge)
        start._outbound.append(edge.handle)
        end._inbound.append(edge.handle)
        return edge

    def disconnect(self, edge: Edge[T]) -> None:
        """Retract ``edge`` from its endpoint adjacency lists."""
        start, end = edge.start_vertex, edge.end_vertex
        if edge.handle in start._outbound:
            start._outbound.remove(edge.handle)
        if edge.handle in end._inbound:
            end._inbound.remove(edge.handle)
