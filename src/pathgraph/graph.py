"""Value-indexed directed graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar

from .exceptions import InvalidArgumentError
from .model import Arena, Edge, Vertex

__all__ = ["DirectedGraph", "GraphLike", "require_vertex"]

T = TypeVar("T", bound=Hashable)


class GraphLike(Protocol):
    """Read surface shared by :class:`DirectedGraph` and ``GridGraph``."""

    @property
    def vertices(self) -> tuple[Vertex[Any], ...]: ...

    @property
    def edges(self) -> tuple[Edge[Any], ...]: ...

    def owns(self, vertex: Vertex[Any]) -> bool: ...


def require_vertex(graph: GraphLike, vertex: Any, name: str = "vertex") -> Vertex[Any]:
    """Return ``vertex`` if it is a live vertex of ``graph``, else raise."""
    if vertex is None or vertex is Vertex.EMPTY:
        raise InvalidArgumentError(f"{name} is missing")
    if not isinstance(vertex, Vertex):
        raise InvalidArgumentError(f"{name} must be a Vertex, got {type(vertex).__name__}")
    if not graph.owns(vertex):
        raise InvalidArgumentError(f"{name} {vertex!r} does not belong to this graph")
    return vertex


class DirectedGraph(Generic[T]):
    """Directed graph indexed by vertex value and by ``(start, end)`` value pairs.

    ``set_vertex``/``set_edge`` are upserts: the last write under a key wins.
    Removals only touch the indexes; adjacency lists of the remaining vertices
    keep references to removed edges.
    """

    def __init__(
        self,
        vertices: Iterable[T] = (),
        edges: Iterable[tuple[T, T] | tuple[T, T, int]] = (),
    ):
        self._arena: Arena[T] = Arena()
        self._vertices: dict[T, Vertex[T]] = {}
        self._edges: dict[tuple[T, T], Edge[T]] = {}
        self._vertex_view: tuple[Vertex[T], ...] = ()
        self._edge_view: tuple[Edge[T], ...] = ()
        self._dirty = False

        for value in vertices:
            self.set_vertex(value)
        for entry in edges:
            self.set_edge(*entry)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self.vertices)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return self.owns(item)
        return self.contains_vertex(item)  # type: ignore[arg-type]

    def __getitem__(self, key: Any) -> Any:
        """``graph[value]`` returns a vertex, ``graph[start, end]`` an edge.

        A two-item tuple that is itself a vertex value is looked up as a vertex.
        Missing vertices return :attr:`Vertex.EMPTY`, missing edges ``None``.
        """
        if isinstance(key, tuple) and len(key) == 2 and key not in self._vertices:
            return self.edge(*key)
        return self.vertex(key)

    # ------------------------------------------------------------------
    # views
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        if self._dirty:
            self._vertex_view = tuple(self._vertices.values())
            self._edge_view = tuple(self._edges.values())
            self._dirty = False

    @property
    def vertices(self) -> tuple[Vertex[T], ...]:
        self._refresh()
        return self._vertex_view

    @property
    def edges(self) -> tuple[Edge[T], ...]:
        self._refresh()
        return self._edge_view

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------
    def vertex(self, value: T) -> Vertex[T]:
        return self._vertices.get(value, Vertex.EMPTY)

    def edge(self, start: T | Vertex[T], end: T | Vertex[T]) -> Edge[T] | None:
        return self._edges.get((_value_of(start), _value_of(end)))

    def contains_vertex(self, value: T) -> bool:
        return value in self._vertices

    def contains_edge(self, start: T | Vertex[T], end: T | Vertex[T]) -> bool:
        return (_value_of(start), _value_of(end)) in self._edges

    def owns(self, vertex: Vertex[Any]) -> bool:
        """True if ``vertex`` is the vertex currently indexed under its value."""
        return self._arena.owns(vertex) and self._vertices.get(vertex.value) is vertex

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------
    def set_vertex(self, item: T | Vertex[T]) -> Vertex[T]:
        """Insert a vertex for ``item``, replacing any vertex with the same value.

        ``item`` is either a value, which gets a fresh edge-less vertex, or a
        vertex previously created by this graph, which is re-indexed as is.
        """
        if isinstance(item, Vertex):
            if item is Vertex.EMPTY or not self._arena.owns(item):
                raise InvalidArgumentError(f"{item!r} was not created by this graph")
            vertex = item
        else:
            if item is None:
                raise InvalidArgumentError("vertex value is missing")
            vertex = self._arena.new_vertex(item)
        self._vertices[vertex.value] = vertex
        self._dirty = True
        return vertex

    def set_edge(self, start: T | Vertex[T], end: T | Vertex[T], weight: int = 1) -> Edge[T]:
        """Connect two indexed vertices, replacing any edge under the same pair.

        A replaced edge stays in the endpoint adjacency lists.
        """
        start_vertex = self._resolve(start, "start")
        end_vertex = self._resolve(end, "end")
        edge = self._arena.connect(start_vertex, end_vertex, int(weight))
        self._edges[(start_vertex.value, end_vertex.value)] = edge
        self._dirty = True
        return edge

    def remove_vertex(self, item: T | Vertex[T]) -> bool:
        """Drop a vertex and every index entry of its incident edges."""
        value = _value_of(item)
        if value not in self._vertices:
            return False
        if isinstance(item, Vertex) and self._vertices[value] is not item:
            return False
        del self._vertices[value]
        for key in [k for k in self._edges if k[0] == value or k[1] == value]:
            del self._edges[key]
        self._dirty = True
        return True

    def remove_edge(self, start: T | Vertex[T], end: T | Vertex[T]) -> bool:
        """Drop the ``(start, end)`` index entry only."""
        key = (_value_of(start), _value_of(end))
        if key not in self._edges:
            return False
        del self._edges[key]
        self._dirty = True
        return True

    def clear(self) -> None:
        """Remove everything; previously returned vertices become detached."""
        self._arena = Arena()
        self._vertices.clear()
        self._edges.clear()
        self._dirty = True

    def _resolve(self, item: T | Vertex[T], name: str) -> Vertex[T]:
        if isinstance(item, Vertex):
            return require_vertex(self, item, name)
        vertex = self._vertices.get(item) if item is not None else None
        if vertex is None:
            raise InvalidArgumentError(f"{name} vertex {item!r} is not in the graph")
        return vertex


def _value_of(item: Any) -> Any:
    return item.value if isinstance(item, Vertex) else item
