"""Two-dimensional lattice graph with automatic neighbour wiring."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np
from pydantic import NonNegativeInt, validate_call

from .config import get_config
from .exceptions import InvalidArgumentError
from .model import Arena, Edge, Position, Vertex

__all__ = ["GridGraph"]

T = TypeVar("T", bound=Hashable)

# (column, row) shifts: left, left-up, up, up-right, right, right-down, down, down-left
_DIAGONAL_SHIFTS = ((-1, 0), (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1))
_DIRECT_SHIFTS = ((-1, 0), (0, -1), (1, 0), (0, 1))


class GridGraph(Generic[T]):
    """Grid of vertex slots addressed by :class:`Position`.

    Placing a vertex connects it both ways to every occupied slot of its
    Moore neighbourhood (von Neumann when ``diagonals`` is off) with edges of
    the configured weight. Identity is positional: there is no value index.
    """

    @validate_call(config={"arbitrary_types_allowed": True})
    def __init__(
        self,
        width: NonNegativeInt,
        height: NonNegativeInt,
        *,
        diagonals: bool | None = None,
        weight: int | None = None,
    ):
        cfg = get_config()
        self._width = width
        self._height = height
        self._shifts = _DIAGONAL_SHIFTS if (
            cfg.grid.diagonals if diagonals is None else diagonals
        ) else _DIRECT_SHIFTS
        self._weight = cfg.grid.weight if weight is None else weight
        self._grid = np.empty((height, width), dtype=object)
        self._arena: Arena[T] = Arena()
        self._vertices: dict[int, Vertex[T]] = {}
        self._positions: dict[int, Position] = {}
        self._edges: dict[tuple[int, int], Edge[T]] = {}

    @classmethod
    def from_size(cls, width: int, height: int, **kwargs: Any) -> "GridGraph[T]":
        return cls(width, height, **kwargs)

    @classmethod
    def empty(cls) -> "GridGraph[T]":
        return cls(0, 0)

    def __repr__(self) -> str:
        return f"GridGraph({self._width}x{self._height}, vertices={len(self._vertices)})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self.vertices)

    def __getitem__(self, key: Position | tuple[int, int]) -> Vertex[T]:
        """Vertex at ``grid[row, column]``, or :attr:`Vertex.EMPTY` for a free slot."""
        position = self._check(key)
        vertex = self._grid[position.row, position.column]
        return Vertex.EMPTY if vertex is None else vertex

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vertices(self) -> tuple[Vertex[T], ...]:
        return tuple(self._vertices.values())

    @property
    def edges(self) -> tuple[Edge[T], ...]:
        return tuple(self._edges.values())

    def owns(self, vertex: Vertex[Any]) -> bool:
        return self._arena.owns(vertex) and self._vertices.get(vertex.handle) is vertex

    def position_of(self, vertex: Vertex[T]) -> Position:
        if not self.owns(vertex):
            raise InvalidArgumentError(f"{vertex!r} is not placed on this grid")
        return self._positions[vertex.handle]

    def edge(self, source: Position | tuple[int, int], target: Position | tuple[int, int]) -> Edge[T] | None:
        start, end = self._occupant(source), self._occupant(target)
        if start is None or end is None:
            return None
        return self._edges.get((start.handle, end.handle))

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------
    def set_vertex(self, position: Position | tuple[int, int], value: T) -> Vertex[T]:
        """Place ``value`` at ``position``, replacing any current occupant."""
        position = self._check(position)
        if value is None:
            raise InvalidArgumentError("vertex value is missing")
        self.remove_vertex(position)

        vertex = self._arena.new_vertex(value)
        for neighbor in self._neighbors(position):
            self._connect(vertex, neighbor, self._weight)
            self._connect(neighbor, vertex, self._weight)

        self._vertices[vertex.handle] = vertex
        self._positions[vertex.handle] = position
        self._grid[position.row, position.column] = vertex
        return vertex

    def set_edge(
        self,
        source: Position | tuple[int, int],
        target: Position | tuple[int, int],
        weight: int | None = None,
    ) -> Edge[T]:
        """Connect two occupied slots; an existing edge between them is returned as is."""
        start = self._occupant(source)
        end = self._occupant(target)
        if start is None or end is None:
            raise InvalidArgumentError(f"no vertex at {source!r} or {target!r}")
        return self._connect(start, end, self._weight if weight is None else weight)

    def remove_vertex(self, position: Position | tuple[int, int]) -> bool:
        """Free a slot and retract every edge between its vertex and the others."""
        position = self._check(position)
        vertex = self._grid[position.row, position.column]
        if vertex is None:
            return False
        for edge in vertex.outbound_edges + vertex.inbound_edges:
            self._disconnect(edge)
        del self._vertices[vertex.handle]
        del self._positions[vertex.handle]
        self._grid[position.row, position.column] = None
        return True

    def remove_edge(self, source: Position | tuple[int, int], target: Position | tuple[int, int]) -> bool:
        edge = self.edge(source, target)
        if edge is None:
            return False
        self._disconnect(edge)
        return True

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _check(self, position: Any) -> Position:
        if position is None:
            raise InvalidArgumentError("position is missing")
        row, column = position
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise InvalidArgumentError(
                f"position ({row}, {column}) is outside the {self._width}x{self._height} grid"
            )
        return Position(row, column)

    def _occupant(self, position: Any) -> Vertex[T] | None:
        position = self._check(position)
        return self._grid[position.row, position.column]

    def _neighbors(self, position: Position) -> list[Vertex[T]]:
        found = []
        for d_column, d_row in self._shifts:
            row, column = position.row + d_row, position.column + d_column
            if 0 <= row < self._height and 0 <= column < self._width:
                neighbor = self._grid[row, column]
                if neighbor is not None:
                    found.append(neighbor)
        return found

    def _connect(self, start: Vertex[T], end: Vertex[T], weight: int) -> Edge[T]:
        key = (start.handle, end.handle)
        edge = self._edges.get(key)
        if edge is None:
            edge = self._arena.connect(start, end, weight)
            self._edges[key] = edge
        return edge

    def _disconnect(self, edge: Edge[T]) -> None:
        self._arena.disconnect(edge)
        self._edges.pop((edge.start_handle, edge.end_handle), None)
