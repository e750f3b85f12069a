"""Result carriers returned by the graph algorithms."""

from __future__ import annotations

import enum
import threading
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from cachetools import LRUCache  # type: ignore[import]

from .config import get_config
from .exceptions import InvalidArgumentError
from .model import INFINITY, Edge, Vertex

__all__ = [
    "AlgorithmState",
    "Pathway",
    "PathwayCollection",
    "Roadmap",
    "MinimumSpanTree",
]


class AlgorithmState(enum.Enum):
    SEARCHING = "searching"
    PATH_FOUND = "path_found"
    PATH_DOES_NOT_EXIST = "path_does_not_exist"


class Pathway(Sequence[Vertex[Any]]):
    """Ordered vertices from source to target with total distance and final state.

    The vertex sequence is fixed at construction. A cursor walks it in both
    directions: ``current`` starts at the first vertex, ``next()`` and
    ``previous()`` move the cursor and return the vertex under it, or
    :attr:`Vertex.EMPTY` once it leaves the sequence.
    """

    def __init__(self, vertices: Iterable[Vertex[Any]], distance: int, state: AlgorithmState):
        self._vertices = tuple(vertices)
        self.distance = distance
        self.state = state
        self._cursor = 0

    def __repr__(self) -> str:
        return f"Pathway({self.values!r}, distance={self.distance}, state={self.state.name})"

    @overload
    def __getitem__(self, index: int) -> Vertex[Any]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Vertex[Any], ...]: ...

    def __getitem__(self, index):
        return self._vertices[index]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[Any]]:
        return iter(self._vertices)

    @property
    def found(self) -> bool:
        return self.state is AlgorithmState.PATH_FOUND

    @property
    def values(self) -> list[Any]:
        return [vertex.value for vertex in self._vertices]

    @property
    def current(self) -> Vertex[Any]:
        if 0 <= self._cursor < len(self._vertices):
            return self._vertices[self._cursor]
        return Vertex.EMPTY

    def next(self) -> Vertex[Any]:
        self._cursor = min(self._cursor + 1, len(self._vertices))
        return self.current

    def previous(self) -> Vertex[Any]:
        self._cursor = max(self._cursor - 1, -1)
        return self.current


def _check_target(target: Any) -> None:
    if target is None or target is Vertex.EMPTY:
        raise InvalidArgumentError("target is missing")
    if not isinstance(target, Vertex):
        raise InvalidArgumentError(f"target must be a Vertex, got {type(target).__name__}")


class PathwayCollection:
    """Single-source shortest paths, reconstructed lazily per target.

    Parameters
    ----------
    start:
        Source vertex of the search.
    predecessors:
        Maps a vertex handle to the handle of its predecessor on the best path.
    distances:
        Maps a vertex handle to its best known distance from ``start``.
    vertices:
        Maps a vertex handle to its vertex.
    cache_size:
        Bound of the pathway LRU cache. Defaults to ``pathways.cache_size``.
    """

    def __init__(
        self,
        start: Vertex[Any],
        predecessors: Mapping[int, int],
        distances: Mapping[int, int],
        vertices: Mapping[int, Vertex[Any]],
        *,
        cache_size: int | None = None,
    ):
        self.start_vertex = start
        self._predecessors = dict(predecessors)
        self._distances = dict(distances)
        self._vertices = dict(vertices)
        size = get_config().pathways.cache_size if cache_size is None else cache_size
        self._pathways: LRUCache[int, Pathway] = LRUCache(maxsize=max(1, size))
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"PathwayCollection(start={self.start_vertex!r}, reachable={self.reachable_count})"

    def __getitem__(self, target: Vertex[Any]) -> Pathway:
        _check_target(target)
        with self._lock:
            pathway = self._pathways.get(target.handle)
        if pathway is None:
            pathway = self._reconstruct(target)
            with self._lock:
                self._pathways[target.handle] = pathway
        return pathway

    def __contains__(self, target: object) -> bool:
        return isinstance(target, Vertex) and bool(target) and self.distance(target) < INFINITY

    @property
    def reachable_count(self) -> int:
        return sum(1 for d in self._distances.values() if d < INFINITY)

    def distance(self, target: Vertex[Any]) -> int:
        _check_target(target)
        return self._distances.get(target.handle, INFINITY)

    def distances(self) -> dict[Any, int]:
        """Distances keyed by vertex value, unreachable vertices included."""
        return {self._vertices[h].value: d for h, d in self._distances.items() if h in self._vertices}

    def _reconstruct(self, target: Vertex[Any]) -> Pathway:
        distance = self.distance(target)
        if target.handle == self.start_vertex.handle:
            return Pathway([target], 0, AlgorithmState.PATH_FOUND)
        if distance >= INFINITY or target.handle not in self._predecessors:
            return Pathway([], INFINITY, AlgorithmState.PATH_DOES_NOT_EXIST)

        chain = [target]
        seen = {target.handle}
        handle = self._predecessors.get(target.handle)
        while handle is not None and handle not in seen:
            seen.add(handle)
            chain.append(self._vertices[handle])
            handle = self._predecessors.get(handle)
        chain.reverse()
        return Pathway(chain, distance, AlgorithmState.PATH_FOUND)


class Roadmap:
    """All-pairs distance table keyed by ``(start, end)`` vertices."""

    def __init__(self, distances: Mapping[tuple[int, int], int], vertices: Mapping[int, Vertex[Any]]):
        self._distances = dict(distances)
        self._vertices = dict(vertices)

    def __repr__(self) -> str:
        return f"Roadmap(vertices={len(self._vertices)})"

    def __getitem__(self, key: tuple[Vertex[Any], Vertex[Any]]) -> int:
        start, end = key
        return self._distances[(start.handle, end.handle)]

    def __len__(self) -> int:
        return len(self._distances)

    def get(self, start: Vertex[Any], end: Vertex[Any], default: int = INFINITY) -> int:
        return self._distances.get((start.handle, end.handle), default)

    def items(self) -> Iterator[tuple[tuple[Vertex[Any], Vertex[Any]], int]]:
        for (i, j), distance in self._distances.items():
            yield (self._vertices[i], self._vertices[j]), distance


class MinimumSpanTree:
    """Selected spanning-tree edges and their total weight."""

    def __init__(self, edges: Iterable[Edge[Any]], distance: int):
        self.edges = tuple(edges)
        self.distance = distance

    def __repr__(self) -> str:
        return f"MinimumSpanTree(edges={len(self.edges)}, distance={self.distance})"

    def __iter__(self) -> Iterator[Edge[Any]]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)
