"""Priority queue and disjoint-set collaborators used by the algorithms."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Hashable, Iterable
from typing import Any, Generic, TypeVar

__all__ = ["PriorityQueue", "DisjointSet"]

V = TypeVar("V", bound=Hashable)


class PriorityQueue(Generic[V]):
    """Binary min-heap of ``(key, value)`` pairs.

    Equal keys pop in insertion order. The same value may be queued several
    times under different keys; callers skip entries they have already closed.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[Any, int, V]] = []
        self._counter = itertools.count()
        self._queued: Counter[V] = Counter()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def insert(self, key: Any, value: V) -> None:
        heapq.heappush(self._heap, (key, next(self._counter), value))
        self._queued[value] += 1

    def remove_minimum(self) -> V:
        """Pop the value with the smallest key.

        Raises
        ------
        IndexError
            If the queue is empty.
        """
        return self.pop()[1]

    def pop(self) -> tuple[Any, V]:
        """Pop and return the ``(key, value)`` pair with the smallest key."""
        if not self._heap:
            raise IndexError("remove from empty priority queue")
        key, _, value = heapq.heappop(self._heap)
        self._queued[value] -= 1
        if not self._queued[value]:
            del self._queued[value]
        return key, value

    def contains(self, value: V) -> bool:
        return value in self._queued

    __contains__ = contains


class DisjointSet(Generic[V]):
    """Union-find with path compression and union by rank."""

    def __init__(self, elements: Iterable[V] = ()) -> None:
        self._parent: dict[V, V] = {}
        self._rank: dict[V, int] = {}
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def add(self, element: V) -> None:
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: V) -> V:
        """Return the representative of ``element``; unknown elements become singletons."""
        self.add(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # compress
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: V, b: V) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already merged."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True
