"""A LIFO stack, a disjoint-set forest, and a histogram problem built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["Stack", "DisjointSet", "largest_histogram_area"]


class Stack:
    """Last-in, first-out stack. Iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"


class DisjointSet:
    """Union-find over the items ``0 .. size - 1`` with path halving."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, first: int, second: int) -> int:
        """Merge the set of ``first`` into that of ``second``; return the root."""
        root_first = self.find(first)
        root_second = self.find(second)
        self._parent[root_first] = root_second
        return root_second


def largest_histogram_area(heights: Iterable[int]) -> int:
    """Largest rectangle under a histogram of unit-width bars.

    Bars are activated from tallest to shortest and merged with active
    neighbours; each merged run's width times the current height is a
    candidate area.
    """
    bars = list(heights)
    count = len(bars)
    forest = DisjointSet(count)
    active = [False] * count
    width = [0] * count
    best = 0
    for height, index in sorted(((h, i) for i, h in enumerate(bars)), reverse=True):
        span = 1
        for neighbour in (index - 1, index + 1):
            if 0 <= neighbour < count and active[neighbour]:
                span += width[forest.find(neighbour)]
                forest.union(index, neighbour)
        active[index] = True
        width[forest.find(index)] = span
        best = max(best, span * height)
    return best