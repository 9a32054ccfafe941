"""Binary search on sorted sequences and on answers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "largest_minimum_distance"]


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def _fits(positions: Sequence[int], count: int, gap: int) -> bool:
    """Can ``count`` items be placed greedily with at least ``gap`` apart?"""
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            last = position
            if placed >= count:
                return True
    return placed >= count


def largest_minimum_distance(positions: Iterable[int], count: int) -> int:
    """Largest minimum distance achievable when choosing ``count`` of the
    given positions (the "aggressive cows" problem).

    Raises ValueError unless ``2 <= count <= len(positions)``.
    """
    ordered = sorted(positions)
    if count < 2:
        raise ValueError("count must be at least 2")
    if count > len(ordered):
        raise ValueError("count exceeds the number of positions")
    low = min(b - a for a, b in zip(ordered, ordered[1:]))
    high = ordered[-1] - ordered[0]
    while low < high:
        mid = (low + high + 1) // 2
        if _fits(ordered, count, mid):
            low = mid
        else:
            high = mid - 1
    return low