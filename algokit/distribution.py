"""Non-comparison sorts for integers: counting, pigeonhole and radix sort."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["counting_sort", "pigeonhole_sort", "radix_sort"]


def _non_negative(values: Iterable[int], name: str) -> list[int]:
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError(f"{name} requires non-negative integers")
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers.

    The count table spans 0 to the largest value, so this suits inputs
    whose range is not much larger than their length.
    """
    items = _non_negative(values, "counting_sort")
    if not items:
        return []
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    running = 0
    for index, count in enumerate(counts):
        running += count
        counts[index] = running
    result = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def pigeonhole_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by dropping each into a hole for its value."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    holes: list[list[int]] = [[] for _ in range(max(items) - low + 1)]
    for value in items:
        holes[value - low].append(value)
    return [value for hole in holes for value in hole]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers, base 10."""
    items = _non_negative(values, "radix_sort")
    if not items:
        return []
    largest = max(items)
    exponent = 1
    while largest // exponent > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exponent) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exponent *= 10
    return items