"""Comparison sorts: bubble, selection, insertion, merge, quick, heap and intro sort.

Every function takes an iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from typing import Any, MutableSequence

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "intro_sort",
]

_INSERTION_THRESHOLD = 16


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the minimum of the unsorted tail to its front."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def _insertion_range(items: MutableSequence[Any], left: int, right: int) -> None:
    """Insertion-sort ``items[left:right + 1]`` in place."""
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    _insertion_range(items, 0, len(items) - 1)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _lomuto_partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition around ``items[high]``; return the pivot's final index."""
    pivot = items[high]
    index = low
    for i in range(low, high):
        if items[i] < pivot:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[high], items[index] = items[index], items[high]
    return index


def quick_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Quicksort with a randomly chosen pivot drawn from ``rng``."""
    items = list(values)
    generator = rng if rng is not None else random.Random()

    def _sort(low: int, high: int) -> None:
        while low < high:
            pivot = generator.randint(low, high)
            items[high], items[pivot] = items[pivot], items[high]
            index = _lomuto_partition(items, low, high)
            # Recurse into the smaller side to bound the stack depth.
            if index - low < high - index:
                _sort(low, index - 1)
                low = index + 1
            else:
                _sort(index + 1, high)
                high = index - 1

    _sort(0, len(items) - 1)
    return items


def _sift_down(items: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    items = list(values)
    size = len(items)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, i)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _median_of_three(items: MutableSequence[Any], a: int, b: int, c: int) -> int:
    """Return whichever of the three indices holds the median value."""
    ranked = sorted((a, b, c), key=items.__getitem__)
    return ranked[1]


def _partition_inclusive(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition keeping elements equal to the pivot on its left side."""
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _intro_sort_range(items: list[Any], begin: int, end: int, depth: int) -> None:
    size = end - begin
    if size < _INSERTION_THRESHOLD:
        _insertion_range(items, begin, end)
        return
    if depth == 0:
        items[begin:end + 1] = heap_sort(items[begin:end + 1])
        return
    pivot = _median_of_three(items, begin, begin + size // 2, end)
    items[pivot], items[end] = items[end], items[pivot]
    point = _partition_inclusive(items, begin, end)
    _intro_sort_range(items, begin, point - 1, depth - 1)
    _intro_sort_range(items, point + 1, end, depth - 1)


def intro_sort(values: Iterable[Any]) -> list[Any]:
    """Introsort: quicksort that falls back to heap sort when recursion
    gets deep and to insertion sort on small ranges."""
    items = list(values)
    if len(items) < 2:
        return items
    span = len(items) - 1
    depth = int(2 * math.log(span)) if span > 1 else 0
    _intro_sort_range(items, 0, span, depth)
    return items