"""Dynamic-programming classics: egg dropping, LIS, largest square, Fibonacci."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Any

__all__ = [
    "egg_drop",
    "longest_increasing_subsequence",
    "largest_square_of_ones",
    "fibonacci",
    "fibonacci_table",
]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor among ``floors``."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    previous = list(range(floors + 1))  # with a single egg, try every floor
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        for height in range(1, floors + 1):
            current[height] = 1 + min(
                max(previous[drop - 1], current[height - drop])
                for drop in range(1, height + 1)
            )
        previous = current
    return previous[floors]


def longest_increasing_subsequence(values: Iterable[Any]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def largest_square_of_ones(
    matrix: Iterable[Iterable[Any]],
) -> tuple[int, tuple[int, int] | None]:
    """Side of the largest all-ones square and the (row, col) of its top-left.

    Cells are read as truthy or falsy. When several squares share the
    largest side, the one whose corner is met first scanning from the
    bottom-right corner is reported. The position is None when there are
    no ones.
    """
    rows = [[1 if cell else 0 for cell in row] for row in matrix]
    if not rows or not rows[0]:
        return 0, None
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must have equal length")
    last_row, last_col = len(rows) - 1, width - 1
    table = [[0] * width for _ in rows]
    best, where = 0, None
    for r in range(last_row, -1, -1):
        for c in range(last_col, -1, -1):
            if r == last_row or c == last_col or not rows[r][c]:
                table[r][c] = rows[r][c]
            else:
                table[r][c] = 1 + min(
                    table[r + 1][c + 1], table[r + 1][c], table[r][c + 1]
                )
            if table[r][c] > best:
                best, where = table[r][c], (r, c)
    return best, where


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_table(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers, starting from 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table: list[int] = []
    current, following = 0, 1
    for _ in range(n):
        table.append(current)
        current, following = following, current + following
    return table