"""Backtracking solvers: N-queens, subsets with a given sum, and sudoku."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["solve_n_queens", "format_board", "subsets_with_sum", "solve_sudoku"]

_SUDOKU_SIZE = 9
_BOX = 3
_EMPTY = 0


def _queen_is_safe(board: list[list[int]], row: int, col: int) -> bool:
    """Check the squares to the left of ``(row, col)`` for attacking queens."""
    if any(board[row][:col]):
        return False
    for r, c in zip(range(row, -1, -1), range(col, -1, -1)):
        if board[r][c]:
            return False
    for r, c in zip(range(row, len(board)), range(col, -1, -1)):
        if board[r][c]:
            return False
    return True


def solve_n_queens(size: int) -> list[list[int]] | None:
    """Place ``size`` non-attacking queens column by column.

    Returns the first board found, with 1 marking a queen and 0 an empty
    square, or None when no placement exists.
    """
    if size < 0:
        raise ValueError("board size must be non-negative")
    board = [[0] * size for _ in range(size)]

    def place(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if _queen_is_safe(board, row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def format_board(board: Iterable[Iterable[int]]) -> str:
    """Render a grid as lines of space-separated cells."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)


def subsets_with_sum(values: Iterable[int], total: int) -> list[list[int]]:
    """Every selection of ``values`` whose elements add up to ``total``.

    Each subset lists its elements from the last chosen position back to
    the first. Returns an empty list when there is no such subset.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    if not items or total < 0:
        return []

    # reachable[i][s]: some subset of items[0..i] sums to s.
    reachable = [[False] * (total + 1) for _ in items]
    for row in reachable:
        row[0] = True
    if items[0] <= total:
        reachable[0][items[0]] = True
    for previous, current, value in zip(reachable, reachable[1:], items[1:]):
        for amount in range(total + 1):
            current[amount] = previous[amount] or (
                value <= amount and previous[amount - value]
            )
    if not reachable[-1][total]:
        return []

    found: list[list[int]] = []

    def walk(index: int, remaining: int, chosen: list[int]) -> None:
        if index == 0:
            found.append(chosen + [items[0]] if remaining else chosen)
            return
        if reachable[index - 1][remaining]:
            walk(index - 1, remaining, list(chosen))
        value = items[index]
        if remaining >= value and reachable[index - 1][remaining - value]:
            walk(index - 1, remaining - value, chosen + [value])

    walk(len(items) - 1, total, [])
    return found


def _sudoku_allows(board: list[list[int]], row: int, col: int, number: int) -> bool:
    if number in board[row]:
        return False
    if any(line[col] == number for line in board):
        return False
    top, left = row - row % _BOX, col - col % _BOX
    return all(
        number not in board[r][left:left + _BOX] for r in range(top, top + _BOX)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a 9x9 grid; return the solved copy or None."""
    board = [list(row) for row in grid]
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= cell <= _SUDOKU_SIZE for row in board for cell in row):
        raise ValueError("sudoku cells must be between 0 and 9")

    def solve() -> bool:
        empty = next(
            (
                (r, c)
                for r, row in enumerate(board)
                for c, cell in enumerate(row)
                if cell == _EMPTY
            ),
            None,
        )
        if empty is None:
            return True
        row, col = empty
        for number in range(1, _SUDOKU_SIZE + 1):
            if _sudoku_allows(board, row, col, number):
                board[row][col] = number
                if solve():
                    return True
                board[row][col] = _EMPTY
        return False

    return board if solve() else None