"""Classic algorithms and data structures: sorting, searching, backtracking,
dynamic programming, string algorithms, a stack, union-find and parity."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "distribution",
    "dp",
    "parity",
    "searching",
    "sorting",
    "strings",
    "structures",
]