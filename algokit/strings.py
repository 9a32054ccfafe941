"""String algorithms: Rabin-Karp search, reversal, rotation, permutations,
and a substring index over a numbered list of words."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator

__all__ = [
    "SubstringIndex",
    "rabin_karp",
    "reverse_string",
    "rotate_left",
    "permutations",
]

_BASE = 127
_MODULUS = 1_000_000_007


class SubstringIndex:
    """Answers "how many of words low..high contain this substring".

    Words are numbered from 1 in the order given.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._positions: dict[str, list[int]] = {}
        for number, word in enumerate(words, start=1):
            pieces = {
                word[start:end]
                for start in range(len(word))
                for end in range(start + 1, len(word) + 1)
            }
            for piece in pieces:
                self._positions.setdefault(piece, []).append(number)

    def count(self, substring: str, low: int, high: int) -> int:
        """Number of words numbered ``low`` to ``high`` holding ``substring``."""
        positions = self._positions.get(substring, [])
        return max(0, bisect_right(positions, high) - bisect_left(positions, low))


def rabin_karp(pattern: str, text: str) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``."""
    width = len(pattern)
    if width > len(text):
        return []
    if width == 0:
        return list(range(len(text) + 1))
    target = window = 0
    for p, t in zip(pattern, text):
        target = (target * _BASE + ord(p)) % _MODULUS
        window = (window * _BASE + ord(t)) % _MODULUS
    leading = pow(_BASE, width - 1, _MODULUS)
    matches = []
    for start in range(len(text) - width + 1):
        if window == target and text.startswith(pattern, start):
            matches.append(start)
        end = start + width
        if end < len(text):
            window = (
                (window - ord(text[start]) * leading) * _BASE + ord(text[end])
            ) % _MODULUS
    return matches


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def rotate_left(text: str, positions: int) -> str:
    """Rotate ``text`` left by ``positions`` characters."""
    if not text:
        return text
    shift = positions % len(text)
    return text[shift:] + text[:shift]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``.

    Each position is filled in turn with each remaining character by
    rotating the remainder; repeated characters give repeated results.
    """

    def expand(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        for _ in range(len(rest)):
            yield from expand(rest[1:], prefix + rest[0])
            rest = rest[1:] + rest[:1]

    yield from expand(text, "")