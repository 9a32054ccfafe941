"""Parity of integers by their lowest bit."""

from __future__ import annotations

__all__ = ["is_odd", "describe_parity"]


def is_odd(number: int) -> bool:
    """True when the lowest bit of ``number`` is set."""
    return bool(number & 1)


def describe_parity(number: int) -> str:
    """A sentence such as "7 is ODD" or "4 is EVEN"."""
    return f"{number} is {'ODD' if is_odd(number) else 'EVEN'}"