"""Small numeric helpers."""

from __future__ import annotations

from typing import TypeVar

_N = TypeVar("_N", int, float)


def sign(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp(value: _N, lo: _N, hi: _N) -> _N:
    """Limit ``value`` to ``[lo, hi]``; the upper bound is checked first."""
    if value > hi:
        return hi
    if value < lo:
        return lo
    return value