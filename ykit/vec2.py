"""Two-dimensional vectors with float and integer components."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class DVec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> DVec2:
        """Return the zero vector."""
        return DVec2(0.0, 0.0)

    def __add__(self, other: DVec2) -> DVec2:
        return DVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: DVec2) -> DVec2:
        return DVec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> DVec2:
        return DVec2(-self.x, -self.y)

    def dot(self, other: DVec2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def scale(self, scalar: float) -> DVec2:
        """Return the vector multiplied by ``scalar``."""
        return DVec2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> DVec2:
        """Return the vector divided by ``scalar``."""
        return DVec2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        """Return the squared length."""
        return float(self.x * self.x + self.y * self.y)

    def normalized(self) -> DVec2:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self.divide(self.length())


@dataclass(frozen=True)
class IVec2:
    """A 2D vector of integers."""

    x: int = 0
    y: int = 0

    @staticmethod
    def zero() -> IVec2:
        """Return the zero vector."""
        return IVec2(0, 0)

    def __add__(self, other: IVec2) -> IVec2:
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IVec2) -> IVec2:
        return IVec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> IVec2:
        return IVec2(-self.x, -self.y)

    def dot(self, other: IVec2) -> int:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def scale(self, scalar: int) -> IVec2:
        """Return the vector multiplied by an integer."""
        return IVec2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: int) -> IVec2:
        """Return the vector divided by an integer, truncating toward zero."""
        return IVec2(_trunc_div(self.x, scalar), _trunc_div(self.y, scalar))

    def dscale(self, scalar: float) -> IVec2:
        """Scale by a float and truncate each component toward zero."""
        return IVec2(int(self.x * scalar), int(self.y * scalar))

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        """Return the squared length as a float."""
        return float(self.x * self.x + self.y * self.y)

    def normalized(self) -> DVec2:
        """Return a unit float vector in the same direction."""
        return DVec2(float(self.x), float(self.y)).normalized()