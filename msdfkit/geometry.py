"""Basic geometric value types: vectors, ranges, signed distances and edge colors."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


class Vector2:
    """A 2-dimensional euclidean floating-point vector."""

    __slots__ = ("x", "y")

    def __init__(self, x: Number = 0.0, y: Number | None = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def squared_length(self) -> float:
        """Return the vector's squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the vector's length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self, allow_zero: bool = False) -> Vector2:
        """Return a vector of unit length with the same direction.

        A zero vector yields (0, 1), or (0, 0) if ``allow_zero`` is set.
        """
        length = self.length()
        if length:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, float(not allow_zero))

    def orthogonal(self, polarity: bool = True) -> Vector2:
        """Return a vector of the same length orthogonal to this one."""
        if polarity:
            return Vector2(-self.y, self.x)
        return Vector2(self.y, -self.x)

    def orthonormal(self, polarity: bool = True, allow_zero: bool = False) -> Vector2:
        """Return a unit vector orthogonal to this one."""
        length = self.length()
        if length:
            if polarity:
                return Vector2(-self.y / length, self.x / length)
            return Vector2(self.y / length, -self.x / length)
        fallback = float(not allow_zero)
        return Vector2(0.0, fallback if polarity else -fallback)

    def __bool__(self) -> bool:
        return bool(self.x or self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | Number) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Vector2 | Number) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other / self.x, other / self.y)
        return NotImplemented


Point2 = Vector2


def dot_product(a: Vector2, b: Vector2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def cross_product(a: Vector2, b: Vector2) -> float:
    """Scalar cross product of two 2D vectors."""
    return a.x * b.y - a.y * b.x


@dataclass
class Range:
    """The range between two real values, such as representable signed distances."""

    lower: float = 0.0
    upper: float = 0.0

    @classmethod
    def symmetric(cls, width: Number) -> Range:
        """Return a range of the given width centred on zero."""
        return cls(-0.5 * width, 0.5 * width)

    def __mul__(self, factor: Number) -> Range:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Range(self.lower * factor, self.upper * factor)

    def __rmul__(self, factor: Number) -> Range:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Range(factor * self.lower, factor * self.upper)

    def __truediv__(self, divisor: Number) -> Range:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Range(self.lower / divisor, self.upper / divisor)


@dataclass
class SignedDistance:
    """A signed distance and alignment, ordered to pick the closest edge segment."""

    distance: float = -sys.float_info.max
    dot: float = 0.0

    def _key(self) -> tuple[float, float]:
        return abs(self.distance), self.dot

    def __lt__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self._key() >= other._key()


class EdgeColor(enum.IntFlag):
    """Which color channels an edge belongs to."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7