"""
Point and vector types for delta computation

VariationModel.deltas() works on any point type whose difference is a
vector type that can be scaled and subtracted. Plain floats qualify, and so
do Point2D/Vector2D below for outline geometry. The point type must
default-construct to its origin: deltas start from point - type(point)().
"""

from dataclasses import dataclass
from typing import Protocol, TypeVar

V = TypeVar("V", bound="Vector")


class Vector(Protocol):
    def __mul__(self: V, factor: float) -> V: ...

    def __sub__(self: V, other: V) -> V: ...


class Point(Protocol):
    def __sub__(self, other) -> Vector: ...


@dataclass(frozen=True)
class Vector2D:
    """An offset in 2d space"""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2D":
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)


@dataclass(frozen=True)
class Point2D:
    """An absolute position in 2d space"""

    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other):
        if isinstance(other, Point2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2D):
            return Point2D(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __add__(self, other: Vector2D) -> "Point2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def to_vec2(self) -> Vector2D:
        return Vector2D(self.x, self.y)
