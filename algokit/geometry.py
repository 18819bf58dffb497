"""Two-dimensional points and vectors."""

from __future__ import annotations

import functools
import math
from collections.abc import Iterator
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True)
class Point:
    """A point or vector in the plane, ordered by y and then by x."""

    x: float = 0
    y: float = 0

    def __add__(self, p: object) -> Point:
        if not isinstance(p, Point):
            return NotImplemented
        return Point(self.x + p.x, self.y + p.y)

    def __sub__(self, p: object) -> Point:
        if not isinstance(p, Point):
            return NotImplemented
        return Point(self.x - p.x, self.y - p.y)

    def __mul__(self, c: float) -> Point:
        return Point(self.x * c, self.y * c)

    __rmul__ = __mul__

    def __truediv__(self, c: float) -> Point:
        return Point(self.x / c, self.y / c)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, p: Point) -> float:
        """Dot product with p."""
        return self.x * p.x + self.y * p.y

    def cross(self, a: Point, b: Point | None = None) -> float:
        """Cross product with a, or of (a - self) and (b - self) when b is given."""
        if b is None:
            return self.x * a.y - self.y * a.x
        return (a - self).cross(b - self)

    def dist(self, p: Point | None = None) -> float:
        """Squared length, or squared distance to p."""
        d = self if p is None else self - p
        return d.x * d.x + d.y * d.y

    def distance(self, p: Point | None = None) -> float:
        """Length, or distance to p."""
        return math.sqrt(self.dist(p))

    def angle(self, p: Point | None = None) -> float:
        """Polar angle, or signed angle from this vector to p."""
        if p is None:
            return math.atan2(self.y, self.x)
        return math.atan2(self.cross(p), self.dot(p))

    def unit(self) -> Point:
        """Vector of length one in the same direction."""
        length = self.distance()
        if length == 0:
            raise ZeroDivisionError("zero vector has no direction")
        return self / length

    def perp(self) -> Point:
        """This vector turned a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def rotate(self, a: float, center: Point | None = None) -> Point:
        """Rotate by a radians about the origin, or about center."""
        if center is not None:
            return (self - center).rotate(a) + center
        cos_a, sin_a = math.cos(a), math.sin(a)
        return Point(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def normal(self) -> Point:
        """Unit vector perpendicular to this one."""
        return self.perp().unit()