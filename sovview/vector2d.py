"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class V2:
    """Immutable 2D vector."""

    x: float
    y: float

    def __add__(self, other):
        return V2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return V2(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def scale(self, ratio):
        """Multiply both components by ratio."""
        return V2(self.x * ratio, self.y * ratio)

    def resize(self, size):
        """Return a vector of the same direction with the given length."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot resize a zero-length vector")
        return self.scale(size / length)

    def rotate(self, angle):
        """Rotate counter-clockwise by angle radians."""
        new_angle = self.angle_x() + angle
        length = self.length()
        return V2(math.cos(new_angle) * length, math.sin(new_angle) * length)

    def rotate_90_left(self):
        return V2(-self.y, self.x)

    def rotate_90_right(self):
        return V2(self.y, -self.x)

    def length(self):
        return math.hypot(self.x, self.y)

    def angle_x(self):
        """Angle of the vector measured from the positive x axis."""
        return math.atan2(self.y, self.x)

    def longside(self):
        """The larger of the absolute components."""
        return max(abs(self.x), abs(self.y))

    def describe(self):
        return f"{self.x:f} {self.y:f} "


def midpoint(a, b):
    """Point halfway between a and b."""
    return a + (b - a).scale(0.5)


def circular_angle_between(a, b):
    """Counter-clockwise angle from a to b in the range [0, 2*pi)."""
    angle = b.angle_x() - a.angle_x()
    if angle < 0.0:
        angle += 2 * math.pi
    return angle