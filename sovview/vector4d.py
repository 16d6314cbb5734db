"""Four-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class V4:
    """Immutable 4D (homogeneous) vector."""

    x: float
    y: float
    z: float
    w: float

    def __add__(self, other):
        return V4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        return V4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def scale(self, factor):
        return V4(self.x * factor, self.y * factor, self.z * factor, self.w * factor)

    def describe(self):
        return f"x : {self.x:f} y : {self.y:f} z : {self.z:f} w : {self.w:f}"