"""Three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 0.00001


@dataclass(frozen=True, slots=True)
class V3:
    """Immutable 3D vector."""

    x: float
    y: float
    z: float

    def __add__(self, other):
        return V3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return V3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def scale(self, factor):
        return V3(self.x * factor, self.y * factor, self.z * factor)

    def cross(self, other):
        return V3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self):
        """Unit vector in the same direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scale(1.0 / length)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle(self, other):
        """Unsigned angle between the two vectors in radians."""
        lengths = self.length() * other.length()
        if lengths == 0.0:
            raise ValueError("angle is undefined for a zero-length vector")
        cosine = max(-1.0, min(1.0, self.dot(other) / lengths))
        return math.acos(cosine)

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other):
        return (other - self).length()

    def rotate_around_x(self, angle):
        """Rotate in the y-z plane; vectors lying on the x axis are unchanged."""
        if abs(self.y) > _EPSILON or abs(self.z) > _EPSILON:
            base = math.atan2(self.z, self.y)
            length = math.hypot(self.y, self.z)
            return V3(
                self.x,
                math.cos(base + angle) * length,
                math.sin(base + angle) * length,
            )
        return self

    def rotate_around_y(self, angle):
        """Rotate in the x-z plane; vectors lying on the y axis are unchanged."""
        if abs(self.x) > _EPSILON or abs(self.z) > _EPSILON:
            base = math.atan2(self.z, self.x)
            length = math.hypot(self.x, self.z)
            return V3(
                math.cos(base + angle) * length,
                self.y,
                math.sin(base + angle) * length,
            )
        return self

    def rotate_around_z(self, angle):
        """Rotate in the x-y plane; vectors lying on the z axis are unchanged."""
        if abs(self.x) > _EPSILON or abs(self.y) > _EPSILON:
            base = math.atan2(self.y, self.x)
            length = math.hypot(self.x, self.y)
            return V3(
                math.cos(base + angle) * length,
                math.sin(base + angle) * length,
                self.z,
            )
        return self


def xy_unit_rotation(vx, vy):
    """Rotation angles that bring the plane spanned by vx, vy back to the x-y unit axes."""
    if abs(vx.x) > _EPSILON or abs(vx.y) > _EPSILON:
        angle = math.atan2(vx.y, vx.x)
        rot_z = angle
        vx = vx.rotate_around_z(-angle)
        vy = vy.rotate_around_z(-angle)
    else:
        rot_z = 0.0

    if abs(vx.x) > _EPSILON or abs(vx.z) > _EPSILON:
        angle = math.atan2(vx.z, vx.x)
        rot_y = -angle
        vx = vx.rotate_around_y(-angle)
        vy = vy.rotate_around_y(-angle)
    else:
        rot_y = 0.0

    if abs(vy.y) > _EPSILON or abs(vy.z) > _EPSILON:
        rot_x = math.atan2(vy.z, vy.y)
    else:
        rot_x = 0.0

    return V3(rot_x, rot_y, rot_z)


def intersect_with_plane(line_a, line_b, plane_point, plane_normal):
    """Point where the line through line_a and line_b meets the plane."""
    direction = line_b - line_a
    denominator = plane_normal.dot(direction)
    if denominator == 0.0:
        raise ValueError("line is parallel to the plane")
    ratio = plane_normal.dot(plane_point - line_a) / denominator
    return line_a + direction.scale(ratio)