"""Planar geometry: line and segment intersections, rectangles and squares.

Segments are given as a translation (start point) and a basis (direction and
length). Functions that may find no intersection return None.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .vector2d import V2, circular_angle_between

_ORIGIN = V2(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def expand(self, distance):
        """Grow the rectangle by distance on every side."""
        return Rect(
            self.x - distance,
            self.y - distance,
            self.w + 2 * distance,
            self.h + 2 * distance,
        )


@dataclass(frozen=True, slots=True)
class Segment:
    trans: V2
    basis: V2


@dataclass(frozen=True, slots=True)
class Square:
    origo: V2
    extent: V2


class Overlap(IntEnum):
    NONE = 0
    INSIDE = 1
    PARTIAL = 2


def intersect_lines(trans_a, basis_a, trans_b, basis_b):
    """Intersection of two infinite lines, or None if parallel or degenerate."""
    if basis_a.x == 0.0 and basis_a.y == 0.0:
        return None
    if basis_b.x == 0.0 and basis_b.y == 0.0:
        return None

    a_a, a_b = basis_a.y, -basis_a.x
    b_a, b_b = basis_b.y, -basis_b.x
    determinant = b_a * a_b - b_b * a_a
    if determinant == 0.0:
        return None

    a_c = a_a * trans_a.x + a_b * trans_a.y
    b_c = b_a * trans_b.x + b_b * trans_b.y
    return V2(
        (a_b * b_c - b_b * a_c) / determinant,
        (b_a * a_c - a_a * b_c) / determinant,
    )


def mirror(axis, vector):
    """Reflect vector across the line through the origin along axis."""
    projected = intersect_lines(_ORIGIN, axis, vector, axis.rotate_90_right())
    if projected is None:
        raise ValueError("mirror axis must not be a zero vector")
    return projected + (projected - vector)


def point_inside_vector(trans, basis, point):
    """Whether a point already on the segment's line falls within the segment."""
    dx = point.x - trans.x
    dy = point.y - trans.y

    if basis.x < 0 and dx >= 0:
        return False
    if basis.x > 0 and dx < 0:
        return False
    if basis.y < 0 and dy >= 0:
        return False
    if basis.y > 0 and dy < 0:
        return False

    abs_dx, abs_dy = abs(dx), abs(dy)
    abs_bx, abs_by = abs(basis.x), abs(basis.y)

    if abs_bx == 0.0:
        if abs_dx > 0.001:
            return False
    elif abs_bx < abs_dx + 0.001:
        return False

    if abs_by == 0.0:
        if abs_dy > 0.001:
            return False
    elif abs_by < abs_dy + 0.001:
        return False

    return True


def intersect_vectors(trans_a, basis_a, trans_b, basis_b):
    """Intersection point of two segments, or None."""
    point = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    if point is None:
        return None
    if point_inside_vector(trans_a, basis_a, point) and point_inside_vector(
        trans_b, basis_b, point
    ):
        return point
    return None


def box_intersect(basis_a, trans_a, basis_b, trans_b, extra_distance):
    """Whether the segments' bounding boxes, grown by extra_distance, overlap."""
    dcx = abs((trans_a.x + basis_a.x / 2.0) - (trans_b.x + basis_b.x / 2.0))
    dcy = abs((trans_a.y + basis_a.y / 2.0) - (trans_b.y + basis_b.y / 2.0))
    max_x = abs(basis_a.x / 2.0) + abs(basis_b.x / 2.0) + extra_distance
    max_y = abs(basis_a.y / 2.0) + abs(basis_b.y / 2.0) + extra_distance
    return dcx < max_x and dcy < max_y


def _start_distance(trans_a, trans_b):
    return max(abs(trans_a.x - trans_b.x), abs(trans_a.y - trans_b.y))


def endpoint_proximity(trans_a, basis_a, trans_b, basis_b):
    """How far the nearer segment end is from reaching the lines' intersection."""
    point = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    if point is None:
        return _start_distance(trans_a, trans_b)

    half_a = trans_a + basis_a.scale(0.5)
    half_b = trans_b + basis_b.scale(0.5)
    a_gap = max((half_a - point).length() - basis_a.length() / 2.0, 0.0)
    b_gap = max((half_b - point).length() - basis_b.length() / 2.0, 0.0)
    return max(a_gap, b_gap)


def intersect_with_proximity(trans_a, basis_a, trans_b, basis_b, proximity):
    """Segment intersection, falling back to line intersection when ends are close."""
    point = intersect_vectors(trans_a, basis_a, trans_b, basis_b)
    if point is None and proximity > 0.0:
        if endpoint_proximity(trans_a, basis_a, trans_b, basis_b) < proximity:
            point = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    return point


def endpoint_nearby(trans_a, basis_a, trans_b, basis_b):
    """Distance of segment a's end point from segment b, measured along and across b."""
    point = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    if point is None:
        return _start_distance(trans_a, trans_b)

    start = trans_a + basis_a
    end = trans_b + basis_b.scale(0.5)
    connector = end - start
    angle = circular_angle_between(connector, basis_b)
    length = connector.length()

    dx = abs(length * math.cos(angle))
    dy = abs(length * math.sin(angle))
    half_b = basis_b.length() / 2.0
    dx = dx - half_b if dx > half_b else 0.0
    return max(dx, dy)


def intersect_with_nearby(trans_a, basis_a, trans_b, basis_b, proximity):
    """Segment intersection, falling back to line intersection when a's end is near b."""
    point = intersect_vectors(trans_a, basis_a, trans_b, basis_b)
    if point is None and proximity > 0.0:
        if endpoint_nearby(trans_a, basis_a, trans_b, basis_b) < proximity:
            point = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    return point


def triangle_with_bases(point_a, point_b, segment_length, direction):
    """Apex of an isosceles triangle over a-b with legs of segment_length.

    direction picks the side; when the legs are too short the midpoint is returned.
    """
    half = (point_b - point_a).scale(0.5)
    length = half.length()
    if length < segment_length:
        needed = math.sqrt(segment_length * segment_length - length * length)
        offset = V2(direction * -half.y, direction * half.x).resize(needed)
        return point_a + half + offset
    return point_a + half


def collide_and_fragment(trans_a, basis_a, trans_b, basis_b):
    """Remaining part of segment a after bouncing off the line of segment b."""
    new_basis = mirror(basis_b, basis_a)
    new_trans = intersect_lines(trans_a, basis_a, trans_b, basis_b)
    if new_trans is None:
        raise ValueError("segments are parallel and cannot collide")

    final_length = basis_a.length() - (new_trans - trans_a).length()
    if final_length > 0.0:
        new_basis = new_basis.resize(final_length)
    else:
        new_basis = V2(0.0, 0.0)
    return Segment(new_trans, new_basis)


def square_intersect(a, b):
    """Intersection product of two squares."""
    new_width = b.extent.x
    new_height = b.extent.y
    new_left = min(a.origo.x, b.origo.x)
    new_top = max(a.origo.y, b.origo.y)

    if b.origo.x < a.origo.x:
        new_width = b.origo.x + b.extent.x - a.origo.x
        new_left = a.origo.x - b.origo.x

    if b.origo.y > a.origo.y:
        new_height = b.origo.y + b.extent.y - a.origo.y
        new_top = a.origo.y - b.origo.y

    if b.origo.x + b.extent.x > a.origo.x + a.extent.x:
        new_width = a.origo.x + a.extent.x - b.origo.x

    if b.origo.y + b.extent.y < a.origo.y + a.extent.y:
        new_height = a.origo.y + a.extent.y - b.origo.y

    if new_width > a.extent.x:
        new_width = a.extent.x
    if new_height < a.extent.y:
        new_height = a.extent.y

    return Square(V2(new_left, new_top), V2(new_width, new_height))


def square_overlapping(a, b):
    """Classify how square b overlaps square a (y extents point downwards)."""
    if (
        b.origo.x + b.extent.x < a.origo.x
        or b.origo.x > a.origo.x + a.extent.x
        or b.origo.y + b.extent.y > a.origo.y
        or b.origo.y < a.origo.y + a.extent.y
    ):
        return Overlap.NONE
    if (
        b.origo.x >= a.origo.x
        and b.origo.x + b.extent.x <= a.origo.x + a.extent.x
        and b.origo.y <= a.origo.y
        and b.origo.y + b.extent.y >= a.origo.y + a.extent.y
    ):
        return Overlap.INSIDE
    return Overlap.PARTIAL