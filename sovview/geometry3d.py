"""Spatial helpers built on 4x4 matrices: projection, decomposition and quads.

Quads are given by their upper left, upper right and lower left corners.
Functions that may find no result return None.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix4 import M4
from .vector3d import V3, intersect_with_plane, xy_unit_rotation
from .vector4d import V4

_HALF_PI = math.pi / 2


@dataclass(frozen=True, slots=True)
class Decomposition:
    """Scale, rotation angles and translation found in a transformation matrix."""

    scale: V3
    rotation: V3
    translation: V3


def extract_angles(matrix):
    """Rotation angles around the x, y and z axes stored in the matrix."""
    if abs(matrix.m20) != 1:
        y = -math.asin(matrix.m20)
        cos_y = math.cos(y)
        x = math.atan2(matrix.m21 / cos_y, matrix.m22 / cos_y)
        z = math.atan2(matrix.m10 / cos_y, matrix.m00 / cos_y)
    else:
        z = 0.0
        if matrix.m20 == -1.0:
            y = _HALF_PI
            x = z + math.atan2(matrix.m01, matrix.m02)
        else:
            y = -_HALF_PI
            x = -z + math.atan2(-matrix.m01, -matrix.m02)
    return V3(x, y, z)


def multiply_vector4(matrix, vector):
    """Product of the matrix with a homogeneous column vector."""
    return V4(
        matrix.m00 * vector.x + matrix.m10 * vector.y + matrix.m20 * vector.z + matrix.m30 * vector.w,
        matrix.m01 * vector.x + matrix.m11 * vector.y + matrix.m21 * vector.z + matrix.m31 * vector.w,
        matrix.m02 * vector.x + matrix.m12 * vector.y + matrix.m22 * vector.z + matrix.m32 * vector.w,
        matrix.m03 * vector.x + matrix.m13 * vector.y + matrix.m23 * vector.z + matrix.m33 * vector.w,
    )


def world_to_screen(matrix, vector, width, height):
    """Project the x, y of a model space point onto a width x height screen.

    When the projected w is zero the unnormalized product is returned.
    """
    projected = multiply_vector4(matrix, V4(vector.x, vector.y, 0.0, 1.0))
    if projected.w == 0:
        return projected
    ndc_x = projected.x / projected.w
    ndc_y = projected.y / projected.w
    ndc_z = projected.z / projected.w
    return V4(
        (ndc_x + 1.0) * width * 0.5,
        (ndc_y + 1.0) * height * 0.5,
        ndc_z,
        projected.w,
    )


def screen_to_world(matrix, vector, width, height):
    """Map a screen point (with depth in z) back to model space, or None.

    Raises SingularMatrixError when the matrix cannot be inverted.
    """
    ndc = V4(
        vector.x / width * 2.0 - 1.0,
        vector.y / height * 2.0 - 1.0,
        vector.z,
        1.0,
    )
    result = multiply_vector4(matrix.invert(), ndc)
    if result.w == 0:
        return None
    inverse_w = 1.0 / result.w
    return V3(result.x * inverse_w, result.y * inverse_w, result.z * inverse_w)


def _xyz(vector):
    return V3(vector.x, vector.y, vector.z)


def extract(matrix):
    """Decompose a transformation into uniform scale, rotation and translation."""
    origin = _xyz(multiply_vector4(matrix, V4(0.0, 0.0, 0.0, 1.0)))
    axis_x = _xyz(multiply_vector4(matrix, V4(1.0, 0.0, 0.0, 1.0))) - origin
    axis_y = _xyz(multiply_vector4(matrix, V4(0.0, 1.0, 0.0, 1.0))) - origin
    factor = axis_x.length()
    return Decomposition(
        scale=V3(factor, factor, factor),
        rotation=xy_unit_rotation(axis_x, axis_y),
        translation=origin,
    )


def _quad_frame(ulc, urc, llc):
    corner = _xyz(ulc)
    down = _xyz(llc) - corner
    right = _xyz(urc) - corner
    return corner, down, right


def _inside_quad(down, right, offset):
    """Quad-local (x, y) of offset from the upper left corner, or None if outside."""
    try:
        angle_down = down.angle(offset)
        angle_right = right.angle(offset)
    except ValueError:
        return None
    length = offset.length()
    x = math.cos(angle_right) * length
    y = -math.sin(angle_right) * length
    if angle_down > _HALF_PI and (angle_right > _HALF_PI or angle_right < _HALF_PI):
        y = -y
    if 0.0 < x < right.length() and -down.length() < y < 0.0:
        return x, y
    return None


def quad_relative_coords(ulc, urc, llc, point):
    """Coordinates of point in the quad's own frame, or None if outside the quad."""
    corner, down, right = _quad_frame(ulc, urc, llc)
    local = _inside_quad(down, right, point - corner)
    if local is None:
        return None
    return V3(local[0], local[1], 0.0)


def quad_line_intersection(ulc, urc, llc, line_a, line_b):
    """Point where the line through line_a and line_b crosses the quad, or None.

    Raises ValueError when the line is parallel to the quad's plane.
    """
    corner, down, right = _quad_frame(ulc, urc, llc)
    hit = intersect_with_plane(line_a, line_b, corner, down.cross(right))
    if _inside_quad(down, right, hit - corner) is None:
        return None
    return hit


__all__ = [
    "Decomposition",
    "M4",
    "extract",
    "extract_angles",
    "multiply_vector4",
    "quad_line_intersection",
    "quad_relative_coords",
    "screen_to_world",
    "world_to_screen",
]