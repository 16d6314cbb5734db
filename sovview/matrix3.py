"""3x3 matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector3d import V3


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix with a zero determinant is inverted."""


def _minor(grid, row, col):
    return [
        [value for c, value in enumerate(cells) if c != col]
        for r, cells in enumerate(grid)
        if r != row
    ]


def _determinant(grid):
    if len(grid) == 1:
        return grid[0][0]
    return sum(
        (-1) ** col * value * _determinant(_minor(grid, 0, col))
        for col, value in enumerate(grid[0])
    )


def _cofactors(grid):
    size = len(grid)
    return [
        [(-1) ** (row + col) * _determinant(_minor(grid, row, col)) for col in range(size)]
        for row in range(size)
    ]


def _format_grid(grid):
    return " | ".join(" ".join(f"{value:.2f}" for value in row) for row in grid)


@dataclass(frozen=True, slots=True)
class M3:
    """Immutable 3x3 matrix; field mRC holds row R, column C."""

    m00: float
    m01: float
    m02: float
    m10: float
    m11: float
    m12: float
    m20: float
    m21: float
    m22: float

    def __iter__(self):
        for row in self._grid():
            yield from row

    def _grid(self):
        return (
            (self.m00, self.m01, self.m02),
            (self.m10, self.m11, self.m12),
            (self.m20, self.m21, self.m22),
        )

    @classmethod
    def _from_grid(cls, grid):
        return cls(*(value for row in grid for value in row))

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def scaling(cls, x, y):
        """Scale matrix for the two planar axes."""
        return cls(x, 0.0, 0.0, 0.0, y, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def translation(cls, x, y):
        """Planar translation in homogeneous coordinates."""
        return cls(1.0, 0.0, x, 0.0, 1.0, y, 0.0, 0.0, 1.0)

    @classmethod
    def rotation_x(cls, radian):
        cos, sin = math.cos(radian), math.sin(radian)
        return cls(1.0, 0.0, 0.0, 0.0, cos, -sin, 0.0, sin, cos)

    @classmethod
    def rotation_y(cls, radian):
        cos, sin = math.cos(radian), math.sin(radian)
        return cls(cos, 0.0, sin, 0.0, 1.0, 0.0, -sin, 0.0, cos)

    @classmethod
    def rotation_z(cls, radian):
        cos, sin = math.cos(radian), math.sin(radian)
        return cls(cos, sin, 0.0, -sin, cos, 0.0, 0.0, 0.0, 1.0)

    def multiply(self, other):
        """Matrix product self * other."""
        a, b = self._grid(), other._grid()
        return M3._from_grid(
            [[sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3)] for i in range(3)]
        )

    def invert(self):
        """Cofactor matrix divided by the determinant, i.e. the transposed inverse.

        Raises SingularMatrixError when the determinant is zero.
        """
        grid = self._grid()
        cofactors = _cofactors(grid)
        determinant = sum(value * cof for value, cof in zip(grid[0], cofactors[0]))
        if determinant == 0:
            raise SingularMatrixError("matrix is not invertible")
        return M3._from_grid(cofactors).scaled(1.0 / determinant)

    def transpose(self):
        return M3._from_grid(list(zip(*self._grid())))

    def multiply_vector(self, vector):
        """Product of the matrix with a column vector."""
        return V3(
            *(row[0] * vector.x + row[1] * vector.y + row[2] * vector.z for row in self._grid())
        )

    def scaled(self, number):
        """Every element multiplied by number."""
        return M3(*(value * number for value in self))

    def describe(self):
        return _format_grid(self._grid())