"""4x4 matrices for 3D transformations and projections."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix3 import SingularMatrixError, _cofactors, _format_grid


@dataclass(frozen=True, slots=True)
class M4:
    """Immutable 4x4 matrix; field mCR holds column C, row R (translation in m30..m32)."""

    m00: float
    m01: float
    m02: float
    m03: float
    m10: float
    m11: float
    m12: float
    m13: float
    m20: float
    m21: float
    m22: float
    m23: float
    m30: float
    m31: float
    m32: float
    m33: float

    def __iter__(self):
        for column in self._grid():
            yield from column

    def _grid(self):
        return (
            (self.m00, self.m01, self.m02, self.m03),
            (self.m10, self.m11, self.m12, self.m13),
            (self.m20, self.m21, self.m22, self.m23),
            (self.m30, self.m31, self.m32, self.m33),
        )

    @classmethod
    def _from_grid(cls, grid):
        return cls(*(value for column in grid for value in column))

    @classmethod
    def identity(cls):
        return cls.scaling(1.0, 1.0, 1.0)

    @classmethod
    def scaling(cls, x, y, z):
        return cls(
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation(cls, x, y, z):
        """Rotation around the axis (x, y, z) by the component of largest magnitude."""
        largest = x if abs(x) > abs(y) else y
        largest = z if abs(z) > abs(largest) else largest
        if largest == 0.0:
            return cls.identity()

        nx, ny, nz = x / largest, y / largest, z / largest
        norm = 1.0 / math.sqrt(nx * nx + ny * ny + nz * nz)
        nx, ny, nz = nx * norm, ny * norm, nz * norm

        sin = math.sin(largest)
        cos = math.cos(largest)
        cosp = 1.0 - cos

        return cls(
            cos + cosp * nx * nx,
            cosp * nx * ny + nz * sin,
            cosp * nx * nz - ny * sin,
            0.0,
            cosp * nx * ny - nz * sin,
            cos + cosp * ny * ny,
            cosp * ny * nz + nx * sin,
            0.0,
            cosp * nx * nz + ny * sin,
            cosp * ny * nz - nx * sin,
            cos + cosp * nz * nz,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def translation(cls, x, y, z):
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        )

    @classmethod
    def ortho(cls, left, right, bottom, top, near, far):
        """Orthographic projection."""
        rpl, rml = right + left, right - left
        tpb, tmb = top + bottom, top - bottom
        fpn, fmn = far + near, far - near
        return cls(
            2.0 / rml, 0.0, 0.0, 0.0,
            0.0, 2.0 / tmb, 0.0, 0.0,
            0.0, 0.0, -2.0 / fmn, 0.0,
            -rpl / rml, -tpb / tmb, -fpn / fmn, 1.0,
        )

    @classmethod
    def perspective(cls, fovy, aspect, near, far):
        """Perspective projection with vertical field of view fovy in radians."""
        cotan = 1.0 / math.tan(fovy / 2.0)
        return cls(
            cotan / aspect, 0.0, 0.0, 0.0,
            0.0, cotan, 0.0, 0.0,
            0.0, 0.0, (far + near) / (near - far), -1.0,
            0.0, 0.0, (2.0 * far * near) / (near - far), 0.0,
        )

    def scale(self, x, y, z):
        """Multiply the diagonal scale elements by x, y and z."""
        grid = [list(column) for column in self._grid()]
        for index, factor in enumerate((x, y, z)):
            grid[index][index] *= factor
        return M4._from_grid(grid)

    def rotate(self, x, y, z):
        return self.multiply(M4.rotation(x, y, z))

    def translate(self, x, y, z):
        """Apply a translation in the matrix's own coordinate system."""
        grid = [list(column) for column in self._grid()]
        offset = (x, y, z)
        grid[3] = [
            sum(grid[k][row] * offset[k] for k in range(3)) + grid[3][row]
            for row in range(4)
        ]
        return M4._from_grid(grid)

    def invert(self):
        """Inverse matrix; raises SingularMatrixError when the determinant is zero."""
        grid = self._grid()
        cofactors = _cofactors(grid)
        determinant = sum(value * cof for value, cof in zip(grid[0], cofactors[0]))
        if determinant == 0:
            raise SingularMatrixError("matrix is not invertible")
        return M4._from_grid(list(zip(*cofactors))).scaled(1.0 / determinant)

    def multiply(self, other):
        """Matrix product self * other."""
        a, b = self._grid(), other._grid()
        return M4._from_grid(
            [
                [sum(a[k][row] * b[column][k] for k in range(4)) for row in range(4)]
                for column in range(4)
            ]
        )

    def transpose(self):
        return M4._from_grid(list(zip(*self._grid())))

    def scaled(self, number):
        """Every element multiplied by number."""
        return M4(*(value * number for value in self))

    def describe(self):
        return _format_grid(self._grid())