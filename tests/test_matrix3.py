import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sovview.matrix3 import M3, SingularMatrixError
from sovview.vector3d import V3

_unit = st.floats(min_value=-1.0, max_value=1.0, allow_nan=False)
_nine = st.lists(_unit, min_size=9, max_size=9)

_IDENTITY = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def _boosted(values):
    return [value + (5.0 if index in (0, 4, 8) else 0.0) for index, value in enumerate(values)]


def test_identity_is_neutral_for_multiply():
    matrix = M3(1, 2, 3, 4, 5, 6, 7, 8, 10)
    assert matrix.multiply(M3.identity()) == matrix
    assert M3.identity().multiply(matrix) == matrix


def test_identity_leaves_vector_unchanged():
    assert M3.identity().multiply_vector(V3(3.0, -2.0, 7.0)) == V3(3.0, -2.0, 7.0)


def test_translation_moves_homogeneous_point():
    moved = M3.translation(4.0, -3.0).multiply_vector(V3(1.0, 2.0, 1.0))
    assert moved == V3(5.0, -1.0, 1.0)


def test_scaling_scales_planar_components():
    scaled = M3.scaling(2.0, 3.0).multiply_vector(V3(1.0, 1.0, 1.0))
    assert scaled == V3(2.0, 3.0, 1.0)


@pytest.mark.parametrize("factory", [M3.rotation_x, M3.rotation_y, M3.rotation_z])
@pytest.mark.parametrize("angle", [0.3, 1.0, -2.5])
def test_rotations_preserve_length(factory, angle):
    vector = V3(1.0, 2.0, 3.0)
    rotated = factory(angle).multiply_vector(vector)
    assert math.isclose(rotated.length(), vector.length())


@pytest.mark.parametrize("factory", [M3.rotation_x, M3.rotation_y, M3.rotation_z])
def test_rotations_are_orthogonal(factory):
    rotation = factory(0.7)
    product = rotation.multiply(rotation.transpose())
    assert list(product) == pytest.approx(_IDENTITY, abs=1e-9)


def test_rotation_z_quarter_turn():
    rotated = M3.rotation_z(math.pi / 2).multiply_vector(V3(1.0, 0.0, 0.0))
    assert tuple(rotated) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)


def test_transpose_swaps_off_diagonal():
    matrix = M3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    transposed = matrix.transpose()
    assert transposed.m01 == matrix.m10
    assert transposed.m20 == matrix.m02
    assert transposed.transpose() == matrix


def test_scaled_multiplies_every_element():
    matrix = M3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert list(matrix.scaled(2.0)) == [value * 2.0 for value in matrix]


def test_invert_of_diagonal():
    inverse = M3.scaling(2.0, 4.0).invert()
    assert list(inverse) == pytest.approx(
        [0.5, 0.0, 0.0, 0.0, 0.25, 0.0, 0.0, 0.0, 1.0], abs=1e-9
    )


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        M3(1, 2, 3, 2, 4, 6, 0, 1, 1).invert()


def test_describe_identity():
    assert M3.identity().describe() == "1.00 0.00 0.00 | 0.00 1.00 0.00 | 0.00 0.00 1.00"


@given(_nine)
def test_invert_is_transposed_inverse(values):
    matrix = M3(*_boosted(values))
    product = matrix.multiply(matrix.invert().transpose())
    assert list(product) == pytest.approx(_IDENTITY, abs=1e-7)


@given(_nine, _nine, _nine)
def test_multiply_is_associative(va, vb, vc):
    a = M3(*_boosted(va))
    b = M3(*_boosted(vb))
    c = M3(*_boosted(vc))
    left = a.multiply(b).multiply(c)
    right = a.multiply(b.multiply(c))
    assert list(left) == pytest.approx(list(right), abs=1e-6)


@given(_nine, _nine)
def test_transpose_of_product(va, vb):
    a = M3(*_boosted(va))
    b = M3(*_boosted(vb))
    left = a.multiply(b).transpose()
    right = b.transpose().multiply(a.transpose())
    assert list(left) == pytest.approx(list(right), abs=1e-9)