import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sovview.vector3d import V3, intersect_with_plane, xy_unit_rotation

coords = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)
triples = st.tuples(coords, coords, coords)


def assert_close(u, v, tol=1e-6):
    assert u.x == pytest.approx(v.x, abs=tol)
    assert u.y == pytest.approx(v.y, abs=tol)
    assert u.z == pytest.approx(v.z, abs=tol)


@given(triples, triples)
def test_add_then_sub_round_trip(ta, tb):
    a = V3(*ta)
    b = V3(*tb)
    back = (a + b) - b
    assert (back.x, back.y, back.z) == pytest.approx(ta, abs=1e-6)


@given(triples, triples)
def test_cross_is_orthogonal_to_both(ta, tb):
    a = V3(*ta)
    b = V3(*tb)
    c = a.cross(b)
    scale = max(1.0, a.length() * b.length() * max(a.length(), b.length()))
    assert c.dot(a) / scale == pytest.approx(0.0, abs=1e-6)
    assert c.dot(b) / scale == pytest.approx(0.0, abs=1e-6)


def test_cross_of_unit_axes():
    assert V3(1.0, 0.0, 0.0).cross(V3(0.0, 1.0, 0.0)) == V3(0.0, 0.0, 1.0)


def test_normalize_gives_unit_length():
    v = V3(3.0, -2.0, 6.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        V3(0.0, 0.0, 0.0).normalize()


def test_angle_between_perpendicular_and_self():
    a = V3(2.0, 0.0, 0.0)
    assert a.angle(V3(0.0, 0.0, 5.0)) == pytest.approx(math.pi / 2)
    assert a.angle(a) == pytest.approx(0.0)


def test_angle_with_zero_vector_raises():
    with pytest.raises(ValueError):
        V3(1.0, 0.0, 0.0).angle(V3(0.0, 0.0, 0.0))


@given(triples, triples)
def test_distance_symmetric_and_matches_difference(ta, tb):
    a = V3(*ta)
    b = V3(*tb)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())


@given(triples, st.floats(min_value=-6, max_value=6))
def test_rotations_preserve_length_and_axis_component(tv, angle):
    v = V3(*tv)
    rx = v.rotate_around_x(angle)
    ry = v.rotate_around_y(angle)
    rz = v.rotate_around_z(angle)
    assert rx.x == v.x and ry.y == v.y and rz.z == v.z
    for r in (rx, ry, rz):
        assert r.length() == pytest.approx(v.length(), abs=1e-6)


def test_rotate_around_z_quarter_turn():
    assert_close(V3(1.0, 0.0, 5.0).rotate_around_z(math.pi / 2), V3(0.0, 1.0, 5.0))


def test_rotate_vector_on_axis_is_unchanged():
    assert V3(5.0, 0.0, 0.0).rotate_around_x(1.0) == V3(5.0, 0.0, 0.0)


def test_xy_unit_rotation_recovers_z_angle():
    angle = 0.7
    vx = V3(1.0, 0.0, 0.0).rotate_around_z(angle)
    vy = V3(0.0, 1.0, 0.0).rotate_around_z(angle)
    rotation = xy_unit_rotation(vx, vy)
    assert rotation.z == pytest.approx(angle)
    assert rotation.x == pytest.approx(0.0, abs=1e-6)
    assert rotation.y == pytest.approx(0.0, abs=1e-6)


def test_intersect_with_plane_lies_on_plane():
    point = V3(1.0, 2.0, 3.0)
    normal = V3(0.5, -1.0, 2.0)
    result = intersect_with_plane(V3(-4.0, 1.0, -2.0), V3(3.0, 5.0, 8.0), point, normal)
    assert normal.dot(result - point) == pytest.approx(0.0, abs=1e-9)


def test_intersect_with_parallel_plane_raises():
    with pytest.raises(ValueError):
        intersect_with_plane(
            V3(0.0, 0.0, 1.0), V3(1.0, 0.0, 1.0), V3(0.0, 0.0, 0.0), V3(0.0, 0.0, 1.0)
        )


def test_iteration_gives_components():
    assert tuple(V3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)