import math

import pytest

from blockengine.vectors import (
    PI,
    Rectangle,
    Vector2,
    Vector3,
    Vector4,
    clamp,
    cot,
    lerp,
    near_zero,
    to_degrees,
    to_radians,
)


def test_to_radians_half_turn_is_pi():
    assert to_radians(180.0) == pytest.approx(PI)


@pytest.mark.parametrize("deg", [-270.0, 0.0, 45.0, 90.0, 360.0])
def test_degrees_radians_round_trip(deg):
    assert to_degrees(to_radians(deg)) == pytest.approx(deg)


def test_near_zero_default_epsilon():
    assert near_zero(0.001)
    assert near_zero(-0.0005)
    assert not near_zero(0.01)


def test_near_zero_custom_epsilon():
    assert near_zero(0.05, 0.1)
    assert not near_zero(0.2, 0.1)


@pytest.mark.parametrize(
    "value,lower,upper,expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (42, 0, 10, 10), (0, 0, 255, 0), (300, 0, 255, 255)],
)
def test_clamp(value, lower, upper, expected):
    assert clamp(value, lower, upper) == expected


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0
    assert lerp(2.0, 8.0, 0.5) == pytest.approx((2.0 + 8.0) / 2)


@pytest.mark.parametrize("angle", [0.3, 1.0, 2.5])
def test_cot_is_reciprocal_of_tan(angle):
    assert cot(angle) * math.tan(angle) == pytest.approx(1.0)


def test_vector2_arithmetic():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 5.0)
    assert a + b == Vector2(4.0, 7.0)
    assert b - a == Vector2(2.0, 3.0)
    assert a * b == Vector2(3.0, 10.0)
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == a * 2


def test_vector2_defaults_and_constants():
    assert Vector2() == Vector2.ZERO
    assert Vector2.UNIT_X + Vector2.NEG_UNIT_X == Vector2.ZERO
    assert Vector2.dot(Vector2.UNIT_X, Vector2.UNIT_Y) == 0.0


def test_vector2_length_and_normalize():
    v = Vector2(3.0, 4.0)
    assert v.length_sq() == pytest.approx(v.length() ** 2)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.x / n.y == pytest.approx(v.x / v.y)


def test_vector2_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2.ZERO.normalized()


def test_vector2_lerp_endpoints():
    a = Vector2(1.0, -1.0)
    b = Vector2(5.0, 9.0)
    assert Vector2.lerp(a, b, 0.0) == a
    assert Vector2.lerp(a, b, 1.0) == b


def test_vector2_reflect_preserves_length_and_flips_normal_component():
    v = Vector2(2.0, -3.0)
    r = Vector2.reflect(v, Vector2.UNIT_Y)
    assert r == Vector2(2.0, 3.0)
    assert r.length() == pytest.approx(v.length())


def test_vector3_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert a + b == Vector3(5.0, 7.0, 9.0)
    assert b - a == Vector3(3.0, 3.0, 3.0)
    assert a * b == Vector3(4.0, 10.0, 18.0)
    assert 3 * a == a * 3
    assert -a + a == Vector3.ZERO


def test_vector3_cross_of_unit_axes():
    assert Vector3.cross(Vector3.UNIT_X, Vector3.UNIT_Y) == Vector3.UNIT_Z
    assert Vector3.cross(Vector3.UNIT_Y, Vector3.UNIT_X) == Vector3.NEG_UNIT_Z


def test_vector3_cross_is_orthogonal():
    a = Vector3(1.5, -2.0, 0.5)
    b = Vector3(0.25, 3.0, -1.0)
    c = Vector3.cross(a, b)
    assert Vector3.dot(c, a) == pytest.approx(0.0)
    assert Vector3.dot(c, b) == pytest.approx(0.0)


def test_vector3_normalized_has_unit_length():
    v = Vector3(2.0, -7.0, 4.0)
    assert v.normalized().length() == pytest.approx(1.0)
    assert v.length_sq() == pytest.approx(v.length() ** 2)


def test_vector3_lerp_and_reflect():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.0, 7.0)
    assert Vector3.lerp(a, b, 0.0) == a
    assert Vector3.lerp(a, b, 1.0) == b
    r = Vector3.reflect(a, Vector3.UNIT_Z)
    assert r == Vector3(1.0, 2.0, -3.0)


def test_vector3_infinity_constants():
    assert Vector3.INFINITY.length() == math.inf
    assert Vector3.NEG_INFINITY.length_sq() == math.inf
    assert all(math.isinf(c) and c > 0 for c in Vector3.INFINITY)
    assert all(math.isinf(c) and c < 0 for c in Vector3.NEG_INFINITY)


def test_vector4_defaults_and_iteration():
    assert tuple(Vector4()) == (0.0, 0.0, 0.0, 0.0)
    assert tuple(Vector4(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)


def test_rectangle_edges_follow_size():
    r = Rectangle(10.0, 20.0, 30.0, 40.0)
    assert r.right == r.left + r.width
    assert r.bottom == r.top + r.height


def test_rectangle_center_is_midpoint_of_edges():
    r = Rectangle(10.0, 20.0, 30.0, 40.0)
    c = r.center()
    assert c == Vector2((r.left + r.right) / 2, (r.top + r.bottom) / 2)


def test_rectangle_default_is_empty():
    r = Rectangle()
    assert (r.left, r.right, r.top, r.bottom) == (0.0, 0.0, 0.0, 0.0)
    assert r.center() == Vector2.ZERO