import math

import pytest

from ogb.vectors import (
    Vector2,
    Vector2i,
    Vector3,
    Vector3i,
    Vector4,
    Vector4i,
    rotate_point_around_pivot,
)


def test_scalar_sets_every_component():
    assert tuple(Vector2.scalar(3)) == (3.0, 3.0)
    assert tuple(Vector3.scalar(3)) == (3.0, 3.0, 3.0)
    assert tuple(Vector4.scalar(3)) == (3.0, 3.0, 3.0, 3.0)
    assert tuple(Vector2i.scalar(3)) == (3, 3)
    assert tuple(Vector3i.scalar(3)) == (3, 3, 3)
    assert tuple(Vector4i.scalar(3)) == (3, 3, 3, 3)


def test_scalar_average_is_the_scalar():
    assert Vector2.scalar(7).average() == pytest.approx(7)
    assert Vector3.scalar(7).average() == pytest.approx(7)
    assert Vector4.scalar(7).average() == pytest.approx(7)
    assert Vector2i.scalar(7).average() == pytest.approx(7)
    assert Vector3i.scalar(7).average() == pytest.approx(7)
    assert Vector4i.scalar(7).average() == pytest.approx(7)


def test_average_of_mixed_components():
    assert Vector2i(1, 2).average() == pytest.approx(1.5)
    assert Vector4(1.0, 2.0, 3.0, 6.0).average() == pytest.approx(3.0)


def test_zero_and_one_constants():
    assert Vector2.ZERO == Vector2.scalar(0)
    assert Vector3.ONE == Vector3.scalar(1)
    assert Vector4.ONE == Vector4(1, 1, 1, 1)
    assert Vector2i.ZERO == Vector2i(0, 0)
    assert Vector3i.ONE == Vector3i.scalar(1)
    assert Vector4i.ZERO == Vector4i.scalar(0)


def test_add_sub_round_trip():
    a = Vector3(1.5, 3.0, 4.5)
    b = Vector3(-0.5, -0.75, -1.0)
    assert a + b == Vector3(1.0, 2.25, 3.5)
    assert (a + b) - b == a


def test_mul_div_round_trip():
    a = Vector4(2.0, 4.0, 6.0, 8.0)
    assert a * 4.0 == Vector4(8.0, 16.0, 24.0, 32.0)
    assert (a * 4.0) / 4.0 == a
    assert 4.0 * a == a * 4.0


def test_normalize_known_value():
    n = Vector2(3.0, 4.0).normalize()
    assert tuple(n) == pytest.approx((0.6, 0.8))
    assert n.length() == pytest.approx(1.0)


def test_normalize_has_unit_length():
    assert Vector3(1.0, 2.0, 3.0).normalize().length() == pytest.approx(1.0)
    assert Vector4(1.0, 2.0, 3.0, 4.0).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_is_zero():
    assert Vector2(0, 0).normalize() == Vector2(0, 0)
    assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)
    assert Vector4(0, 0, 0, 0).normalize() == Vector4(0, 0, 0, 0)
    assert Vector2i(0, 0).normalize() == Vector2i(0, 0)
    assert Vector3i(0, 0, 0).normalize() == Vector3i(0, 0, 0)
    assert Vector4i(0, 0, 0, 0).normalize() == Vector4i(0, 0, 0, 0)


def test_dot_known_values():
    assert Vector2(1, 2).dot(Vector2(3, 4)) == pytest.approx(11.0)
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == pytest.approx(32.0)
    assert Vector4(1, 2, 3, 4).dot(Vector4(1, 1, 1, 1)) == pytest.approx(10.0)


def test_dot_with_self_is_length_squared():
    a = Vector3(-1.5, -0.5, 0.5)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_dot_rejects_other_type():
    with pytest.raises(TypeError):
        Vector2(1, 2).dot(Vector3(1, 2, 3))


def test_vector2_cross_antisymmetric():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.5, 3.0)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == pytest.approx(0.0)


def test_vector3_cross_is_perpendicular():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vector3_cross_unit_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_float_to_int_truncates_toward_zero():
    assert Vector2(-1.7, 2.9).to_int() == Vector2i(-1, 2)
    assert Vector3(0.9, -0.9, 5.5).to_int() == Vector3i(0, 0, 5)
    assert Vector4(1.1, 2.2, -3.3, 4.4).to_int() == Vector4i(1, 2, -3, 4)


@pytest.mark.parametrize(
    "v",
    [Vector2i(3, -4), Vector3i(1, -2, 5), Vector4i(-9, 8, 0, 7)],
)
def test_int_float_round_trip(v):
    assert v.to_float().to_int() == v


def test_int_division_truncates_toward_zero():
    assert Vector2i(-7, 7) / 2 == Vector2i(-3, 3)


def test_int_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2i(1, 1) / 0


def test_int_normalize_axis_vector():
    assert Vector2i(5, 0).normalize() == Vector2i(1, 0)
    assert Vector3i(0, 0, -4).normalize() == Vector3i(0, 0, -1)
    assert Vector4i(0, 7, 0, 0).normalize() == Vector4i(0, 1, 0, 0)


def test_int_length_matches_float_length():
    v = Vector3i(2, -3, 6)
    assert v.length() == pytest.approx(7.0)
    assert v.length() == pytest.approx(v.to_float().length())
    assert Vector2i(3, 4).length() == pytest.approx(5.0)
    assert Vector4i(1, 1, 1, 1).length() == pytest.approx(2.0)


def test_abs_and_neg():
    v = Vector3(-1.0, 2.0, -3.0)
    assert abs(v) == Vector3(1.0, 2.0, 3.0)
    assert abs(v) == abs(-v)


def test_vector4_swizzles():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert v.xy == Vector2(1.0, 2.0)
    assert v.zw == Vector2(3.0, 4.0)
    assert v.xyz == Vector3(1.0, 2.0, 3.0)
    assert (v.r, v.g, v.b, v.a) == tuple(v)
    assert (v.left, v.bottom, v.right, v.top) == tuple(v)


def test_rotate_full_turn_returns_point():
    p = Vector2(3.0, 1.0)
    pivot = Vector2(-1.0, 2.0)
    r = rotate_point_around_pivot(p, pivot, 2 * math.pi)
    assert r.x == pytest.approx(p.x)
    assert r.y == pytest.approx(p.y)


def test_rotate_preserves_distance_to_pivot():
    p = Vector2(3.0, 1.0)
    pivot = Vector2(-1.0, 2.0)
    r = rotate_point_around_pivot(p, pivot, 0.7)
    assert (r - pivot).length() == pytest.approx((p - pivot).length())


def test_rotate_quarter_turn_is_perpendicular():
    p = Vector2(2.0, 0.5)
    pivot = Vector2(1.0, 1.0)
    r = rotate_point_around_pivot(p, pivot, math.pi / 2)
    assert (r - pivot).dot(p - pivot) == pytest.approx(0.0, abs=1e-9)
    assert (p - pivot).cross(r - pivot) > 0