import math

import pytest

from amarillo.vectors import (
    Vec2,
    Vec3,
    Vec4,
    cross,
    dot,
    length,
    length2,
    mix,
    normalize,
    reflect,
    refract,
    rotate_vec2,
)


def approx_vec(v):
    return pytest.approx(tuple(v))


def test_defaults_are_zero():
    assert Vec2() == Vec2(0.0, 0.0)
    assert Vec3() == Vec3(0.0, 0.0, 0.0)
    assert Vec4() == Vec4(0.0, 0.0, 0.0, 0.0)


def test_color_aliases_follow_components():
    v = Vec4(1.5, 2.5, 3.5, 4.5)
    assert (v.r, v.g, v.b, v.a) == (v.x, v.y, v.z, v.w)


def test_set_mutates_in_place():
    v = Vec3(1, 2, 3)
    v.set(7, 8, 9)
    assert tuple(v) == (7, 8, 9)


@pytest.mark.parametrize("u", [Vec2(1.5, -2.0), Vec3(1, 2, 3), Vec4(1, -1, 2, -2)])
def test_add_sub_round_trip(u):
    w = type(u)(*(c * 0.5 + 1 for c in u))
    assert approx_vec((u + w) - w) == tuple(u)


@pytest.mark.parametrize("u", [Vec2(1.5, -2.0), Vec3(1, 2, 3), Vec4(1, -1, 2, -2)])
def test_scalar_operations(u):
    assert u * 2 == u + u
    assert 2 * u == u * 2
    assert 1 + u == u + 1
    assert 1 - u == -(u - 1)
    assert approx_vec((u * 3) / 3) == tuple(u)


def test_componentwise_vector_product_and_division():
    u = Vec3(2, 4, 8)
    v = Vec3(1, 2, 4)
    assert approx_vec((u * v) / v) == tuple(u)


def test_mixed_kinds_rejected():
    with pytest.raises(TypeError):
        Vec2(1, 2) + Vec3(1, 2, 3)
    with pytest.raises(TypeError):
        dot(Vec2(1, 2), Vec3(1, 2, 3))


def test_dot_and_length_consistency():
    u = Vec3(3, -4, 12)
    assert dot(u, u) == length2(u)
    assert length(u) == pytest.approx(math.sqrt(length2(u)))


def test_normalize_gives_unit_length():
    for u in (Vec2(3, 4), Vec3(1, 2, 2), Vec3(-5, 0.5, 7)):
        assert length(normalize(u)) == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vec3())


def test_mix_endpoints_and_midpoint():
    u = Vec3(1, 2, 3)
    v = Vec3(5, 6, 7)
    assert approx_vec(mix(u, v, 0.0)) == tuple(u)
    assert approx_vec(mix(u, v, 1.0)) == tuple(v)
    assert approx_vec(mix(u, v, 0.5)) == tuple((u + v) / 2)


def test_reflect_preserves_length_and_flips_normal_part():
    i = Vec3(1, -2, 0.5)
    n = normalize(Vec3(0, 1, 0))
    r = reflect(i, n)
    assert length(r) == pytest.approx(length(i))
    assert dot(r, n) == pytest.approx(-dot(i, n))


def test_refract_with_unit_ratio_passes_through():
    i = normalize(Vec2(1, -1))
    n = Vec2(0, 1)
    assert approx_vec(refract(i, n, 1.0)) == tuple(i)


def test_refract_total_internal_reflection_is_zero():
    i = normalize(Vec3(1, -0.1, 0))
    n = Vec3(0, 1, 0)
    assert refract(i, n, 5.0) == Vec3()


def test_rotate_invariants():
    u = Vec2(2.5, -1.25)
    assert length(rotate_vec2(u, 37)) == pytest.approx(length(u))
    assert approx_vec(rotate_vec2(rotate_vec2(u, 37), -37)) == tuple(u)
    assert approx_vec(rotate_vec2(u, 360)) == tuple(u)


def test_cross_of_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    u = Vec3(1, 2, 3)
    v = Vec3(-2, 0.5, 4)
    c = cross(u, v)
    assert dot(c, u) == pytest.approx(0.0)
    assert dot(c, v) == pytest.approx(0.0)
    assert cross(v, u) == -c


def test_cross_requires_vec3():
    with pytest.raises(TypeError):
        cross(Vec2(1, 0), Vec2(0, 1))