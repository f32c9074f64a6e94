import pytest

from schnitzel.vmath import (
    IRect,
    IVec2,
    Mat4,
    Rect,
    Vec2,
    Vec4,
    approach,
    lerp,
    lerp_ivec2,
    lerp_vec2,
    orthographic_projection,
    point_in_rect,
    rect_collision,
    sign,
)


def test_vec2_mul_div_round_trip():
    v = Vec2(3.0, -5.0)
    assert (v * 4.0) / 4.0 == v


def test_vec2_sub_self_is_zero():
    v = Vec2(1.5, 2.5)
    assert v - v == Vec2(0.0, 0.0)


def test_vec2_bool_requires_both_components():
    both = Vec2(1.0, 2.0).__bool__()
    one_zero = Vec2(1.0, 0.0).__bool__()
    default = Vec2().__bool__()
    assert both is True
    assert one_zero is False
    assert default is False


def test_ivec2_add_sub_inverse():
    a = IVec2(3, 7)
    b = IVec2(-2, 4)
    assert (a + b) - b == a
    assert (a + 5) - 5 == a


def test_ivec2_floordiv_truncates_towards_zero():
    assert IVec2(-7, 7) // 2 == IVec2(-3, 3)


def test_ivec2_to_vec2():
    v = IVec2(4, -2).to_vec2()
    assert v == Vec2(4.0, -2.0)
    assert isinstance(v.x, float)


def test_sign():
    assert sign(0) == 1
    assert sign(-3) == -1
    assert sign(-0.5) == -1.0
    assert isinstance(sign(2.0), float)


def test_approach_never_overshoots():
    assert approach(9.0, 10.0, 3.0) == 10.0
    assert approach(11.0, 10.0, 3.0) == 10.0
    assert approach(0.0, 10.0, 3.0) < 10.0
    assert approach(10.0, 10.0, 3.0) == 10.0


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0
    a, b = Vec2(1.0, 2.0), Vec2(5.0, 6.0)
    assert lerp_vec2(a, b, 0.0) == a
    assert lerp_vec2(a, b, 1.0) == b


def test_lerp_ivec2_floors():
    assert lerp_ivec2(IVec2(0, 0), IVec2(1, 1), 0.5) == IVec2(0, 0)
    assert lerp_ivec2(IVec2(0, 0), IVec2(4, 8), 1.0) == IVec2(4, 8)


def test_vec4_aliases_and_indexing():
    v = Vec4(0.1, 0.2, 0.3, 0.4)
    assert (v.r, v.g, v.b, v.a) == (v.x, v.y, v.z, v.w)
    assert [v[i] for i in range(4)] == list(v)
    assert Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4)


def test_mat4_starts_zero():
    m = Mat4()
    assert m.flatten() == [0.0] * 16


def test_orthographic_projection():
    m = orthographic_projection(-1.0, 1.0, 1.0, -1.0)
    assert m[2][2] == 1.0
    assert m[3][3] == 1.0
    assert m[0][0] == 1.0
    assert m[3][2] == 0.0
    flat = m.flatten()
    assert len(flat) == 16
    assert flat[15] == 1.0


def test_point_in_rect_edges_inclusive():
    rect = Rect(Vec2(0.0, 0.0), Vec2(10.0, 5.0))
    assert point_in_rect(Vec2(10.0, 5.0), rect)
    assert point_in_rect(Vec2(0.0, 0.0), rect)
    assert not point_in_rect(Vec2(10.5, 1.0), rect)


def test_point_in_irect_with_ivec2():
    rect = IRect(IVec2(2, 2), IVec2(3, 3))
    assert point_in_rect(IVec2(3, 4), rect)
    assert not point_in_rect(IVec2(1, 4), rect)


def test_rect_collision():
    a = IRect(IVec2(0, 0), IVec2(4, 4))
    touching = IRect(IVec2(4, 0), IVec2(4, 4))
    overlapping = IRect(IVec2(3, 3), IVec2(4, 4))
    assert rect_collision(a, overlapping)
    assert rect_collision(overlapping, a)
    assert not rect_collision(a, touching)


@pytest.mark.parametrize("idx", [4, 5])
def test_vec4_index_out_of_range(idx):
    with pytest.raises(IndexError):
        Vec4()[idx]