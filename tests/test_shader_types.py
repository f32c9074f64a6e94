from schnitzel.shader_types import Material, RenderingOption, Transform
from schnitzel.vmath import IVec2, Vec2, Vec4


def test_rendering_option_bits():
    assert RenderingOption(1) is RenderingOption.FLIP_X
    assert RenderingOption(2) is RenderingOption.FLIP_Y
    assert RenderingOption(4) is RenderingOption.FONT


def test_rendering_options_combine():
    transform = Transform(render_options=RenderingOption.FLIP_X | RenderingOption.FONT)
    assert transform.render_options & RenderingOption.FONT
    assert not transform.render_options & RenderingOption.FLIP_Y
    assert int(transform.render_options) == 5


def test_material_default_is_white():
    assert Material() == Material(Vec4(1.0, 1.0, 1.0, 1.0))


def test_material_differs_by_color():
    assert not (Material(Vec4(1.0, 0.0, 0.0, 1.0)) == Material())


def test_material_compare_with_other_type():
    assert (Material() == "white") is False


def test_transform_defaults():
    transform = Transform()
    assert transform.pos == Vec2()
    assert transform.atlas_offset == IVec2()
    assert transform.render_options == 0
    assert transform.material_idx == 0
    assert transform.layer == 0.0