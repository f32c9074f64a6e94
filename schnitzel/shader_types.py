"""Data layouts shared between the engine and its shaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .vmath import IVec2, Vec2, Vec4


class RenderingOption(IntFlag):
    NONE = 0
    FLIP_X = 1 << 0
    FLIP_Y = 1 << 1
    FONT = 1 << 2


@dataclass
class Transform:
    """One drawn quad; ``pos`` is the top-left corner."""

    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    atlas_offset: IVec2 = field(default_factory=IVec2)
    sprite_size: IVec2 = field(default_factory=IVec2)
    render_options: int = 0
    material_idx: int = 0
    layer: float = 0.0
    padding: int = 0


def _white() -> Vec4:
    return Vec4(1.0, 1.0, 1.0, 1.0)


@dataclass(eq=False)
class Material:
    color: Vec4 = field(default_factory=_white)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.color == other.color