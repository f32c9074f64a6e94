"""Sprite identifiers and their locations in the texture atlas."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .vmath import IVec2


class SpriteID(IntEnum):
    WHITE = 0
    DICE = 1
    CELESTE = 2
    CELESTE_RUN = 3
    CELESTE_JUMP = 4
    SOLID_01 = 5
    SOLID_02 = 6
    BUTTON_PLAY = 7
    BUTTON_SAVE = 8


@dataclass(frozen=True)
class Sprite:
    """Region of the atlas holding a sprite; animations lie side by side."""

    atlas_offset: IVec2 = field(default_factory=IVec2)
    size: IVec2 = field(default_factory=IVec2)
    frame_count: int = 1


_SPRITES = {
    SpriteID.WHITE: Sprite(IVec2(0, 0), IVec2(1, 1)),
    SpriteID.DICE: Sprite(IVec2(16, 0), IVec2(16, 16)),
    SpriteID.CELESTE: Sprite(IVec2(112, 0), IVec2(17, 20)),
    SpriteID.CELESTE_RUN: Sprite(IVec2(128, 0), IVec2(17, 20), 12),
    SpriteID.CELESTE_JUMP: Sprite(IVec2(229, 0), IVec2(17, 20)),
    SpriteID.SOLID_01: Sprite(IVec2(0, 16), IVec2(28, 18)),
    SpriteID.SOLID_02: Sprite(IVec2(32, 16), IVec2(16, 13)),
    SpriteID.BUTTON_PLAY: Sprite(IVec2(80, 0), IVec2(32, 16)),
    SpriteID.BUTTON_SAVE: Sprite(IVec2(80, 16), IVec2(32, 16)),
}


def get_sprite(sprite_id: SpriteID) -> Sprite:
    """Return the atlas region of ``sprite_id``."""
    return _SPRITES[SpriteID(sprite_id)]