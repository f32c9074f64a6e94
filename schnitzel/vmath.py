"""Small vector, matrix and rectangle maths."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union


def sign(x):
    """Return 1 for non-negative values and -1 otherwise, keeping int/float type."""
    if isinstance(x, float):
        return 1.0 if x >= 0.0 else -1.0
    return 1 if x >= 0 else -1


def approach(current: float, target: float, increase: float) -> float:
    """Move ``current`` towards ``target`` by ``increase`` without overshooting."""
    if current < target:
        return min(current + increase, target)
    return max(current - increase, target)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __bool__(self) -> bool:
        # Only a vector with both components set counts as given.
        return self.x != 0.0 and self.y != 0.0


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class IVec2:
    x: int = 0
    y: int = 0

    def __sub__(self, other: Union["IVec2", int]) -> "IVec2":
        if isinstance(other, IVec2):
            return IVec2(self.x - other.x, self.y - other.y)
        return IVec2(self.x - other, self.y - other)

    def __add__(self, other: Union["IVec2", int]) -> "IVec2":
        if isinstance(other, IVec2):
            return IVec2(self.x + other.x, self.y + other.y)
        return IVec2(self.x + other, self.y + other)

    def __floordiv__(self, scalar: int) -> "IVec2":
        """Divide both components, truncating towards zero."""
        return IVec2(_trunc_div(self.x, scalar), _trunc_div(self.y, scalar))

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))


def lerp_vec2(a: Vec2, b: Vec2, t: float) -> Vec2:
    return Vec2(lerp(a.x, b.x, t), lerp(a.y, b.y, t))


def lerp_ivec2(a: IVec2, b: IVec2, t: float) -> IVec2:
    return IVec2(
        math.floor(lerp(float(a.x), float(b.x), t)),
        math.floor(lerp(float(a.y), float(b.y), t)),
    )


_VEC4_FIELDS = ("x", "y", "z", "w")


@dataclass
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    def __getitem__(self, idx: int) -> float:
        return getattr(self, _VEC4_FIELDS[idx])

    def __setitem__(self, idx: int, value: float) -> None:
        setattr(self, _VEC4_FIELDS[idx], value)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))


class Mat4:
    """A 4x4 matrix stored as four column vectors, all zero initially."""

    def __init__(self) -> None:
        self.values = [Vec4() for _ in range(4)]

    def __getitem__(self, col: int) -> Vec4:
        return self.values[col]

    def flatten(self) -> list[float]:
        """Return the 16 values column by column."""
        return [v for column in self.values for v in column]


def orthographic_projection(left: float, right: float, top: float, bottom: float) -> Mat4:
    result = Mat4()
    result[3][0] = -(right + left) / (right - left)
    result[3][1] = (top + bottom) / (top - bottom)
    result[3][2] = 0.0
    result[0][0] = 2.0 / (right - left)
    result[1][1] = 2.0 / (top - bottom)
    result[2][2] = 1.0 / (1.0 - 0.0)
    result[3][3] = 1.0
    return result


@dataclass
class Rect:
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)


@dataclass
class IRect:
    pos: IVec2 = field(default_factory=IVec2)
    size: IVec2 = field(default_factory=IVec2)


def point_in_rect(point: Union[Vec2, IVec2], rect: Union[Rect, IRect]) -> bool:
    """Whether ``point`` lies within ``rect``, edges included."""
    px, py = float(point.x), float(point.y)
    return (
        px >= rect.pos.x
        and px <= rect.pos.x + rect.size.x
        and py >= rect.pos.y
        and py <= rect.pos.y + rect.size.y
    )


def rect_collision(a: IRect, b: IRect) -> bool:
    """Whether two rectangles overlap; touching edges do not count."""
    return (
        a.pos.x < b.pos.x + b.size.x
        and a.pos.x + a.size.x > b.pos.x
        and a.pos.y < b.pos.y + b.size.y
        and a.pos.y + a.size.y > b.pos.y
    )