"""Keyboard and mouse state as gathered from window events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from .vmath import IVec2


class KeyCodeID(IntEnum):
    """Platform-independent key and mouse button codes."""

    MOUSE_LEFT = 0
    MOUSE_MIDDLE = auto()
    MOUSE_RIGHT = auto()

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    NUM_0 = auto()
    NUM_1 = auto()
    NUM_2 = auto()
    NUM_3 = auto()
    NUM_4 = auto()
    NUM_5 = auto()
    NUM_6 = auto()
    NUM_7 = auto()
    NUM_8 = auto()
    NUM_9 = auto()

    SPACE = auto()
    TICK = auto()
    MINUS = auto()
    EQUAL = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    SEMICOLON = auto()
    QUOTE = auto()
    COMMA = auto()
    PERIOD = auto()
    FORWARD_SLASH = auto()
    BACKWARD_SLASH = auto()
    TAB = auto()
    ESCAPE = auto()
    PAUSE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    RETURN = auto()
    DELETE = auto()
    INSERT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    CAPS_LOCK = auto()
    NUM_LOCK = auto()
    SCROLL_LOCK = auto()
    MENU = auto()
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    COMMAND = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    NUMPAD_0 = auto()
    NUMPAD_1 = auto()
    NUMPAD_2 = auto()
    NUMPAD_3 = auto()
    NUMPAD_4 = auto()
    NUMPAD_5 = auto()
    NUMPAD_6 = auto()
    NUMPAD_7 = auto()
    NUMPAD_8 = auto()
    NUMPAD_9 = auto()

    NUMPAD_STAR = auto()
    NUMPAD_PLUS = auto()
    NUMPAD_MINUS = auto()
    NUMPAD_DOT = auto()
    NUMPAD_SLASH = auto()

    COUNT = 255


KEY_COUNT = int(KeyCodeID.COUNT)


@dataclass
class Key:
    """State of one key; the transition count wraps like an unsigned byte."""

    is_down: bool = False
    just_pressed: bool = False
    just_released: bool = False
    half_transition_count: int = 0

    def apply(self, is_down: bool) -> None:
        """Record a press (``is_down`` true) or release event."""
        was_down = self.is_down
        self.just_pressed = not self.just_pressed and not was_down and is_down
        self.just_released = not self.just_released and was_down and not is_down
        self.is_down = bool(is_down)
        self.half_transition_count = (self.half_transition_count + 1) % 256


@dataclass
class Input:
    """Screen size, mouse positions and the state of every key."""

    screen_size: IVec2 = field(default_factory=IVec2)

    prev_mouse_pos: IVec2 = field(default_factory=IVec2)
    mouse_pos: IVec2 = field(default_factory=IVec2)
    rel_mouse: IVec2 = field(default_factory=IVec2)

    prev_mouse_pos_world: IVec2 = field(default_factory=IVec2)
    mouse_pos_world: IVec2 = field(default_factory=IVec2)
    rel_mouse_world: IVec2 = field(default_factory=IVec2)

    keys: list[Key] = field(default_factory=lambda: [Key() for _ in range(KEY_COUNT)])

    def __init__(self) -> None:
        self.screen_size = IVec2()
        self.prev_mouse_pos = IVec2()
        self.mouse_pos = IVec2()
        self.rel_mouse = IVec2()
        self.prev_mouse_pos_world = IVec2()
        self.mouse_pos_world = IVec2()
        self.rel_mouse_world = IVec2()
        self.keys = [Key() for _ in range(KEY_COUNT)]

    def _key(self, key_code: KeyCodeID) -> Key:
        code = int(key_code)
        if not 0 <= code < KEY_COUNT:
            raise IndexError(f"key code out of range: {code}")
        return self.keys[code]

    def process_key_event(self, key_code: KeyCodeID, is_down: bool) -> None:
        """Apply a press or release event to the key ``key_code``."""
        self._key(key_code).apply(is_down)

    def key_pressed_this_frame(self, key_code: KeyCodeID) -> bool:
        key = self._key(key_code)
        return (key.is_down and key.half_transition_count == 1) or key.half_transition_count > 1

    def key_released_this_frame(self, key_code: KeyCodeID) -> bool:
        key = self._key(key_code)
        return (not key.is_down and key.half_transition_count == 1) or key.half_transition_count > 1

    def key_is_down(self, key_code: KeyCodeID) -> bool:
        return self._key(key_code).is_down