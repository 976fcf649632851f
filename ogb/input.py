"""Keyboard, mouse and gamepad state for one frame of input."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import List

from ogb.vectors import Vector2

MAX_EVENTS_PER_FRAME = 10000


class InputEventKind(Enum):
    KEY = 0
    SCROLL = 1
    TEXT = 2
    GAMEPAD_AXIS = 3


class KeyCode(IntEnum):
    """Key codes; the letters A-Z use their ASCII values and need no member."""

    UNKNOWN = 0

    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    SPACEBAR = 32

    DELETE = 127

    ARROW_UP = 128
    ARROW_DOWN = 129
    ARROW_LEFT = 130
    ARROW_RIGHT = 131

    PAGE_UP = 132
    PAGE_DOWN = 133

    HOME = 134
    END = 135

    INSERT = 136

    PAUSE = 137
    SCROLL_LOCK = 138

    ALT = 139
    CTRL = 140
    SHIFT = 141
    CMD = 142
    META = 142

    F1 = 143
    F2 = 144
    F3 = 145
    F4 = 146
    F5 = 147
    F6 = 148
    F7 = 149
    F8 = 150
    F9 = 151
    F10 = 152
    F11 = 153
    F12 = 154

    PRINT_SCREEN = 155

    GAMEPAD_DPAD_UP = 156
    GAMEPAD_DPAD_RIGHT = 157
    GAMEPAD_DPAD_DOWN = 158
    GAMEPAD_DPAD_LEFT = 159

    GAMEPAD_A = 160
    GAMEPAD_X = 161
    GAMEPAD_Y = 162
    GAMEPAD_B = 163

    GAMEPAD_START = 164
    GAMEPAD_BACK = 165

    GAMEPAD_LEFT_STICK = 166
    GAMEPAD_RIGHT_STICK = 167

    GAMEPAD_LEFT_BUMPER = 168
    GAMEPAD_RIGHT_BUMPER = 169
    GAMEPAD_LEFT_TRIGGER = 170
    GAMEPAD_RIGHT_TRIGGER = 171

    MOUSE_BUTTON_LEFT = 172
    MOUSE_BUTTON_MIDDLE = 173
    MOUSE_BUTTON_RIGHT = 174

    GAMEPAD_FIRST = 164
    GAMEPAD_LAST = 171

    MOUSE_FIRST = 172
    MOUSE_LAST = 174


INPUT_KEY_CODE_COUNT = KeyCode.MOUSE_BUTTON_RIGHT + 1


class InputState(IntFlag):
    DOWN = 1 << 0
    JUST_PRESSED = 1 << 1
    JUST_RELEASED = 1 << 2
    REPEAT = 1 << 3


class AxisFlags(IntFlag):
    LEFT_STICK = 1 << 0
    RIGHT_STICK = 1 << 1
    LEFT_TRIGGER = 1 << 2
    RIGHT_TRIGGER = 1 << 3


@dataclass
class InputEvent:
    """One input event; only the fields that belong to ``kind`` are meaningful."""

    kind: InputEventKind
    key_code: int = KeyCode.UNKNOWN
    key_state: InputState = InputState(0)
    gamepad_index: int = -1
    xscroll: float = 0.0
    yscroll: float = 0.0
    utf32: int = 0
    axes_changed: AxisFlags = AxisFlags(0)
    left_stick: Vector2 = field(default_factory=Vector2)
    right_stick: Vector2 = field(default_factory=Vector2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0

    @property
    def ascii(self) -> str:
        """The low byte of the text code point as a character."""
        return chr(self.utf32 & 0xFF)


@dataclass
class Deadzones:
    """Axis values below these magnitudes are treated as zero."""

    left_stick: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.2))
    right_stick: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.2))
    left_trigger: float = 0.07
    right_trigger: float = 0.07


def _empty_states() -> List[InputState]:
    return [InputState(0)] * INPUT_KEY_CODE_COUNT


@dataclass
class InputFrame:
    """The events and key states gathered for the current frame."""

    events: List[InputEvent] = field(default_factory=list)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    left_stick: Vector2 = field(default_factory=Vector2)
    right_stick: Vector2 = field(default_factory=Vector2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    key_states: List[InputState] = field(default_factory=_empty_states)

    def _state(self, code: int) -> InputState:
        if not 0 <= code < INPUT_KEY_CODE_COUNT:
            raise ValueError(f"Invalid key code {int(code)}!")
        return InputState(self.key_states[code])

    def has_key_state(self, code: int, flags: InputState) -> bool:
        """True if every flag in ``flags`` is set for ``code``."""
        if not 0 < code < INPUT_KEY_CODE_COUNT:
            raise ValueError(f"Invalid key code {int(code)}!")
        state = self._state(code)
        for impossible in (
            InputState.JUST_RELEASED | InputState.DOWN,
            InputState.JUST_RELEASED | InputState.JUST_PRESSED,
        ):
            if state & impossible == impossible:
                raise RuntimeError(f"Key state for key '{int(code)}' is corrupt!")
        return state & flags == flags

    def is_key_down(self, code: int) -> bool:
        return self.has_key_state(code, InputState.DOWN)

    def is_key_up(self, code: int) -> bool:
        return self._state(code) == 0 or self.has_key_state(code, InputState.JUST_RELEASED)

    def is_key_just_pressed(self, code: int) -> bool:
        return self.has_key_state(code, InputState.JUST_PRESSED)

    def is_key_just_released(self, code: int) -> bool:
        return self.has_key_state(code, InputState.JUST_RELEASED)

    def _consume(self, code: int, flag: InputState) -> bool:
        result = self.has_key_state(code, flag)
        self.key_states[code] = self._state(code) & ~flag
        return result

    def consume_key_down(self, code: int) -> bool:
        """Report whether the key is down and clear that flag."""
        return self._consume(code, InputState.DOWN)

    def consume_key_just_pressed(self, code: int) -> bool:
        """Report whether the key was just pressed and clear that flag."""
        return self._consume(code, InputState.JUST_PRESSED)

    def consume_key_just_released(self, code: int) -> bool:
        """Report whether the key was just released and clear that flag."""
        return self._consume(code, InputState.JUST_RELEASED)