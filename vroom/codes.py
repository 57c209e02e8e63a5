"""Key and mouse button codes, with readable names."""

from __future__ import annotations

from enum import IntEnum, auto

CODE_NONE = 0


class KeyCode(IntEnum):
    NONE = CODE_NONE
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
    SPACE = auto()
    ESCAPE = auto()
    ENTER = auto()
    TAB = auto()
    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
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
    LEFT_SHIFT = auto()
    LEFT_ALT = auto()
    LEFT_CTRL = auto()
    RIGHT_SHIFT = auto()
    RIGHT_ALT = auto()
    RIGHT_CTRL = auto()


class MouseCode(IntEnum):
    NONE = CODE_NONE
    MB1 = 1
    LEFT = 1
    MB2 = 2
    RIGHT = 2
    MB3 = 3
    MIDDLE = 3
    MB4 = 4
    MB5 = 5
    MB6 = 6
    MB7 = 7
    MB8 = 8


_NO_CONVERSION = "<no conversion set>"

_KEY_NAMES = {
    KeyCode.SPACE: "Space",
    KeyCode.ESCAPE: "Escape",
    KeyCode.ENTER: "Enter",
    KeyCode.TAB: "Tab",
    KeyCode.RIGHT: "Right",
    KeyCode.LEFT: "Left",
    KeyCode.DOWN: "Down",
    KeyCode.UP: "Up",
    KeyCode.LEFT_SHIFT: "Left Shift",
    KeyCode.NONE: "None",
}

_MOUSE_NAMES = {
    MouseCode.LEFT: "Left mouse button",
    MouseCode.RIGHT: "Right mouse button",
    MouseCode.MIDDLE: "Middle mouse button",
    MouseCode.NONE: "None",
}


def key_code_name(code: int) -> str:
    """Return a human-readable name for a key code."""
    code = KeyCode(code)
    if KeyCode.A <= code <= KeyCode.Z:
        return chr(ord("A") + code - KeyCode.A)
    if code in _KEY_NAMES:
        return _KEY_NAMES[code]
    if KeyCode.NUMPAD_0 <= code <= KeyCode.NUMPAD_9:
        return f"Numpad {code - KeyCode.NUMPAD_0}"
    return _NO_CONVERSION


def mouse_code_name(code: int) -> str:
    """Return a human-readable name for a mouse button code."""
    code = MouseCode(code)
    if code in _MOUSE_NAMES:
        return _MOUSE_NAMES[code]
    if MouseCode.MB4 <= code <= MouseCode.MB8:
        return f"Mouse button {4 + code - MouseCode.MB4}"
    return _NO_CONVERSION