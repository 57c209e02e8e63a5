"""The engine's standardized input and window event."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from vroom.codes import CODE_NONE, KeyCode, MouseCode


class EventType(Enum):
    NONE = 0
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    MOUSE_PRESSED = auto()
    MOUSE_RELEASED = auto()
    SCROLL = auto()
    MOUSE_MOVED = auto()
    MOUSE_ENTERED = auto()
    MOUSE_LEFT = auto()
    WINDOWS_RESIZED = auto()
    GAINED_FOCUS = auto()
    LOST_FOCUS = auto()
    EXIT = auto()


@dataclass
class Event:
    """An event; only the fields relevant to its type carry meaning.

    ``code`` holds the standardized input code; ``key_code`` and
    ``mouse_code`` are typed views onto the same value.
    """

    type: EventType = EventType.NONE
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    mouse_delta_x: float = 0.0
    mouse_delta_y: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    new_width: int = 0
    new_height: int = 0
    code: int = CODE_NONE
    handled: bool = False

    @property
    def key_code(self) -> KeyCode:
        return KeyCode(self.code)

    @key_code.setter
    def key_code(self, value: KeyCode) -> None:
        self.code = int(KeyCode(value))

    @property
    def mouse_code(self) -> MouseCode:
        return MouseCode(self.code)

    @mouse_code.setter
    def mouse_code(self, value: MouseCode) -> None:
        self.code = int(MouseCode(value))