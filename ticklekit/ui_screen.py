"""The base class of menu screens driven by controller input."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

MessageFunc = Callable[[int, int, Any], int]


class PadButton(enum.IntFlag):
    SELECT = 0x0001
    L3 = 0x0002
    R3 = 0x0004
    START = 0x0008
    UP = 0x0010
    RIGHT = 0x0020
    DOWN = 0x0040
    LEFT = 0x0080
    L2 = 0x0100
    R2 = 0x0200
    L1 = 0x0400
    R1 = 0x0800
    TRIANGLE = 0x1000
    CIRCLE = 0x2000
    CROSS = 0x4000
    SQUARE = 0x8000


class Screen:
    """A screen that reports events through a message callback."""

    def __init__(self, msg_func: Optional[MessageFunc] = None,
                 render: Optional[Callable[[], None]] = None) -> None:
        self.msg_func = msg_func
        self.render = render

    def activate(self) -> None:
        """Called when the screen becomes current."""

    def deactivate(self) -> None:
        """Called when the screen stops being current."""

    def process(self) -> None:
        """Per-frame update."""

    def handle_input(self, buttons: int, trigger: int) -> None:
        """React to held ``buttons`` and newly pressed ``trigger`` buttons."""

    def force_draw(self) -> None:
        """Render a frame immediately, if a renderer is attached."""
        if self.render is not None:
            self.render()

    def send_message(self, kind: int, parm1: int, parm2: Any = None) -> int:
        """Pass an event to the message callback; 0 if there is none."""
        if self.msg_func is not None:
            return self.msg_func(kind, parm1, parm2)
        return 0