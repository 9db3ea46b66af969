"""A scrollable screen of log messages."""

from __future__ import annotations

from typing import Optional

from .ui_screen import MessageFunc, PadButton, Screen

MAX_MESSAGES = 64
MESSAGE_CHARS = 64
DISPLAY_LINES = 16


class LogScreen(Screen):
    """Keeps the first 64 messages and shows a window of them."""

    def __init__(self, msg_func: Optional[MessageFunc] = None, render=None,
                 display_lines: int = DISPLAY_LINES) -> None:
        super().__init__(msg_func, render)
        self.messages: list[str] = []
        self.scroll = 0
        self.display_lines = display_lines

    def add_message(self, text: str) -> None:
        """Append ``text`` and scroll to the end; ignored once the log is full."""
        if len(self.messages) < MAX_MESSAGES:
            self.messages.append(text[: MESSAGE_CHARS - 1])
            self.scroll = len(self.messages) - self.display_lines

    def visible_messages(self) -> list[str]:
        """Clamp the scroll position and return the messages in view."""
        top = len(self.messages) - self.display_lines
        if self.scroll >= top:
            self.scroll = top
        if self.scroll < 0:
            self.scroll = 0
        return self.messages[self.scroll:self.scroll + self.display_lines]

    def handle_input(self, buttons: int, trigger: int) -> None:
        if trigger & PadButton.UP:
            self.scroll -= 1
        if trigger & PadButton.DOWN:
            self.scroll += 1