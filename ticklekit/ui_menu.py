"""A vertical menu of choices with a title and four lines of text below."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .ui_screen import MessageFunc, PadButton, Screen

MAX_ENTRIES = 32
TEXT_LINES = 4
MENU_SELECT = 1


class MenuScreen(Screen):
    """Reports the chosen entry with message ``MENU_SELECT``."""

    def __init__(self, msg_func: Optional[MessageFunc] = None, render=None) -> None:
        super().__init__(msg_func, render)
        self.user_data: Any = None
        self.title = ""
        self.entries: list[str] = []
        self.select = 0
        self.texts = [""] * TEXT_LINES

    def set_entries(self, entries: Iterable[Optional[str]]) -> None:
        """Use ``entries`` as the choices, up to the first None and at most 32."""
        self.entries = []
        for entry in entries:
            if entry is None or len(self.entries) >= MAX_ENTRIES:
                break
            self.entries.append(entry)

    def set_text(self, index: int, text: str) -> None:
        """Set one of the four text lines shown under the menu."""
        self.texts[index] = text

    def handle_input(self, buttons: int, trigger: int) -> None:
        if trigger & PadButton.UP:
            self.select -= 1
        if trigger & PadButton.DOWN:
            self.select += 1
        if self.select < 0:
            self.select = 0
        if self.select > len(self.entries) - 1:
            self.select = len(self.entries) - 1
        if trigger & (PadButton.CROSS | PadButton.START):
            self.send_message(MENU_SELECT, self.select, self.user_data)