import pytest

from ticklekit.ui_menu import MenuScreen
from ticklekit.ui_screen import PadButton


def test_set_entries_stops_at_none():
    menu = MenuScreen()
    menu.set_entries(["Copy File", "Paste File", None, "Hidden"])
    assert menu.entries == ["Copy File", "Paste File"]


def test_set_entries_caps_at_32():
    menu = MenuScreen()
    menu.set_entries(f"item{i}" for i in range(40))
    assert len(menu.entries) == 32
    assert menu.entries[-1] == "item31"


def test_selection_moves_and_clamps():
    menu = MenuScreen()
    menu.set_entries(["a", "b", "c"])
    menu.handle_input(0, PadButton.UP)
    assert menu.select == 0
    for _ in range(5):
        menu.handle_input(0, PadButton.DOWN)
    assert menu.select == 2
    menu.handle_input(0, PadButton.UP)
    assert menu.select == 1


def test_cross_sends_selection():
    seen = []
    menu = MenuScreen(msg_func=lambda k, p1, p2: seen.append((k, p1, p2)) or 0)
    menu.user_data = "owner"
    menu.set_entries(["a", "b"])
    menu.handle_input(0, PadButton.DOWN)
    menu.handle_input(0, PadButton.CROSS)
    menu.handle_input(0, PadButton.START)
    assert seen == [(1, 1, "owner"), (1, 1, "owner")]


def test_set_text_and_bounds():
    menu = MenuScreen()
    menu.set_text(1, "game.smc")
    assert menu.texts == ["", "game.smc", "", ""]
    with pytest.raises(IndexError):
        menu.set_text(4, "x")