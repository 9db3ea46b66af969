from ticklekit.ui_log import LogScreen
from ticklekit.ui_screen import PadButton


def test_few_messages_all_visible():
    screen = LogScreen()
    for text in ("Test", "Test2", "Boo"):
        screen.add_message(text)
    assert screen.visible_messages() == ["Test", "Test2", "Boo"]
    assert screen.scroll == 0


def test_scrolls_to_latest_messages():
    screen = LogScreen(display_lines=3)
    for i in range(6):
        screen.add_message(f"m{i}")
    assert screen.visible_messages() == ["m3", "m4", "m5"]


def test_scroll_up_and_clamp():
    screen = LogScreen(display_lines=3)
    for i in range(6):
        screen.add_message(f"m{i}")
    screen.handle_input(0, PadButton.UP)
    assert screen.visible_messages() == ["m2", "m3", "m4"]
    for _ in range(10):
        screen.handle_input(0, PadButton.UP)
    assert screen.visible_messages() == ["m0", "m1", "m2"]
    for _ in range(10):
        screen.handle_input(0, PadButton.DOWN)
    assert screen.visible_messages() == ["m3", "m4", "m5"]


def test_log_is_capped_at_64_messages():
    screen = LogScreen()
    for i in range(70):
        screen.add_message(str(i))
    assert len(screen.messages) == 64
    assert screen.messages[-1] == "63"


def test_long_message_is_clipped():
    screen = LogScreen()
    screen.add_message("x" * 100)
    assert len(screen.messages[0]) == 63