from ticklekit.ui_screen import PadButton, Screen


def test_send_message_without_callback_returns_zero():
    assert Screen().send_message(1, 2, None) == 0


def test_send_message_passes_arguments_and_result():
    seen = []

    def handler(kind, parm1, parm2):
        seen.append((kind, parm1, parm2))
        return 42

    screen = Screen(msg_func=handler)
    assert screen.send_message(3, 4, "data") == 42
    assert seen == [(3, 4, "data")]


def test_send_message_carries_button_mask():
    seen = []

    def handler(kind, parm1, parm2):
        seen.append(parm1)
        return int(parm1 & PadButton.START)

    screen = Screen(msg_func=handler)
    mask = PadButton.CROSS | PadButton.START
    assert screen.send_message(1, mask, None) == int(PadButton.START)
    assert seen == [mask]


def test_force_draw_calls_renderer():
    calls = []
    screen = Screen(render=lambda: calls.append(1))
    screen.force_draw()
    screen.force_draw()
    assert calls == [1, 1]