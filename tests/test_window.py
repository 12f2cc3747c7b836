import pytest

from glsandbox.window import NUMBER_OF_KEYS, Key, KeyAction, Window


def _changes(window):
    return window.take_x_change(), window.take_y_change()


def _moved(*points):
    window = Window()
    for x, y in points:
        window.handle_mouse(x, y)
    return window


def test_keys_start_released():
    window = Window()
    assert not any(window.get_key(code) for code in range(NUMBER_OF_KEYS))


def test_press_and_release():
    window = Window()
    states = []
    for action in (KeyAction.PRESS, KeyAction.RELEASE):
        window.handle_key(Key.W, action)
        states.append(window.get_key(Key.W))
    assert states == [True, False]


def test_repeat_keeps_state():
    window = Window()
    window.handle_key(Key.A, KeyAction.REPEAT)
    assert window.get_key(Key.A) is False
    window.handle_key(Key.A, KeyAction.PRESS)
    window.handle_key(Key.A, KeyAction.REPEAT)
    assert window.get_key(Key.A) is True


@pytest.mark.parametrize("code", [-1, NUMBER_OF_KEYS, NUMBER_OF_KEYS + 500])
def test_out_of_range_keys_are_ignored(code):
    window = Window()
    window.handle_key(code, KeyAction.PRESS)
    assert window.get_key(code) is False


def test_reset_key():
    window = Window()
    window.handle_key(Key.ESCAPE, KeyAction.PRESS)
    window.reset_key(Key.ESCAPE)
    assert window.get_key(Key.ESCAPE) is False


def test_first_mouse_move_has_no_change():
    assert _changes(_moved((300.0, 200.0))) == (0.0, 0.0)


def test_mouse_change_inverts_y():
    assert _changes(_moved((300.0, 200.0), (310.0, 190.0))) == (10.0, 10.0)


def test_take_change_clears_value():
    window = _moved((0.0, 0.0), (5.0, 7.0))
    assert _changes(window) == (5.0, -7.0)
    assert _changes(window) == (0.0, 0.0)


def test_reset_restarts_mouse_tracking():
    window = _moved((0.0, 0.0), (50.0, 50.0))
    window.reset()
    assert window.take_x_change() == 0.0
    window.handle_mouse(400.0, 400.0)
    assert _changes(window) == (0.0, 0.0)


def test_buffer_size_defaults_to_window_size():
    window = Window(1280, 800)
    assert (window.buffer_width(), window.buffer_height()) == (1280.0, 800.0)


def test_default_size():
    window = Window()
    assert (window.width, window.height) == (800, 600)


@pytest.mark.parametrize(
    "method", ["should_close", "swap_buffers", "enable_cursor", "disable_cursor"]
)
def test_needs_init(method):
    with pytest.raises(RuntimeError):
        getattr(Window(), method)()