"""The application window and its keyboard and mouse state."""

from __future__ import annotations

from enum import IntEnum

NUMBER_OF_KEYS = 1024


class Key(IntEnum):
    """Key codes tracked by the window."""

    SPACE = 32
    A = 65
    D = 68
    S = 83
    W = 87
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class KeyAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


def _translate_key(symbol: int) -> int | None:
    """Map a pyglet key symbol to the window's key code."""
    from pyglet.window import key

    if key.A <= symbol <= key.Z:
        return symbol - key.A + Key.A
    if key._0 <= symbol <= key._9:
        return symbol
    special = {
        key.SPACE: Key.SPACE,
        key.ESCAPE: Key.ESCAPE,
        key.ENTER: Key.ENTER,
        key.RETURN: Key.ENTER,
        key.TAB: Key.TAB,
        key.BACKSPACE: Key.BACKSPACE,
        key.RIGHT: Key.RIGHT,
        key.LEFT: Key.LEFT,
        key.DOWN: Key.DOWN,
        key.UP: Key.UP,
    }
    found = special.get(symbol)
    return int(found) if found is not None else None


class Window:
    """An OpenGL window that records held keys and mouse movement."""

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = int(width)
        self.height = int(height)
        self._buffer_width = self.width
        self._buffer_height = self.height
        self._keys = [False] * NUMBER_OF_KEYS
        self._last_x = 0.0
        self._last_y = 0.0
        self._x_change = 0.0
        self._y_change = 0.0
        self._mouse_first_moved = False
        self._cursor: list[float] | None = None
        self.native = None

    def init(self) -> None:
        """Open the window with a 3.3 core context and hook up input."""
        import pyglet
        from pyglet import gl

        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        try:
            native = pyglet.window.Window(
                self.width, self.height, caption="Sandbox Window", config=config
            )
        except Exception as exc:
            raise RuntimeError("window creation failed") from exc

        self.native = native
        self._buffer_width, self._buffer_height = native.get_framebuffer_size()
        native.switch_to()
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glViewport(0, 0, self._buffer_width, self._buffer_height)

        def on_key_press(symbol, modifiers):
            code = _translate_key(symbol)
            if code is None:
                return None
            self.handle_key(code, KeyAction.PRESS)
            # Stop pyglet's default handler from closing the window on escape.
            return pyglet.event.EVENT_HANDLED if code == Key.ESCAPE else None

        def on_key_release(symbol, modifiers):
            code = _translate_key(symbol)
            if code is not None:
                self.handle_key(code, KeyAction.RELEASE)

        def on_mouse_motion(x, y, dx, dy):
            # Track a virtual cursor with y growing downwards, so movement
            # keeps registering while the pointer is captured.
            if self._cursor is None:
                self._cursor = [float(x), float(self.height - y)]
            else:
                self._cursor[0] += dx
                self._cursor[1] -= dy
            self.handle_mouse(*self._cursor)

        def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
            on_mouse_motion(x, y, dx, dy)

        native.push_handlers(
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
        )

    def _require_native(self):
        if self.native is None:
            raise RuntimeError("window is not initialised")
        return self.native

    def buffer_width(self) -> float:
        return float(self._buffer_width)

    def buffer_height(self) -> float:
        return float(self._buffer_height)

    def get_key(self, key: int) -> bool:
        """Whether a key is held; unknown codes read as released."""
        if 0 <= key < NUMBER_OF_KEYS:
            return self._keys[key]
        return False

    def reset_key(self, key: int) -> None:
        if 0 <= key < NUMBER_OF_KEYS:
            self._keys[key] = False

    def reset(self) -> None:
        """Forget mouse history so the next movement starts afresh."""
        self._last_x = 0.0
        self._last_y = 0.0
        self._x_change = 0.0
        self._y_change = 0.0
        self._mouse_first_moved = False

    def take_x_change(self) -> float:
        """Return the horizontal movement since the last call and clear it."""
        change, self._x_change = self._x_change, 0.0
        return change

    def take_y_change(self) -> float:
        """Return the vertical movement since the last call and clear it."""
        change, self._y_change = self._y_change, 0.0
        return change

    def handle_key(self, key: int, action: KeyAction) -> None:
        if not 0 <= key < NUMBER_OF_KEYS:
            return
        if action == KeyAction.PRESS:
            self._keys[key] = True
        elif action == KeyAction.RELEASE:
            self._keys[key] = False

    def handle_mouse(self, x: float, y: float) -> None:
        """Record a cursor position; y grows downwards."""
        if not self._mouse_first_moved:
            self._last_x = x
            self._last_y = y
            self._mouse_first_moved = True
        self._x_change = x - self._last_x
        self._y_change = self._last_y - y
        self._last_x = x
        self._last_y = y

    def should_close(self) -> bool:
        """Process pending window events and report whether to quit."""
        native = self._require_native()
        native.dispatch_events()
        return bool(native.has_exit)

    def swap_buffers(self) -> None:
        self._require_native().flip()

    def enable_cursor(self) -> None:
        native = self._require_native()
        native.set_exclusive_mouse(False)
        native.set_mouse_visible(True)

    def disable_cursor(self) -> None:
        native = self._require_native()
        native.set_exclusive_mouse(True)