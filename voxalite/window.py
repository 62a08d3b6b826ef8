"""The game window and its queue of input events."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Optional

from .buffers import _default_gl
from .errors import ensure
from .events import Event, Key, KeyEvent, KeyState, MouseEvent, StopEvent

# Key symbols as reported by the windowing layer: letters are their
# lowercase character codes and Escape is 0xFF1B.
_SYMBOL_ESCAPE = 0xFF1B
_SYMBOL_A = ord("a")
_SYMBOL_Z = ord("z")


def translate_key(symbol: int) -> Optional[Key]:
    """The engine key for a window key symbol, or ``None`` if it has none."""
    if symbol == _SYMBOL_ESCAPE:
        return Key.ESC
    if _SYMBOL_A <= symbol <= _SYMBOL_Z:
        return Key(symbol - _SYMBOL_A + Key.A)
    return None


def _create_native_window(width: int, height: int) -> Any:
    import pyglet

    config = pyglet.gl.Config(
        double_buffer=True,
        red_size=8,
        green_size=8,
        blue_size=8,
        alpha_size=8,
        depth_size=24,
        stencil_size=8,
        major_version=4,
        minor_version=6,
        forward_compatible=False,
    )
    try:
        return pyglet.window.Window(
            width, height, caption="game window", config=config, resizable=True
        )
    except pyglet.window.NoSuchConfigException:
        ensure(False, "failed to choose pixel format")
        raise  # unreachable: ensure always raises here


class Window:
    """A window with an OpenGL context that turns input into engine events."""

    def __init__(self, width: int, height: int, native: Any = None, gl: Any = None) -> None:
        self.width = width
        self.height = height
        self._events: Deque[Event] = deque()
        self._native = native if native is not None else _create_native_window(width, height)
        self._native.push_handlers(
            on_close=self._on_close,
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
        )
        self._gl = gl if gl is not None else _default_gl()
        self._gl.enable_depth_test()

    def _on_close(self) -> bool:
        self._events.append(StopEvent())
        return True

    def _on_key(self, symbol: int, state: KeyState) -> None:
        key = translate_key(symbol)
        if key is not None:
            self._events.append(KeyEvent(key, state))

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        self._on_key(symbol, KeyState.DOWN)

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        self._on_key(symbol, KeyState.UP)

    def _on_mouse_motion(self, x: int, y: int, dx: float, dy: float) -> None:
        # Vertical motion is reported upwards-positive; events use downwards-positive.
        self._events.append(MouseEvent(float(dx), float(-dy)))

    def pump_event(self) -> Optional[Event]:
        """Process pending window messages and return the oldest queued event, if any."""
        self._native.dispatch_events()
        if self._events:
            return self._events.popleft()
        return None

    def swap(self) -> None:
        """Present the frame that was drawn."""
        self._native.flip()

    def close(self) -> None:
        """Destroy the window."""
        self._native.close()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()