"""
Samples pyglet's event-driven input into one FrameInput per frame.

Keys are read from a KeyStateHandler, so a held key shows up in every frame
it is held (level-triggered).
"""
from __future__ import annotations

from typing import Optional

from pyglet.window import key, mouse

from mandelbrot_explorer.app_state import FrameInput
from mandelbrot_explorer.domain.selection import OFF_BUFFER

QUIT_KEYS = (key.ESCAPE,)
RESET_KEYS = (key.R,)
INCREASE_KEYS = (key.I,)
DECREASE_KEYS = (key.D,)
ZOOM_IN_KEYS = (key.NUM_ADD, key.PLUS, key.EQUAL)
ZOOM_OUT_KEYS = (key.NUM_SUBTRACT, key.MINUS)
PAN_UP_KEYS = (key.UP,)
PAN_DOWN_KEYS = (key.DOWN,)
PAN_LEFT_KEYS = (key.LEFT,)
PAN_RIGHT_KEYS = (key.RIGHT,)
FAST_STEP_KEYS = (key.LSHIFT, key.RSHIFT)
SNAPSHOT_KEY = key.P


def _held(keys: key.KeyStateHandler, symbols: tuple[int, ...]) -> bool:
    return any(keys[s] for s in symbols)


class PointerSampler:
    """
    Tracks the left button and the last known cursor position.
    Pushed onto the window as an event handler.
    """

    def __init__(self) -> None:
        self.left_down = False
        self._pos: Optional[tuple[int, int]] = None

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        self._pos = (x, y)

    def on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self._pos = (x, y)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        self._pos = (x, y)
        if button == mouse.LEFT:
            self.left_down = True

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        self._pos = (x, y)
        if button == mouse.LEFT:
            self.left_down = False

    def on_deactivate(self) -> None:
        # a release outside the window is never reported
        self.left_down = False

    def cursor(self, width: int, height: int) -> tuple[float, float]:
        """Cursor in buffer pixels (top-left origin) clamped to the buffer."""
        if self._pos is None or width <= 0 or height <= 0:
            return OFF_BUFFER

        x, y = self._pos
        col = min(max(x, 0), width - 1)
        row = min(max(height - 1 - y, 0), height - 1)
        return (float(col), float(row))


def sample_frame(
    keys: key.KeyStateHandler, pointer: PointerSampler, width: int, height: int
) -> FrameInput:
    return FrameInput(
        width=width,
        height=height,
        quit=_held(keys, QUIT_KEYS),
        reset=_held(keys, RESET_KEYS),
        increase_iterations=_held(keys, INCREASE_KEYS),
        decrease_iterations=_held(keys, DECREASE_KEYS),
        zoom_in=_held(keys, ZOOM_IN_KEYS),
        zoom_out=_held(keys, ZOOM_OUT_KEYS),
        pan_up=_held(keys, PAN_UP_KEYS),
        pan_down=_held(keys, PAN_DOWN_KEYS),
        pan_left=_held(keys, PAN_LEFT_KEYS),
        pan_right=_held(keys, PAN_RIGHT_KEYS),
        fast_step=_held(keys, FAST_STEP_KEYS),
        mouse_down=pointer.left_down,
        cursor=pointer.cursor(width, height),
    )
