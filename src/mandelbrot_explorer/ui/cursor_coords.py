from __future__ import annotations

import pyglet
from typing import Optional
from .dependencies import UIDeps
from .types import UIElement
from pyglet.window import Window
from pydantic import BaseModel

from mandelbrot_explorer.domain.transform import pixel_to_plane


class CursorCoordsOverlayConfig(BaseModel):
    x_pad: int = 12
    y_pad: int = 12
    font_size: int = 12
    font_name: str = "Menlo"
    color: tuple[int, int, int, int] = (230, 40, 40, 255)
    precision: int = 6


class CursorCoordsOverlay(UIElement):
    """Label following the mouse with the plane coordinate under it."""

    def __init__(self, config: CursorCoordsOverlayConfig) -> None:
        self._deps: Optional[UIDeps] = None
        self._x: int = 0
        self._y: int = 0
        self._visible = False
        self._config = config

        self._label = pyglet.text.Label(
            text="", x=0, y=0, anchor_x="left", anchor_y="bottom"
        )
        self._update_config()

    def mount(self, window: Window, deps: UIDeps) -> None:
        self._deps = deps

    def unmount(self, window: Window) -> None:
        self._deps = None

    def _update_config(self) -> None:
        self._label.font_size = self._config.font_size
        self._label.font_name = self._config.font_name
        self._label.color = self._config.color

    def _refresh(self, x: int, y: int) -> None:
        if self._deps is None:
            return

        self._x = x
        self._y = y
        self._visible = True
        w, h = self._deps.get_size()
        # pyglet reports y from the bottom, the buffer counts rows from the top
        z = pixel_to_plane(x, h - 1 - y, w, h, self._deps.get_viewport())

        p = self._config.precision
        self._label.text = f"z={z.real:.{p}f}{z.imag:+.{p}f}i"

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        self._refresh(x, y)

    def on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self._refresh(x, y)

    def on_mouse_leave(self, x: int, y: int) -> None:
        self._visible = False

    def draw(self) -> None:
        if self._deps is None or not self._visible:
            return

        self._label.x = int(self._x + self._config.x_pad)
        self._label.y = int(self._y + self._config.y_pad)
        self._label.draw()
