from __future__ import annotations
from typing import List
from pyglet.window import Window
from .types import UIElement
from .dependencies import UIDeps


class UIManager:
    """Owns the overlays drawn on top of the fractal texture."""

    def __init__(self, window: Window, deps: UIDeps) -> None:
        self.window = window
        self.deps = deps
        self._elements: List[UIElement] = []

    def add(self, element: UIElement) -> None:
        element.mount(self.window, self.deps)
        self.window.push_handlers(element)
        self._elements.append(element)

    def remove(self, element: UIElement) -> None:
        self._elements.remove(element)
        self.window.remove_handlers(element)
        element.unmount(self.window)

    def clear(self) -> None:
        for e in list(self._elements):
            self.remove(e)

    def draw(self) -> None:
        for e in self._elements:
            e.draw()
