from pyglet.window import Window

from mandelbrot_explorer.domain.viewport import Viewport
from mandelbrot_explorer.ui.dependencies import UIDeps
from mandelbrot_explorer.ui.manager import UIManager
from mandelbrot_explorer.ui.types import UIElement


class StubWindow:
    def __init__(self) -> None:
        self.handlers = []

    def push_handlers(self, handler) -> None:
        self.handlers.append(handler)

    def remove_handlers(self, handler) -> None:
        self.handlers.remove(handler)


class CountingOverlay:
    def __init__(self) -> None:
        self.mounted = None
        self.draws = 0

    def mount(self, window: Window, deps: UIDeps) -> None:
        self.mounted = deps

    def unmount(self, window: Window) -> None:
        self.mounted = None

    def draw(self) -> None:
        self.draws += 1


def make_manager():
    deps = UIDeps(get_size=lambda: (8, 4), get_viewport=Viewport.default)
    return UIManager(StubWindow(), deps), deps


def test_overlay_satisfies_protocol():
    assert isinstance(CountingOverlay(), UIElement)
    assert not isinstance(object(), UIElement)


def test_add_mounts_and_registers_handler():
    manager, deps = make_manager()
    overlay = CountingOverlay()

    manager.add(overlay)
    manager.draw()

    assert overlay.mounted is deps
    assert manager.window.handlers == [overlay]
    assert overlay.draws == 1


def test_clear_unmounts_everything():
    manager, _ = make_manager()
    overlays = [CountingOverlay(), CountingOverlay()]
    for overlay in overlays:
        manager.add(overlay)

    manager.clear()
    manager.draw()

    assert manager.window.handlers == []
    assert all(o.mounted is None and o.draws == 0 for o in overlays)
