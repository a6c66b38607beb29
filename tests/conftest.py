import pyglet
import pytest

from mandelbrot_explorer.config import ExplorerConfig
from mandelbrot_explorer.domain.viewport import Viewport

# window-level modules are exercised without a display
pyglet.options["headless"] = True


@pytest.fixture
def default_viewport() -> Viewport:
    return Viewport.default()


@pytest.fixture
def config() -> ExplorerConfig:
    return ExplorerConfig(width=8, height=4, iterations=20, workers=1)
