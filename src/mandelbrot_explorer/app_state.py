from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from mandelbrot_explorer.config import ExplorerConfig
from mandelbrot_explorer.domain.selection import OFF_BUFFER, SelectionTracker
from mandelbrot_explorer.domain.viewport import Viewport
from mandelbrot_explorer.rendering.pixels import allocate

TITLE_TEMPLATE = (
    "Mandelbrot - ESC: EXIT - I/D: ITERATIONS={iterations}"
    " - Arrows: MOVEMENT - +/-: ZOOM"
)


def status_text(iterations: int) -> str:
    return TITLE_TEMPLATE.format(iterations=iterations)


@dataclass
class FrameInput:
    """Input sampled once per frame. Key fields are level-triggered."""

    width: int
    height: int
    quit: bool = False
    reset: bool = False
    increase_iterations: bool = False
    decrease_iterations: bool = False
    zoom_in: bool = False
    zoom_out: bool = False
    pan_up: bool = False
    pan_down: bool = False
    pan_left: bool = False
    pan_right: bool = False
    fast_step: bool = False
    mouse_down: bool = False
    # top-left origin, clamped to the buffer, or OFF_BUFFER
    cursor: tuple[float, float] = OFF_BUFFER


@dataclass
class ExplorerState:
    """Everything the frame loop mutates."""

    viewport: Viewport
    iterations: int
    dirty: bool = True
    rendered_size: tuple[int, int] = (0, 0)
    # last fully rendered buffer, never drawn on
    committed: np.ndarray = field(default_factory=lambda: allocate(0, 0))
    # buffer handed to the display, may carry a selection preview
    buffer: np.ndarray = field(default_factory=lambda: allocate(0, 0))
    selection: SelectionTracker = field(default_factory=SelectionTracker)
    status: str = ""
    running: bool = True

    @classmethod
    def from_config(cls, config: ExplorerConfig) -> ExplorerState:
        return cls(
            viewport=Viewport.default(),
            iterations=config.iterations,
            status=status_text(config.iterations),
        )
