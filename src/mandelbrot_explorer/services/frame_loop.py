"""
Per-frame update of the explorer state.

Keys are level-triggered: a held key re-applies its action every frame, so
zoom, pan and iteration changes repeat continuously at the frame rate.
"""
import logging

from mandelbrot_explorer.app_state import ExplorerState, FrameInput, status_text
from mandelbrot_explorer.config import ExplorerConfig
from mandelbrot_explorer.domain import budget, navigation
from mandelbrot_explorer.domain.navigation import PanDirection
from mandelbrot_explorer.rendering.pixels import draw_selection_outline
from mandelbrot_explorer.services.fractal_engine import FractalEngine

logger = logging.getLogger(__name__)


def _apply_selection(state: ExplorerState, frame: FrameInput) -> bool:
    step = state.selection.update(
        button_down=frame.mouse_down,
        cursor=frame.cursor,
        width=frame.width,
        height=frame.height,
        viewport=state.viewport,
    )

    if step.viewport is not None:
        state.viewport = step.viewport
        state.dirty = True
        return False

    if step.preview is not None:
        width, height = state.rendered_size
        state.buffer = draw_selection_outline(state.committed, width, height, step.preview)
        return True

    return False


def _apply_iterations(state: ExplorerState, frame: FrameInput, config: ExplorerConfig) -> None:
    step = budget.step_for(frame.fast_step, config.step, config.fast_step)
    iterations = state.iterations

    if frame.increase_iterations:
        iterations = budget.increase(iterations, step)
    if frame.decrease_iterations:
        iterations = budget.decrease(iterations, step)

    if iterations != state.iterations:
        state.iterations = iterations
        state.status = status_text(iterations)
        state.dirty = True


def _apply_navigation(state: ExplorerState, frame: FrameInput, config: ExplorerConfig) -> None:
    viewport = state.viewport

    if frame.reset:
        viewport = navigation.reset(viewport)
        state.dirty = True

    if frame.zoom_in:
        viewport = navigation.zoom_in(viewport, config.zoom_factor)
        state.dirty = True
    if frame.zoom_out:
        viewport = navigation.zoom_out(viewport, config.zoom_factor)
        state.dirty = True

    pans = (
        (frame.pan_left, PanDirection.LEFT),
        (frame.pan_right, PanDirection.RIGHT),
        (frame.pan_up, PanDirection.UP),
        (frame.pan_down, PanDirection.DOWN),
    )
    for held, direction in pans:
        if held:
            viewport = navigation.pan(viewport, direction, config.pan_fraction)
            state.dirty = True

    if viewport != state.viewport:
        logger.debug("Viewport %s", viewport)
    state.viewport = viewport


def _render(state: ExplorerState, frame: FrameInput, engine: FractalEngine) -> None:
    # the engine allocates a buffer of the new size before any pixel is written
    state.committed = engine.render(frame.width, frame.height, state.viewport, state.iterations)
    state.buffer = state.committed
    state.rendered_size = (frame.width, frame.height)
    state.dirty = False


def update_frame(
    state: ExplorerState,
    frame: FrameInput,
    engine: FractalEngine,
    config: ExplorerConfig,
) -> bool:
    """
    Advance the explorer by one frame.
    Returns True when state.buffer was replaced and needs to be presented.
    """
    if (frame.width, frame.height) != state.rendered_size:
        state.dirty = True

    if frame.quit:
        state.running = False
        return False

    changed = _apply_selection(state, frame)
    _apply_navigation(state, frame, config)
    _apply_iterations(state, frame, config)

    if state.dirty and frame.width > 0 and frame.height > 0:
        _render(state, frame, engine)
        changed = True

    return changed
