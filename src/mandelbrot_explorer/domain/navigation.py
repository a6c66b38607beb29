from __future__ import annotations

from enum import Enum
from typing import Optional

from mandelbrot_explorer.domain.viewport import Viewport

ZOOM_FACTOR = 0.8
PAN_FRACTION = 0.1


class PanDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# --- zoom ---------------------------------------------------------------
def zoom(viewport: Viewport, factor: float) -> Viewport:
    """
    Scale the viewport's half-extents by factor around its center.
    factor < 1 => zoom in, factor > 1 => zoom out.
    Past the float64 precision floor the viewport is returned unchanged.
    """
    center_x, center_y = viewport.center
    edge_x = viewport.width / 2.0 * abs(factor)
    edge_y = viewport.height / 2.0 * abs(factor)

    zoomed = Viewport.from_bounds(
        x_min=center_x - edge_x,
        x_max=center_x + edge_x,
        y_min=center_y - edge_y,
        y_max=center_y + edge_y,
    )
    return zoomed if zoomed is not None else viewport


def zoom_in(viewport: Viewport, factor: float = ZOOM_FACTOR) -> Viewport:
    return zoom(viewport, factor)


def zoom_out(viewport: Viewport, factor: float = ZOOM_FACTOR) -> Viewport:
    return zoom(viewport, 1.0 / factor)


# --- panning ------------------------------------------------------------
def pan(
    viewport: Viewport, direction: PanDirection, fraction: float = PAN_FRACTION
) -> Viewport:
    """
    Translate the viewport by fraction of its span along one axis.
    UP moves towards larger imaginary values.
    """
    dx = dy = 0.0
    if direction is PanDirection.RIGHT:
        dx = viewport.width * fraction
    elif direction is PanDirection.LEFT:
        dx = -viewport.width * fraction
    elif direction is PanDirection.UP:
        dy = viewport.height * fraction
    else:
        dy = -viewport.height * fraction

    panned = Viewport.from_bounds(
        x_min=viewport.x_min + dx,
        x_max=viewport.x_max + dx,
        y_min=viewport.y_min + dy,
        y_max=viewport.y_max + dy,
    )
    return panned if panned is not None else viewport


def reset(viewport: Optional[Viewport] = None) -> Viewport:
    """Return the default region regardless of the current one."""
    return Viewport.default()
