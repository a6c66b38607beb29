"""
Pixel space <-> plane space.

Pixel row 0 is the top of the buffer, which is the *largest* imaginary value
in plane space, so the vertical map is flipped. Both functions accept numpy
arrays as well as scalars; the render engine feeds them whole index ranges.
"""
from __future__ import annotations

from typing import TypeVar

import numpy as np

from mandelbrot_explorer.domain.viewport import Viewport

Coord = TypeVar("Coord", float, np.ndarray)


def pixel_to_plane_x(px: Coord, width: int, viewport: Viewport) -> Coord:
    return viewport.x_min + (viewport.x_max - viewport.x_min) * (px / width)


def pixel_to_plane_y(py: Coord, height: int, viewport: Viewport) -> Coord:
    return viewport.y_min + (viewport.y_max - viewport.y_min) * (
        (height - py) / height
    )


def pixel_to_plane(
    px: float, py: float, width: int, height: int, viewport: Viewport
) -> complex:
    """Convert a buffer pixel (top-left origin) to a complex-plane coordinate"""
    return complex(
        pixel_to_plane_x(px, width, viewport), pixel_to_plane_y(py, height, viewport)
    )
