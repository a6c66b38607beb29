from __future__ import annotations

import numpy as np
import plotly.express as px
import plotly.graph_objects as go

from mandelbrot_explorer.domain.transform import pixel_to_plane_x, pixel_to_plane_y
from mandelbrot_explorer.domain.viewport import Viewport
from mandelbrot_explorer.rendering.pixels import MEMBER_COLOR


def build_snapshot_figure(
    buffer: np.ndarray, width: int, height: int, viewport: Viewport, iterations: int
) -> go.Figure:
    """Figure of the rendered view with plane-space axes (bottom row first)."""
    membership = (np.asarray(buffer).reshape(height, width) == MEMBER_COLOR).astype(
        np.float32
    )

    rows = np.arange(height - 1, -1, -1)
    cols = np.arange(width)

    fig = px.imshow(
        np.flipud(membership),
        origin="lower",
        zmin=0.0,
        zmax=1.0,
        x=pixel_to_plane_x(cols, width, viewport),
        y=pixel_to_plane_y(rows, height, viewport),
        color_continuous_scale=[
            (0.0, "white"),  # escaped
            (1.0, "blue"),  # inside the set
        ],
    )

    fig.update_layout(
        title=f"Mandelbrot set, {iterations} iterations",
        xaxis_title="Re(c)",
        yaxis_title="Im(c)",
    )

    return fig


def show_snapshot(
    buffer: np.ndarray, width: int, height: int, viewport: Viewport, iterations: int
) -> None:
    build_snapshot_figure(buffer, width, height, viewport, iterations).show()
