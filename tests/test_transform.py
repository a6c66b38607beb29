import numpy as np
import pytest

from mandelbrot_explorer.domain.transform import (
    pixel_to_plane,
    pixel_to_plane_x,
    pixel_to_plane_y,
)
from mandelbrot_explorer.domain.viewport import Viewport


def test_x_boundaries(default_viewport):
    assert pixel_to_plane_x(0, 4, default_viewport) == -2.0
    assert pixel_to_plane_x(4, 4, default_viewport) == 1.0


def test_x_is_monotonic(default_viewport):
    xs = pixel_to_plane_x(np.arange(640), 640, default_viewport)
    assert np.all(np.diff(xs) >= 0.0)


def test_y_is_inverted(default_viewport):
    # row 0 is the top of the buffer and the largest imaginary value
    assert pixel_to_plane_y(0, 2, default_viewport) == 1.0
    assert pixel_to_plane_y(2, 2, default_viewport) == -1.0
    assert pixel_to_plane_y(1, 2, default_viewport) == 0.0


def test_y_inversion_on_other_viewport():
    vp = Viewport(x_min=-0.5, x_max=0.25, y_min=0.125, y_max=0.375)
    assert pixel_to_plane_y(0, 8, vp) == 0.375
    assert pixel_to_plane_y(8, 8, vp) == 0.125
    assert pixel_to_plane_y(4, 8, vp) == 0.25


def test_y_is_monotonically_decreasing_by_row(default_viewport):
    ys = pixel_to_plane_y(np.arange(360), 360, default_viewport)
    assert np.all(np.diff(ys) <= 0.0)


def test_out_of_range_extrapolates(default_viewport):
    assert pixel_to_plane_x(-4, 4, default_viewport) == -5.0
    assert pixel_to_plane_y(4, 2, default_viewport) == -3.0


def test_arrays_match_scalars(default_viewport):
    cols = np.arange(7)
    rows = np.arange(5)
    xs = pixel_to_plane_x(cols, 7, default_viewport)
    ys = pixel_to_plane_y(rows, 5, default_viewport)
    assert xs.tolist() == [pixel_to_plane_x(int(c), 7, default_viewport) for c in cols]
    assert ys.tolist() == [pixel_to_plane_y(int(r), 5, default_viewport) for r in rows]


def test_pixel_to_plane_complex(default_viewport):
    z = pixel_to_plane(2, 1, 4, 2, default_viewport)
    assert z == pytest.approx(complex(-0.5, 0.0))
