import numpy as np
import pytest

from mandelbrot_explorer.rendering.snapshot import build_snapshot_figure
from mandelbrot_explorer.services.fractal_engine import FractalEngineCPU


def test_snapshot_figure_axes(default_viewport):
    buffer = FractalEngineCPU(workers=1).render(6, 4, default_viewport, 30)
    fig = build_snapshot_figure(buffer, 6, 4, default_viewport, 30)

    heatmap = fig.data[0]
    z = np.asarray(heatmap.z)
    assert z.shape == (4, 6)
    # bottom row first
    assert z[0].tolist() == (buffer.reshape(4, 6)[-1] == 0x000000FF).astype(float).tolist()

    assert heatmap.x[0] == pytest.approx(-2.0)
    assert heatmap.y[0] == pytest.approx(-0.5)
    assert heatmap.y[-1] == pytest.approx(1.0)
    assert fig.layout.xaxis.title.text == "Re(c)"
    assert fig.layout.yaxis.title.text == "Im(c)"
    assert "30 iterations" in fig.layout.title.text
