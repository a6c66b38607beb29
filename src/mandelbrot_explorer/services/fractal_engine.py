import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Protocol

import numpy as np

from mandelbrot_explorer.domain.transform import pixel_to_plane_x, pixel_to_plane_y
from mandelbrot_explorer.domain.viewport import Viewport
from mandelbrot_explorer.rendering.pixels import (
    ESCAPED_COLOR,
    MEMBER_COLOR,
    PIXEL_DTYPE,
    allocate,
)
from mandelbrot_explorer.services.escape_time import member_mask

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 16384


class FractalEngine(Protocol):
    def render(
        self, width: int, height: int, viewport: Viewport, iterations: int
    ) -> np.ndarray: ...


def chunk_bounds(total: int, chunk_size: int) -> Iterator[tuple[int, int]]:
    """Contiguous [start, stop) ranges covering range(total)."""
    for start in range(0, total, chunk_size):
        yield start, min(start + chunk_size, total)


def render_chunk(
    start: int,
    stop: int,
    width: int,
    height: int,
    viewport: Viewport,
    iterations: int,
) -> np.ndarray:
    """
    Colors for buffer indices [start, stop).
    Index i is pixel (i % width, i // width).
    """
    index = np.arange(start, stop, dtype=np.int64)
    px = index % width
    py = index // width

    c_real = pixel_to_plane_x(px, width, viewport)
    c_imag = pixel_to_plane_y(py, height, viewport)

    members = member_mask(c_real, c_imag, iterations)
    return np.where(members, MEMBER_COLOR, ESCAPED_COLOR).astype(PIXEL_DTYPE)


class FractalEngineCPU:
    """
    Fills a pixel buffer in parallel.

    The index space is split into contiguous chunks that are evaluated
    independently on a thread pool; numpy releases the GIL inside the
    per-chunk array arithmetic. Every chunk is a pure function of its own
    indices, so the result does not depend on the worker count.
    """

    def __init__(
        self, workers: Optional[int] = None, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

        self.workers = workers
        self.chunk_size = chunk_size

    def render(
        self, width: int, height: int, viewport: Viewport, iterations: int
    ) -> np.ndarray:
        total = width * height
        if total <= 0:
            return allocate(0, 0)

        started = time.perf_counter()
        bounds = list(chunk_bounds(total, self.chunk_size))

        def task(span: tuple[int, int]) -> np.ndarray:
            return render_chunk(span[0], span[1], width, height, viewport, iterations)

        if self.workers == 1 or len(bounds) == 1:
            chunks = [task(span) for span in bounds]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                # map() yields in submission order
                chunks = list(pool.map(task, bounds))

        buffer = np.concatenate(chunks)

        logger.debug(
            "Rendered %dx%d (%d iterations, %d chunks) in %.1f ms",
            width,
            height,
            iterations,
            len(bounds),
            (time.perf_counter() - started) * 1000.0,
        )
        return buffer
