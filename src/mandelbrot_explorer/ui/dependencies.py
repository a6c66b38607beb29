from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from mandelbrot_explorer.domain import viewport


@dataclass(frozen=True)
class UIDeps:
    get_size: Callable[[], tuple[int, int]]
    # the viewport is replaced on every navigation, so overlays read it lazily
    get_viewport: Callable[[], viewport.Viewport]
