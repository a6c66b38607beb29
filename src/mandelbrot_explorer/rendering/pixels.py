"""Packed 0x00RRGGBB pixel buffers."""
from __future__ import annotations

import numpy as np

from mandelbrot_explorer.domain.selection import SelectionRect

WHITE = 0x00_FF_FF_FF
ESCAPED_COLOR = WHITE
MEMBER_COLOR = 0x00_00_00_FF
SELECTION_COLOR = 0x00_FF_00_00

PIXEL_DTYPE = np.uint32


def allocate(width: int, height: int) -> np.ndarray:
    return np.zeros(width * height, dtype=PIXEL_DTYPE)


def draw_selection_outline(
    committed: np.ndarray,
    width: int,
    height: int,
    rect: SelectionRect,
    color: int = SELECTION_COLOR,
) -> np.ndarray:
    """
    Return a copy of the committed buffer with the rectangle's outline drawn on it.
    The committed buffer itself is left untouched.
    """
    preview = committed.copy()
    if width <= 0 or height <= 0 or preview.size != width * height:
        return preview

    # clamp to the buffer, the cursor may have been sampled before a resize
    left = min(max(int(rect.left), 0), width - 1)
    right = min(max(int(rect.right), 0), width - 1)
    top = min(max(int(rect.top), 0), height - 1)
    bottom = min(max(int(rect.bottom), 0), height - 1)

    image = preview.reshape(height, width)
    image[top, left : right + 1] = color
    image[bottom, left : right + 1] = color
    image[top : bottom + 1, left] = color
    image[top : bottom + 1, right] = color

    return preview


def unpack_0rgb(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """Expand packed pixels into an (H, W, 4) uint8 RGBA image, top row first."""
    packed = np.asarray(buffer, dtype=PIXEL_DTYPE).reshape(height, width)

    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., 0] = (packed >> 16) & 0xFF
    rgba[..., 1] = (packed >> 8) & 0xFF
    rgba[..., 2] = packed & 0xFF
    rgba[..., 3] = 255  # reserved byte is ignored, always opaque

    return rgba
