from __future__ import annotations
import moderngl
from typing import Tuple
import numpy as np

from mandelbrot_explorer.rendering.pixels import unpack_0rgb


class TexturePresenter:
    def __init__(self, ctx: moderngl.Context) -> None:
        self.ctx = ctx
        self.texture: moderngl.Texture | None = None

    def ensure_size(self, size: Tuple[int, int]) -> None:
        w, h = size
        if self.texture is None or self.texture.size != (w, h):
            if self.texture is not None:
                self.texture.release()
            # RGBA8 texture holding the unpacked pixel buffer
            self.texture = self.ctx.texture((w, h), components=4, dtype="f1")
            self.texture.filter = (moderngl.NEAREST, moderngl.NEAREST)
            self.texture.repeat_x = False
            self.texture.repeat_y = False

    def upload(self, buffer: np.ndarray, width: int, height: int) -> None:
        """buffer: packed 0x00RRGGBB pixels, length width * height, top row first"""
        self.ensure_size((width, height))
        assert self.texture is not None

        rgba = unpack_0rgb(buffer, width, height)

        # GL textures start at the bottom row
        self.texture.write(np.ascontiguousarray(np.flipud(rgba)).tobytes())

    def use(self, unit: int = 0) -> None:
        if self.texture is not None:
            self.texture.use(unit)
