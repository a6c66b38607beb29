from __future__ import annotations
import moderngl
from typing import Any, Protocol, cast

from mandelbrot_explorer.rendering.texture_presenter import TexturePresenter

TEXTURE_UNIT = 0


class Drawable(Protocol):
    def draw(self) -> None: ...


class RenderPipeline:
    """Presents the fractal texture over the whole framebuffer."""

    def __init__(
        self,
        ctx: moderngl.Context,
        present_prog: moderngl.Program,
        quad: Drawable,
        presenter: TexturePresenter,
    ) -> None:
        self.ctx = ctx
        self.program = present_prog
        self.quad = quad
        self.presenter = presenter

        # sampler binding never changes, set it once
        if "tex" in present_prog:
            cast(Any, present_prog["tex"]).value = TEXTURE_UNIT

    def draw(self, framebuffer_size: tuple[int, int]) -> bool:
        """Draw at the given framebuffer size. False when nothing was uploaded yet."""
        if self.presenter.texture is None:
            return False

        width, height = framebuffer_size
        self.ctx.viewport = (0, 0, width, height)
        self.presenter.use(TEXTURE_UNIT)
        self.quad.draw()
        return True
