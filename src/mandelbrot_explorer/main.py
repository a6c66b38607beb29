import logging
from importlib.resources import files
from typing import Optional, Sequence

import moderngl
import pyglet
from pydantic import ValidationError
from pyglet.window import key

from mandelbrot_explorer.app_context import AppContext
from mandelbrot_explorer.app_state import ExplorerState
from mandelbrot_explorer.cli import build_parser, load_config
from mandelbrot_explorer.config import ExplorerConfig
from mandelbrot_explorer.logging_config import setup_logging
from mandelbrot_explorer.rendering.pipeline import RenderPipeline
from mandelbrot_explorer.rendering.quad import FullscreenQuad
from mandelbrot_explorer.rendering.snapshot import show_snapshot
from mandelbrot_explorer.rendering.texture_presenter import TexturePresenter
from mandelbrot_explorer.services.fractal_engine import FractalEngineCPU
from mandelbrot_explorer.services.frame_loop import update_frame
from mandelbrot_explorer.ui.cursor_coords import (
    CursorCoordsOverlay,
    CursorCoordsOverlayConfig,
)
from mandelbrot_explorer.ui.dependencies import UIDeps
from mandelbrot_explorer.ui.input_sampler import SNAPSHOT_KEY, PointerSampler, sample_frame
from mandelbrot_explorer.ui.manager import UIManager

logger = logging.getLogger(__name__)


class MandelbrotWindow(pyglet.window.Window):
    def __init__(self, config: ExplorerConfig) -> None:
        state = ExplorerState.from_config(config)
        super().__init__(
            width=config.width,
            height=config.height,
            caption=state.status,
            resizable=True,
        )
        ctx = moderngl.create_context()
        ctx.viewport = (0, 0, self.width, self.height)

        shaders = files("mandelbrot_explorer.shaders")
        vs = (shaders / "present.vert.glsl").read_text("utf-8")
        fs = (shaders / "present.frag.glsl").read_text("utf-8")
        program = ctx.program(vertex_shader=vs, fragment_shader=fs)

        presenter = TexturePresenter(ctx)
        presenter.ensure_size((self.width, self.height))  # allocate texture

        quad = FullscreenQuad(ctx, program)
        pipeline = RenderPipeline(ctx, program, quad, presenter)
        engine = FractalEngineCPU(workers=config.workers, chunk_size=config.chunk_size)

        self.app = AppContext(
            config=config,
            gl_ctx=ctx,
            presenter=presenter,
            pipeline=pipeline,
            engine=engine,
            state=state,
        )

        self.keys = key.KeyStateHandler()
        self.pointer = PointerSampler()
        self.push_handlers(self.keys, self.pointer)

        self.set_mouse_visible(True)
        cursor = self.get_system_mouse_cursor(self.CURSOR_CROSSHAIR)
        self.set_mouse_cursor(cursor)

        deps = UIDeps(get_size=self.get_size, get_viewport=lambda: self.app.state.viewport)
        self.ui = UIManager(window=self, deps=deps)

        pyglet.clock.schedule_interval(self.update, 1.0 / config.frame_rate)

    def update(self, dt: float) -> None:
        state = self.app.state
        width, height = self.get_size()
        frame = sample_frame(self.keys, self.pointer, width, height)
        status = state.status

        if update_frame(state, frame, self.app.engine, self.app.config):
            w, h = state.rendered_size
            self.app.presenter.upload(state.buffer, w, h)

        if state.status != status:
            self.set_caption(state.status)

        if not state.running:
            logger.info("Quit requested")
            self.close()

    def on_draw(self) -> None:
        self.clear()
        self.app.gl_ctx.clear(0.07, 0.07, 0.09, 1.0)
        self.app.pipeline.draw(self.get_framebuffer_size())

        self.ui.draw()

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        # one-shot, unlike the navigation keys sampled each frame
        if symbol == SNAPSHOT_KEY:
            state = self.app.state
            w, h = state.rendered_size
            if w * h > 0:
                show_snapshot(state.committed, w, h, state.viewport, state.iterations)
            return
        super().on_key_press(symbol, modifiers)

    def close(self) -> None:
        pyglet.clock.unschedule(self.update)
        self.ui.clear()
        super().close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        parser.error(f"invalid configuration: {exc}")

    logger.info("Starting explorer %dx%d, %d iterations", config.width, config.height, config.iterations)

    app = MandelbrotWindow(config)

    cursor_cords_config = CursorCoordsOverlayConfig()
    cursor_cords = CursorCoordsOverlay(cursor_cords_config)

    app.ui.add(cursor_cords)

    pyglet.app.run()


if __name__ == "__main__":
    main()
