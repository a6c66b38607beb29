from dataclasses import dataclass

import moderngl

from mandelbrot_explorer.app_state import ExplorerState
from mandelbrot_explorer.config import ExplorerConfig
from mandelbrot_explorer.rendering.pipeline import RenderPipeline
from mandelbrot_explorer.rendering.texture_presenter import TexturePresenter
from mandelbrot_explorer.services.fractal_engine import FractalEngine


@dataclass
class AppContext:
    config: ExplorerConfig
    gl_ctx: moderngl.Context
    presenter: TexturePresenter
    pipeline: RenderPipeline
    engine: FractalEngine
    state: ExplorerState
