from __future__ import annotations
import moderngl
import numpy as np

# x, y, u, v per corner, counter-clockwise from bottom-left
QUAD_VERTICES = np.array(
    [
        [-1.0, -1.0, 0.0, 0.0],
        [1.0, -1.0, 1.0, 0.0],
        [1.0, 1.0, 1.0, 1.0],
        [-1.0, 1.0, 0.0, 1.0],
    ],
    dtype="f4",
)
QUAD_INDICES = np.array([0, 1, 2, 2, 3, 0], dtype="i4")


class FullscreenQuad:
    def __init__(self, ctx: moderngl.Context, prog: moderngl.Program) -> None:
        self._vbo = ctx.buffer(QUAD_VERTICES.tobytes())
        self._ibo = ctx.buffer(QUAD_INDICES.tobytes())
        self._vao = ctx.vertex_array(
            prog, [(self._vbo, "2f 2f", "in_pos", "in_uv")], self._ibo
        )

    def draw(self) -> None:
        self._vao.render()
