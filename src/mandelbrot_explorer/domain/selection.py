"""
Mouse-drag rectangle selection, converted into a new viewport on release.

The tracker is sampled once per frame with the left-button state and the
cursor position. The authoritative viewport is only replaced on the
down -> up transition; while the button is held the tracker only reports the
rectangle to preview.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mandelbrot_explorer.domain.transform import pixel_to_plane_x, pixel_to_plane_y
from mandelbrot_explorer.domain.viewport import Viewport

logger = logging.getLogger(__name__)

# Substituted by the input layer when the cursor position cannot be resolved.
OFF_BUFFER = (-1.0, -1.0)


def is_off_buffer(cursor: tuple[float, float]) -> bool:
    return cursor[0] < 0.0 or cursor[1] < 0.0


@dataclass
class SelectionDrag:
    anchor_x: float
    anchor_y: float
    current_x: float
    current_y: float


@dataclass(frozen=True)
class SelectionRect:
    """Pixel-space rectangle with left <= right and top <= bottom."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> SelectionRect:
        # a drag can go in any direction, normalise each axis on its own
        return cls(left=min(x0, x1), top=min(y0, y1), right=max(x0, x1), bottom=max(y0, y1))

    @classmethod
    def from_drag(cls, drag: SelectionDrag) -> SelectionRect:
        return cls.from_corners(drag.anchor_x, drag.anchor_y, drag.current_x, drag.current_y)

    def snapped(self) -> SelectionRect:
        """Truncate the corners to whole pixels."""
        return SelectionRect(
            left=float(int(self.left)),
            top=float(int(self.top)),
            right=float(int(self.right)),
            bottom=float(int(self.bottom)),
        )

    def clamped(self, width: float, height: float) -> SelectionRect:
        """Limit the corners to [0, width] x [0, height]."""
        return SelectionRect(
            left=min(max(self.left, 0.0), width),
            top=min(max(self.top, 0.0), height),
            right=min(max(self.right, 0.0), width),
            bottom=min(max(self.bottom, 0.0), height),
        )

    @property
    def is_empty(self) -> bool:
        return self.right <= self.left or self.bottom <= self.top

    def to_viewport(self, width: int, height: int, viewport: Viewport) -> Optional[Viewport]:
        """
        Convert the rectangle into plane coordinates using the current viewport.
        Returns None for a zero-area selection (a click without a drag) or an
        empty buffer.
        """
        if width <= 0 or height <= 0:
            return None

        # corners sampled before a resize may lie outside the current buffer
        rect = self.clamped(width, height).snapped()
        if rect.is_empty:
            return None

        # the bottom pixel row is the smaller imaginary value
        return Viewport.from_bounds(
            x_min=pixel_to_plane_x(rect.left, width, viewport),
            x_max=pixel_to_plane_x(rect.right, width, viewport),
            y_min=pixel_to_plane_y(rect.bottom, height, viewport),
            y_max=pixel_to_plane_y(rect.top, height, viewport),
        )


@dataclass(frozen=True)
class SelectionStep:
    # rectangle to outline while dragging
    preview: Optional[SelectionRect] = None
    # replacement viewport on a valid release
    viewport: Optional[Viewport] = None


class SelectionTracker:
    """Idle / Dragging state machine driven by the sampled button state."""

    def __init__(self) -> None:
        self._drag: Optional[SelectionDrag] = None

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    @property
    def drag(self) -> Optional[SelectionDrag]:
        return self._drag

    def update(
        self,
        button_down: bool,
        cursor: tuple[float, float],
        width: int,
        height: int,
        viewport: Viewport,
    ) -> SelectionStep:
        if self._drag is None:
            if not button_down:
                return SelectionStep()
            if is_off_buffer(cursor):
                # no usable anchor yet, try again next frame
                return SelectionStep()

            x, y = cursor
            self._drag = SelectionDrag(anchor_x=x, anchor_y=y, current_x=x, current_y=y)
            return SelectionStep()

        if button_down:
            if not is_off_buffer(cursor):
                self._drag.current_x, self._drag.current_y = cursor
            return SelectionStep(preview=SelectionRect.from_drag(self._drag))

        rect = SelectionRect.from_drag(self._drag)
        self._drag = None

        new_viewport = rect.to_viewport(width, height, viewport)
        if new_viewport is None:
            logger.debug("Discarded zero-area selection %s", rect)
            return SelectionStep()

        logger.info("Zooming to selection %s -> %s", rect, new_viewport)
        return SelectionStep(viewport=new_viewport)
