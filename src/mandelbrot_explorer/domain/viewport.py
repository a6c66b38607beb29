from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mandelbrot_explorer.config import (
    DEFAULT_X_MAX,
    DEFAULT_X_MIN,
    DEFAULT_Y_MAX,
    DEFAULT_Y_MIN,
)


def is_valid_bounds(x_min: float, x_max: float, y_min: float, y_max: float) -> bool:
    return x_min < x_max and y_min < y_max


@dataclass(frozen=True)
class Viewport:
    """Rectangle of the complex plane mapped onto the pixel buffer."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        if not is_valid_bounds(self.x_min, self.x_max, self.y_min, self.y_max):
            raise ValueError(
                f"Degenerate viewport: x=[{self.x_min}, {self.x_max}], "
                f"y=[{self.y_min}, {self.y_max}]"
            )

    @classmethod
    def default(cls) -> Viewport:
        """The canonical full view of the set."""
        return cls(
            x_min=DEFAULT_X_MIN,
            x_max=DEFAULT_X_MAX,
            y_min=DEFAULT_Y_MIN,
            y_max=DEFAULT_Y_MAX,
        )

    @classmethod
    def from_bounds(
        cls, x_min: float, x_max: float, y_min: float, y_max: float
    ) -> Optional[Viewport]:
        """Build a viewport, or None when the bounds collapsed (float precision floor)."""
        if not is_valid_bounds(x_min, x_max, y_min, y_max):
            return None
        return cls(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> tuple[float, float]:
        return ((self.x_min + self.x_max) / 2.0, (self.y_min + self.y_max) / 2.0)
