from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

# |z|^2 bound for the escape test (|z| >= 2)
ESCAPE_RADIUS_SQUARED = 4.0

DEFAULT_X_MIN = -2.0
DEFAULT_X_MAX = 1.0
DEFAULT_Y_MIN = -1.0
DEFAULT_Y_MAX = 1.0

# Largest budget the controller will hold (64-bit unsigned word).
MAX_ITERATIONS = 2**64 - 1


class ExplorerConfig(BaseModel):
    width: int = Field(default=640, gt=0)
    height: int = Field(default=360, gt=0)
    iterations: int = Field(default=100, ge=1, le=MAX_ITERATIONS)

    # zoom-in factor; zoom-out uses the reciprocal
    zoom_factor: float = Field(default=0.8, gt=0.0, lt=1.0)
    pan_fraction: float = Field(default=0.1, gt=0.0, lt=1.0)

    step: int = Field(default=1, ge=1)
    fast_step: int = Field(default=10, ge=1)

    frame_rate: float = Field(default=60.0, gt=0.0)

    # None lets the executor pick from the CPU count
    workers: Optional[int] = Field(default=None, ge=1)
    chunk_size: int = Field(default=16384, gt=0)

    @classmethod
    def from_file(cls, path: Path) -> "ExplorerConfig":
        """Load a configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text("utf-8"))
