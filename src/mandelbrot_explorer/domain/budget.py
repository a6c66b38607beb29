"""Saturating iteration budget arithmetic."""
from mandelbrot_explorer.config import MAX_ITERATIONS

STEP = 1
FAST_STEP = 10


def step_for(fast: bool, step: int = STEP, fast_step: int = FAST_STEP) -> int:
    return fast_step if fast else step


def increase(budget: int, step: int = STEP) -> int:
    # no-op instead of overflowing the representable range
    if budget < MAX_ITERATIONS - step:
        return budget + step
    return budget


def decrease(budget: int, step: int = STEP) -> int:
    # never drops to zero or below
    if budget > step:
        return budget - step
    return budget
