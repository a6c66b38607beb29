from mandelbrot_explorer.config import MAX_ITERATIONS
from mandelbrot_explorer.domain.budget import FAST_STEP, STEP, decrease, increase, step_for


def test_increase_and_decrease():
    assert increase(100) == 101
    assert increase(100, 10) == 110
    assert decrease(100) == 99
    assert decrease(100, 10) == 90


def test_step_for_modifier():
    assert step_for(False) == STEP == 1
    assert step_for(True) == FAST_STEP == 10
    assert step_for(True, 2, 25) == 25


def test_increase_saturates_at_the_top():
    assert increase(MAX_ITERATIONS - 1, 1) == MAX_ITERATIONS - 1
    assert increase(MAX_ITERATIONS - 5, 10) == MAX_ITERATIONS - 5
    assert increase(MAX_ITERATIONS - 11, 10) == MAX_ITERATIONS - 1


def test_decrease_never_reaches_zero():
    assert decrease(1, 1) == 1
    assert decrease(2, 1) == 1
    assert decrease(10, 10) == 10
    assert decrease(5, 10) == 5
    assert decrease(11, 10) == 1
