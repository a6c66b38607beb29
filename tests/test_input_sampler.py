import pytest
from pyglet.window import key, mouse

from mandelbrot_explorer.domain.selection import OFF_BUFFER
from mandelbrot_explorer.ui.input_sampler import PointerSampler, sample_frame


@pytest.fixture
def pointer():
    return PointerSampler()


def test_cursor_unknown_before_motion(pointer):
    assert pointer.cursor(10, 5) == OFF_BUFFER


@pytest.mark.parametrize("size", [(0, 0), (0, 5), (10, 0)])
def test_cursor_on_empty_window(pointer, size):
    pointer.on_mouse_motion(3, 2, 0, 0)
    assert pointer.cursor(*size) == OFF_BUFFER


def test_cursor_flips_to_top_left_origin(pointer):
    pointer.on_mouse_motion(3, 0, 0, 0)
    assert pointer.cursor(10, 5) == (3.0, 4.0)

    pointer.on_mouse_drag(7, 4, 0, 0, mouse.LEFT, 0)
    assert pointer.cursor(10, 5) == (7.0, 0.0)


@pytest.mark.parametrize(
    "pos, expected",
    [((50, -7), (9.0, 4.0)), ((-3, 20), (0.0, 0.0)), ((10, 5), (9.0, 0.0))],
)
def test_cursor_clamped_to_buffer(pointer, pos, expected):
    pointer.on_mouse_motion(*pos, 0, 0)
    assert pointer.cursor(10, 5) == expected


def test_left_button_state(pointer):
    pointer.on_mouse_press(2, 2, mouse.LEFT, 0)
    assert pointer.left_down
    assert pointer.cursor(10, 5) == (2.0, 2.0)

    pointer.on_mouse_release(4, 1, mouse.LEFT, 0)
    assert not pointer.left_down
    assert pointer.cursor(10, 5) == (4.0, 3.0)


def test_other_buttons_ignored(pointer):
    pointer.on_mouse_press(2, 2, mouse.RIGHT, 0)
    assert not pointer.left_down

    pointer.on_mouse_press(2, 2, mouse.LEFT, 0)
    pointer.on_mouse_release(2, 2, mouse.MIDDLE, 0)
    assert pointer.left_down


def test_deactivate_releases_button(pointer):
    pointer.on_mouse_press(2, 2, mouse.LEFT, 0)
    pointer.on_deactivate()
    assert not pointer.left_down


def test_sample_frame_reads_held_keys(pointer):
    keys = key.KeyStateHandler()
    keys.on_key_press(key.I, 0)
    keys.on_key_press(key.LSHIFT, 0)
    keys.on_key_press(key.EQUAL, 0)
    pointer.on_mouse_press(1, 1, mouse.LEFT, 0)

    frame = sample_frame(keys, pointer, 10, 5)

    assert (frame.width, frame.height) == (10, 5)
    assert frame.increase_iterations
    assert frame.fast_step
    assert frame.zoom_in
    assert not frame.decrease_iterations
    assert not frame.zoom_out
    assert not frame.quit
    assert not any((frame.pan_up, frame.pan_down, frame.pan_left, frame.pan_right))
    assert frame.mouse_down
    assert frame.cursor == (1.0, 3.0)


def test_sample_frame_key_release(pointer):
    keys = key.KeyStateHandler()
    keys.on_key_press(key.ESCAPE, 0)
    assert sample_frame(keys, pointer, 10, 5).quit

    keys.on_key_release(key.ESCAPE, 0)
    frame = sample_frame(keys, pointer, 10, 5)
    assert not frame.quit
    assert frame.cursor == OFF_BUFFER
