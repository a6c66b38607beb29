import numpy as np

from mandelbrot_explorer.config import ESCAPE_RADIUS_SQUARED


def is_member(c_real: float, c_imag: float, budget: int) -> bool:
    """
    z_0 = 0
    z_n+1 = z_n^2 + c

    A point is a member when none of z_1 .. z_budget reaches |z|^2 >= 4.
    A budget of 0 performs no iteration and classifies every point as a member.
    """
    z_real = 0.0
    z_imag = 0.0

    for _ in range(budget):
        z_real_tmp = z_real * z_real - z_imag * z_imag + c_real
        z_imag = 2.0 * z_real * z_imag + c_imag
        z_real = z_real_tmp

        # |z|^2 instead of |z| avoids the square root; nan counts as escaped
        if not z_real * z_real + z_imag * z_imag < ESCAPE_RADIUS_SQUARED:
            return False

    return True


def member_mask(c_real: np.ndarray, c_imag: np.ndarray, budget: int) -> np.ndarray:
    """
    Vectorized is_member over arrays of equal shape.

    Performs the same float64 operations in the same order as the scalar loop,
    so both classify every point identically. Escaped points are dropped from
    the working arrays as soon as they leave the radius.
    """
    c_real = np.asarray(c_real, dtype=np.float64)
    c_imag = np.asarray(c_imag, dtype=np.float64)
    shape = c_real.shape

    members = np.ones(c_real.size, dtype=bool)
    live = np.arange(c_real.size)
    cr = c_real.ravel()
    ci = c_imag.ravel()
    z_real = np.zeros_like(cr)
    z_imag = np.zeros_like(ci)

    # huge coordinates may overflow to inf/nan, which fails the < test
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(budget):
            if live.size == 0:
                break

            z_real, z_imag = (
                z_real * z_real - z_imag * z_imag + cr,
                2.0 * z_real * z_imag + ci,
            )

            inside = z_real * z_real + z_imag * z_imag < ESCAPE_RADIUS_SQUARED
            if not inside.all():
                members[live[~inside]] = False
                live = live[inside]
                cr, ci = cr[inside], ci[inside]
                z_real, z_imag = z_real[inside], z_imag[inside]

    return members.reshape(shape)
