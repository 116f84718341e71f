#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


def sinc(r: float) -> float:
    """Unnormalized sinc, sin(r) / r, with the removable singularity at 0."""
    if r == 0.0:
        return 1.0
    return math.sin(r) / r


def sinc_field(x: float, y: float) -> float:
    """Height of the surface at (x, y): sinc of the radial distance."""
    return sinc(math.hypot(x, y))


def descending_samples(start: float, stop: float, step: float):
    """
    Yield start, start - step, ... while the value is >= stop.

    The counter is decremented by repeated subtraction so the float error
    accumulates exactly like a `for (v = max; v >= min; v -= step)` loop.
    Whether `stop` itself is reached therefore depends on that rounding.
    """
    v = start
    while v >= stop:
        yield v
        v -= step
