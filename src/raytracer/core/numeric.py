"""Numeric constants and tolerant float helpers shared by the whole renderer.

Every comparison between geometric or color values goes through
``approx_equal`` so that floating-point drift from chained transforms does
not break equality checks.
"""

import math

# Tolerance used when comparing floats anywhere in the renderer
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Check whether two floats are within EPSILON of each other."""
    return abs(a - b) <= EPSILON


def reciprocal(x: float) -> float:
    """Compute 1/x, returning 0.0 when x is within EPSILON of zero.

    Scaling inversion relies on this so that a zero scale factor degrades to
    a collapsed axis instead of producing infinities.

    Args:
        x: The value to invert.

    Returns:
        The reciprocal of x, or 0.0 for near-zero input.
    """
    if approx_equal(x, 0.0):
        return 0.0
    return 1.0 / x


def floor_int(x: float) -> int:
    """Return the floor of x as an int."""
    return int(math.floor(x))


def is_even(n: int) -> bool:
    """Check whether an integer is even (floored modulo, safe for negatives)."""
    return n % 2 == 0
