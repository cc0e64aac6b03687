"""Floating-point near-equality shared by every comparison in the kernel.

All tuple and pixel comparisons go through ``eq_f32`` so that values derived
through normalization or cross products still compare equal to their exact
counterparts despite accumulated float32 rounding error.

Example:
    >>> from src.python.core.util import eq_f32
    >>> eq_f32(0.1 + 0.2, 0.3)
    True
"""

import taichi as ti

# Absolute tolerance for float comparisons
EPSILON = 1e-5


def eq_f32(a: float, b: float) -> bool:
    """Check whether two floats are equal within EPSILON.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if |a - b| < EPSILON. NaN operands never compare equal.
    """
    return bool(abs(a - b) < EPSILON)


@ti.func
def ti_eq_f32(a: ti.f32, b: ti.f32) -> ti.i32:
    """Kernel-side variant of eq_f32.

    Returns:
        1 if |a - b| < EPSILON, 0 otherwise.
    """
    return ti.abs(a - b) < EPSILON
