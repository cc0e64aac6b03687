"""Tuple algebra for use inside Taichi kernels.

This module mirrors the host-side algebra of src.python.core.tuples on
homogeneous ``vec4`` values. Points carry w = 1.0, vectors and colours
w = 0.0, and every operation except cross covers all four components.

Taichi reads the annotations here when a kernel is compiled, so they must
stay real objects rather than postponed strings.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def length() -> ti.f32:
    ...     return tuple_magnitude(ti_vector(1.0, 2.0, 3.0))
    >>> length()  # sqrt(14)
"""

import taichi as ti
import taichi.math as tm

from src.python.core.tuples import POINT_W, VECTOR_W
from src.python.core.util import ti_eq_f32

# Type alias for homogeneous 4D tuples in kernels
vec4 = tm.vec4


@ti.func
def ti_point(x: ti.f32, y: ti.f32, z: ti.f32) -> vec4:
    """Create a point inside a kernel."""
    return vec4(x, y, z, POINT_W)


@ti.func
def ti_vector(x: ti.f32, y: ti.f32, z: ti.f32) -> vec4:
    """Create a vector (or colour) inside a kernel."""
    return vec4(x, y, z, VECTOR_W)


@ti.func
def tuple_magnitude(v: vec4) -> ti.f32:
    """Length over all four components."""
    return ti.sqrt(tm.dot(v, v))


@ti.func
def tuple_normalize(v: vec4) -> vec4:
    """Divide by the magnitude. The zero tuple is not guarded."""
    return v / tuple_magnitude(v)


@ti.func
def tuple_dot(a: vec4, b: vec4) -> ti.f32:
    """Dot product over all four components."""
    return tm.dot(a, b)


@ti.func
def tuple_cross(a: vec4, b: vec4) -> vec4:
    """Cross product of the x/y/z parts, returned as a vector."""
    return vec4(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
        VECTOR_W,
    )


@ti.func
def tuple_eq(a: vec4, b: vec4) -> ti.i32:
    """Approximate equality of all four components.

    Returns:
        1 if every component differs by less than EPSILON, 0 otherwise.
    """
    return (
        ti_eq_f32(a.x, b.x)
        and ti_eq_f32(a.y, b.y)
        and ti_eq_f32(a.z, b.z)
        and ti_eq_f32(a.w, b.w)
    )
