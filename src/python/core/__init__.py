"""Core numeric module.

This module contains the fundamental building blocks of the ray tracer:

Components:
    util: Shared epsilon and float near-equality
    tuples: Point/vector/colour tuple algebra
    kernels: Kernel-side vec4 mirror of the tuple algebra
    matrix: Read-only 4x4 matrix container

Tuples compare approximately (within EPSILON) so that values derived
through normalization and cross products still match their exact
counterparts.
"""

from .kernels import (
    ti_point,
    ti_vector,
    tuple_cross,
    tuple_dot,
    tuple_eq,
    tuple_magnitude,
    tuple_normalize,
    vec4,
)
from .matrix import Matrix4
from .tuples import (
    Colour,
    Point,
    Tuple,
    Vector,
    add,
    cross,
    divide,
    dot,
    hadamard,
    magnitude,
    negate,
    new_colour,
    new_point,
    new_vector,
    normalize,
    scale,
    subtract,
)
from .util import EPSILON, eq_f32, ti_eq_f32

__all__ = [
    "EPSILON",
    "eq_f32",
    "ti_eq_f32",
    "Tuple",
    "Point",
    "Vector",
    "Colour",
    "new_point",
    "new_vector",
    "new_colour",
    "add",
    "subtract",
    "negate",
    "scale",
    "divide",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "hadamard",
    "vec4",
    "ti_point",
    "ti_vector",
    "tuple_magnitude",
    "tuple_normalize",
    "tuple_dot",
    "tuple_cross",
    "tuple_eq",
    "Matrix4",
]
