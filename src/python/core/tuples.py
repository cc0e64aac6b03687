"""Homogeneous tuple algebra for points, vectors and colours.

This module provides the 4-component Tuple value used throughout the ray
tracer, together with three tagged variants built from three components:

    Point:  w = 1.0
    Vector: w = 0.0
    Colour: a Vector whose x/y/z are read as red/green/blue

Arithmetic lives on Tuple and is applied component-wise to all four
coordinates, w included. Results are re-tagged from the w they end up with,
so point - point is a Vector, point - vector is a Point and point + point
(w = 2.0) is a plain Tuple with no point/vector meaning.

Components are stored as float32. Equality is approximate (see
src.python.core.util.EPSILON).

Tuples convert to and from Taichi ``vec4`` values; the kernel-side mirror of
the algebra lives in src.python.core.kernels.

Example:
    >>> from src.python.core.tuples import new_point, new_vector
    >>> p = new_point(3.0, 2.0, 1.0)
    >>> v = new_vector(5.0, 6.0, 7.0)
    >>> p - v
    Point(x=-2.0, y=-4.0, z=-6.0)
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from typing import Any

import numpy as np
import numpy.typing as npt

import taichi.math as tm

from src.python.core.util import EPSILON

POINT_W = 1.0
VECTOR_W = 0.0


class Tuple:
    """A 4-component homogeneous value (x, y, z, w).

    The algebra does not constrain w: callers building raw Tuples are
    responsible for their meaning. Use Point, Vector and Colour to get a
    value whose w is fixed by construction.

    Tuples are immutable. They are not hashable, since approximate
    equality cannot be expressed as a hash.
    """

    __slots__ = ("_data",)

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        data = np.array([x, y, z, w], dtype=np.float32)
        data.flags.writeable = False
        self._data = data

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new_point(cls, x: float, y: float, z: float) -> Point:
        """Create a point (w = 1.0)."""
        return Point(x, y, z)

    @classmethod
    def new_vector(cls, x: float, y: float, z: float) -> Vector:
        """Create a vector (w = 0.0)."""
        return Vector(x, y, z)

    @classmethod
    def new_colour(cls, r: float, g: float, b: float) -> Colour:
        """Create a colour (a vector with channels in x/y/z)."""
        return Colour(r, g, b)

    @classmethod
    def from_numpy(cls, data: npt.ArrayLike) -> Tuple:
        """Build a Tuple from four raw components.

        The result is tagged from its w component. Called on Colour, a
        w of 0.0 gives a Colour rather than a Vector.
        """
        arr = np.array(data, dtype=np.float32).reshape(4)
        return _tagged(arr, colour=issubclass(cls, Colour))

    @classmethod
    def from_taichi(cls, v: Any) -> Tuple:
        """Build a Tuple from a Taichi vec4 (or any 4-element indexable)."""
        return cls.from_numpy([v[0], v[1], v[2], v[3]])

    @staticmethod
    def _wrap(kind: type[Tuple], data: npt.NDArray[np.float32]) -> Tuple:
        obj = object.__new__(kind)
        data.flags.writeable = False
        obj._data = data
        return obj

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    @property
    def r(self) -> float:
        """Red channel (aliases x)."""
        return self.x

    @property
    def g(self) -> float:
        """Green channel (aliases y)."""
        return self.y

    @property
    def b(self) -> float:
        """Blue channel (aliases z)."""
        return self.z

    def is_point(self) -> bool:
        """Check whether w is exactly 1.0."""
        return self.w == POINT_W

    def is_vector(self) -> bool:
        """Check whether w is exactly 0.0."""
        return self.w == VECTOR_W

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a writable copy of the four float32 components."""
        return self._data.copy()

    def to_taichi(self) -> Any:
        """Return the components as a Taichi vec4."""
        return tm.vec4(self.x, self.y, self.z, self.w)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """Compute the length over all four components.

        Returns:
            sqrt(x^2 + y^2 + z^2 + w^2).
        """
        return float(np.sqrt(np.dot(self._data, self._data)))

    def normalize(self) -> Tuple:
        """Divide the tuple by its magnitude.

        The zero tuple is not guarded against: its components come back as
        NaN, as for any division by zero.
        """
        return self / self.magnitude()

    def dot(self, other: Tuple) -> float:
        """Compute the dot product over all four components."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Tuple) -> Vector:
        """Compute the cross product of the x/y/z parts.

        w is ignored on both sides, so the result is meaningful only for
        vectors. cross(a, b) == -cross(b, a).

        Returns:
            A Vector.
        """
        ax, ay, az = self._data[:3]
        bx, by, bz = other._data[:3]
        data = np.array(
            [ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx, VECTOR_W],
            dtype=np.float32,
        )
        return self._wrap(Vector, data)

    def hadamard(self, other: Tuple) -> Tuple:
        """Multiply two tuples component-wise.

        Used to blend colours: Colour(1, 0.2, 0.4) * Colour(0.9, 1, 0.1)
        is Colour(0.9, 0.2, 0.04).
        """
        return _tagged(self._data * other._data, self, other)

    def __add__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return _tagged(self._data + other._data, self, other)

    def __sub__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return _tagged(self._data - other._data, self, other)

    def __neg__(self) -> Tuple:
        return _tagged(-self._data, self)

    def __mul__(self, other: object) -> Tuple:
        if isinstance(other, Colour) and isinstance(self, Colour):
            return self.hadamard(other)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return _tagged(self._data * np.float32(other), self)

    def __rmul__(self, other: object) -> Tuple:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return _tagged(self._data * np.float32(other), self)

    def __truediv__(self, other: object) -> Tuple:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        # Division by zero propagates inf/NaN
        with np.errstate(divide="ignore", invalid="ignore"):
            data = self._data / np.float32(other)
        return _tagged(data, self)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        with np.errstate(invalid="ignore"):
            return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


class Point(Tuple):
    """A position in space (w = 1.0)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, POINT_W)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y}, z={self.z})"


class Vector(Tuple):
    """A direction and length (w = 0.0)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, VECTOR_W)

    def __repr__(self) -> str:
        return f"Vector(x={self.x}, y={self.y}, z={self.z})"


class Colour(Vector):
    """An RGB colour stored in the x/y/z slots of a vector."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Colour(r={self.r}, g={self.g}, b={self.b})"


def _tagged(
    data: npt.NDArray[np.float32], *operands: Tuple, colour: bool = False
) -> Tuple:
    """Wrap raw components in the variant matching their w.

    w == 1 gives a Point, w == 0 a Vector (a Colour when every operand is a
    Colour, or when colour is set), anything else a plain Tuple.
    """
    w = data[3]
    if w == POINT_W:
        kind: type[Tuple] = Point
    elif w == VECTOR_W:
        if colour or (operands and all(isinstance(t, Colour) for t in operands)):
            kind = Colour
        else:
            kind = Vector
    else:
        kind = Tuple
    return Tuple._wrap(kind, data.astype(np.float32, copy=False))


# =============================================================================
# Functional API
# =============================================================================


def new_point(x: float, y: float, z: float) -> Point:
    """Create a point (w = 1.0)."""
    return Point(x, y, z)


def new_vector(x: float, y: float, z: float) -> Vector:
    """Create a vector (w = 0.0)."""
    return Vector(x, y, z)


def new_colour(r: float, g: float, b: float) -> Colour:
    """Create a colour with channels aliased to x/y/z."""
    return Colour(r, g, b)


def add(a: Tuple, b: Tuple) -> Tuple:
    """Add two tuples component-wise, w included."""
    return a + b


def subtract(a: Tuple, b: Tuple) -> Tuple:
    """Subtract two tuples component-wise, w included."""
    return a - b


def negate(a: Tuple) -> Tuple:
    """Negate every component."""
    return -a


def scale(a: Tuple, s: float) -> Tuple:
    """Multiply every component by a scalar."""
    return a * s


def divide(a: Tuple, s: float) -> Tuple:
    """Divide every component by a scalar. s == 0 yields inf/NaN."""
    return a / s


def magnitude(a: Tuple) -> float:
    return a.magnitude()


def normalize(a: Tuple) -> Tuple:
    return a.normalize()


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Vector:
    return a.cross(b)


def hadamard(a: Tuple, b: Tuple) -> Tuple:
    return a.hadamard(b)
