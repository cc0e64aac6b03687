"""Fixed-size pixel canvas of colours.

The canvas stores width x height colours in a flat row-major buffer
(index = y * width + x), each pixel kept as the four float32 components of
its Tuple. Pixels are mutated in place; the canvas is never resized.

Coordinates must be integers (Python or NumPy); anything else raises
TypeError. Writes outside the canvas raise PixelOutOfBoundsError. Reads
outside the canvas return None.

For kernel-side drawing the buffer can be copied to a Taichi field with
to_field() and copied back with load_field().

Example:
    >>> from src.python.canvas import Canvas
    >>> from src.python.core.tuples import new_colour
    >>> canvas = Canvas(10, 20)  # height, width
    >>> canvas.set_pixel(2, 3, new_colour(1.0, 0.0, 0.0))
    Canvas(width=20, height=10)
    >>> canvas.get_pixel(2, 3)
    Colour(r=1.0, g=0.0, b=0.0)
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from typing import Any

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.python.core.tuples import Colour, Tuple, new_colour

logger = logging.getLogger(__name__)

BLACK = (0.0, 0.0, 0.0)


class PixelOutOfBoundsError(IndexError):
    """Raised when writing a pixel outside the canvas.

    Attributes:
        x: The requested column.
        y: The requested row.
        width: Canvas width.
        height: Canvas height.
    """

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Pixel x:{x} y:{y} is outside the {width}x{height} canvas"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Canvas:
    """A row-major grid of colours.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(
        self,
        height: int,
        width: int,
        fill: Tuple | None = None,
    ) -> None:
        """Allocate the canvas.

        Args:
            height: Number of rows.
            width: Number of columns.
            fill: Initial colour of every pixel. Defaults to black.

        Raises:
            ValueError: If either dimension is negative.
        """
        if height < 0 or width < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")

        if fill is None:
            fill = new_colour(*BLACK)

        self._width = int(width)
        self._height = int(height)
        self._pixels = np.empty((self._width * self._height, 4), dtype=np.float32)
        self._pixels[:] = fill.to_numpy()
        logger.debug("Allocated %dx%d canvas filled with %r", self._width, self._height, fill)

    @classmethod
    def new(cls, height: int, width: int) -> Canvas:
        """Create a canvas with every pixel black."""
        return cls(height, width)

    @classmethod
    def new_fill(cls, height: int, width: int, colour: Tuple) -> Canvas:
        """Create a canvas with every pixel set to colour."""
        return cls(height, width, fill=colour)

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    @staticmethod
    def _coords(x: Any, y: Any) -> tuple[int, int]:
        # Floats would pass the bounds check but cannot index the buffer
        try:
            return operator.index(x), operator.index(y)
        except TypeError as e:
            raise TypeError(f"Pixel coordinates must be integers, got x={x!r} y={y!r}") from e

    def _index(self, x: int, y: int) -> int:
        return y * self._width + x

    def set_pixel(self, x: int, y: int, colour: Tuple) -> Canvas:
        """Overwrite the pixel at (x, y).

        Args:
            x: Column, 0 <= x < width.
            y: Row, 0 <= y < height.
            colour: The new pixel colour.

        Returns:
            The canvas, for chaining.

        Raises:
            PixelOutOfBoundsError: If (x, y) lies outside the canvas.
            TypeError: If x or y is not an integer.
        """
        x, y = self._coords(x, y)
        if not self._in_bounds(x, y):
            raise PixelOutOfBoundsError(x, y, self._width, self._height)
        self._pixels[self._index(x, y)] = colour.to_numpy()
        return self

    def get_pixel(self, x: int, y: int) -> Tuple | None:
        """Read the pixel at (x, y).

        Returns:
            The stored colour, or None if (x, y) lies outside the canvas.

        Raises:
            TypeError: If x or y is not an integer.
        """
        x, y = self._coords(x, y)
        if not self._in_bounds(x, y):
            return None
        return Colour.from_numpy(self._pixels[self._index(x, y)])

    def pixels(self) -> npt.NDArray[np.float32]:
        """Get a read-only view of the buffer, shape (width * height, 4)."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Get the RGB channels as a (height, width, 3) float32 copy."""
        return self._pixels[:, :3].reshape(self._height, self._width, 3).copy()

    # -------------------------------------------------------------------------
    # Taichi interop
    # -------------------------------------------------------------------------

    def to_field(self) -> Any:
        """Copy the pixels into a new Taichi field.

        Taichi must already be initialized.

        Returns:
            A ti.Vector.field(4, ti.f32) of shape (height, width).
        """
        field = ti.Vector.field(4, dtype=ti.f32, shape=(self._height, self._width))
        field.from_numpy(self._pixels.reshape(self._height, self._width, 4))
        return field

    def load_field(self, field: Any) -> None:
        """Overwrite the pixels from a Taichi field made by to_field().

        Args:
            field: A 4-component vector field of shape (height, width).

        Raises:
            ValueError: If the field shape does not match the canvas.
        """
        data = field.to_numpy()
        expected = (self._height, self._width, 4)
        if data.shape != expected:
            raise ValueError(f"Field shape {data.shape} does not match canvas shape {expected}")
        self._pixels[:] = data.reshape(-1, 4).astype(np.float32, copy=False)

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Tuple]:
        for row in self._pixels:
            yield Colour.from_numpy(row)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
