"""Canvas module for pixel storage.

Components:
    canvas: Row-major colour buffer with bounds-checked writes and
        Taichi field interop

Example:
    >>> from src.python.canvas import Canvas
    >>> from src.python.core.tuples import new_colour
    >>> canvas = Canvas.new_fill(2, 10, new_colour(1.0, 0.8, 0.6))
"""

from src.python.canvas.canvas import BLACK, Canvas, PixelOutOfBoundsError

__all__ = [
    "BLACK",
    "Canvas",
    "PixelOutOfBoundsError",
]
