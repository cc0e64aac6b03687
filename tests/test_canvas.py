"""Unit tests for the canvas module.

Tests cover:
- Allocation (black and filled)
- Pixel writes and reads, in and out of bounds
- NumPy views and copies
- Taichi field interop
"""

import numpy as np
import pytest
import taichi as ti


class TestCanvasCreation:
    """Tests for allocating canvases."""

    def test_build_canvas(self):
        """A new canvas has the requested size and is all black."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import new_colour

        canvas = Canvas.new(10, 20)
        black = new_colour(0.0, 0.0, 0.0)

        assert canvas.width == 20
        assert canvas.height == 10
        assert len(canvas) == 20 * 10
        assert all(pixel == black for pixel in canvas)

    def test_constructor_matches_new(self):
        """Canvas(h, w) is the same as Canvas.new(h, w)."""
        from src.python.canvas import Canvas

        canvas = Canvas(3, 4)
        assert (canvas.width, canvas.height) == (4, 3)
        assert np.all(canvas.pixels() == 0.0)

    def test_new_fill(self):
        """new_fill sets every pixel to the colour."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import new_colour

        colour = new_colour(1.0, 0.8, 0.6)
        canvas = Canvas.new_fill(2, 10, colour)

        assert len(canvas) == 20
        assert all(pixel == colour for pixel in canvas)

    def test_empty_canvas(self):
        """Zero-sized canvases are allowed."""
        from src.python.canvas import Canvas

        canvas = Canvas(0, 5)
        assert len(canvas) == 0
        assert list(canvas) == []

    def test_negative_dimensions_raise(self):
        """Negative sizes are rejected."""
        from src.python.canvas import Canvas

        with pytest.raises(ValueError):
            Canvas(-1, 5)
        with pytest.raises(ValueError):
            Canvas(5, -1)

    def test_repr(self):
        """repr shows the dimensions."""
        from src.python.canvas import Canvas

        assert repr(Canvas(3, 4)) == "Canvas(width=4, height=3)"


class TestPixelAccess:
    """Tests for set_pixel and get_pixel."""

    def test_mutate_canvas(self, red):
        """A written pixel reads back as the same colour."""
        from src.python.canvas import Canvas

        canvas = Canvas.new(10, 20)
        canvas.set_pixel(5, 5, red)
        assert canvas.get_pixel(5, 5) == red

    @pytest.mark.parametrize("x, y", [(0, 0), (19, 0), (0, 9), (19, 9), (7, 3)])
    def test_round_trip(self, x, y):
        """set then get returns the colour anywhere in bounds."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import new_colour

        canvas = Canvas(10, 20)
        colour = new_colour(0.1, 0.25, 0.9)
        canvas.set_pixel(x, y, colour)
        assert canvas.get_pixel(x, y) == colour

    def test_row_major_layout(self, red):
        """Pixel (x, y) lives at index y * width + x."""
        from src.python.canvas import Canvas

        canvas = Canvas(3, 4)
        canvas.set_pixel(1, 2, red)

        pixels = canvas.pixels()
        assert pixels[2 * 4 + 1][0] == 1.0
        assert np.count_nonzero(pixels) == 1

    def test_get_pixel_returns_colour(self, red):
        """Stored colours read back as Colour instances."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import Colour

        canvas = Canvas(2, 2)
        canvas.set_pixel(1, 1, red)
        assert isinstance(canvas.get_pixel(1, 1), Colour)
        assert isinstance(canvas.get_pixel(0, 0), Colour)

    def test_set_pixel_chains(self, red):
        """set_pixel returns the canvas."""
        from src.python.canvas import Canvas

        canvas = Canvas(2, 2)
        assert canvas.set_pixel(0, 0, red).set_pixel(1, 1, red) is canvas

    def test_overwrite(self, red):
        """A second write replaces the first."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import new_colour

        canvas = Canvas(2, 2)
        green = new_colour(0.0, 1.0, 0.0)
        canvas.set_pixel(0, 1, red)
        canvas.set_pixel(0, 1, green)
        assert canvas.get_pixel(0, 1) == green

    @pytest.mark.parametrize(
        "x, y",
        [(20, 0), (0, 10), (-1, 0), (0, -1), (25, 25)],
    )
    def test_set_out_of_bounds_raises(self, red, x, y):
        """Writes outside the canvas raise and leave it unchanged."""
        from src.python.canvas import Canvas, PixelOutOfBoundsError

        canvas = Canvas(10, 20)
        with pytest.raises(PixelOutOfBoundsError) as exc_info:
            canvas.set_pixel(x, y, red)

        assert f"x:{x} y:{y}" in str(exc_info.value)
        assert (exc_info.value.x, exc_info.value.y) == (x, y)
        assert (exc_info.value.width, exc_info.value.height) == (20, 10)
        assert np.all(canvas.pixels() == 0.0)

    def test_out_of_bounds_error_is_index_error(self, red):
        """Callers can catch the write error as IndexError."""
        from src.python.canvas import Canvas

        with pytest.raises(IndexError):
            Canvas(1, 1).set_pixel(1, 0, red)

    @pytest.mark.parametrize("x, y", [(20, 0), (0, 10), (-1, 0), (0, -1)])
    def test_get_out_of_bounds_returns_none(self, x, y):
        """Reads outside the canvas return None."""
        from src.python.canvas import Canvas

        assert Canvas(10, 20).get_pixel(x, y) is None

    @pytest.mark.parametrize("x, y", [(1.0, 0), (0, 2.5), ("1", 0), (None, 0)])
    def test_set_non_integer_coordinates_raise(self, red, x, y):
        """Non-integer coordinates are rejected before any write."""
        from src.python.canvas import Canvas

        canvas = Canvas(3, 3)
        with pytest.raises(TypeError, match="must be integers"):
            canvas.set_pixel(x, y, red)
        assert np.all(canvas.pixels() == 0.0)

    def test_get_non_integer_coordinates_raise(self):
        """Reads with float coordinates raise rather than returning None."""
        from src.python.canvas import Canvas

        with pytest.raises(TypeError, match="must be integers"):
            Canvas(3, 3).get_pixel(1.0, 1)

    def test_numpy_integer_coordinates(self, red):
        """NumPy integers index the canvas like Python ints."""
        from src.python.canvas import Canvas

        canvas = Canvas(3, 3)
        canvas.set_pixel(np.int64(2), np.int32(1), red)
        assert canvas.get_pixel(2, 1) == red
        assert canvas.get_pixel(np.int64(2), np.int64(1)) == red

    def test_stored_pixel_is_a_copy(self):
        """Reading a pixel does not expose the buffer."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import new_colour

        canvas = Canvas(1, 1)
        pixel = canvas.get_pixel(0, 0)
        data = pixel.to_numpy()
        data[:] = 1.0
        assert canvas.get_pixel(0, 0) == new_colour(0.0, 0.0, 0.0)


class TestCanvasArrays:
    """Tests for NumPy access."""

    def test_pixels_view_is_read_only(self):
        """pixels() cannot be written through."""
        from src.python.canvas import Canvas

        pixels = Canvas(2, 2).pixels()
        assert pixels.shape == (4, 4)
        with pytest.raises(ValueError):
            pixels[0, 0] = 1.0

    def test_to_numpy_shape_and_values(self, red):
        """to_numpy returns (height, width, 3) RGB."""
        from src.python.canvas import Canvas

        canvas = Canvas(3, 5)
        canvas.set_pixel(4, 2, red)
        image = canvas.to_numpy()

        assert image.shape == (3, 5, 3)
        assert image.dtype == np.float32
        np.testing.assert_array_equal(image[2, 4], [1.0, 0.0, 0.0])
        assert image.sum() == 1.0


class TestTaichiInterop:
    """Tests for copying canvases to and from Taichi fields."""

    def test_to_field(self, red):
        """The field holds the same pixels, indexed [y, x]."""
        from src.python.canvas import Canvas
        from src.python.core.tuples import Tuple

        canvas = Canvas(3, 4)
        canvas.set_pixel(3, 1, red)
        field = canvas.to_field()

        assert field.shape == (3, 4)
        assert Tuple.from_taichi(field[1, 3]) == red
        assert Tuple.from_taichi(field[0, 0]) == Tuple(0.0, 0.0, 0.0, 0.0)

    def test_kernel_draws_into_canvas(self):
        """Pixels written by a kernel come back through load_field."""
        from src.python.canvas import Canvas
        from src.python.core.kernels import ti_vector
        from src.python.core.tuples import new_colour

        canvas = Canvas(3, 4)
        field = canvas.to_field()

        @ti.kernel
        def paint(f: ti.template()):
            for y, x in f:
                f[y, x] = ti_vector(x / 4.0, y / 3.0, 0.5)

        paint(field)
        canvas.load_field(field)

        assert canvas.get_pixel(2, 1) == new_colour(0.5, 1.0 / 3.0, 0.5)
        assert canvas.get_pixel(0, 0) == new_colour(0.0, 0.0, 0.5)

    def test_load_field_shape_mismatch(self):
        """Fields of a different size are rejected."""
        from src.python.canvas import Canvas

        field = Canvas(2, 2).to_field()
        with pytest.raises(ValueError):
            Canvas(3, 3).load_field(field)
