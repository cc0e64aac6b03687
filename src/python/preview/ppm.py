"""Plain-text PPM (P3) encoding of a canvas.

Output layout:

    P3
    <width> <height>
    255
    <r> <b> <g> <r> <b> <g> ...   (5 pixels per line)

Pixels are written in row-major storage order and grouped five to a line,
regardless of where display rows end, which keeps every line within the
70 character limit of the format. Channels are written in R, B, G order;
existing fixtures depend on that order.

Each channel is scaled by MAX_COLOUR_VALUE, clamped to [0, MAX_COLOUR_VALUE]
and truncated. A NaN channel clamps to MAX_COLOUR_VALUE.

Example:
    >>> from src.python.canvas import Canvas
    >>> from src.python.core.tuples import new_colour
    >>> canvas = Canvas(2, 2)
    >>> _ = canvas.set_pixel(0, 0, new_colour(1.0, 0.0, 0.0))
    >>> canvas_to_ppm(canvas)
    'P3\\n2 2\\n255\\n255 0 0 0 0 0 0 0 0 0 0 0\\n'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from src.python.canvas import Canvas

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
MAX_COLOUR_VALUE = 255
PIXELS_PER_LINE = 5
MAX_LINE_LENGTH = 70

# Column order of the emitted channels: red, blue, green
CHANNEL_ORDER = (0, 2, 1)


class PpmEncodingError(RuntimeError):
    """Raised when the PPM text cannot be built."""


def clamp_channels(
    values: npt.NDArray[np.float32],
    max_colour: int = MAX_COLOUR_VALUE,
) -> npt.NDArray[np.int64]:
    """Scale float channels to integer colour values.

    Args:
        values: Channel values, nominally in [0, 1].
        max_colour: The maximum colour value of the output.

    Returns:
        Integers in [0, max_colour]: value * max_colour, clamped, truncated.
    """
    limit = np.float32(max_colour)
    scaled = values.astype(np.float32) * limit
    # fmin/fmax drop NaN in favour of the bound
    clamped = np.fmax(np.fmin(scaled, limit), np.float32(0.0))
    return clamped.astype(np.int64)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as PPM P3 text.

    Args:
        canvas: The canvas to encode.

    Returns:
        The complete document. It always ends with a newline.

    Raises:
        PpmEncodingError: If the text could not be built, or a pixel line
            would exceed MAX_LINE_LENGTH.
    """
    header = f"{PPM_MAGIC}\n{canvas.width} {canvas.height}\n{MAX_COLOUR_VALUE}\n"
    try:
        channels = clamp_channels(canvas.pixels()[:, list(CHANNEL_ORDER)])
        lines = [header]
        for start in range(0, len(channels), PIXELS_PER_LINE):
            batch = channels[start : start + PIXELS_PER_LINE]
            line = " ".join(str(value) for value in batch.ravel())
            if len(line) > MAX_LINE_LENGTH:
                raise PpmEncodingError(
                    f"PPM line of {len(line)} characters exceeds {MAX_LINE_LENGTH}"
                )
            lines.append(line)
            lines.append("\n")
        ppm = "".join(lines)
    except (ValueError, MemoryError) as e:
        raise PpmEncodingError(f"Failed to encode {canvas!r} as PPM: {e}") from e

    logger.debug("Encoded %r as %d bytes of PPM", canvas, len(ppm))
    return ppm
