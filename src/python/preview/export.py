"""Image export utilities for canvases.

Supported formats:
    - PPM (plain-text P3, see src.python.preview.ppm)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from src.python.preview.export import save_ppm, save_png
    >>> from src.python.canvas import Canvas
    >>>
    >>> canvas = Canvas(100, 200)
    >>> save_ppm(canvas, "output.ppm")
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.python.preview.ppm import MAX_COLOUR_VALUE, canvas_to_ppm, clamp_channels

if TYPE_CHECKING:
    from src.python.canvas import Canvas

logger = logging.getLogger(__name__)


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Save the canvas as a plain-text PPM file.

    The document is fully encoded before the file is opened, so a failed
    encoding leaves no partial file behind.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path written to.

    Raises:
        PpmEncodingError: If the canvas could not be encoded.
    """
    ppm = canvas_to_ppm(canvas)
    path = Path(filepath)
    path.write_text(ppm, encoding="ascii")
    logger.debug("Saved %r to %s", canvas, path)
    return path


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit RGB array.

    Uses the same scale, clamp and truncate rule as the PPM encoder, with
    channels in conventional R, G, B order.

    Args:
        canvas: The canvas to convert.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    return clamp_channels(canvas.to_numpy(), MAX_COLOUR_VALUE).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Save the canvas as an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path written to.
    """
    path = Path(filepath)
    image_uint8 = canvas_to_uint8(canvas)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(path)
    logger.debug("Saved %r to %s", canvas, path)
    return path
