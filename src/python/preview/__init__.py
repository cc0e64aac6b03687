"""Preview module for output and visualization.

Components:
    ppm: Plain-text PPM (P3) encoder
    export: PPM/PNG file export
    display: Matplotlib-based canvas preview

Example:
    >>> from src.python.preview import canvas_to_ppm, save_png
    >>> from src.python.canvas import Canvas
    >>>
    >>> canvas = Canvas(2, 2)
    >>> text = canvas_to_ppm(canvas)
    >>> save_png(canvas, "output.png")
"""

from src.python.preview.display import (
    apply_gamma,
    canvas_to_display,
    create_canvas_figure,
    show_canvas,
)
from src.python.preview.export import (
    canvas_to_uint8,
    save_png,
    save_ppm,
)
from src.python.preview.ppm import (
    MAX_COLOUR_VALUE,
    MAX_LINE_LENGTH,
    PIXELS_PER_LINE,
    PpmEncodingError,
    canvas_to_ppm,
    clamp_channels,
)

__all__ = [
    # PPM encoding
    "canvas_to_ppm",
    "clamp_channels",
    "PpmEncodingError",
    "MAX_COLOUR_VALUE",
    "MAX_LINE_LENGTH",
    "PIXELS_PER_LINE",
    # Export functions
    "save_ppm",
    "save_png",
    "canvas_to_uint8",
    # Display functions
    "show_canvas",
    "create_canvas_figure",
    "canvas_to_display",
    "apply_gamma",
]
