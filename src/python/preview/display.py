"""Matplotlib-based preview display for canvases.

Features:
    - Gamma correction (sRGB 2.2) for display
    - Figure construction separate from showing, so figures can be
      inspected or saved without opening a window

Example:
    >>> from src.python.preview.display import show_canvas
    >>> from src.python.canvas import Canvas
    >>>
    >>> canvas = Canvas(100, 200)
    >>> show_canvas(canvas, title="Projectile")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from src.python.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Apply gamma correction for display.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value (default 2.2 for sRGB).

    Returns:
        Gamma corrected image clamped to [0, 1].
    """
    # Clamp first so negative values don't turn into NaN
    image = np.clip(np.nan_to_num(image, nan=1.0), 0.0, 1.0)

    if gamma == 1.0:
        return image.astype(np.float32)

    result = np.power(image, 1.0 / gamma)

    return result.astype(np.float32)


def canvas_to_display(
    canvas: Canvas,
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Get a canvas as a displayable (H, W, 3) image in [0, 1].

    Args:
        canvas: The canvas to convert.
        gamma: Gamma correction value. Default 1.0 shows stored values as-is.

    Returns:
        Float32 image ready for imshow.
    """
    return apply_gamma(canvas.to_numpy(), gamma)


def create_canvas_figure(
    canvas: Canvas,
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Any, Any]:
    """Build a Matplotlib figure showing a canvas.

    Args:
        canvas: The canvas to show.
        gamma: Gamma correction value.
        title: Custom title (default shows the canvas size).
        figsize: Figure size in inches (width, height).

    Returns:
        Tuple of (figure, axes).
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # nearest keeps single pixels crisp on small canvases
    ax.imshow(canvas_to_display(canvas, gamma), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = f"Canvas {canvas.width}x{canvas.height}"
    ax.set_title(title)

    fig.tight_layout()
    return fig, ax


def show_canvas(
    canvas: Canvas,
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib window.

    Args:
        canvas: The canvas to display.
        gamma: Gamma correction value.
        title: Custom title (default shows the canvas size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    create_canvas_figure(canvas, gamma=gamma, title=title, figsize=figsize)
    plt.show(block=block)
