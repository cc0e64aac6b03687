"""Read-only 4x4 matrix container.

Matrix4 only stores a grid of float32 values and exposes indexed reads.
Transformations, multiplication and inversion are not part of this module.

Example:
    >>> from src.python.core.matrix import Matrix4
    >>> m = Matrix4([[1, 2, 3, 4], [5.5, 6.5, 7.5, 8.5],
    ...              [9, 10, 11, 12], [13.5, 14.5, 15.5, 16.5]])
    >>> m.get(1, 2)
    7.5
"""

from collections.abc import Sequence

import numpy as np

MATRIX_SIZE = 4


class Matrix4:
    """An immutable 4x4 grid of float32 values, addressed as (row, col)."""

    __slots__ = ("_grid",)

    def __init__(self, grid: Sequence[Sequence[float]]) -> None:
        """Build the matrix from a literal 4x4 grid.

        Args:
            grid: Four rows of four numbers each.

        Raises:
            ValueError: If the grid is not 4x4.
        """
        data = np.array(grid, dtype=np.float32)
        if data.shape != (MATRIX_SIZE, MATRIX_SIZE):
            raise ValueError(
                f"Matrix4 needs a {MATRIX_SIZE}x{MATRIX_SIZE} grid, got shape {data.shape}"
            )
        data.flags.writeable = False
        self._grid = data

    def get(self, row: int, col: int) -> float:
        """Read the value at (row, col)."""
        return float(self._grid[row, col])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __repr__(self) -> str:
        return f"Matrix4({self._grid.tolist()})"
