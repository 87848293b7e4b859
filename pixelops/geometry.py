# pixelops/geometry.py

import numpy as np

from pixelops.grid import PixelGrid
from pixelops.log import get_logger

logger = get_logger(__name__)


def rotate(grid: PixelGrid) -> PixelGrid:
    """Return a new grid rotated a quarter turn.

    The result is ``height`` wide and ``width`` tall; the input pixel at
    ``(x, y)`` lands at ``(y, width - x - 1)``. The input is not modified.
    """

    logger.debug("rotate %dx%d", grid.width, grid.height)

    # rows of the output are the input's columns, last column first
    rotated = np.rot90(grid.pixels, k=1, axes=(0, 1))

    return PixelGrid.from_array(np.ascontiguousarray(rotated), copy=True)


def rotate_times(grid: PixelGrid, turns: int) -> PixelGrid:
    """Apply :func:`rotate` ``turns`` times (taken modulo 4). Always returns a new grid."""

    if isinstance(turns, bool) or not isinstance(turns, (int, np.integer)):
        raise TypeError("turns must be an integer")

    result = grid.copy()
    for _ in range(int(turns) % 4):
        result = rotate(result)
    return result
