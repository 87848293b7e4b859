# pixelops/tone.py

from __future__ import annotations

import numpy as np

from pixelops.config import (
    CHANNEL_CEILING,
    CHANNEL_MIN,
    DEFAULT_WORKERS,
    LUMINANCE_WEIGHTS,
    SEPIA_MATRIX,
)
from pixelops.errors import OutOfRangeParameter
from pixelops.grid import PixelGrid
from pixelops.log import get_logger
from pixelops.parallel import run_row_bands
from pixelops.stats import median

logger = get_logger(__name__)


def grayscale(grid: PixelGrid, *, workers: int = DEFAULT_WORKERS) -> PixelGrid:
    """Replace every channel with the integer mean ``(r + g + b) // 3``."""

    logger.debug("grayscale %dx%d", grid.width, grid.height)
    pixels = grid.pixels

    def _band(lo: int, hi: int) -> None:
        rows = pixels[lo:hi].astype(np.uint16)
        avg = rows.sum(axis=2) // 3
        pixels[lo:hi] = avg.astype(np.uint8)[:, :, np.newaxis]

    run_row_bands(grid.height, _band, workers)
    return grid


def invert(
    grid: PixelGrid,
    ceiling: int = CHANNEL_CEILING,
    *,
    workers: int = DEFAULT_WORKERS,
) -> PixelGrid:
    """Replace every channel with ``ceiling - channel``, clamped to ``[0, 255]``."""

    if isinstance(ceiling, bool) or not isinstance(ceiling, (int, np.integer)):
        raise OutOfRangeParameter(f"ceiling must be an integer, got {ceiling!r}")
    if not CHANNEL_MIN <= ceiling <= CHANNEL_CEILING:
        raise OutOfRangeParameter(
            f"ceiling must be in [{CHANNEL_MIN}, {CHANNEL_CEILING}], got {ceiling}"
        )

    logger.debug("invert %dx%d ceiling=%d", grid.width, grid.height, ceiling)
    pixels = grid.pixels

    def _band(lo: int, hi: int) -> None:
        rows = int(ceiling) - pixels[lo:hi].astype(np.int16)
        pixels[lo:hi] = np.clip(rows, CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)

    run_row_bands(grid.height, _band, workers)
    return grid


def sepia(grid: PixelGrid, *, workers: int = DEFAULT_WORKERS) -> PixelGrid:
    """Apply the fixed sepia matrix, reading only the original channels.

    Results are truncated toward zero and clamped to ``[0, 255]``.
    """

    logger.debug("sepia %dx%d", grid.width, grid.height)
    pixels = grid.pixels
    matrix = np.array(SEPIA_MATRIX, dtype=np.float64)

    def _band(lo: int, hi: int) -> None:
        rows = pixels[lo:hi].astype(np.float64)
        r, g, b = rows[:, :, 0], rows[:, :, 1], rows[:, :, 2]
        out = np.stack(
            [r * row[0] + g * row[1] + b * row[2] for row in matrix],
            axis=-1,
        )
        pixels[lo:hi] = np.clip(np.trunc(out), CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)

    run_row_bands(grid.height, _band, workers)
    return grid


def luminance(grid: PixelGrid) -> np.ndarray:
    """Per-pixel ``sqrt(.299 r^2 + .587 g^2 + .114 b^2)`` as a float64 ``(H, W)`` array."""

    rgb = grid.pixels.astype(np.float64)
    w_r, w_g, w_b = LUMINANCE_WEIGHTS
    r, g, b = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    return np.sqrt(w_r * r * r + w_g * g * g + w_b * b * b)


def bw_stylize(grid: PixelGrid, *, workers: int = DEFAULT_WORKERS) -> PixelGrid:
    """Two-tone stylize against the median luminance of the original image.

    Pixels whose luminance is at or above the median become white, the rest
    become black. The median is the upper-middle sample for an even count.
    """

    if grid.is_empty():
        return grid

    samples = luminance(grid)
    threshold = median(samples)
    logger.debug(
        "bw_stylize %dx%d median luminance=%.4f", grid.width, grid.height, threshold
    )

    pixels = grid.pixels

    def _band(lo: int, hi: int) -> None:
        white = samples[lo:hi] >= threshold
        pixels[lo:hi] = np.where(white, CHANNEL_CEILING, CHANNEL_MIN).astype(np.uint8)[
            :, :, np.newaxis
        ]

    run_row_bands(grid.height, _band, workers)
    return grid
