# pixelops/fusion.py

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from pixelops.config import (
    CHANNEL_CEILING,
    CHANNEL_MIN,
    DEFAULT_WORKERS,
    GRAIN_WEIGHT,
    HALO_WEIGHT,
    WARM_BLUE_DIVISOR,
    WARM_RED_GAIN,
)
from pixelops.errors import DimensionMismatch, OutOfRangeParameter
from pixelops.grid import PixelGrid
from pixelops.log import get_logger
from pixelops.parallel import run_row_bands

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilterParams:
    """Weights of the warm + vignette + grain composite filter."""

    red_gain: float = WARM_RED_GAIN
    blue_divisor: float = WARM_BLUE_DIVISOR
    halo_weight: float = HALO_WEIGHT
    grain_weight: float = GRAIN_WEIGHT

    def validate(self) -> "FilterParams":
        _check_positive("red_gain", self.red_gain)
        _check_positive("blue_divisor", self.blue_divisor)
        _check_weight("halo_weight", self.halo_weight)
        _check_weight("grain_weight", self.grain_weight)
        return self


def _check_number(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise OutOfRangeParameter(f"{name} must be a number, got {value!r}")


def _check_positive(name: str, value: float) -> None:
    _check_number(name, value)
    if not (math.isfinite(value) and value > 0.0):
        raise OutOfRangeParameter(f"{name} must be a positive number, got {value!r}")


def _check_weight(name: str, value: float) -> None:
    _check_number(name, value)
    if not (0.0 <= value <= 1.0):
        raise OutOfRangeParameter(f"{name} must be in [0, 1], got {value!r}")


def _check_overlay(grid: PixelGrid, overlay: PixelGrid, name: str) -> None:
    if not isinstance(overlay, PixelGrid):
        raise TypeError(f"{name} must be a PixelGrid")

    if overlay.shape != grid.shape:
        raise DimensionMismatch(
            f"{name} is {overlay.width}x{overlay.height} but the image is "
            f"{grid.width}x{grid.height}"
        )


def warm(
    grid: PixelGrid,
    red_gain: float = WARM_RED_GAIN,
    blue_divisor: float = WARM_BLUE_DIVISOR,
    *,
    workers: int = DEFAULT_WORKERS,
) -> PixelGrid:
    """Boost red by ``red_gain`` and divide blue by ``blue_divisor``; green is untouched."""

    _check_positive("red_gain", red_gain)
    _check_positive("blue_divisor", blue_divisor)
    _warm(grid, red_gain, blue_divisor, workers)
    return grid


def _warm(grid: PixelGrid, red_gain: float, blue_divisor: float, workers: int) -> None:
    pixels = grid.pixels

    def _band(lo: int, hi: int) -> None:
        red = pixels[lo:hi, :, 0].astype(np.float64) * red_gain
        blue = pixels[lo:hi, :, 2].astype(np.float64) / blue_divisor
        pixels[lo:hi, :, 0] = np.clip(np.trunc(red), CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)
        pixels[lo:hi, :, 2] = np.clip(np.trunc(blue), CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)

    run_row_bands(grid.height, _band, workers)


def blend(
    grid: PixelGrid,
    overlay: PixelGrid,
    weight: float,
    *,
    workers: int = DEFAULT_WORKERS,
) -> PixelGrid:
    """Mix ``weight`` of ``grid`` with ``1 - weight`` of ``overlay``, in place."""

    _check_weight("weight", weight)
    _check_overlay(grid, overlay, "overlay")
    _blend(grid, overlay, weight, workers)
    return grid


def _blend(grid: PixelGrid, overlay: PixelGrid, weight: float, workers: int) -> None:
    pixels = grid.pixels
    texture = overlay.pixels

    def _band(lo: int, hi: int) -> None:
        # Weighted fusion
        mixed = weight * pixels[lo:hi].astype(np.float64) + (1.0 - weight) * texture[
            lo:hi
        ].astype(np.float64)

        # Clip and convert back
        pixels[lo:hi] = np.clip(mixed, CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)

    run_row_bands(grid.height, _band, workers)


def composite_filter(
    grid: PixelGrid,
    halo: PixelGrid,
    grain: PixelGrid,
    params: FilterParams = FilterParams(),
    *,
    workers: int = DEFAULT_WORKERS,
) -> PixelGrid:
    """Warm the image, then blend in the halo (vignette) and grain textures.

    Both overlays must match the image geometry. They are only read, so the
    same decoded textures can be reused across calls.
    """

    params.validate()
    _check_overlay(grid, halo, "halo")
    _check_overlay(grid, grain, "grain")
    if workers < 1:
        raise ValueError("workers must be >= 1")

    logger.debug("composite_filter %dx%d %s", grid.width, grid.height, params)

    # stage 1 writes the working grid, so a texture sharing its buffer is read from a snapshot
    if np.shares_memory(halo.pixels, grid.pixels):
        halo = halo.copy()
    if np.shares_memory(grain.pixels, grid.pixels):
        grain = grain.copy()

    _warm(grid, params.red_gain, params.blue_divisor, workers)
    _blend(grid, halo, params.halo_weight, workers)
    _blend(grid, grain, params.grain_weight, workers)
    return grid
