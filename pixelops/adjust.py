import math

import numpy as np

from pixelops.colorspace import hsl_to_rgb_array, rgb_to_hsl_array
from pixelops.config import DEFAULT_WORKERS, HUE_LIMIT
from pixelops.errors import OutOfRangeParameter
from pixelops.grid import PixelGrid
from pixelops.log import get_logger
from pixelops.parallel import run_row_bands

logger = get_logger(__name__)

_HUE, _SATURATION, _LIGHTNESS = 0, 1, 2


def _check_parameter(name: str, value: float, upper: float, upper_inclusive: bool) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise OutOfRangeParameter(f"{name} must be a number, got {value!r}")

    value = float(value)
    if math.isnan(value):
        raise OutOfRangeParameter(f"{name} must not be NaN")

    in_range = 0.0 <= value <= upper if upper_inclusive else 0.0 <= value < upper
    if not in_range:
        bracket = "]" if upper_inclusive else ")"
        raise OutOfRangeParameter(f"{name} must be in [0, {upper:g}{bracket}, got {value:g}")
    return value


def _set_component(grid: PixelGrid, component: int, value: float, workers: int) -> PixelGrid:
    pixels = grid.pixels

    def _band(lo: int, hi: int) -> None:
        hsl = list(rgb_to_hsl_array(pixels[lo:hi]))
        hsl[component] = np.full_like(hsl[component], value)
        pixels[lo:hi] = hsl_to_rgb_array(*hsl)

    run_row_bands(grid.height, _band, workers)
    return grid


def set_hue(grid: PixelGrid, hue: float, *, workers: int = DEFAULT_WORKERS) -> PixelGrid:
    """Overwrite the hue of every pixel. ``hue`` must lie in ``[0, 360)``."""

    hue = _check_parameter("hue", hue, HUE_LIMIT, upper_inclusive=False)
    logger.debug("set_hue %dx%d hue=%g", grid.width, grid.height, hue)
    return _set_component(grid, _HUE, hue, workers)


def set_saturation(
    grid: PixelGrid, saturation: float, *, workers: int = DEFAULT_WORKERS
) -> PixelGrid:
    """Overwrite the saturation of every pixel. ``saturation`` must lie in ``[0, 1]``."""

    saturation = _check_parameter("saturation", saturation, 1.0, upper_inclusive=True)
    logger.debug("set_saturation %dx%d saturation=%g", grid.width, grid.height, saturation)
    return _set_component(grid, _SATURATION, saturation, workers)


def set_lightness(
    grid: PixelGrid, lightness: float, *, workers: int = DEFAULT_WORKERS
) -> PixelGrid:
    """Overwrite the lightness of every pixel. ``lightness`` must lie in ``[0, 1]``."""

    lightness = _check_parameter("lightness", lightness, 1.0, upper_inclusive=True)
    logger.debug("set_lightness %dx%d lightness=%g", grid.width, grid.height, lightness)
    return _set_component(grid, _LIGHTNESS, lightness, workers)
