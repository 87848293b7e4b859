"""
In-memory RGB image transformations.

This package contains the pixel transformation modules:
- grid: Pixel value type and the PixelGrid buffer
- colorspace: RGB <-> HSL conversions
- stats: median / selection over luminance samples
- tone: grayscale, invert, sepia, black/white stylize
- adjust: hue, saturation and lightness setters
- geometry: quarter-turn rotation
- fusion: warm + vignette + grain composite filter
- imageio: decode/encode collaborator (OpenCV), not used by the transforms
"""

from pixelops.adjust import set_hue, set_lightness, set_saturation
from pixelops.colorspace import HSL, hsl_to_rgb, rgb_to_hsl
from pixelops.errors import (
    DimensionMismatch,
    EmptyInput,
    IndexOutOfBounds,
    OutOfRangeParameter,
    PixelopsError,
)
from pixelops.fusion import FilterParams, blend, composite_filter, warm
from pixelops.geometry import rotate, rotate_times
from pixelops.grid import Pixel, PixelGrid
from pixelops.stats import median, select
from pixelops.tone import bw_stylize, grayscale, invert, luminance, sepia

__all__ = [
    "HSL",
    "DimensionMismatch",
    "EmptyInput",
    "FilterParams",
    "IndexOutOfBounds",
    "OutOfRangeParameter",
    "Pixel",
    "PixelGrid",
    "PixelopsError",
    "blend",
    "bw_stylize",
    "composite_filter",
    "grayscale",
    "hsl_to_rgb",
    "invert",
    "luminance",
    "median",
    "rgb_to_hsl",
    "rotate",
    "rotate_times",
    "select",
    "sepia",
    "set_hue",
    "set_lightness",
    "set_saturation",
    "warm",
]
