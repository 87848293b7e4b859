from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from pixelops.config import CHANNEL_CEILING, HUE_LIMIT
from pixelops.grid import Pixel


@dataclass(frozen=True)
class HSL:
    """Hue in degrees ``[0, 360)``, saturation and lightness in ``[0, 1]``."""

    hue: float
    saturation: float
    lightness: float


def rgb_to_hsl_array(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    if not isinstance(rgb, np.ndarray):
        raise TypeError("Input must be a NumPy array")

    if rgb.ndim < 1 or rgb.shape[-1] != 3:
        raise ValueError("Input must be an RGB array with 3 channels")

    if rgb.dtype != np.uint8:
        raise ValueError("Input image must have dtype uint8")

    norm = rgb.astype(np.float64) / CHANNEL_CEILING
    r, g, b = norm[..., 0], norm[..., 1], norm[..., 2]

    c_max = norm.max(axis=-1)
    c_min = norm.min(axis=-1)
    delta = c_max - c_min
    chromatic = delta > 0

    lightness = (c_max + c_min) / 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(
            chromatic, delta / (1.0 - np.abs(2.0 * lightness - 1.0)), 0.0
        )

        # Red wins ties, then green, then blue
        hue_sector = np.select(
            [c_max == r, c_max == g],
            [((g - b) / delta) % 6.0, (b - r) / delta + 2.0],
            default=(r - g) / delta + 4.0,
        )
    hue = np.where(chromatic, 60.0 * hue_sector, 0.0)
    hue = np.where(hue >= HUE_LIMIT, hue - HUE_LIMIT, hue)

    return hue, np.clip(saturation, 0.0, 1.0), lightness


def hsl_to_rgb_array(
    hue: np.ndarray, saturation: np.ndarray, lightness: np.ndarray
) -> np.ndarray:
    hue, saturation, lightness = np.broadcast_arrays(
        np.asarray(hue, dtype=np.float64),
        np.asarray(saturation, dtype=np.float64),
        np.asarray(lightness, dtype=np.float64),
    )

    chroma = (1.0 - np.abs(2.0 * lightness - 1.0)) * saturation
    h_prime = (hue % HUE_LIMIT) / 60.0
    x = chroma * (1.0 - np.abs(h_prime % 2.0 - 1.0))
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime).astype(np.int64)
    sector = np.clip(sector, 0, 5)

    # (r1, g1, b1) for each of the six hue sectors
    table = np.stack(
        [
            np.stack([chroma, x, zero], axis=-1),
            np.stack([x, chroma, zero], axis=-1),
            np.stack([zero, chroma, x], axis=-1),
            np.stack([zero, x, chroma], axis=-1),
            np.stack([x, zero, chroma], axis=-1),
            np.stack([chroma, zero, x], axis=-1),
        ],
        axis=0,
    )
    rgb1 = np.take_along_axis(table, sector[np.newaxis, ..., np.newaxis], axis=0)[0]

    m = lightness - chroma / 2.0
    rgb = np.floor((rgb1 + m[..., np.newaxis]) * CHANNEL_CEILING + 0.5)

    return np.clip(rgb, 0, CHANNEL_CEILING).astype(np.uint8)


def rgb_to_hsl(pixel: Pixel) -> HSL:
    rgb = np.array([pixel.as_tuple()], dtype=np.uint8)
    hue, saturation, lightness = rgb_to_hsl_array(rgb)
    return HSL(float(hue[0]), float(saturation[0]), float(lightness[0]))


def hsl_to_rgb(hsl: HSL) -> Pixel:
    r, g, b = hsl_to_rgb_array(
        np.array([hsl.hue]), np.array([hsl.saturation]), np.array([hsl.lightness])
    )[0]
    return Pixel(int(r), int(g), int(b))
