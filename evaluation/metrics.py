# evaluation/metrics.py

from typing import Union

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

from pixelops.errors import DimensionMismatch
from pixelops.grid import PixelGrid

Image = Union[PixelGrid, np.ndarray]


def _as_rgb_array(image: Image) -> np.ndarray:
    if isinstance(image, PixelGrid):
        return image.pixels

    if not isinstance(image, np.ndarray):
        raise TypeError("Images must be PixelGrid or NumPy arrays")

    if image.dtype != np.uint8:
        raise ValueError("Images must have dtype uint8")

    return image


def _pair(reference: Image, test: Image):
    ref = _as_rgb_array(reference)
    out = _as_rgb_array(test)

    if ref.shape != out.shape:
        raise DimensionMismatch("Images must have the same shape")

    return ref, out


def compute_psnr(
    reference: Image,
    test: Image
) -> float:
    ref, out = _pair(reference, test)

    if np.array_equal(ref, out):
        return float("inf")

    return float(peak_signal_noise_ratio(
        ref,
        out,
        data_range=255
    ))


def compute_ssim(
    reference: Image,
    test: Image
) -> float:
    ref, out = _pair(reference, test)

    return float(structural_similarity(
        ref,
        out,
        channel_axis=2,
        data_range=255
    ))
