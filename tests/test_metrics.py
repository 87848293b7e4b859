"""Tests for the PSNR / SSIM helpers."""

import math

import numpy as np
import pytest

from evaluation.metrics import compute_psnr, compute_ssim
from pixelops.errors import DimensionMismatch
from pixelops.grid import PixelGrid
from pixelops.tone import invert


@pytest.fixture
def textured_grid(rng):
    return PixelGrid.from_array(rng.integers(0, 256, size=(16, 16, 3), dtype=np.uint8))


def test_identical_images(textured_grid):
    assert math.isinf(compute_psnr(textured_grid, textured_grid.copy()))
    assert compute_ssim(textured_grid, textured_grid.copy()) == pytest.approx(1.0)


def test_different_images_score_lower(textured_grid):
    inverted = invert(textured_grid.copy())

    psnr = compute_psnr(textured_grid, inverted)
    assert math.isfinite(psnr)
    assert compute_ssim(textured_grid, inverted) < 1.0


def test_accepts_arrays(textured_grid):
    assert math.isinf(compute_psnr(textured_grid.to_array(), textured_grid))


def test_shape_mismatch():
    with pytest.raises(DimensionMismatch):
        compute_psnr(PixelGrid(16, 16), PixelGrid(16, 17))


def test_rejects_float_arrays():
    with pytest.raises(ValueError):
        compute_ssim(np.zeros((16, 16, 3), dtype=np.float32), PixelGrid(16, 16))
