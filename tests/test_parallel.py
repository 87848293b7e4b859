"""Row-band execution must match the sequential result exactly."""

import pytest

from pixelops.adjust import set_hue, set_lightness, set_saturation
from pixelops.fusion import composite_filter
from pixelops.grid import Pixel, PixelGrid
from pixelops.parallel import row_bands
from pixelops.tone import bw_stylize, grayscale, invert, sepia


def test_row_bands_cover_rows_once():
    assert row_bands(10, 3) == [(0, 4), (4, 8), (8, 10)]
    assert row_bands(2, 8) == [(0, 1), (1, 2)]
    assert row_bands(5, 1) == [(0, 5)]
    assert row_bands(0, 4) == []


def test_row_bands_rejects_non_positive_workers():
    with pytest.raises(ValueError):
        row_bands(10, 0)


@pytest.mark.parametrize(
    "transform",
    [
        grayscale,
        invert,
        sepia,
        bw_stylize,
        lambda grid, **kw: set_hue(grid, 200.0, **kw),
        lambda grid, **kw: set_saturation(grid, 0.4, **kw),
        lambda grid, **kw: set_lightness(grid, 0.6, **kw),
        lambda grid, **kw: composite_filter(
            grid,
            PixelGrid(13, 9, fill=Pixel(30, 60, 90)),
            PixelGrid(13, 9, fill=Pixel(250, 240, 230)),
            **kw,
        ),
    ],
)
def test_parallel_matches_sequential(transform, random_grid):
    sequential = transform(random_grid.copy(), workers=1)
    parallel = transform(random_grid.copy(), workers=4)
    assert parallel == sequential


def test_invalid_workers_leave_grid_untouched(random_grid):
    original = random_grid.copy()
    with pytest.raises(ValueError):
        grayscale(random_grid, workers=0)
    assert random_grid == original
