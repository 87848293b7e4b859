"""Tests for the Pixel value type and the PixelGrid buffer."""

import numpy as np
import pytest

from pixelops.errors import IndexOutOfBounds
from pixelops.grid import Pixel, PixelGrid


def test_pixel_channels_are_clamped_integers():
    pixel = Pixel(300, -5, 12.7)
    assert pixel.as_tuple() == (255, 0, 12)


def test_pixel_replace_returns_new_value():
    pixel = Pixel(1, 2, 3)
    changed = pixel.replace(green=200)

    assert changed == Pixel(1, 200, 3)
    assert pixel == Pixel(1, 2, 3)


def test_grid_geometry_and_fill():
    grid = PixelGrid(3, 2, fill=Pixel(9, 8, 7))

    assert grid.width == 3
    assert grid.height == 2
    assert grid.shape == (3, 2)
    assert grid.size == 6
    assert grid.pixels.shape == (2, 3, 3)
    assert all(p == Pixel(9, 8, 7) for _, _, p in grid.iter_pixels())


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        PixelGrid(-1, 4)


def test_get_and_set_use_column_row_addressing():
    grid = PixelGrid(3, 2)
    grid.set(2, 1, Pixel(10, 20, 30))

    assert grid.get(2, 1) == Pixel(10, 20, 30)
    assert tuple(grid.pixels[1, 2]) == (10, 20, 30)
    assert grid.get(1, 1) == Pixel(0, 0, 0)


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_access_raises(x, y):
    grid = PixelGrid(3, 2)

    with pytest.raises(IndexOutOfBounds):
        grid.get(x, y)
    with pytest.raises(IndexError):
        grid.set(x, y, Pixel())


def test_from_array_copies_by_default():
    array = np.zeros((2, 2, 3), dtype=np.uint8)
    grid = PixelGrid.from_array(array)
    array[0, 0] = 255

    assert grid.get(0, 0) == Pixel(0, 0, 0)


def test_from_array_clips_wider_dtypes():
    array = np.array([[[-20, 128, 999]]], dtype=np.int32)
    grid = PixelGrid.from_array(array)

    assert grid.pixels.dtype == np.uint8
    assert grid.get(0, 0) == Pixel(0, 128, 255)


def test_from_array_validates_input():
    with pytest.raises(TypeError):
        PixelGrid.from_array([[[0, 0, 0]]])
    with pytest.raises(ValueError):
        PixelGrid.from_array(np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(ValueError):
        PixelGrid.from_array(np.zeros((2, 2, 4), dtype=np.uint8))


def test_from_rows():
    grid = PixelGrid.from_rows([
        [(1, 2, 3), (4, 5, 6)],
        [(7, 8, 9), (10, 11, 12)],
    ])

    assert grid.shape == (2, 2)
    assert grid.get(1, 0) == Pixel(4, 5, 6)
    assert grid.get(0, 1) == Pixel(7, 8, 9)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        PixelGrid.from_rows([[(0, 0, 0)], [(0, 0, 0), (1, 1, 1)]])


def test_empty_grids():
    assert PixelGrid(0, 0).is_empty()
    assert PixelGrid.from_rows([]).shape == (0, 0)
    assert PixelGrid.from_rows([[], []]).shape == (0, 2)
    assert list(PixelGrid(0, 5).iter_pixels()) == []


def test_copy_is_independent(random_grid):
    clone = random_grid.copy()
    assert clone == random_grid
    assert clone is not random_grid

    p = random_grid.get(0, 0)
    clone.set(0, 0, Pixel(255 - p.red, 255 - p.green, 255 - p.blue))
    assert clone != random_grid


def test_equality_requires_same_geometry():
    assert PixelGrid(2, 3) != PixelGrid(3, 2)
    assert PixelGrid(0, 0) == PixelGrid(0, 0)


def test_iter_pixels_is_row_major():
    grid = PixelGrid.from_rows([[(0, 0, 0), (1, 1, 1)], [(2, 2, 2), (3, 3, 3)]])
    coords = [(x, y) for x, y, _ in grid.iter_pixels()]
    assert coords == [(0, 0), (1, 0), (0, 1), (1, 1)]


@pytest.mark.parametrize("x, y", [(0.5, 0), (0, 1.0), (True, 0), ("0", 0)])
def test_non_integer_coordinates_raise(x, y):
    grid = PixelGrid(2, 2)

    with pytest.raises(IndexOutOfBounds):
        grid.get(x, y)
    with pytest.raises(IndexOutOfBounds):
        grid.set(x, y, Pixel())


def test_numpy_integer_coordinates_accepted():
    grid = PixelGrid(2, 2)
    grid.set(np.int64(1), np.int32(0), Pixel(5, 6, 7))
    assert grid.get(1, 0) == Pixel(5, 6, 7)
