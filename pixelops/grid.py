# pixelops/grid.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Sequence, Tuple

import numpy as np

from pixelops.config import CHANNEL_CEILING, CHANNEL_MIN
from pixelops.errors import IndexOutOfBounds


def _clamp_channel(value) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_CEILING, int(value)))


@dataclass(frozen=True)
class Pixel:
    """A single RGB triple. Channels are clamped into ``[0, 255]`` on creation."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    def replace(self, **channels) -> "Pixel":
        return replace(self, **channels)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


class PixelGrid:
    """Row-major RGB buffer of fixed width and height.

    Pixels are stored in an owned ``(height, width, 3)`` uint8 array and
    addressed by ``(x, y)`` where ``x`` is the column and ``y`` the row.
    """

    __slots__ = ("_pixels",)

    def __init__(self, width: int, height: int, fill: Pixel = Pixel()):
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise TypeError("Width and height must be integers")
        if width < 0 or height < 0:
            raise ValueError("Width and height must be non-negative")

        self._pixels = np.empty((int(height), int(width), 3), dtype=np.uint8)
        self._pixels[:, :] = fill.as_tuple()

    @classmethod
    def from_array(cls, array: np.ndarray, copy: bool = True) -> "PixelGrid":
        if not isinstance(array, np.ndarray):
            raise TypeError("Input must be a NumPy array")

        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError("Input must be an RGB image with 3 channels")

        if array.dtype != np.uint8:
            array = np.clip(array, CHANNEL_MIN, CHANNEL_CEILING).astype(np.uint8)
        elif copy:
            array = array.copy()

        grid = cls.__new__(cls)
        grid._pixels = np.ascontiguousarray(array)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "PixelGrid":
        rows = list(rows)
        if not rows:
            return cls(0, 0)
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same width")
        if width == 0:
            return cls(0, len(rows))
        return cls.from_array(np.array(rows, dtype=np.int64), copy=False)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.size == 0

    # ------------------------------------------------------------------
    # Buffer access
    # ------------------------------------------------------------------
    @property
    def pixels(self) -> np.ndarray:
        """The owned ``(height, width, 3)`` array. Writes go straight to the grid."""
        return self._pixels

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def copy(self) -> "PixelGrid":
        return PixelGrid.from_array(self._pixels, copy=True)

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------
    def _check_bounds(self, x: int, y: int) -> None:
        if isinstance(x, bool) or isinstance(y, bool) or not (
            isinstance(x, (int, np.integer)) and isinstance(y, (int, np.integer))
        ):
            raise IndexOutOfBounds(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBounds(
                f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} grid"
            )

    def get(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = pixel.as_tuple()

    def iter_pixels(self) -> Iterator[Tuple[int, int, Pixel]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get(x, y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"
