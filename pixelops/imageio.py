# pixelops/imageio.py

import os
from pathlib import Path
from typing import Optional, Union

import cv2 as cv
import numpy as np

from pixelops.config import SUPPORTED_EXTENSIONS
from pixelops.grid import PixelGrid

PathLike = Union[str, Path]


def load_image(path: PathLike) -> PixelGrid:
    img = cv.imread(str(path), cv.IMREAD_UNCHANGED)
    if img is None:
        raise FileNotFoundError(f"Could not load image: {path}")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = np.clip(img * 255.0, 0, 255).astype(np.uint8)

    if img.ndim == 2:
        rgb = cv.cvtColor(img, cv.COLOR_GRAY2RGB)
    elif img.shape[2] == 4:
        rgb = cv.cvtColor(img, cv.COLOR_BGRA2RGB)
    else:
        rgb = cv.cvtColor(img, cv.COLOR_BGR2RGB)

    return PixelGrid.from_array(rgb, copy=False)


def load_overlay(path: PathLike, width: int, height: int) -> PixelGrid:
    """Load a texture and resize it to ``width`` x ``height``."""

    overlay = load_image(path)
    if overlay.shape == (width, height):
        return overlay

    resized = cv.resize(overlay.pixels, (width, height), interpolation=cv.INTER_LINEAR)
    return PixelGrid.from_array(resized, copy=False)


def _resolve_extension(path: PathLike, fmt: Optional[str]) -> str:
    ext = fmt if fmt is not None else Path(path).suffix
    ext = ext.lower()
    if not ext.startswith("."):
        ext = "." + ext
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported image format: {ext or path}")
    return ext


def save_image(grid: PixelGrid, path: PathLike, fmt: Optional[str] = None) -> None:
    ext = _resolve_extension(path, fmt)
    if grid.is_empty():
        raise ValueError("Cannot encode an empty image")

    parent = os.path.dirname(str(path))
    if parent:
        os.makedirs(parent, exist_ok=True)

    ok, encoded = cv.imencode(ext, cv.cvtColor(grid.pixels, cv.COLOR_RGB2BGR))
    if not ok:
        raise OSError(f"Could not encode image as {ext}: {path}")
    encoded.tofile(str(path))
