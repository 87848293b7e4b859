import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Ensure the project sources are importable without installation.
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pixelops.grid import PixelGrid  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_grid(rng):
    """A 13x9 grid of random colours (odd sizes catch transposed axes)."""
    pixels = rng.integers(0, 256, size=(9, 13, 3), dtype=np.uint8)
    return PixelGrid.from_array(pixels)


@pytest.fixture
def empty_grid():
    return PixelGrid(0, 0)
