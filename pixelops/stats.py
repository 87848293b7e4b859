"""Order statistics over pixel-derived samples.

Selection uses :func:`numpy.partition` (introselect), so finding one rank is
linear on average instead of a full sort.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from pixelops.errors import EmptyInput, IndexOutOfBounds

Samples = Union[Sequence[float], np.ndarray]


def _as_samples(values: Samples) -> np.ndarray:
    samples = np.asarray(values, dtype=np.float64)
    return samples.reshape(-1)


def select(values: Samples, k: int) -> float:
    """Return the ``k``-th smallest value (0-based) of *values*."""

    samples = _as_samples(values)
    if samples.size == 0:
        raise EmptyInput("Cannot select from an empty sequence")
    if not 0 <= k < samples.size:
        raise IndexOutOfBounds(f"Rank {k} is outside a sequence of length {samples.size}")

    return float(np.partition(samples, k)[k])


def median(values: Samples) -> float:
    """Return the element at index ``n // 2`` of the ascending order.

    For an even number of values this is the upper of the two middle
    elements; the two are never averaged.
    """

    samples = _as_samples(values)
    if samples.size == 0:
        raise EmptyInput("Median of an empty sequence is undefined")

    return select(samples, samples.size // 2)
