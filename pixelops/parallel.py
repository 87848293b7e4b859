# pixelops/parallel.py

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Tuple

from pixelops.config import DEFAULT_WORKERS

RowBand = Tuple[int, int]


def row_bands(height: int, workers: int) -> List[RowBand]:
    """Split ``[0, height)`` into at most *workers* contiguous, disjoint bands."""

    if workers < 1:
        raise ValueError("workers must be >= 1")

    if height <= 0:
        return []

    chunk = (height + workers - 1) // workers
    return [(lo, min(lo + chunk, height)) for lo in range(0, height, chunk)]


def run_row_bands(
    height: int,
    band_fn: Callable[[int, int], None],
    workers: int = DEFAULT_WORKERS,
) -> None:
    """Call ``band_fn(lo, hi)`` once per row band.

    Each call must only write rows ``lo:hi``. With a single band the call runs
    on the current thread.
    """

    ranges = row_bands(height, workers)
    if len(ranges) <= 1:
        for lo, hi in ranges:
            band_fn(lo, hi)
        return

    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures: List[Future[None]] = [pool.submit(band_fn, lo, hi) for lo, hi in ranges]
        for fut in futures:
            fut.result()
