"""Tests for the order statistic helpers."""

import numpy as np
import pytest

from pixelops.errors import EmptyInput, IndexOutOfBounds
from pixelops.stats import median, select


def test_median_odd_length():
    assert median([3.0, 1.0, 2.0]) == 2.0


def test_median_even_length_uses_upper_middle():
    assert median([4.0, 1.0, 3.0, 2.0]) == 3.0
    assert median([0.0, 255.0, 100.0, 50.0]) == 100.0


def test_median_single_value():
    assert median([5.5]) == 5.5


def test_median_of_empty_sequence_fails():
    with pytest.raises(EmptyInput):
        median([])
    with pytest.raises(ValueError):
        median(np.array([], dtype=np.float64))


def test_median_matches_sorted_index(rng):
    for n in (1, 2, 7, 100, 1001):
        values = rng.random(n) * 255.0
        assert median(values) == sorted(values)[n // 2]


def test_median_flattens_two_dimensional_input():
    samples = np.array([[9.0, 1.0], [5.0, 3.0]])
    assert median(samples) == 5.0


def test_median_does_not_reorder_input():
    values = np.array([3.0, 1.0, 2.0])
    median(values)
    assert values.tolist() == [3.0, 1.0, 2.0]


def test_select_ranks():
    values = [7.0, 2.0, 9.0, 4.0]
    assert [select(values, k) for k in range(4)] == [2.0, 4.0, 7.0, 9.0]


def test_select_rank_out_of_range():
    with pytest.raises(IndexOutOfBounds):
        select([1.0, 2.0], 2)
    with pytest.raises(IndexOutOfBounds):
        select([1.0, 2.0], -1)
    with pytest.raises(EmptyInput):
        select([], 0)
