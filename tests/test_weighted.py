# tests/test_weighted.py

import numpy as np
import pytest

from pixel_planet import OutOfRangeError, SeededRandom, select_index, select_indices, weighted_choice


@pytest.mark.parametrize("weights, sample, expected", [
    ([1, 1, 1, 1], 0.0, 0),
    ([1, 1, 1, 1], 0.99, 3),
    ([2, 1, 1], 0.49, 0),
    ([2, 1, 1], 0.5, 0),
    ([2, 1, 1], 0.51, 1),
    ([2, 1, 1], 0.8, 2),
    ([1, 1, 1, 1], 1.0, 3),
    ([0, 1], 0.3, 1),
])
def test_select_index(weights, sample, expected):
    assert select_index(weights, sample) == expected


def test_sample_beyond_total_fails():
    with pytest.raises(OutOfRangeError):
        select_index([1, 1, 1], 1.5)


def test_zero_weights_fail():
    with pytest.raises(OutOfRangeError):
        select_index([0, 0, 0], 0.0)


def test_default_sample_uses_injected_rng():
    expected = select_index([1, 2, 3], SeededRandom(0.4).random())
    assert select_index([1, 2, 3], rng=SeededRandom(0.4)) == expected


def test_default_sample_without_rng():
    assert select_index([1, 2, 3]) in (0, 1, 2)


def test_vectorized_matches_scalar():
    weights = [0.3, 1.7, 0.0, 2.2, 0.8]
    samples = np.linspace(0.0, 0.999, 257).reshape(1, 257)
    result = select_indices(weights, samples)
    assert result.shape == samples.shape
    assert [select_index(weights, s) for s in samples[0]] == list(result[0])


def test_vectorized_out_of_range():
    with pytest.raises(OutOfRangeError):
        select_indices([1, 1], np.array([0.2, 1.2]))


def test_weighted_choice():
    assert weighted_choice(["a", "b", "c"], [2, 1, 1], 0.6) == "b"


@pytest.mark.parametrize("sample", [1.0, np.nextafter(1.0, 0.0)])
def test_top_sample_with_inexact_weights(sample):
    assert select_index([0.1, 0.2, 0.3], sample) == 2
    assert select_indices([0.1, 0.2, 0.3], np.array([sample])).tolist() == [2]


def test_top_sample_skips_trailing_zero_weights():
    assert select_index([0.7, 0.1, 0.0], 1.0) == 1
    assert select_indices([0.7, 0.1, 0.0], np.ones(3)).tolist() == [1, 1, 1]
