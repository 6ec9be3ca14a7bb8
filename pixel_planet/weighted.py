# pixel_planet/weighted.py

"""
Weighted discretization: maps a value in [0, 1] onto an index through the
cumulative distribution of a list of non-negative weights.
"""

import numpy as np

from .errors import OutOfRangeError
from .rng import SeededRandom


def _cumulative_weights(weights) -> list:
    """Running sums, accumulated left to right so the last entry equals sum(weights)."""
    cumulative = []
    total = 0
    for weight in weights:
        total += weight
        cumulative.append(total)
    if total <= 0:
        raise OutOfRangeError(f"Weights must sum to a positive value, got {total}.")
    return cumulative


def select_index(weights, sample=None, rng: SeededRandom = None) -> int:
    """
    Returns the index of the first cumulative weight the scaled sample falls under.

    Args:
        weights: Ordered, non-negative weights.
        sample (float, optional): A value in [0, 1]. If None, one is drawn
            from `rng`, or from a freshly seeded source if `rng` is None.
        rng (SeededRandom, optional): The source used when no sample is given.

    Raises:
        OutOfRangeError: The weights sum to zero or the sample lies beyond
            the cumulative total.
    """
    if sample is None:
        sample = (rng or SeededRandom()).random()
    cumulative = _cumulative_weights(weights)
    # sample == 1 lands exactly on cumulative[-1] whatever the weights.
    threshold = sample * cumulative[-1]
    for i, bound in enumerate(cumulative):
        if threshold <= bound:
            return i
    raise OutOfRangeError(f"Sample {sample} exceeds the cumulative weight.")


def select_indices(weights, samples: np.ndarray) -> np.ndarray:
    """
    Vectorized select_index over an array of samples.
    Compares against the same cumulative bounds, so every result equals the
    scalar function's result for that sample.
    """
    samples = np.asarray(samples, dtype=np.float64)
    cumulative = _cumulative_weights(weights)
    threshold = samples * cumulative[-1]
    result = np.full(samples.shape, -1, dtype=np.int32)
    for i, bound in enumerate(cumulative):
        hit = (result < 0) & (threshold <= bound)
        result[hit] = i
    if (result < 0).any():
        worst = samples[result < 0].max()
        raise OutOfRangeError(f"Sample {worst} exceeds the cumulative weight.")
    return result


def weighted_choice(items, weights, sample=None, rng: SeededRandom = None):
    """Returns the item selected by select_index."""
    return items[select_index(weights, sample, rng)]
