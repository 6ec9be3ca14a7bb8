# pixel_planet/rng.py

"""
================================================================================
SEEDED RANDOM SOURCE
================================================================================
A small, explicit wrapper around NumPy's Generator. Instances are threaded
through constructors instead of living in a module-level singleton, so two
scenes built from the same seed never share hidden state.

Data Contract:
---------------
- Inputs (on initialization):
    - seed: A real number in [0, 1), a non-negative integer, or None (fresh
      OS entropy). Reals are quantized to multiples of 2**-53, so any real
      below 2**-53 seeds the same stream as 0. An integral float such as
      3.0 seeds the same stream as the integer 3.
- Public Methods:
    - random(): A float in [0, 1).
    - randint(min_value, max_value): An integer in [min_value, max_value).
- Side Effects: Advances the internal generator state.
- Invariants: The same seed and call sequence produce the same outputs.
================================================================================
"""

import math
import numbers

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfigurationError


def seed_entropy(seed) -> int:
    """Converts a real or integer seed into the integer entropy NumPy expects."""
    if isinstance(seed, bool) or not isinstance(seed, numbers.Real):
        raise InvalidConfigurationError(f"Seed must be a real number, got {seed!r}.")
    if seed < 0:
        raise InvalidConfigurationError(f"Seed must be non-negative, got {seed}.")
    if isinstance(seed, numbers.Integral):
        return int(seed)
    seed = float(seed)
    if math.isnan(seed):
        raise InvalidConfigurationError("Seed must not be NaN.")
    if seed.is_integer():
        return int(seed)
    if seed >= 1:
        raise InvalidConfigurationError(
            f"A fractional seed must lie in [0, 1), got {seed}. Use an integer for larger seeds."
        )
    return int(seed * DEFAULTS.SEED_RESOLUTION)


class SeededRandom:
    """Deterministic uniform random source."""

    def __init__(self, seed=None):
        if seed is None:
            seed = float(np.random.default_rng().random())
        self._seed = seed
        self._generator = np.random.default_rng(seed_entropy(seed))

    @property
    def seed(self):
        return self._seed

    def random(self) -> float:
        """Returns the next float in [0, 1)."""
        return float(self._generator.random())

    def randint(self, min_value: int, max_value: int) -> int:
        """Returns an integer in [min_value, max_value)."""
        return math.floor(self.random() * (max_value - min_value)) + min_value

    def __repr__(self):
        return f"SeededRandom(seed={self._seed!r})"
