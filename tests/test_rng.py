# tests/test_rng.py

import pytest

from pixel_planet import InvalidConfigurationError, SeededRandom
from pixel_planet.rng import seed_entropy


@pytest.mark.parametrize("seed", [0, 0.0, 0.5, 0.123456789, 1337])
def test_same_seed_reproduces_sequence(seed):
    first = SeededRandom(seed)
    second = SeededRandom(seed)
    assert [first.random() for _ in range(50)] == [second.random() for _ in range(50)]


def test_different_seeds_diverge():
    a = [SeededRandom(0.1).random() for _ in range(5)]
    b = [SeededRandom(0.2).random() for _ in range(5)]
    assert a != b


def test_random_is_in_unit_interval():
    rng = SeededRandom(0.75)
    values = [rng.random() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_randint_range():
    rng = SeededRandom(3)
    values = {rng.randint(-2, 3) for _ in range(500)}
    assert values <= {-2, -1, 0, 1, 2}
    assert len(values) == 5


def test_seed_is_kept():
    assert SeededRandom(0.5).seed == 0.5


def test_missing_seed_draws_one():
    rng = SeededRandom()
    assert 0.0 <= rng.seed < 1.0
    assert 0.0 <= rng.random() < 1.0


@pytest.mark.parametrize("seed", [-1, -0.5, "abc", True])
def test_invalid_seed(seed):
    with pytest.raises(InvalidConfigurationError):
        SeededRandom(seed)


def test_seed_entropy_scales_reals():
    assert seed_entropy(0.5) == 2 ** 52
    assert seed_entropy(7) == 7


@pytest.mark.parametrize("seed", [1.5, 2.25, float("inf"), float("nan")])
def test_fractional_seed_outside_unit_interval(seed):
    with pytest.raises(InvalidConfigurationError):
        SeededRandom(seed)


def test_integral_float_matches_integer_seed():
    assert seed_entropy(1.0) == seed_entropy(1) == 1
    assert SeededRandom(3.0).random() == SeededRandom(3).random()


def test_reals_are_quantized():
    assert seed_entropy(2.0 ** -53) == 1
    assert seed_entropy(1e-17) == 0
