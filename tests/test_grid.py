# tests/test_grid.py

import numpy as np
import pytest

from pixel_planet import InvalidConfigurationError, OutOfRangeError, ToroidalGrid

WIDTH = 6
HEIGHT = 4


@pytest.fixture
def grid():
    g = ToroidalGrid(WIDTH, HEIGHT)
    for y in range(HEIGHT):
        for x in range(WIDTH):
            g.set(x, y, y * WIDTH + x)
    return g


def test_initial_fill():
    g = ToroidalGrid(3, 2, 5)
    assert g.shape == (2, 3)
    assert (g.to_array() == 5).all()


def test_set_then_get(grid):
    grid.set(2, 3, 99)
    assert grid.get(2, 3) == 99


def test_reads_wrap_with_true_modulo(grid):
    for y in range(-2 * HEIGHT, 2 * HEIGHT):
        for x in range(-2 * WIDTH, 2 * WIDTH):
            assert grid.get(x, y) == grid.get(x % WIDTH, y % HEIGHT)
    assert grid.get(-1, -1) == (HEIGHT - 1) * WIDTH + (WIDTH - 1)


@pytest.mark.parametrize("x, y", [(-1, 0), (WIDTH, 0), (0, -1), (0, HEIGHT), (100, 100)])
def test_out_of_bounds_write(grid, x, y):
    with pytest.raises(OutOfRangeError):
        grid.set(x, y, 1)


def test_out_of_range_is_an_index_error(grid):
    with pytest.raises(IndexError):
        grid.set(WIDTH, 0, 1)


def test_load_replaces_all_cells(grid):
    values = np.arange(WIDTH * HEIGHT).reshape(HEIGHT, WIDTH)[::-1]
    grid.load(values)
    assert grid.get(0, 0) == values[0, 0]
    assert np.array_equal(grid.to_array(), values)


def test_load_rejects_wrong_shape(grid):
    with pytest.raises(OutOfRangeError):
        grid.load(np.zeros((WIDTH, HEIGHT)))


def test_frozen_grid_rejects_writes(grid):
    grid.freeze()
    with pytest.raises(ValueError):
        grid.set(0, 0, 1)
    assert grid.get(1, 0) == 1


def test_to_array_is_a_copy(grid):
    snapshot = grid.to_array()
    snapshot[0, 0] = -5
    assert grid.get(0, 0) == 0


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 2), (2.5, 2)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidConfigurationError):
        ToroidalGrid(width, height)
