import numpy as np
import pytest

from sudogen.engine.shuffle import (
    shuffle_grid_inplace,
    swap_cols_within_stack,
    swap_rows_within_band,
)
from sudogen.engine.synth import base_pattern
from sudogen.grid import is_full_valid


@pytest.fixture
def grid() -> np.ndarray:
    return base_pattern(range(1, 10))


def test_swap_rows(grid):
    row0, row2 = grid[0].copy(), grid[2].copy()
    swap_rows_within_band(grid, 0, 2)
    assert grid[0].tolist() == row2.tolist()
    assert grid[2].tolist() == row0.tolist()
    assert is_full_valid(grid)


def test_swap_cols(grid):
    col3, col5 = grid[:, 3].copy(), grid[:, 5].copy()
    swap_cols_within_stack(grid, 5, 3)
    assert grid[:, 3].tolist() == col5.tolist()
    assert grid[:, 5].tolist() == col3.tolist()
    assert is_full_valid(grid)


def test_swap_same_line_is_noop(grid):
    before = grid.copy()
    swap_rows_within_band(grid, 4, 4)
    swap_cols_within_stack(grid, 8, 8)
    assert np.array_equal(grid, before)


@pytest.mark.parametrize("a, b", [(2, 3), (0, 8), (-1, 0), (8, 9)])
def test_swap_across_groups_rejected(grid, a, b):
    with pytest.raises(ValueError):
        swap_rows_within_band(grid, a, b)
    with pytest.raises(ValueError):
        swap_cols_within_stack(grid, a, b)


def test_valid_after_every_swap(grid, rng):
    for _ in range(500):
        start = 3 * int(rng.integers(3))
        a, b = (start + rng.integers(3, size=2)).tolist()
        if rng.integers(2):
            swap_rows_within_band(grid, a, b)
        else:
            swap_cols_within_stack(grid, a, b)
        assert is_full_valid(grid)


def test_shuffle_grid_inplace(grid, rng):
    before = grid.copy()
    shuffle_grid_inplace(grid, rng)
    assert is_full_valid(grid)
    assert not np.array_equal(grid, before)


def test_shuffle_valid_after_each_call(grid, rng):
    for _ in range(50):
        shuffle_grid_inplace(grid, rng, iterations=1)
        assert is_full_valid(grid)


def test_zero_iterations_is_noop(grid, rng):
    before = grid.copy()
    shuffle_grid_inplace(grid, rng, iterations=0)
    assert np.array_equal(grid, before)
