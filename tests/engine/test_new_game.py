import numpy as np
import pytest

from sudogen.engine import MIN_GIVENS, new_game, produce_full_grid
from sudogen.grid import is_full_valid
from sudogen.oracle import has_unique_solution


@pytest.mark.parametrize("strategy", ["pattern", "search"])
def test_new_game(rng, strategy):
    game = new_game(30, rng, strategy=strategy)
    assert is_full_valid(game.solution)
    assert game.givens >= 30
    assert np.count_nonzero(game.start) == game.givens
    filled = game.start != 0
    assert np.array_equal(game.start[filled], game.solution[filled])
    assert has_unique_solution(game.start)


def test_grids_are_read_only(rng):
    game = new_game(40, rng)
    with pytest.raises(ValueError):
        game.solution[0, 0] = 0
    with pytest.raises(ValueError):
        game.start[0, 0] = 0


def test_want_81_start_equals_solution(rng):
    game = new_game(81, rng)
    assert np.array_equal(game.start, game.solution)
    assert game.givens == 81


def test_want_17(rng):
    game = new_game(MIN_GIVENS, rng)
    assert game.givens >= MIN_GIVENS
    assert has_unique_solution(game.start)


@pytest.mark.parametrize("givens", [16, 82, 0])
def test_rejects_out_of_range(rng, givens):
    with pytest.raises(ValueError):
        new_game(givens, rng)


def test_unknown_strategy(rng):
    with pytest.raises(ValueError):
        produce_full_grid(rng, strategy="magic")


def test_seeded_games_are_reproducible():
    a = new_game(35, 2024)
    b = new_game(35, 2024)
    assert np.array_equal(a.solution, b.solution)
    assert np.array_equal(a.start, b.start)


def test_successive_games_differ(rng):
    a = new_game(35, rng)
    b = new_game(35, rng)
    assert not np.array_equal(a.solution, b.solution)
