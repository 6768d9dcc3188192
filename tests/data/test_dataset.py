from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from sudogen.data import SudokuDataset, generate_games, make_puzzle_dataset


def test_generate_games_is_reproducible():
    a = generate_games(3, 40, 5)
    b = generate_games(3, 40, 5)
    assert len(a) == 3
    for x, y in zip(a, b):
        assert np.array_equal(x.start, y.start)


def test_generate_games_with_executor():
    with ThreadPoolExecutor(max_workers=2) as pool:
        parallel = generate_games(4, 45, 11, executor=pool)
    serial = generate_games(4, 45, 11)
    for x, y in zip(parallel, serial):
        assert np.array_equal(x.solution, y.solution)
        assert np.array_equal(x.start, y.start)


def test_dataset_samples():
    ds = make_puzzle_dataset(2, 50, rng=3)
    assert len(ds) == 2
    sample = ds[1]
    assert sample.puzzle.shape == (81,)
    assert sample.answer.shape == (81,)
    assert sample.puzzle.dtype == np.int64
    assert sample.givens == np.count_nonzero(sample.puzzle)
    filled = sample.puzzle != 0
    assert np.array_equal(sample.puzzle[filled], sample.answer[filled])


def test_dataset_rejects_bad_shapes():
    games = generate_games(1, 50, 0)
    bad = games[0]._replace(solution=np.zeros((3, 3), dtype=np.int8))
    with pytest.raises(ValueError):
        SudokuDataset((bad,))
