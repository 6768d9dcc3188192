from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from concurrent.futures import Executor

    import numpy as np

from sudogen.data import sudoku_dataset
from sudogen.data.sudoku_dataset import (
    SudokuDataset,
    SudokuSample,
    generate_games,
)

__all__ = [
    "SudokuDataset",
    "SudokuSample",
    "generate_games",
    "make_puzzle_dataset",
    "sudoku_dataset",
]


logger = getLogger(__name__)


def make_puzzle_dataset(
    num_puzzles: int,
    givens: int,
    rng: np.random.Generator | int | None = None,
    executor: Executor | None = None,
) -> SudokuDataset:
    games = generate_games(num_puzzles, givens, rng, executor=executor)
    ds = SudokuDataset(games)
    if len(ds):
        logger.debug("Example dataset answer: %s", str(ds[0].answer))
        logger.debug("Example dataset puzzle: %s", str(ds[0].puzzle))
    return ds
