from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
import numpy.typing as npt
from torch.utils.data import Dataset

from sudogen.engine import Game, new_game
from sudogen.rng import RandomSource, as_generator, split_seeds

if TYPE_CHECKING:
    from concurrent.futures import Executor


__all__ = [
    "SudokuDataset",
    "SudokuSample",
    "generate_games",
]


def generate_games(
    count: int,
    givens: int,
    rng: RandomSource = None,
    *,
    executor: Executor | None = None,
) -> tuple[Game, ...]:
    rng = as_generator(rng)
    seeds = split_seeds(rng, count)
    make_game = partial(new_game, givens)
    if executor is None:
        return tuple(map(make_game, seeds))
    return tuple(executor.map(make_game, seeds))


class SudokuSample(NamedTuple):
    puzzle: npt.NDArray[np.int64]
    answer: npt.NDArray[np.int64]
    givens: int


class SudokuDataset(Dataset[SudokuSample]):
    def __init__(self, games: tuple[Game, ...]) -> None:
        if not all(g.solution.shape == (9, 9) for g in games):
            msg = "All solutions must have shape (9, 9)."
            raise ValueError(msg)

        self.games = games

    def __len__(self) -> int:
        return len(self.games)

    def __getitem__(self, index: int) -> SudokuSample:
        game = self.games[index]
        return SudokuSample(
            puzzle=game.start.astype(np.int64).flatten(),
            answer=game.solution.astype(np.int64).flatten(),
            givens=game.givens,
        )
