from collections.abc import Callable
from logging import getLogger
from typing import NamedTuple

import numpy as np

from sudogen.grid import Grid
from sudogen.oracle import has_unique_solution
from sudogen.rng import RandomSource, as_generator, pick_and_remove

__all__ = ["Reduction", "reduce_clues"]


logger = getLogger(__name__)


class Reduction(NamedTuple):
    start: Grid
    givens: int
    trials: int


def reduce_clues(
    solution: Grid,
    want: int,
    rng: RandomSource = None,
    *,
    oracle: Callable[[Grid], bool] = has_unique_solution,
) -> Reduction:
    """Blank cells of ``solution`` in random order while ``oracle`` still
    reports a unique completion.

    Stops once ``want`` givens remain or every cell has been tried once. In the
    second case more than ``want`` givens are left, which is a normal outcome.
    """
    rng = as_generator(rng)
    grid = np.array(solution, dtype=np.int8)
    flat = grid.reshape(-1)
    pool = np.flatnonzero(flat).tolist()
    have = len(pool)
    trials = 0

    while pool and have != want:
        i = pick_and_remove(pool, rng)
        saved = flat[i]
        flat[i] = 0
        trials += 1
        if oracle(grid):
            have -= 1
        else:
            flat[i] = saved

    if have != want:
        logger.info(
            "Candidate pool exhausted with %d givens (wanted %d)", have, want
        )
    logger.debug("Reduction finished after %d oracle calls", trials)
    return Reduction(start=grid, givens=have, trials=trials)
