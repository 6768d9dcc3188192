from logging import getLogger
from typing import Final, Literal, NamedTuple

from sudogen.engine import legacy, reduce, shuffle, synth
from sudogen.grid import GRID_CELLS, Grid
from sudogen.rng import RandomSource, as_generator, digit_permutation

__all__ = [
    "MAX_GIVENS",
    "MIN_GIVENS",
    "Game",
    "legacy",
    "new_game",
    "produce_full_grid",
    "reduce",
    "shuffle",
    "synth",
]


logger = getLogger(__name__)

MIN_GIVENS: Final[int] = 17  # fewest clues any uniquely solvable 9x9 puzzle has
MAX_GIVENS: Final[int] = 80

Strategy = Literal["pattern", "search"]


class Game(NamedTuple):
    solution: Grid
    start: Grid
    givens: int


def produce_full_grid(
    rng: RandomSource = None,
    *,
    strategy: Strategy = "pattern",
    shuffle_iterations: int = shuffle.SHUFFLE_ITERATIONS,
) -> Grid:
    rng = as_generator(rng)
    perm = digit_permutation(rng)
    match strategy:
        case "pattern":
            grid = synth.base_pattern(perm)
        case "search":
            grid = legacy.search_full_grid(perm, rng)
        case _:
            msg = f"Unknown strategy: {strategy}"
            raise ValueError(msg)
    shuffle.shuffle_grid_inplace(grid, rng, shuffle_iterations)
    return grid


def new_game(
    givens: int,
    rng: RandomSource = None,
    *,
    strategy: Strategy = "pattern",
    shuffle_iterations: int = shuffle.SHUFFLE_ITERATIONS,
) -> Game:
    if not MIN_GIVENS <= givens <= GRID_CELLS:
        msg = f"givens must be between {MIN_GIVENS} and {GRID_CELLS}, got {givens}."
        raise ValueError(msg)

    rng = as_generator(rng)
    solution = produce_full_grid(
        rng, strategy=strategy, shuffle_iterations=shuffle_iterations
    )
    solution.flags.writeable = False
    reduction = reduce.reduce_clues(solution, givens, rng)
    start = reduction.start
    start.flags.writeable = False
    logger.debug(
        "New game with %d givens (wanted %d, %d trials)",
        reduction.givens,
        givens,
        reduction.trials,
    )
    return Game(solution=solution, start=start, givens=reduction.givens)
