from logging import getLogger
from typing import Final

from sudogen.grid import BOX_SIZE, GRID_SIZE, Grid
from sudogen.rng import RandomSource, as_generator

__all__ = [
    "SHUFFLE_ITERATIONS",
    "shuffle_grid_inplace",
    "swap_cols_within_stack",
    "swap_rows_within_band",
]


logger = getLogger(__name__)
SHUFFLE_ITERATIONS: Final[int] = 1000


def _check_same_group(a: int, b: int, group: str) -> None:
    if not (0 <= a < GRID_SIZE and 0 <= b < GRID_SIZE):
        msg = f"Line indices must be in 0-8, got {a} and {b}."
        raise ValueError(msg)
    if a // BOX_SIZE != b // BOX_SIZE:
        msg = f"Lines {a} and {b} are not in the same {group}."
        raise ValueError(msg)


def swap_rows_within_band(grid: Grid, a: int, b: int) -> None:
    """Exchange two rows of the same band in place."""
    _check_same_group(a, b, "band")
    if a != b:
        grid[[a, b], :] = grid[[b, a], :]


def swap_cols_within_stack(grid: Grid, a: int, b: int) -> None:
    """Exchange two columns of the same stack in place."""
    _check_same_group(a, b, "stack")
    if a != b:
        grid[:, [a, b]] = grid[:, [b, a]]


def shuffle_grid_inplace(
    grid: Grid,
    rng: RandomSource = None,
    iterations: int = SHUFFLE_ITERATIONS,
) -> None:
    rng = as_generator(rng)
    for _ in range(iterations):
        start = BOX_SIZE * int(rng.integers(BOX_SIZE))
        a, b = (start + rng.integers(BOX_SIZE, size=2)).tolist()
        if rng.integers(2) == 0:
            swap_rows_within_band(grid, a, b)
        else:
            swap_cols_within_stack(grid, a, b)
    logger.debug("Applied %d band/stack swaps", iterations)
