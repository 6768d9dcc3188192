from logging import getLogger
from typing import Final

import numpy as np
import numpy.typing as npt

from sudogen.grid import GRID_SIZE, Grid
from sudogen.rng import RandomSource, as_generator, digit_permutation

__all__ = [
    "BASE_OFFSETS",
    "base_pattern",
    "check_permutation",
    "synthesize_full_grid",
]


logger = getLogger(__name__)

# Row r of the base pattern is the permutation rotated left by BASE_OFFSETS[r].
# The offsets are a permutation of 0..8 and each band's offsets are distinct
# mod 3, so every column and every box receives all nine digits.
BASE_OFFSETS: Final[tuple[int, ...]] = (0, 6, 3, 8, 5, 2, 7, 4, 1)


def check_permutation(permutation: npt.ArrayLike) -> npt.NDArray[np.int8]:
    perm = np.asarray(permutation)
    if perm.shape != (GRID_SIZE,) or not np.array_equal(
        np.sort(perm), np.arange(1, GRID_SIZE + 1)
    ):
        msg = f"Expected a permutation of the digits 1-9, got {perm.tolist()}."
        raise ValueError(msg)
    return perm.astype(np.int8)


def base_pattern(permutation: npt.ArrayLike) -> Grid:
    perm = check_permutation(permutation)
    index = (np.asarray(BASE_OFFSETS)[:, None] + np.arange(GRID_SIZE)) % GRID_SIZE
    return perm[index]


def synthesize_full_grid(rng: RandomSource = None) -> Grid:
    rng = as_generator(rng)
    perm = digit_permutation(rng)
    logger.debug("Base pattern permutation: %s", perm.tolist())
    return base_pattern(perm)
