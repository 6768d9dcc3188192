"""Search-based full grid construction.

Row 0 is fixed to 1..9 and a handful of cells that the first row and box force
are filled by random rules; the oracle's ``solve`` completes the rest. Roughly
one attempt in ten is completable, so attempts are repeated with fresh random
placements. The digits are relabelled with the requested permutation at the
end.
"""

from logging import getLogger

import numpy as np
import numpy.typing as npt

from sudogen.engine.synth import check_permutation
from sudogen.grid import GRID_CELLS, GRID_SIZE, Grid
from sudogen.oracle import solve
from sudogen.rng import RandomSource, as_generator

__all__ = ["search_full_grid", "try_generating_grid"]


logger = getLogger(__name__)


def _place_by_membership(
    cells: npt.NDArray[np.int8],
    digits: npt.NDArray[np.int8],
    taken: npt.NDArray[np.int8],
    if_taken: tuple[int, int, int],
    otherwise: tuple[int, int, int],
) -> None:
    for digit, a, b in zip(digits.tolist(), if_taken, otherwise, strict=True):
        cells[a if digit in taken else b] = digit


def try_generating_grid(rng: np.random.Generator) -> tuple[Grid, bool]:
    cells = np.zeros(GRID_CELLS, dtype=np.int8)
    cells[:GRID_SIZE] = np.arange(1, GRID_SIZE + 1)

    # Box 1 below the 1, 2, 3 of row 0.
    rest_box1 = rng.permutation(np.arange(4, 10, dtype=np.int8))
    cells[9:12] = rest_box1[:3]
    cells[18:21] = rest_box1[3:]

    # The rest of column 0 holds the box 1 digits not yet in column 0.
    rest_col1 = rng.permutation(cells[[1, 2, 10, 11, 19, 20]])
    cells[27::9] = rest_col1

    # 1, 2, 3 go into rows 1-2 of boxes 2 and 3.
    box2 = rng.permutation(np.arange(1, 4, dtype=np.int8))
    box3 = rng.permutation(np.arange(1, 4, dtype=np.int8))
    offsets = rng.integers(2, size=3) * GRID_SIZE
    for k in range(3):
        cells[12 + k + offsets[k]] = box2[k]
    _place_by_membership(cells, box3, cells[12:15], (24, 25, 26), (15, 16, 17))

    # Same for the column 0 digits of box 1 in columns 1-2 of boxes 4 and 7.
    box4 = rng.permutation(cells[[0, 9, 18]])
    box7 = rng.permutation(cells[[0, 9, 18]])
    shifts = rng.integers(2, size=3)
    for k, base in enumerate((28, 37, 46)):
        cells[base + shifts[k]] = box4[k]
    _place_by_membership(cells, box7, cells[[28, 37, 46]], (56, 65, 74), (55, 64, 73))

    return solve(cells.reshape(GRID_SIZE, GRID_SIZE))


def search_full_grid(
    permutation: npt.ArrayLike,
    rng: RandomSource = None,
    max_attempts: int = 1000,
) -> Grid:
    perm = check_permutation(permutation)
    rng = as_generator(rng)

    for attempt in range(1, max_attempts + 1):
        grid, ok = try_generating_grid(rng)
        if ok:
            logger.debug("Search construction succeeded on attempt %d", attempt)
            return perm[grid - 1]

    msg = f"Failed to construct a full grid after {max_attempts} attempts."
    raise RuntimeError(msg)
