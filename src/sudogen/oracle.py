"""Exact solver used as the uniqueness oracle.

Backtracking over the empty cell with the fewest candidates, with row, column
and box occupancy kept as bit masks (bit ``d`` set when digit ``d`` is used).
"""

from logging import getLogger
from typing import Final

import numpy as np

from sudogen.grid import GRID_CELLS, GRID_SIZE, Grid, box_index

__all__ = ["count_solutions", "has_unique_solution", "solve"]


logger = getLogger(__name__)

_ALL_DIGITS: Final[int] = 0b11_1111_1110
_UNITS: Final[tuple[tuple[int, int, int], ...]] = tuple(
    (i // GRID_SIZE, i % GRID_SIZE, box_index(i // GRID_SIZE, i % GRID_SIZE))
    for i in range(GRID_CELLS)
)


class _Search:
    def __init__(self, cells: list[int]) -> None:
        self.cells = cells
        self.rows = [0] * GRID_SIZE
        self.cols = [0] * GRID_SIZE
        self.boxes = [0] * GRID_SIZE
        self.first_solution: list[int] | None = None

    def place_givens(self) -> bool:
        """Record the filled cells; False if any unit holds a digit twice."""
        for i, digit in enumerate(self.cells):
            if digit == 0:
                continue
            row, col, box = _UNITS[i]
            bit = 1 << digit
            if (self.rows[row] | self.cols[col] | self.boxes[box]) & bit:
                return False
            self.rows[row] |= bit
            self.cols[col] |= bit
            self.boxes[box] |= bit
        return True

    def _most_constrained(self) -> tuple[int, int]:
        best, best_mask, best_count = -1, 0, GRID_SIZE + 1
        for i, digit in enumerate(self.cells):
            if digit:
                continue
            row, col, box = _UNITS[i]
            mask = _ALL_DIGITS & ~(self.rows[row] | self.cols[col] | self.boxes[box])
            count = mask.bit_count()
            if count < best_count:
                best, best_mask, best_count = i, mask, count
                if count <= 1:
                    break
        return best, best_mask

    def count(self, limit: int) -> int:
        index, mask = self._most_constrained()
        if index < 0:
            if self.first_solution is None:
                self.first_solution = list(self.cells)
            return 1

        row, col, box = _UNITS[index]
        found = 0
        for digit in range(1, GRID_SIZE + 1):
            bit = 1 << digit
            if not mask & bit:
                continue
            self.cells[index] = digit
            self.rows[row] |= bit
            self.cols[col] |= bit
            self.boxes[box] |= bit
            found += self.count(limit - found)
            self.rows[row] ^= bit
            self.cols[col] ^= bit
            self.boxes[box] ^= bit
            self.cells[index] = 0
            if found >= limit:
                break
        return found


def _cells_of(grid: Grid) -> list[int]:
    flat = np.asarray(grid).reshape(-1)
    if flat.size != GRID_CELLS:
        msg = f"Grid must have {GRID_CELLS} cells, got {flat.size}."
        raise ValueError(msg)
    if flat.min() < 0 or flat.max() > GRID_SIZE:
        msg = "Grid values must be in the range 0-9."
        raise ValueError(msg)
    return [int(v) for v in flat.tolist()]


def _search(grid: Grid, limit: int) -> tuple[_Search, int]:
    search = _Search(_cells_of(grid))
    if not search.place_givens():
        return search, 0
    return search, search.count(limit)


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Number of completions of ``grid``, counting stops at ``limit``."""
    if limit < 1:
        msg = f"limit must be positive, got {limit}"
        raise ValueError(msg)
    _, found = _search(grid, limit)
    return found


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, limit=2) == 1


def solve(grid: Grid) -> tuple[Grid, bool]:
    """Return a completion of ``grid`` and True, or a copy of it and False."""
    search, found = _search(grid, limit=1)
    if not found or search.first_solution is None:
        logger.debug("No completion exists")
        return np.array(grid, dtype=np.int8).reshape(GRID_SIZE, GRID_SIZE), False
    solved = np.array(search.first_solution, dtype=np.int8)
    return solved.reshape(GRID_SIZE, GRID_SIZE), True
