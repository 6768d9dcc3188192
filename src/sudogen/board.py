"""Player-editable copy of a start grid.

Cells are addressed by flat index ``row * 9 + col``; every editing operation
acts on a selection of such indices. Givens can never be changed and the start
and solution grids themselves are never written to.
"""

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from sudogen.grid import GRID_CELLS, GRID_SIZE, Grid, format_grid

__all__ = ["PlayerBoard"]


def _selection(cells: Iterable[int]) -> npt.NDArray[np.intp]:
    index = np.fromiter(cells, dtype=np.intp)
    if index.size and (index.min() < 0 or index.max() >= GRID_CELLS):
        msg = f"Cell indices must be in 0-{GRID_CELLS - 1}."
        raise ValueError(msg)
    return index


def _check_digit(n: int) -> None:
    if not 1 <= n <= GRID_SIZE:
        msg = f"Digit must be in 1-9, got {n}"
        raise ValueError(msg)


class PlayerBoard:
    def __init__(self, start: Grid) -> None:
        self.numbers = np.array(start, dtype=np.int8).reshape(GRID_CELLS)
        self.fixed = self.numbers != 0
        self.corner = np.zeros((GRID_CELLS, GRID_SIZE), dtype=bool)
        self.center = np.zeros((GRID_CELLS, GRID_SIZE), dtype=bool)

    @property
    def grid(self) -> Grid:
        return self.numbers.reshape(GRID_SIZE, GRID_SIZE).copy()

    def _editable(self, cells: Iterable[int]) -> npt.NDArray[np.intp]:
        index = _selection(cells)
        return index[~self.fixed[index]]

    def _empty(self, cells: Iterable[int]) -> npt.NDArray[np.intp]:
        index = _selection(cells)
        return index[self.numbers[index] == 0]

    def put_number(self, cells: Iterable[int], n: int) -> None:
        if n != 0:
            _check_digit(n)
        self.numbers[self._editable(cells)] = n

    def _toggle_mark(
        self, marks: npt.NDArray[np.bool_], cells: Iterable[int], n: int
    ) -> None:
        _check_digit(n)
        index = self._empty(cells)
        # Set the mark everywhere if any selected cell lacks it, else clear it.
        marks[index, n - 1] = not marks[index, n - 1].all()

    def toggle_corner_mark(self, cells: Iterable[int], n: int) -> None:
        self._toggle_mark(self.corner, cells, n)

    def toggle_center_mark(self, cells: Iterable[int], n: int) -> None:
        self._toggle_mark(self.center, cells, n)

    def clear(self, cells: Iterable[int]) -> None:
        """Delete numbers if any selected cell has one, otherwise center marks
        if any are set, otherwise corner marks."""
        index = self._editable(cells)
        if self.numbers[index].any():
            self.numbers[index] = 0
        elif self.center[index].any():
            self.center[index] = False
        else:
            self.corner[index] = False

    def clear_corner_marks(self, cells: Iterable[int]) -> None:
        index = self._empty(cells)
        self.corner[index[~self.fixed[index]]] = False

    def clear_center_marks(self, cells: Iterable[int]) -> None:
        index = self._empty(cells)
        self.center[index[~self.fixed[index]]] = False

    def is_solved(self, solution: Grid) -> bool:
        return np.array_equal(self.numbers, np.asarray(solution).reshape(GRID_CELLS))

    def to_text(self, newline: str = "\r\n") -> str:
        return format_grid(self.numbers, newline)
