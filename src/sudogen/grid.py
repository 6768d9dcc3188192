from typing import Final, TypeAlias

import numpy as np
import numpy.typing as npt

__all__ = [
    "BOX_SIZE",
    "GRID_CELLS",
    "GRID_SIZE",
    "Grid",
    "box_index",
    "empty_grid",
    "format_grid",
    "is_consistent",
    "is_full_valid",
    "parse_grid",
]

Grid: TypeAlias = npt.NDArray[np.int8]

GRID_SIZE: Final[int] = 9
BOX_SIZE: Final[int] = 3
GRID_CELLS: Final[int] = GRID_SIZE * GRID_SIZE

_DIGITS: Final = np.arange(1, GRID_SIZE + 1)


def empty_grid() -> Grid:
    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)


def box_index(row: int, col: int) -> int:
    return BOX_SIZE * (row // BOX_SIZE) + col // BOX_SIZE


def _units(grid: Grid) -> list[npt.NDArray[np.int8]]:
    boxes = (
        grid.reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE)
        .swapaxes(1, 2)
        .reshape(GRID_SIZE, GRID_SIZE)
    )
    return [*grid, *grid.T, *boxes]


def is_full_valid(grid: Grid) -> bool:
    """Every row, column and box is a permutation of 1..9."""
    grid = np.asarray(grid).reshape(GRID_SIZE, GRID_SIZE)
    return all(np.array_equal(np.sort(unit), _DIGITS) for unit in _units(grid))


def is_consistent(grid: Grid) -> bool:
    """No digit repeats within a row, column or box; zeros are ignored."""
    grid = np.asarray(grid).reshape(GRID_SIZE, GRID_SIZE)
    for unit in _units(grid):
        filled = unit[unit != 0]
        if len(np.unique(filled)) != len(filled):
            return False
    return True


def format_grid(grid: Grid, newline: str = "\r\n") -> str:
    """Render a grid as plain text: three groups of three per row, a blank line
    between bands and ``.`` for empty cells."""
    grid = np.asarray(grid).reshape(GRID_SIZE, GRID_SIZE)
    lines = []
    for row_index, row in enumerate(grid):
        cells = "".join(str(v) if v else "." for v in row.tolist())
        lines.append(" ".join(cells[i : i + BOX_SIZE] for i in range(0, 9, 3)))
        if row_index % BOX_SIZE == BOX_SIZE - 1 and row_index < GRID_SIZE - 1:
            lines.append("")
    return newline.join(lines)


def parse_grid(text: str) -> Grid:
    cells = [ch for ch in text if not ch.isspace()]
    if len(cells) != GRID_CELLS:
        msg = f"Expected {GRID_CELLS} cells, got {len(cells)}."
        raise ValueError(msg)

    values = []
    for ch in cells:
        if ch == ".":
            values.append(0)
        elif ch in "0123456789":
            values.append(int(ch))
        else:
            msg = f"Unexpected character in grid text: {ch!r}"
            raise ValueError(msg)
    return np.array(values, dtype=np.int8).reshape(GRID_SIZE, GRID_SIZE)
