"""Pure grid edits. Each function returns a new grid and leaves its input untouched."""

from __future__ import annotations

from grid_validator import check_dimensions
from models import CellIndexError, Grid, SizeMismatchError


def empty_grid(width: int, height: int) -> Grid:
    check_dimensions(width, height)
    return [[False] * width for _ in range(height)]


def _copy(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def _check_cell(grid: Grid, row: int, col: int) -> None:
    height = len(grid)
    width = len(grid[0]) if grid else 0
    if not (0 <= row < height and 0 <= col < width):
        raise CellIndexError(
            f"Coordinates ({row}, {col}) are out of bounds for grid {width}x{height}"
        )


def toggle_cell(grid: Grid, row: int, col: int) -> Grid:
    _check_cell(grid, row, col)
    result = _copy(grid)
    result[row][col] = not result[row][col]
    return result


def fill_rectangle(
    grid: Grid,
    start: tuple[int, int],
    end: tuple[int, int],
    value: bool = True,
) -> Grid:
    """Set every cell in the inclusive rectangle spanned by two (row, col) corners."""
    _check_cell(grid, *start)
    _check_cell(grid, *end)
    r0, r1 = sorted((start[0], end[0]))
    c0, c1 = sorted((start[1], end[1]))

    result = _copy(grid)
    for r in range(r0, r1 + 1):
        for c in range(c0, c1 + 1):
            result[r][c] = value
    return result


def clear_grid(grid: Grid) -> Grid:
    return [[False] * len(row) for row in grid]


def invert_grid(grid: Grid) -> Grid:
    return [[not cell for cell in row] for row in grid]


def resize_grid(grid: Grid, width: int, height: int) -> Grid:
    """Resize to width x height, keeping the overlapping top-left region."""
    check_dimensions(width, height)
    return [
        [
            grid[r][c] if r < len(grid) and c < len(grid[r]) else False
            for c in range(width)
        ]
        for r in range(height)
    ]


def to_flat(grid: Grid) -> list[bool]:
    return [cell for row in grid for cell in row]


def from_flat(flat: list[bool], width: int, height: int) -> Grid:
    if len(flat) != width * height:
        raise SizeMismatchError(
            f"Flat grid length ({len(flat)}) does not match "
            f"width ({width}) x height ({height})"
        )
    return [list(flat[r * width:(r + 1) * width]) for r in range(height)]
