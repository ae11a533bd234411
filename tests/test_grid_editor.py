"""Tests for grid_editor.py."""

import pytest

from grid_editor import (
    clear_grid,
    empty_grid,
    fill_rectangle,
    from_flat,
    invert_grid,
    resize_grid,
    to_flat,
    toggle_cell,
)
from models import CellIndexError, InvalidDimensionError, Puzzle, SizeMismatchError

T, F = True, False


class TestEmptyGrid:
    def test_shape(self):
        grid = empty_grid(4, 2)
        assert grid == [[F, F, F, F], [F, F, F, F]]

    def test_rows_are_independent(self):
        grid = empty_grid(3, 3)
        grid[0][0] = T
        assert grid[1][0] is F

    def test_rejects_bad_dimensions(self):
        with pytest.raises(InvalidDimensionError):
            empty_grid(0, 3)


class TestToggleCell:
    def test_toggle(self):
        grid = empty_grid(3, 3)
        result = toggle_cell(grid, 1, 2)
        assert result[1][2] is T
        assert toggle_cell(result, 1, 2)[1][2] is F

    def test_input_untouched(self):
        grid = empty_grid(3, 3)
        toggle_cell(grid, 0, 0)
        assert grid[0][0] is F

    def test_out_of_bounds(self):
        with pytest.raises(CellIndexError):
            toggle_cell(empty_grid(3, 3), 3, 0)


class TestFillRectangle:
    def test_fill(self):
        result = fill_rectangle(empty_grid(4, 4), (1, 1), (2, 3))
        assert result == [
            [F, F, F, F],
            [F, T, T, T],
            [F, T, T, T],
            [F, F, F, F],
        ]

    def test_corners_in_any_order(self):
        grid = empty_grid(4, 4)
        assert fill_rectangle(grid, (2, 3), (1, 1)) == fill_rectangle(grid, (1, 1), (2, 3))

    def test_erase(self):
        full = invert_grid(empty_grid(3, 3))
        result = fill_rectangle(full, (0, 0), (0, 2), value=False)
        assert result[0] == [F, F, F]
        assert result[1] == [T, T, T]

    def test_out_of_bounds_corner(self):
        with pytest.raises(CellIndexError):
            fill_rectangle(empty_grid(3, 3), (0, 0), (5, 1))


class TestClearAndInvert:
    def test_clear(self):
        assert clear_grid([[T, F], [T, T]]) == [[F, F], [F, F]]

    def test_invert(self):
        assert invert_grid([[T, F], [F, F]]) == [[F, T], [T, T]]

    def test_invert_swaps_clue_sides(self):
        puzzle = Puzzle.from_grid([[T, F, F, T]])
        inverted = puzzle.with_grid(invert_grid(puzzle.grid))
        assert inverted.get_row_clues(0) == [2]


class TestResizeGrid:
    GRID = [[T, F, T], [F, T, F]]

    def test_grow_keeps_overlap(self):
        result = resize_grid(self.GRID, 4, 3)
        assert result == [
            [T, F, T, F],
            [F, T, F, F],
            [F, F, F, F],
        ]

    def test_shrink_crops(self):
        assert resize_grid(self.GRID, 2, 1) == [[T, F]]

    def test_rejects_bad_dimensions(self):
        with pytest.raises(InvalidDimensionError):
            resize_grid(self.GRID, 51, 2)


class TestFlatConversion:
    def test_to_flat(self):
        assert to_flat([[T, F], [F, T]]) == [T, F, F, T]

    def test_from_flat(self):
        assert from_flat([T, F, F, T, T, T], 3, 2) == [[T, F, F], [T, T, T]]

    def test_from_flat_mismatch(self):
        with pytest.raises(SizeMismatchError):
            from_flat([T, F, F], 2, 2)

    def test_round_trip(self):
        grid = [[T, F, T], [F, F, T]]
        assert from_flat(to_flat(grid), 3, 2) == grid
