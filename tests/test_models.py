"""Tests for models.py."""

from datetime import datetime

import pytest

from models import (
    CellIndexError,
    CellState,
    InvalidDimensionError,
    NonogramError,
    Puzzle,
    SizeMismatchError,
    play_grid_to_solution,
)

T, F = True, False

HEART = [
    [F, T, F, T, F],
    [T, T, T, T, T],
    [T, T, T, T, T],
    [F, T, T, T, F],
    [F, F, T, F, F],
]


class TestCellState:
    def test_values(self):
        assert CellState.EMPTY.value == 0
        assert CellState.FILLED.value == 1
        assert CellState.CROSSED.value == 2

    def test_play_grid_to_solution(self):
        play = [[0, 1, 2], [CellState.FILLED, CellState.CROSSED, CellState.EMPTY]]
        assert play_grid_to_solution(play) == [[F, T, F], [T, F, F]]


class TestPuzzleConstruction:
    def test_from_grid(self):
        puzzle = Puzzle.from_grid(HEART, title="Heart")
        assert puzzle.width == 5
        assert puzzle.height == 5
        assert puzzle.title == "Heart"

    def test_grid_round_trip(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.grid == HEART

    def test_grid_property_is_a_copy(self):
        puzzle = Puzzle.from_grid(HEART)
        grid = puzzle.grid
        grid[0][0] = True
        assert puzzle.get_cell(0, 0) is False

    def test_input_grid_changes_do_not_leak(self):
        grid = [list(row) for row in HEART]
        puzzle = Puzzle.from_grid(grid)
        grid[4][2] = False
        assert puzzle.get_cell(4, 2) is True

    def test_from_flat(self):
        puzzle = Puzzle.from_flat([T, F, F, T, T, F], width=3, height=2)
        assert puzzle.grid == [[T, F, F], [T, T, F]]
        assert puzzle.flat == [T, F, F, T, T, F]

    def test_flat_size_mismatch(self):
        with pytest.raises(SizeMismatchError, match="does not match"):
            Puzzle.from_flat([T, F, T], width=2, height=2)

    def test_row_length_mismatch(self):
        with pytest.raises(SizeMismatchError, match="Row 1"):
            Puzzle.from_grid([[T, F], [T]])

    def test_declared_height_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Puzzle.from_grid([[T, F], [F, T]], width=2, height=3)

    def test_declared_width_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Puzzle.from_grid([[T, F], [F, T]], width=3, height=2)

    def test_empty_grid_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Puzzle.from_grid([])

    def test_errors_share_base_class(self):
        with pytest.raises(NonogramError):
            Puzzle.from_flat([T], width=2, height=2)

    def test_size_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            Puzzle.from_flat([T], width=2, height=2)

    def test_frozen(self):
        puzzle = Puzzle.from_grid(HEART)
        with pytest.raises(AttributeError):
            puzzle.width = 7

    def test_metadata_defaults(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.title == "Untitled"
        assert puzzle.puzzle_id
        assert puzzle.tags == ()
        assert isinstance(puzzle.created_at, datetime)
        assert puzzle.modified_at is None

    def test_unique_ids(self):
        assert Puzzle.from_grid(HEART).puzzle_id != Puzzle.from_grid(HEART).puzzle_id

    def test_equality_ignores_descriptive_metadata(self):
        a = Puzzle.from_grid(HEART, title="Heart", puzzle_id="p1", author="Ann",
                             tags=("love",), created_at=datetime(2024, 1, 1))
        b = Puzzle.from_grid(HEART, title="Heart", puzzle_id="p1",
                             description="edited", created_at=datetime(2025, 6, 1))
        assert a == b

    def test_equality_respects_title_and_id(self):
        base = Puzzle.from_grid(HEART, title="Heart", puzzle_id="p1")
        assert base != Puzzle.from_grid(HEART, title="Other", puzzle_id="p1")
        assert base != Puzzle.from_grid(HEART, title="Heart", puzzle_id="p2")


class TestPuzzleClues:
    def test_row_clues(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.get_row_clues(0) == [1, 1]
        assert puzzle.get_row_clues(1) == [5]
        assert puzzle.get_row_clues(3) == [3]
        assert puzzle.get_row_clues(4) == [1]

    def test_column_clues(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.get_column_clues(0) == [2]
        assert puzzle.get_column_clues(1) == [4]
        assert puzzle.get_column_clues(2) == [4]

    def test_empty_line_has_no_clues(self):
        puzzle = Puzzle.from_grid([[T, T], [F, F]])
        assert puzzle.get_row_clues(1) == []

    def test_clue_tuples_cover_every_line(self):
        puzzle = Puzzle.from_grid(HEART)
        assert len(puzzle.row_clues) == 5
        assert len(puzzle.column_clues) == 5

    def test_accessor_returns_copy(self):
        puzzle = Puzzle.from_grid(HEART)
        clues = puzzle.get_row_clues(1)
        clues.append(99)
        assert puzzle.get_row_clues(1) == [5]

    def test_difficulty_computed(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.difficulty == 1


class TestPuzzleAccessors:
    def test_get_cell(self):
        puzzle = Puzzle.from_grid(HEART)
        assert puzzle.get_cell(0, 1) is True
        assert puzzle.get_cell(0, 0) is False

    @pytest.mark.parametrize("row, col", [(-1, 0), (5, 0), (0, -1), (0, 5)])
    def test_get_cell_out_of_bounds(self, row, col):
        puzzle = Puzzle.from_grid(HEART)
        with pytest.raises(CellIndexError, match="out of bounds"):
            puzzle.get_cell(row, col)

    def test_row_clues_out_of_bounds(self):
        puzzle = Puzzle.from_grid([[T, F, T]])
        with pytest.raises(CellIndexError, match="Row index 1"):
            puzzle.get_row_clues(1)

    def test_column_clues_out_of_bounds(self):
        puzzle = Puzzle.from_grid([[T, F, T]])
        with pytest.raises(CellIndexError, match="Column index 3"):
            puzzle.get_column_clues(3)

    def test_index_error_is_index_error(self):
        puzzle = Puzzle.from_grid([[T, F]])
        with pytest.raises(IndexError):
            puzzle.get_column_clues(-1)

    def test_failed_accessor_keeps_puzzle_usable(self):
        puzzle = Puzzle.from_grid(HEART)
        with pytest.raises(CellIndexError):
            puzzle.get_row_clues(10)
        assert puzzle.get_row_clues(1) == [5]

    def test_fill_counts(self):
        puzzle = Puzzle.from_grid([[T, F], [F, F]])
        assert puzzle.filled_count == 1
        assert puzzle.fill_ratio == 0.25

    def test_str(self):
        puzzle = Puzzle.from_grid(HEART, title="Heart", puzzle_id="abc")
        assert str(puzzle) == "Puzzle(id: abc, title: Heart, 5x5, difficulty: 1)"


class TestWithGrid:
    def test_keeps_metadata(self):
        puzzle = Puzzle.from_grid(HEART, title="Heart", puzzle_id="p1", author="me")
        edited = puzzle.with_grid([[T, F], [F, T]])
        assert edited.title == "Heart"
        assert edited.puzzle_id == "p1"
        assert edited.author == "me"
        assert edited.created_at == puzzle.created_at

    def test_sets_modified_at(self):
        puzzle = Puzzle.from_grid(HEART)
        before = datetime.now()
        edited = puzzle.with_grid([[T]])
        assert puzzle.modified_at is None
        assert edited.modified_at is not None
        assert edited.modified_at >= before

    def test_recomputes_clues(self):
        puzzle = Puzzle.from_grid([[T, T], [F, F]])
        edited = puzzle.with_grid([[T, F], [T, F]])
        assert edited.get_column_clues(0) == [2]
        assert puzzle.get_column_clues(0) == [1]

    def test_original_unchanged(self):
        puzzle = Puzzle.from_grid(HEART)
        puzzle.with_grid([[T]])
        assert puzzle.grid == HEART


class TestIsSolvedBy:
    def test_exact_match(self):
        puzzle = Puzzle.from_grid([[T, F], [F, T]])
        assert puzzle.is_solved_by([[1, 0], [0, 1]]) is True

    def test_crossed_counts_as_empty(self):
        puzzle = Puzzle.from_grid([[T, F], [F, T]])
        play = [
            [CellState.FILLED, CellState.CROSSED],
            [CellState.CROSSED, CellState.FILLED],
        ]
        assert puzzle.is_solved_by(play) is True

    def test_wrong_cell(self):
        puzzle = Puzzle.from_grid([[T, F], [F, T]])
        assert puzzle.is_solved_by([[1, 1], [0, 1]]) is False

    def test_wrong_shape(self):
        puzzle = Puzzle.from_grid([[T, F], [F, T]])
        assert puzzle.is_solved_by([[1, 0]]) is False
        assert puzzle.is_solved_by([[1, 0, 0], [0, 1, 0]]) is False
