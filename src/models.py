"""Data models for the nonogram generator."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from clue_engine import grid_clues
from difficulty import score_difficulty

MAX_DIMENSION = 50

Line = list[bool]
Grid = list[list[bool]]
Clues = list[int]


class CellState(Enum):
    """Play-state of a single cell."""

    EMPTY = 0
    FILLED = 1
    CROSSED = 2


def play_grid_to_solution(play_grid: list[list[CellState | int]]) -> Grid:
    """Collapse a three-state play grid to a boolean grid (FILLED -> True)."""
    return [[CellState(v) == CellState.FILLED for v in row] for row in play_grid]


@dataclass(frozen=True)
class Puzzle:
    """An immutable nonogram: solution grid plus derived clues and difficulty.

    ``solution`` is stored flat and row-major (``row * width + col``).
    Clues and difficulty are computed once in ``__post_init__``; to change the
    grid build a new Puzzle with :meth:`with_grid`. Equality compares id,
    title, dimensions and solution only.
    """

    width: int
    height: int
    solution: tuple[bool, ...]
    title: str = "Untitled"
    puzzle_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    description: str | None = field(default=None, compare=False)
    author: str | None = field(default=None, compare=False)
    tags: tuple[str, ...] = field(default=(), compare=False)
    created_at: datetime = field(default_factory=datetime.now, compare=False)
    modified_at: datetime | None = field(default=None, compare=False)

    row_clues: tuple[tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    column_clues: tuple[tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    difficulty: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidDimensionError(
                f"Puzzle dimensions must be at least 1x1, got {self.width}x{self.height}"
            )
        solution = tuple(bool(v) for v in self.solution)
        if len(solution) != self.width * self.height:
            raise SizeMismatchError(
                f"Solution length ({len(solution)}) does not match "
                f"width ({self.width}) x height ({self.height})"
            )
        object.__setattr__(self, "solution", solution)
        object.__setattr__(self, "tags", tuple(self.tags))

        rows, cols = grid_clues(self.grid)
        object.__setattr__(self, "row_clues", tuple(tuple(c) for c in rows))
        object.__setattr__(self, "column_clues", tuple(tuple(c) for c in cols))
        object.__setattr__(
            self, "difficulty",
            score_difficulty(self.width, self.height, rows, cols),
        )

    @classmethod
    def from_flat(cls, solution: list[bool], width: int, height: int, **meta) -> Puzzle:
        """Build from a flat row-major list of length ``width * height``."""
        return cls(width=width, height=height, solution=tuple(solution), **meta)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        width: int | None = None,
        height: int | None = None,
        **meta,
    ) -> Puzzle:
        """Build from a 2-D grid. Width/height default to the grid's own shape."""
        if height is None:
            height = len(grid)
        if width is None:
            width = len(grid[0]) if grid else 0
        if len(grid) != height:
            raise SizeMismatchError(
                f"Grid has {len(grid)} rows, expected height {height}"
            )
        for r, row in enumerate(grid):
            if len(row) != width:
                raise SizeMismatchError(
                    f"Row {r} has {len(row)} cells, expected width {width}"
                )
        flat = [cell for row in grid for cell in row]
        return cls(width=width, height=height, solution=tuple(flat), **meta)

    def with_grid(self, grid: Grid) -> Puzzle:
        """Return a new Puzzle with this puzzle's metadata and a new grid."""
        return Puzzle.from_grid(
            grid,
            title=self.title,
            puzzle_id=self.puzzle_id,
            description=self.description,
            author=self.author,
            tags=self.tags,
            created_at=self.created_at,
            modified_at=datetime.now(),
        )

    @property
    def grid(self) -> Grid:
        """A fresh 2-D copy of the solution."""
        w = self.width
        return [list(self.solution[r * w:(r + 1) * w]) for r in range(self.height)]

    @property
    def flat(self) -> list[bool]:
        return list(self.solution)

    @property
    def filled_count(self) -> int:
        return sum(self.solution)

    @property
    def fill_ratio(self) -> float:
        return self.filled_count / (self.width * self.height)

    def get_cell(self, row: int, col: int) -> bool:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise CellIndexError(
                f"Coordinates ({row}, {col}) are out of bounds for grid "
                f"{self.width}x{self.height}"
            )
        return self.solution[row * self.width + col]

    def get_row_clues(self, row: int) -> Clues:
        if not 0 <= row < self.height:
            raise CellIndexError(
                f"Row index {row} is out of bounds for height {self.height}"
            )
        return list(self.row_clues[row])

    def get_column_clues(self, col: int) -> Clues:
        if not 0 <= col < self.width:
            raise CellIndexError(
                f"Column index {col} is out of bounds for width {self.width}"
            )
        return list(self.column_clues[col])

    def is_solved_by(self, play_grid: list[list[CellState | int]]) -> bool:
        """True when the FILLED cells of *play_grid* match the solution exactly.

        CROSSED and EMPTY are equivalent for this check.
        """
        if len(play_grid) != self.height:
            return False
        if any(len(row) != self.width for row in play_grid):
            return False
        return play_grid_to_solution(play_grid) == self.grid

    def __str__(self) -> str:
        return (
            f"Puzzle(id: {self.puzzle_id}, title: {self.title}, "
            f"{self.width}x{self.height}, difficulty: {self.difficulty})"
        )


class NonogramError(Exception):
    """Base error for puzzle construction, generation and I/O."""


class InvalidDimensionError(NonogramError, ValueError):
    """Width or height outside the supported range."""


class InvalidParameterError(NonogramError, ValueError):
    """A generator parameter (fill probability, cluster count/size) is out of range."""


class SizeMismatchError(NonogramError, ValueError):
    """Supplied grid shape disagrees with the declared width/height."""


class CellIndexError(NonogramError, IndexError):
    """Row/column index outside the grid."""


class GenerationError(NonogramError):
    """No valid grid was produced within the allowed attempts."""
