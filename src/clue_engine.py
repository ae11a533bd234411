"""Derive nonogram clues (run lengths of filled cells) from lines and grids.

Two empty-line conventions exist and both are kept:

* :func:`line_clues` returns ``[]`` for a line with no filled cells. Puzzle
  records use this form.
* :func:`editor_line_clues` returns ``[0]`` for the same line, which is what
  the grid editor displays.
"""

from __future__ import annotations

from typing import Callable, Sequence

LinePolicy = Callable[[Sequence[bool]], list[int]]


def line_clues(line: Sequence[bool]) -> list[int]:
    """Return the lengths of consecutive filled runs, left to right."""
    clues: list[int] = []
    count = 0
    for cell in line:
        if cell:
            count += 1
        elif count > 0:
            clues.append(count)
            count = 0
    if count > 0:
        clues.append(count)
    return clues


def editor_line_clues(line: Sequence[bool]) -> list[int]:
    """Like :func:`line_clues`, but an all-empty line yields ``[0]``."""
    return line_clues(line) or [0]


def row_clues(
    grid: Sequence[Sequence[bool]], policy: LinePolicy = line_clues
) -> list[list[int]]:
    return [policy(row) for row in grid]


def column_clues(
    grid: Sequence[Sequence[bool]], policy: LinePolicy = line_clues
) -> list[list[int]]:
    if not grid:
        return []
    width = len(grid[0])
    return [policy([row[c] for row in grid]) for c in range(width)]


def grid_clues(
    grid: Sequence[Sequence[bool]], policy: LinePolicy = line_clues
) -> tuple[list[list[int]], list[list[int]]]:
    """Return ``(row_clues, column_clues)`` for *grid* using *policy* per line."""
    return row_clues(grid, policy), column_clues(grid, policy)


def clue_span(clues: Sequence[int]) -> int:
    """Minimum line length that fits *clues* (runs plus one-cell gaps)."""
    runs = [c for c in clues if c > 0]
    if not runs:
        return 0
    return sum(runs) + len(runs) - 1


def format_clues(clues: Sequence[int], sep: str = " ") -> str:
    """Render a clue sequence as text, e.g. ``[3, 1] -> "3 1"``."""
    return sep.join(str(c) for c in clues)
