"""Difficulty heuristics for nonogram grids."""

from __future__ import annotations

from typing import Sequence

MIN_LEVEL = 1
MAX_LEVEL = 5

# Clue-density bump applies when the mean clue count per line exceeds this.
DENSE_CLUE_THRESHOLD = 5


def score_difficulty(
    width: int,
    height: int,
    row_clues: Sequence[Sequence[int]],
    column_clues: Sequence[Sequence[int]],
) -> int:
    """Return a difficulty level in 1..5 from grid area and clue density.

    Each area threshold overwrites the level; the checks run in ascending
    order so the last threshold cleared wins.
    """
    area = width * height
    level = MIN_LEVEL

    if area > 100:
        level = 2
    if area > 225:
        level = 3
    if area > 400:
        level = 4
    if area > 625:
        level = 5

    avg_row = sum(len(c) for c in row_clues) / height
    avg_col = sum(len(c) for c in column_clues) / width
    avg_clue_count = (avg_row + avg_col) / 2

    if avg_clue_count > DENSE_CLUE_THRESHOLD:
        level = min(max(level + 1, MIN_LEVEL), MAX_LEVEL)

    return level


def fill_label(grid: Sequence[Sequence[bool]]) -> str:
    """Editor label from the percentage of filled cells."""
    total = sum(len(row) for row in grid)
    if total == 0:
        return "Easy"
    filled = sum(1 for row in grid for cell in row if cell)
    pct = filled / total * 100

    if pct < 20:
        return "Easy"
    if pct < 50:
        return "Medium"
    if pct < 80:
        return "Hard"
    return "Expert"
