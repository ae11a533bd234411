"""Render a nonogram as standalone SVG, clues in the top and left margins."""

from __future__ import annotations

from models import Puzzle

FONT_FAMILY = "Helvetica, Arial, sans-serif"


def render_svg(
    puzzle: Puzzle,
    output_path: str,
    show_solution: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the puzzle grid and its clues to an SVG file."""
    if cell_size is None:
        cell_size = _default_cell_size(max(puzzle.width, puzzle.height))

    clue_font = cell_size * 0.5
    left = _row_margin(puzzle, cell_size)
    top = _column_margin(puzzle, cell_size)
    grid_w = cell_size * puzzle.width
    grid_h = cell_size * puzzle.height
    total_w = left + grid_w
    total_h = top + grid_h

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{total_w}" height="{total_h}" '
        f'viewBox="0 0 {total_w} {total_h}">\n'
    )
    parts.append(
        f'  <rect x="0" y="0" width="{total_w}" height="{total_h}" fill="white"/>\n'
    )

    # Row clues, right-aligned against the grid
    for r, clues in enumerate(puzzle.row_clues):
        ty = top + r * cell_size + cell_size / 2
        for i, value in enumerate(reversed(clues)):
            tx = left - (i + 0.5) * cell_size
            parts.append(_clue_text(tx, ty, value, clue_font))

    # Column clues, bottom-aligned against the grid
    for c, clues in enumerate(puzzle.column_clues):
        tx = left + c * cell_size + cell_size / 2
        for i, value in enumerate(reversed(clues)):
            ty = top - (i + 0.5) * cell_size
            parts.append(_clue_text(tx, ty, value, clue_font))

    for r in range(puzzle.height):
        for c in range(puzzle.width):
            x = left + c * cell_size
            y = top + r * cell_size
            fill = "black" if show_solution and puzzle.get_cell(r, c) else "white"
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )

    # Guide lines every 5 cells
    for c in range(5, puzzle.width, 5):
        x = left + c * cell_size
        parts.append(
            f'  <line x1="{x}" y1="{top}" x2="{x}" y2="{total_h}" '
            f'stroke="black" stroke-width="1.2"/>\n'
        )
    for r in range(5, puzzle.height, 5):
        y = top + r * cell_size
        parts.append(
            f'  <line x1="{left}" y1="{y}" x2="{total_w}" y2="{y}" '
            f'stroke="black" stroke-width="1.2"/>\n'
        )

    # Outer border
    parts.append(
        f'  <rect x="{left}" y="{top}" width="{grid_w}" height="{grid_h}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(puzzle: Puzzle, output_path: str) -> None:
    """Render the blank puzzle (clues only) to SVG."""
    render_svg(puzzle, output_path, show_solution=False)


def render_answer_svg(puzzle: Puzzle, output_path: str) -> None:
    """Render the solved grid to SVG."""
    render_svg(puzzle, output_path, show_solution=True)


def _clue_text(x: float, y: float, value: int, font_size: float) -> str:
    return (
        f'  <text x="{x}" y="{y}" '
        f'text-anchor="middle" dominant-baseline="central" '
        f'font-family="{FONT_FAMILY}" font-size="{font_size}" '
        f'fill="black">{value}</text>\n'
    )


def _row_margin(puzzle: Puzzle, cell_size: float) -> float:
    longest = max((len(c) for c in puzzle.row_clues), default=0)
    return max(1, longest) * cell_size


def _column_margin(puzzle: Puzzle, cell_size: float) -> float:
    longest = max((len(c) for c in puzzle.column_clues), default=0)
    return max(1, longest) * cell_size


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 15:
        return 20.0
    elif longest_side <= 25:
        return 16.0
    else:
        return 12.0
