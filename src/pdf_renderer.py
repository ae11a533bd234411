"""Render a nonogram to a printable PDF using ReportLab.

Layout: title banner at top, grid centered below it with row clues in the
left margin and column clues above. Page 2 is the solution.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth

from models import Puzzle

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
MAX_CELL_SIZE = 24.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    width: int = 15
    height: int = 15
    cell_size: float = MAX_CELL_SIZE
    grid_x: float = 0.0  # left edge of grid
    grid_y: float = 0.0  # top of grid in page coords

    # Clue margins, measured in cells
    row_clue_cells: int = 1
    col_clue_cells: int = 1
    clue_font_size: float = 10.0

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0
    footer_h: float = 14.0

    title: str = "NONOGRAM"


def render_pdf(puzzle: Puzzle, title: str, output_path: str) -> None:
    """Compute layout, draw page 1 (puzzle) + page 2 (solution)."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(puzzle, title)

    c = Canvas(output_path, pagesize=letter)

    # --- Page 1: Puzzle ---
    _draw_title_banner(c, layout)
    _draw_clues(c, puzzle, layout)
    _draw_grid(c, puzzle, layout, show_solution=False)
    _draw_footer(c, puzzle, layout)
    c.showPage()

    # --- Page 2: Solution ---
    solution_layout = _compute_layout(puzzle, "SOLUTION")
    _draw_title_banner(c, solution_layout)
    _draw_clues(c, puzzle, solution_layout)
    _draw_grid(c, puzzle, solution_layout, show_solution=True)
    c.showPage()

    c.save()


def _compute_layout(puzzle: Puzzle, title: str) -> LayoutParams:
    """Size cells so grid plus clue margins fit the usable page area."""
    lp = LayoutParams(width=puzzle.width, height=puzzle.height, title=title)

    lp.row_clue_cells = max(1, max((len(c) for c in puzzle.row_clues), default=0))
    lp.col_clue_cells = max(1, max((len(c) for c in puzzle.column_clues), default=0))

    cols_total = puzzle.width + lp.row_clue_cells
    rows_total = puzzle.height + lp.col_clue_cells
    avail_h = lp.usable_h - lp.banner_h - 12 - lp.footer_h

    lp.cell_size = min(MAX_CELL_SIZE, lp.usable_w / cols_total, avail_h / rows_total)
    lp.clue_font_size = round(lp.cell_size * 0.55, 1)

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    block_w = (lp.width + lp.row_clue_cells) * lp.cell_size
    block_x = (lp.page_w - block_w) / 2
    lp.grid_x = block_x + lp.row_clue_cells * lp.cell_size
    lp.grid_y = lp.banner_y - 12 - lp.col_clue_cells * lp.cell_size


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_clues(c, puzzle: Puzzle, layout: LayoutParams) -> None:
    """Row clues right-aligned left of the grid, column clues stacked above it."""
    cs = layout.cell_size
    fs = layout.clue_font_size
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", fs)

    for r, clues in enumerate(puzzle.row_clues):
        cy = layout.grid_y - (r + 1) * cs + (cs - fs) / 2 + 1
        for i, value in enumerate(reversed(clues)):
            cx = layout.grid_x - (i + 0.5) * cs
            c.drawCentredString(cx, cy, str(value))

    for col, clues in enumerate(puzzle.column_clues):
        cx = layout.grid_x + (col + 0.5) * cs
        for i, value in enumerate(reversed(clues)):
            cy = layout.grid_y + i * cs + (cs - fs) / 2 + 1
            c.drawCentredString(cx, cy, str(value))


def _draw_grid(c, puzzle: Puzzle, layout: LayoutParams, show_solution: bool) -> None:
    """Draw the cell grid, shading filled cells when *show_solution* is set."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(0.5)
    for r in range(puzzle.height):
        for col in range(puzzle.width):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs
            if show_solution and puzzle.get_cell(r, col):
                c.setFillColorRGB(0, 0, 0)
            else:
                c.setFillColorRGB(1, 1, 1)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

    # Guide lines every 5 cells
    c.setLineWidth(1.2)
    for col in range(5, puzzle.width, 5):
        x = x0 + col * cs
        c.line(x, y0, x, y0 - puzzle.height * cs)
    for r in range(5, puzzle.height, 5):
        y = y0 - r * cs
        c.line(x0, y, x0 + puzzle.width * cs, y)

    # Outer border
    c.setLineWidth(1.5)
    c.rect(x0, y0 - puzzle.height * cs, puzzle.width * cs, puzzle.height * cs,
           fill=0, stroke=1)


def _draw_footer(c, puzzle: Puzzle, layout: LayoutParams) -> None:
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", 9)
    c.drawCentredString(
        layout.page_w / 2,
        layout.margin,
        f"{puzzle.width} x {puzzle.height}  |  Difficulty {puzzle.difficulty}/5",
    )
