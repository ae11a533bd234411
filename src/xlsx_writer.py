"""Write a nonogram puzzle to an XLSX workbook."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from clue_engine import format_clues
from models import Puzzle

METADATA_SHEET = "Puzzle"
SOLUTION_SHEET = "Solution"
CLUES_SHEET = "Clues"

FILLED_FILL = PatternFill(fill_type="solid", start_color="000000", end_color="000000")


def write_puzzle_xlsx(puzzle: Puzzle, output_path: str) -> None:
    """Write *puzzle* to an Excel workbook.

    Sheets: 'Puzzle' (label/value metadata), 'Solution' (1/0 per cell, filled
    cells shaded black) and 'Clues' (ROWS then COLUMNS, space-separated runs).
    Clues are informational; the reader recomputes them from 'Solution'.
    """
    wb = openpyxl.Workbook()
    header_font = Font(bold=True, size=12)

    # Metadata
    ws = wb.active
    ws.title = METADATA_SHEET
    metadata = [
        ("Title", [puzzle.title]),
        ("ID", [puzzle.puzzle_id]),
        ("Width", [puzzle.width]),
        ("Height", [puzzle.height]),
        ("Difficulty", [puzzle.difficulty]),
        ("Author", [puzzle.author or ""]),
        ("Description", [puzzle.description or ""]),
        ("Tags", list(puzzle.tags)),  # one tag per cell
        ("Created", [puzzle.created_at.isoformat()]),
        ("Modified", [puzzle.modified_at.isoformat() if puzzle.modified_at else ""]),
    ]
    for row, (label, values) in enumerate(metadata, start=1):
        ws.cell(row=row, column=1, value=label).font = header_font
        for col, value in enumerate(values, start=2):
            _write_value(ws, row, col, value)
    ws.column_dimensions["A"].width = 15
    ws.column_dimensions["B"].width = 40

    # Solution grid
    ws_grid = wb.create_sheet(title=SOLUTION_SHEET)
    for r, row in enumerate(puzzle.grid, start=1):
        for c, filled in enumerate(row, start=1):
            cell = ws_grid.cell(row=r, column=c, value=1 if filled else 0)
            cell.alignment = Alignment(horizontal="center")
            if filled:
                cell.fill = FILLED_FILL
    for c in range(1, puzzle.width + 1):
        ws_grid.column_dimensions[get_column_letter(c)].width = 3

    # Clues
    ws_clues = wb.create_sheet(title=CLUES_SHEET)
    row = 1

    ws_clues.cell(row=row, column=1, value="ROWS").font = header_font
    row += 1
    for i, clues in enumerate(puzzle.row_clues, start=1):
        ws_clues.cell(row=row, column=1, value=i)
        ws_clues.cell(row=row, column=2, value=format_clues(clues))
        row += 1

    # Blank separator
    row += 1

    ws_clues.cell(row=row, column=1, value="COLUMNS").font = header_font
    row += 1
    for i, clues in enumerate(puzzle.column_clues, start=1):
        ws_clues.cell(row=row, column=1, value=i)
        ws_clues.cell(row=row, column=2, value=format_clues(clues))
        row += 1

    ws_clues.column_dimensions["A"].width = 10
    ws_clues.column_dimensions["B"].width = 30

    wb.save(output_path)


def _write_value(ws, row: int, col: int, value) -> None:
    """Write *value*; strings are always stored as text, never as formulas."""
    cell = ws.cell(row=row, column=col, value=value)
    if isinstance(value, str) and value.startswith("="):
        cell.data_type = "s"
