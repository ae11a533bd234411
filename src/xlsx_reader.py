"""Read a nonogram puzzle back from an XLSX workbook written by xlsx_writer."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import openpyxl

from models import NonogramError, Puzzle, SizeMismatchError
from xlsx_writer import METADATA_SHEET, SOLUTION_SHEET

_TRUE_VALUES = {1, "1", True, "x", "X", "#"}
_FALSE_VALUES = {0, "0", False, "", None, "."}


def read_puzzle_xlsx(path: str | Path) -> Puzzle:
    """Open *path*, read metadata and solution, and rebuild the Puzzle.

    Clues and difficulty are recomputed from the solution grid.
    Raises SizeMismatchError if the 'Solution' sheet is not exactly
    Width x Height.
    """
    path = Path(path)
    if not path.exists():
        raise NonogramError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        for name in (METADATA_SHEET, SOLUTION_SHEET):
            if name not in wb.sheetnames:
                raise NonogramError(f"Workbook {path.name} has no '{name}' sheet")

        meta = _read_metadata(wb[METADATA_SHEET])
        width = _read_dimension(meta, "width")
        height = _read_dimension(meta, "height")
        grid = _read_solution(wb[SOLUTION_SHEET], width, height)
    finally:
        wb.close()

    return Puzzle.from_grid(
        grid,
        width=width,
        height=height,
        title=str(_first(meta, "title") or "Untitled"),
        **_optional_fields(meta),
    )


def _read_metadata(sheet) -> dict[str, list[object]]:
    """Collect 'Label | value | value ...' rows, keyed by lowercase label.

    Empty cells after the label are dropped.
    """
    meta: dict[str, list[object]] = {}
    for row in sheet.iter_rows(min_row=1, values_only=True):
        if not row or row[0] is None:
            continue
        meta[str(row[0]).strip().lower()] = [v for v in row[1:] if v not in (None, "")]
    return meta


def _first(meta: dict[str, list[object]], key: str) -> object:
    values = meta.get(key)
    return values[0] if values else None


def _read_dimension(meta: dict[str, list[object]], key: str) -> int:
    if key not in meta:
        raise NonogramError(f"Missing '{key.capitalize()}' in puzzle metadata")
    raw = _first(meta, key)
    try:
        value = int(raw)
    except (ValueError, TypeError):
        raise NonogramError(
            f"Invalid '{key.capitalize()}' in puzzle metadata: {raw!r}"
        ) from None
    if value < 1:
        raise NonogramError(f"'{key.capitalize()}' must be positive, got {value}")
    return value


def _read_solution(sheet, width: int, height: int) -> list[list[bool]]:
    """Parse the used range of the sheet, which must be exactly width x height."""
    rows: list[list[object]] = []
    for row in sheet.iter_rows(min_row=1, values_only=True):
        values = list(row)
        while values and values[-1] is None:
            values.pop()
        rows.append(values)
    while rows and not rows[-1]:
        rows.pop()

    used_h = len(rows)
    used_w = max((len(r) for r in rows), default=0)
    if (used_w, used_h) != (width, height):
        raise SizeMismatchError(
            f"Solution sheet is {used_w}x{used_h}, "
            f"metadata declares {width}x{height}"
        )

    grid: list[list[bool]] = []
    for r, values in enumerate(rows, start=1):
        values = values + [None] * (width - len(values))
        grid.append([_parse_cell(v, r, c) for c, v in enumerate(values, start=1)])
    return grid


def _parse_cell(value: object, row: int, col: int) -> bool:
    if isinstance(value, str):
        value = value.strip()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    print(
        f"Warning: unrecognised cell value {value!r} at row {row}, column {col}; "
        f"treating as empty",
        file=sys.stderr,
    )
    return False


def _parse_timestamp(meta: dict[str, list[object]], key: str) -> datetime | None:
    value = _first(meta, key)
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        print(
            f"Warning: ignoring bad '{key.capitalize()}' value {value!r}",
            file=sys.stderr,
        )
        return None


def _optional_fields(meta: dict[str, list[object]]) -> dict[str, object]:
    fields: dict[str, object] = {}
    if _first(meta, "id"):
        fields["puzzle_id"] = str(_first(meta, "id"))
    if _first(meta, "author"):
        fields["author"] = str(_first(meta, "author"))
    if _first(meta, "description"):
        fields["description"] = str(_first(meta, "description"))
    if meta.get("tags"):
        fields["tags"] = tuple(str(t) for t in meta["tags"])

    created = _parse_timestamp(meta, "created")
    if created is not None:
        fields["created_at"] = created
    modified = _parse_timestamp(meta, "modified")
    if modified is not None:
        fields["modified_at"] = modified
    return fields
