"""Grid validation and generator preconditions."""

from __future__ import annotations

from typing import Sequence

from models import MAX_DIMENSION, InvalidDimensionError, InvalidParameterError


def is_valid_grid(grid: Sequence[Sequence[bool]]) -> bool:
    """True if *grid* is rectangular, non-empty and neither blank nor full."""
    if not grid or not grid[0]:
        return False

    width = len(grid[0])
    for row in grid:
        if len(row) != width:
            return False

    filled = sum(1 for row in grid for cell in row if cell)
    total = len(grid) * width
    return 0 < filled < total


def check_dimensions(width: int, height: int) -> None:
    """Raise InvalidDimensionError unless 1 <= width, height <= MAX_DIMENSION."""
    for name, value in (("Width", width), ("Height", height)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
        if not 1 <= value <= MAX_DIMENSION:
            raise InvalidDimensionError(
                f"{name} must be between 1 and {MAX_DIMENSION}, got {value}"
            )


def check_fill_probability(fill: float) -> None:
    if not 0.0 <= fill <= 1.0:
        raise InvalidParameterError(
            f"Fill probability must be between 0.0 and 1.0, got {fill}"
        )


def check_positive(name: str, value: int) -> None:
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")


def check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidParameterError(f"{name} must not be negative, got {value}")
