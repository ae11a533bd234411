"""Procedural nonogram grid generators.

Every generator accepts an optional ``rng`` (a :class:`random.Random`). When
omitted, a shared module-level instance is used, so pass a seeded ``rng`` for
reproducible output. The shared instance is not meant for concurrent use.
"""

from __future__ import annotations

import math
import random

from grid_validator import (
    check_dimensions,
    check_fill_probability,
    check_non_negative,
    check_positive,
    is_valid_grid,
)
from models import GenerationError, Grid, InvalidParameterError

PATTERNS = ("random", "symmetric", "striped", "clustered")

_shared_rng = random.Random()


def _blank(width: int, height: int) -> Grid:
    return [[False] * width for _ in range(height)]


def generate_random(
    width: int,
    height: int,
    fill: float = 0.5,
    rng: random.Random | None = None,
) -> Grid:
    """Each cell is filled independently with probability *fill*."""
    check_dimensions(width, height)
    check_fill_probability(fill)
    rng = rng or _shared_rng

    return [[rng.random() < fill for _ in range(width)] for _ in range(height)]


def generate_symmetric(
    width: int,
    height: int,
    fill: float = 0.5,
    rng: random.Random | None = None,
) -> Grid:
    """Point-symmetric grid: draw the upper-left quadrant, mirror it three ways."""
    check_dimensions(width, height)
    check_fill_probability(fill)
    rng = rng or _shared_rng

    grid = _blank(width, height)
    mid_h = math.ceil(height / 2)
    mid_w = math.ceil(width / 2)

    for y in range(mid_h):
        my = height - 1 - y
        for x in range(mid_w):
            mx = width - 1 - x
            filled = rng.random() < fill
            grid[y][x] = filled
            # Skip partners that coincide with the source on odd centre lines.
            if x < mx:
                grid[y][mx] = filled
            if y < my:
                grid[my][x] = filled
            if x < mx and y < my:
                grid[my][mx] = filled

    return grid


def generate_striped(
    width: int,
    height: int,
    rng: random.Random | None = None,
) -> Grid:
    """Alternating full-width horizontal bands of filled and empty rows.

    Band heights are drawn from ``1..max(1, height // 2)``; the first band's
    state comes from a single coin flip.
    """
    check_dimensions(width, height)
    rng = rng or _shared_rng

    max_band = max(1, height // 2)
    band = rng.randint(1, max_band)
    filled = rng.random() < 0.5

    grid: Grid = []
    remaining = band
    for _ in range(height):
        if remaining == 0:
            filled = not filled
            remaining = rng.randint(1, max_band)
        grid.append([filled] * width)
        remaining -= 1

    return grid


def generate_clustered(
    width: int,
    height: int,
    cluster_count: int = 5,
    cluster_size: int = 3,
    rng: random.Random | None = None,
) -> Grid:
    """Fill circular blobs around random centres; blobs may overlap."""
    check_dimensions(width, height)
    check_non_negative("Cluster count", cluster_count)
    check_positive("Cluster size", cluster_size)
    rng = rng or _shared_rng

    grid = _blank(width, height)

    for _ in range(cluster_count):
        cy = rng.randrange(height)
        cx = rng.randrange(width)
        radius = rng.randint(1, cluster_size)
        r2 = radius * radius

        for y in range(max(0, cy - radius), min(height, cy + radius + 1)):
            dy = y - cy
            for x in range(max(0, cx - radius), min(width, cx + radius + 1)):
                dx = x - cx
                if dx * dx + dy * dy <= r2:
                    grid[y][x] = True

    return grid


def shuffle_grid(
    grid: Grid,
    preserve_clues: bool = False,
    rng: random.Random | None = None,
) -> Grid:
    """Return a shuffled copy of *grid*.

    With *preserve_clues* each row is Fisher-Yates shuffled, which keeps the
    per-row filled count but not the run structure. Without it every cell is
    re-drawn from a fair coin.
    """
    rng = rng or _shared_rng
    shuffled = [list(row) for row in grid]

    if not preserve_clues:
        for row in shuffled:
            for x in range(len(row)):
                row[x] = rng.random() < 0.5
        return shuffled

    for row in shuffled:
        for x in range(len(row) - 1, 0, -1):
            j = rng.randint(0, x)
            row[x], row[j] = row[j], row[x]
    return shuffled


def generate(
    pattern: str,
    width: int,
    height: int,
    fill: float = 0.5,
    cluster_count: int = 5,
    cluster_size: int = 3,
    rng: random.Random | None = None,
) -> Grid:
    """Dispatch to the generator named by *pattern*."""
    if pattern == "random":
        return generate_random(width, height, fill, rng=rng)
    if pattern == "symmetric":
        return generate_symmetric(width, height, fill, rng=rng)
    if pattern == "striped":
        return generate_striped(width, height, rng=rng)
    if pattern == "clustered":
        return generate_clustered(width, height, cluster_count, cluster_size, rng=rng)
    raise InvalidParameterError(
        f"Unknown pattern {pattern!r} (expected one of: {', '.join(PATTERNS)})"
    )


def generate_valid(
    pattern: str,
    width: int,
    height: int,
    max_attempts: int = 100,
    rng: random.Random | None = None,
    **params,
) -> Grid:
    """Regenerate until the grid passes :func:`is_valid_grid`.

    Raises GenerationError if *max_attempts* grids are all degenerate.
    """
    check_positive("Max attempts", max_attempts)
    rng = rng or _shared_rng

    for _ in range(max_attempts):
        grid = generate(pattern, width, height, rng=rng, **params)
        if is_valid_grid(grid):
            return grid

    raise GenerationError(
        f"No valid {width}x{height} '{pattern}' grid after {max_attempts} attempts"
    )
