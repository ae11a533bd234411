#!/usr/bin/env python3
"""CLI entry point for nonogram generation.

Pipeline: generate grid (random / symmetric / striped / clustered)
→ optional shuffle → validate → build Puzzle → write PDF, XLSX and SVGs.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from difficulty import fill_label
from models import NonogramError, Puzzle
from pattern_generators import PATTERNS


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a nonogram puzzle (PDF, XLSX and SVG)."
    )
    p.add_argument(
        "output",
        nargs="?",
        default="nonogram.pdf",
        help="Output PDF path; other files share its stem (default: nonogram.pdf)",
    )
    p.add_argument("--pattern", choices=PATTERNS, default="random",
                   help="Grid generator (default: random)")
    p.add_argument("--width", type=int, default=15,
                   help="Grid width, 1..50 (default: 15)")
    p.add_argument("--height", type=int, default=15,
                   help="Grid height, 1..50 (default: 15)")
    p.add_argument("--fill", type=float, default=0.5,
                   help="Fill probability for random/symmetric, 0.0..1.0 (default: 0.5)")
    p.add_argument("--clusters", type=int, default=5,
                   help="Number of clusters for --pattern clustered (default: 5)")
    p.add_argument("--cluster-size", type=int, default=3,
                   help="Maximum cluster radius for --pattern clustered (default: 3)")
    p.add_argument("--shuffle", action="store_true",
                   help="Shuffle the generated grid before building the puzzle")
    p.add_argument("--preserve-clues", action="store_true",
                   help="With --shuffle, shuffle within rows instead of re-drawing cells")
    p.add_argument("--title", default="NONOGRAM",
                   help='Title text (default: "NONOGRAM")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--max-attempts", type=int, default=100,
                   help="Regeneration attempts before giving up (default: 100)")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        puzzle = _build_puzzle(args, random.Random(seed))
        _output_all(puzzle, args.title, args.output)
    except NonogramError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    elapsed = time.time() - t0
    print(
        f"Generated {puzzle.width}x{puzzle.height} '{args.pattern}' puzzle "
        f"(seed={seed}), fill {puzzle.fill_ratio * 100:.0f}% ({fill_label(puzzle.grid)}), "
        f"difficulty {puzzle.difficulty}/5, time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _build_puzzle(args, rng: random.Random) -> Puzzle:
    """Generate, optionally shuffle, and validate a grid, then wrap it in a Puzzle."""
    from grid_validator import (
        check_dimensions,
        check_fill_probability,
        check_positive,
        is_valid_grid,
    )
    from pattern_generators import generate_valid, shuffle_grid

    check_dimensions(args.width, args.height)
    check_fill_probability(args.fill)
    check_positive("Max attempts", args.max_attempts)

    print(
        f"Generating {args.width}x{args.height} '{args.pattern}' grid...",
        file=sys.stderr,
    )

    for _ in range(args.max_attempts):
        grid = generate_valid(
            args.pattern,
            args.width,
            args.height,
            max_attempts=args.max_attempts,
            rng=rng,
            fill=args.fill,
            cluster_count=args.clusters,
            cluster_size=args.cluster_size,
        )
        if args.shuffle:
            grid = shuffle_grid(grid, preserve_clues=args.preserve_clues, rng=rng)
        if is_valid_grid(grid):
            return Puzzle.from_grid(grid, title=args.title)

    raise NonogramError(
        f"Shuffled grid degenerate after {args.max_attempts} attempts"
    )


def _output_all(puzzle: Puzzle, title: str, output_path: str) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from xlsx_writer import write_puzzle_xlsx
    from svg_renderer import render_puzzle_svg, render_answer_svg

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(puzzle, title, pdf_path)
    write_puzzle_xlsx(puzzle, xlsx_path)
    render_puzzle_svg(puzzle, puzzle_svg_path)
    render_answer_svg(puzzle, answer_svg_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)
    print(f"Output: {puzzle_svg_path}", file=sys.stderr)
    print(f"Output: {answer_svg_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
