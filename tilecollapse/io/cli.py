"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tilecollapse.core.errors import StepBudgetExceeded, TileCollapseError
from tilecollapse.core.grid import create_grid
from tilecollapse.core.model import StepStatus
from tilecollapse.core.solver import Solver
from tilecollapse.logging_config import setup_logging
from tilecollapse.tilesets import get_tileset

from . import parser, render


def resolve_config(source: str) -> parser.TilesetConfig:
    """Load ``source`` as a YAML file if it exists, else as a built-in tile-set name."""
    path = Path(source)
    if path.suffix in (".yaml", ".yml") or path.is_file():
        return parser.load_tileset(path)
    return parser.TilesetConfig.from_tileset(get_tileset(source))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Fill a grid with mutually compatible tiles")
    ap.add_argument("tileset", nargs="?", default="terrain", help="Built-in tile set name or path to YAML")
    ap.add_argument("--width", type=int, help="Grid width (overrides tile set)")
    ap.add_argument("--height", type=int, help="Grid height (overrides tile set)")
    ap.add_argument("--seed", type=int, help="Random seed")
    ap.add_argument("--max-steps", type=int, help="Step budget for a full run")
    ap.add_argument("--steps", type=int, help="Only perform this many single steps")
    ap.add_argument("--log-level", default="WARNING", help="Console log level")
    ap.add_argument("--log-file", help="Also write a debug log here")
    args = ap.parse_args(argv)

    setup_logging(getattr(logging, args.log_level.upper(), logging.WARNING), args.log_file)

    try:
        cfg = resolve_config(args.tileset)
    except (KeyError, OSError, TileCollapseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.width is not None:
        cfg.width = args.width
    if args.height is not None:
        cfg.height = args.height
    seed = args.seed if args.seed is not None else cfg.seed
    try:
        max_steps = args.max_steps if args.max_steps is not None else cfg.max_steps
    except (TypeError, ValueError) as exc:
        print(f"error: bad max_steps option: {exc}", file=sys.stderr)
        return 2
    if max_steps < 0:
        print(f"error: max_steps must be non-negative, got {max_steps}", file=sys.stderr)
        return 2

    try:
        grid = create_grid(cfg.width, cfg.height, cfg.table())
    except TileCollapseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    solver = Solver(grid, random.Random(seed))
    code = 0
    if args.steps is not None:
        for _ in range(args.steps):
            if solver.step().status is StepStatus.COMPLETE:
                break
    else:
        try:
            solver.run(max_steps)
        except StepBudgetExceeded as exc:
            print(f"warning: {exc}", file=sys.stderr)
            code = 1

    print(render.render_text(grid, cfg.glyphs))
    print(solver.status)
    print(f"Collapsed: {solver.collapsed_count}  Contradictions: {len(solver.contradictions)}")
    return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
