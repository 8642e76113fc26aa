"""Plain-text rendering of grid snapshots."""

from __future__ import annotations

from typing import Mapping, Optional

from tilecollapse.core.entropy import entropy_map
from tilecollapse.core.grid import Grid
from tilecollapse.core.model import CellView

DEAD_END = "!"
CROWDED = "+"


def count_glyph(count: int) -> str:
    return str(count) if count < 10 else CROWDED


def cell_glyph(view: CellView, glyphs: Optional[Mapping] = None) -> str:
    """Tile glyph for a resolved cell, ``!`` for a dead end, else the candidate count."""
    if view.is_dead_end:
        return DEAD_END
    if view.resolved:
        label = view.label
        if glyphs and label in glyphs:
            return glyphs[label]
        return str(label)[:1]
    return count_glyph(len(view.domain))


def render_text(grid: Grid, glyphs: Optional[Mapping] = None) -> str:
    counts = entropy_map(grid)
    return "\n".join(
        "".join(
            cell_glyph(view, glyphs) if counts[y][x] is None else count_glyph(counts[y][x])
            for x, view in enumerate(row)
        )
        for y, row in enumerate(grid.rows())
    )
