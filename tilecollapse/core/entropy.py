"""Remaining-candidate counts over a grid."""

from __future__ import annotations

from typing import List, Optional

from .grid import Grid


def entropy_map(grid: Grid) -> List[List[Optional[int]]]:
    """Remaining candidate counts as ``rows[y][x]``; ``None`` for resolved cells."""
    return [
        [
            None if grid.cell_at(x, y).resolved else len(grid.cell_at(x, y).domain)
            for x in range(grid.width)
        ]
        for y in range(grid.height)
    ]


def total_potential(grid: Grid) -> int:
    """Sum of domain sizes over all cells; strictly drops on every propagation push."""
    return sum(len(cell.domain) for _, cell in grid.cells())
