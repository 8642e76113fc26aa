"""Rectangular grid of cells and their candidate labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from .compatibility import CompatibilityTable
from .errors import InvalidDimensions, OutOfBounds
from .model import CellView, Coord, Label

# up, down, left, right
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass
class Cell:
    """Mutable cell state. ``resolved`` with an empty domain marks a dead end."""
    domain: Set[Label] = field(default_factory=set)
    resolved: bool = False

    @property
    def is_dead_end(self) -> bool:
        return self.resolved and not self.domain


class Grid:
    """Flat, coordinate-indexed storage of ``width * height`` cells.

    Cells are stored column by column so that iterating the backing list
    visits ``x`` in the outer loop and ``y`` in the inner one. Neighbors are
    computed from coordinates; cells never hold references to each other.
    """

    def __init__(self, width: int, height: int, table: CompatibilityTable) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self.table = table
        self._cells: List[Cell] = [
            Cell(domain=set(table.labels)) for _ in range(width * height)
        ]

    @classmethod
    def create(cls, width: int, height: int, label_count: int) -> "Grid":
        """Grid over labels ``0..label_count-1`` with no adjacency restrictions."""
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        return cls(width, height, CompatibilityTable.unconstrained(label_count))

    def __repr__(self) -> str:
        return (
            f"Grid({self.width}x{self.height}, labels={len(self.table)}, "
            f"unresolved={self.unresolved_count()})"
        )

    # Coordinates ------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return x * self.height + y

    def coords(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def neighbors_of(self, x: int, y: int) -> List[Coord]:
        """In-bounds orthogonal neighbors in the order up, down, left, right."""
        self._index(x, y)
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    # Cell access ------------------------------------------------------

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self._index(x, y)]

    def cells(self) -> Iterator[Tuple[Coord, Cell]]:
        return zip(self.coords(), self._cells)

    def is_fully_resolved(self) -> bool:
        return all(cell.resolved for cell in self._cells)

    def unresolved_count(self) -> int:
        return sum(1 for cell in self._cells if not cell.resolved)

    def dead_ends(self) -> List[Coord]:
        return [coord for coord, cell in self.cells() if cell.is_dead_end]

    def reset(self) -> None:
        """Return every cell to the full, unresolved label set."""
        for cell in self._cells:
            cell.domain = set(self.table.labels)
            cell.resolved = False

    # Snapshots --------------------------------------------------------

    def view(self, x: int, y: int) -> CellView:
        cell = self.cell_at(x, y)
        return CellView(x=x, y=y, resolved=cell.resolved, domain=frozenset(cell.domain))

    def snapshot(self) -> Tuple[CellView, ...]:
        return tuple(
            CellView(x=x, y=y, resolved=cell.resolved, domain=frozenset(cell.domain))
            for (x, y), cell in self.cells()
        )

    def label_at(self, x: int, y: int) -> Optional[Label]:
        return self.view(x, y).label

    def rows(self) -> List[List[CellView]]:
        """Snapshot arranged as ``rows[y][x]`` for top-to-bottom drawing."""
        return [[self.view(x, y) for x in range(self.width)] for y in range(self.height)]


def create_grid(width: int, height: int, table: CompatibilityTable) -> Grid:
    """Fully ambiguous grid using the caller's compatibility table."""
    return Grid(width, height, table)
