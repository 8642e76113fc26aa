"""Minimum-entropy collapse with worklist propagation.

A step selects the unresolved cell with the fewest candidates, commits it to
one of them at random and then pushes the new constraint outward until no
neighboring domain shrinks any further. A domain that empties is a
contradiction: the cell is marked resolved with no label and the run goes on.
Nothing is rolled back.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from tilecollapse.logging_config import get_logger, log_step

from .entropy import total_potential
from .errors import StepBudgetExceeded
from .grid import Grid
from .model import Completion, Coord, Label, StepResult, StepStatus

logger = get_logger(__name__)


def select_cell(grid: Grid, rng: random.Random) -> Optional[Coord]:
    """Pick uniformly among the unresolved cells with the smallest domain."""
    best = None
    candidates: List[Coord] = []
    for coord, cell in grid.cells():
        if cell.resolved:
            continue
        size = len(cell.domain)
        if best is None or size < best:
            best = size
            candidates = [coord]
        elif size == best:
            candidates.append(coord)
    if not candidates:
        return None
    return rng.choice(candidates)


def collapse(grid: Grid, coord: Coord, rng: random.Random) -> Label:
    cell = grid.cell_at(*coord)
    if cell.resolved:
        raise ValueError(f"cell {coord} is already resolved")
    choice = rng.choice(grid.table.ordered(cell.domain))
    cell.domain = {choice}
    cell.resolved = True
    return choice


def propagate(grid: Grid, start: Coord) -> Tuple[Coord, ...]:
    """Shrink neighbor domains outward from ``start``.

    Returns the coordinates of cells whose domain emptied, in the order they
    were found. The worklist is drained completely even after a contradiction.
    """
    worklist: List[Coord] = [start]
    contradictions: List[Coord] = []
    while worklist:
        x, y = worklist.pop()
        current = grid.cell_at(x, y)
        allowed = grid.table.allowed_for_neighbor(current.domain)
        for n in grid.neighbors_of(x, y):
            neighbor = grid.cell_at(*n)
            if neighbor.resolved:
                continue
            before = len(neighbor.domain)
            neighbor.domain &= allowed
            if not neighbor.domain:
                neighbor.resolved = True
                contradictions.append(n)
                logger.warning(f"Contradiction at {n[0]}, {n[1]}")
            elif len(neighbor.domain) < before:
                worklist.append(n)
    return tuple(contradictions)


def step(grid: Grid, rng: random.Random) -> StepResult:
    coord = select_cell(grid, rng)
    if coord is None:
        return StepResult(StepStatus.COMPLETE)
    label = collapse(grid, coord, rng)
    contradictions = propagate(grid, coord)
    status = StepStatus.CONTRADICTION if contradictions else StepStatus.PROGRESSED
    return StepResult(status, collapsed=coord, label=label, contradictions=contradictions)


def run_to_completion(grid: Grid, rng: random.Random, max_steps: int) -> Completion:
    """Step until the grid is fully resolved.

    Raises :class:`StepBudgetExceeded` when ``max_steps`` collapses were not
    enough. The grid keeps whatever progress was made.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    steps = 0
    contradictions: List[Coord] = []
    while True:
        if steps >= max_steps and not grid.is_fully_resolved():
            raise StepBudgetExceeded(steps, max_steps)
        result = step(grid, rng)
        if result.status is StepStatus.COMPLETE:
            break
        steps += 1
        contradictions.extend(result.contradictions)
    logger.info(f"Grid complete after {steps} steps, {len(contradictions)} contradictions")
    return Completion(steps=steps, contradictions=tuple(contradictions))


class Solver:
    """Stateful driver around :func:`step` for interactive callers.

    Keeps the counters a UI shows between frames. All grid mutation still
    happens in the module-level functions.
    """

    READY = "Status: Ready"
    RUNNING = "Status: Running"
    COMPLETE = "Status: Complete!"

    def __init__(self, grid: Grid, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else random.Random(seed)
        self.collapsed_count = 0
        self.contradictions: List[Coord] = []
        self.history: List[Tuple[Coord, Label]] = []
        self.status = self.READY

    def step(self) -> StepResult:
        result = step(self.grid, self.rng)
        if result.status is StepStatus.COMPLETE:
            self.status = self.COMPLETE
            return result
        self.collapsed_count += 1
        self.history.append((result.collapsed, result.label))
        self.contradictions.extend(result.contradictions)
        self.status = self.RUNNING
        if logger.isEnabledFor(logging.DEBUG):
            log_step(
                logger,
                self.collapsed_count,
                "COLLAPSE",
                f"{result.collapsed} -> {result.label!r} | potential={total_potential(self.grid)}",
            )
        return result

    def run(self, max_steps: int) -> Completion:
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        first_step = self.collapsed_count
        first_contradiction = len(self.contradictions)
        while True:
            taken = self.collapsed_count - first_step
            if taken >= max_steps and not self.grid.is_fully_resolved():
                raise StepBudgetExceeded(taken, max_steps)
            if self.step().status is StepStatus.COMPLETE:
                break
        return Completion(
            steps=self.collapsed_count - first_step,
            contradictions=tuple(self.contradictions[first_contradiction:]),
        )

    def reset(self) -> None:
        self.grid.reset()
        self.collapsed_count = 0
        self.contradictions = []
        self.history = []
        self.status = self.READY
