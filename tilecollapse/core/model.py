from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Hashable, Optional, Tuple

Label = Hashable
Coord = Tuple[int, int]


class StepStatus(str, Enum):
    """Outcome reported by a single solver step."""
    PROGRESSED = "progressed"
    CONTRADICTION = "contradiction"
    COMPLETE = "complete"


@dataclass(frozen=True)
class StepResult:
    """What one ``step`` did: the cell it collapsed and any dead ends it hit."""
    status: StepStatus
    collapsed: Optional[Coord] = None
    label: Optional[Label] = None
    contradictions: Tuple[Coord, ...] = ()

    @property
    def has_contradiction(self) -> bool:
        return self.status is StepStatus.CONTRADICTION


@dataclass(frozen=True)
class Completion:
    """Summary of a run that reached a fully resolved grid."""
    steps: int
    contradictions: Tuple[Coord, ...] = ()

    @property
    def clean(self) -> bool:
        return not self.contradictions


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of one cell, as handed to renderers."""
    x: int
    y: int
    resolved: bool
    domain: FrozenSet[Label]

    @property
    def label(self) -> Optional[Label]:
        if self.resolved and len(self.domain) == 1:
            return next(iter(self.domain))
        return None

    @property
    def is_dead_end(self) -> bool:
        return self.resolved and not self.domain
