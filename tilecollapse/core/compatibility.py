"""Adjacency rules between tile labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple

from .errors import InvalidLabelSet
from .model import Label


@dataclass(frozen=True)
class CompatibilityTable:
    """Map from each label to the labels allowed in its four neighbor slots.

    The table is directional: ``allowed[a]`` constrains the neighbors of a cell
    holding ``a``. Nothing requires ``b in allowed[a]`` to imply
    ``a in allowed[b]``.
    """
    labels: Tuple[Label, ...]
    allowed: Mapping[Label, FrozenSet[Label]] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))
        if not self.labels:
            raise InvalidLabelSet("at least one label is required")
        known = set(self.labels)
        if len(known) != len(self.labels):
            raise InvalidLabelSet(f"duplicate labels in {list(self.labels)!r}")
        for label in self.labels:
            if label not in self.allowed:
                raise InvalidLabelSet(f"label {label!r} has no neighbor set")
            unknown = set(self.allowed[label]) - known
            if unknown:
                raise InvalidLabelSet(
                    f"label {label!r} allows unknown neighbors {sorted(map(repr, unknown))}"
                )
        object.__setattr__(
            self,
            "allowed",
            MappingProxyType({label: frozenset(self.allowed[label]) for label in self.labels}),
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[Label, Iterable[Label]]) -> "CompatibilityTable":
        labels = tuple(mapping)
        allowed = {label: frozenset(neighbors) for label, neighbors in mapping.items()}
        return cls(labels=labels, allowed=allowed)

    @classmethod
    def unconstrained(cls, label_count: int) -> "CompatibilityTable":
        """Labels ``0..label_count-1``, every pair compatible."""
        if label_count <= 0:
            raise InvalidLabelSet(f"label count must be positive, got {label_count}")
        labels = tuple(range(label_count))
        everything = frozenset(labels)
        return cls(labels=labels, allowed={label: everything for label in labels})

    def __len__(self) -> int:
        return len(self.labels)

    def neighbors(self, label: Label) -> FrozenSet[Label]:
        return self.allowed[label]

    def allowed_for_neighbor(self, domain: Iterable[Label]) -> FrozenSet[Label]:
        """Union of the neighbor sets of every label in ``domain``."""
        result: set = set()
        for label in domain:
            result |= self.allowed[label]
        return frozenset(result)

    def permits(self, label: Label, neighbor: Label) -> bool:
        return neighbor in self.allowed[label]

    def is_symmetric(self) -> bool:
        return all(
            self.permits(b, a) for a in self.labels for b in self.allowed[a]
        )

    def ordered(self, domain: Iterable[Label]) -> list:
        """Labels of ``domain`` in declaration order."""
        members = set(domain)
        return [label for label in self.labels if label in members]
