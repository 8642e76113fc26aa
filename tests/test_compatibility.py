import random

import pytest

from tilecollapse.core.compatibility import CompatibilityTable
from tilecollapse.core.errors import InvalidLabelSet
from tilecollapse.core.grid import create_grid
from tilecollapse.core.model import StepStatus
from tilecollapse.core.solver import step


def test_from_mapping_keeps_key_order():
    table = CompatibilityTable.from_mapping({"b": ["a"], "a": ["a", "b"]})
    assert table.labels == ("b", "a")
    assert table.neighbors("b") == frozenset({"a"})
    assert len(table) == 2


def test_allowed_for_neighbor_is_union():
    table = CompatibilityTable.from_mapping({
        "water": ["water", "sand"],
        "sand": ["water", "sand", "grass"],
        "grass": ["sand", "grass"],
    })
    assert table.allowed_for_neighbor({"water"}) == {"water", "sand"}
    assert table.allowed_for_neighbor({"water", "grass"}) == {"water", "sand", "grass"}
    assert table.allowed_for_neighbor(set()) == frozenset()


def test_asymmetric_table_is_accepted():
    table = CompatibilityTable.from_mapping({"A": ["A"], "B": ["A"]})
    assert table.permits("B", "A")
    assert not table.permits("A", "B")
    assert not table.is_symmetric()


def test_unconstrained():
    table = CompatibilityTable.unconstrained(3)
    assert table.labels == (0, 1, 2)
    assert table.is_symmetric()
    assert all(table.neighbors(l) == {0, 1, 2} for l in table.labels)


def test_ordered_follows_declaration():
    table = CompatibilityTable.from_mapping({"c": ["c"], "a": ["a"], "b": ["b"]})
    assert table.ordered({"a", "b", "c"}) == ["c", "a", "b"]


@pytest.mark.parametrize("mapping", [{}, {"a": ["a", "zzz"]}])
def test_invalid_label_sets(mapping):
    with pytest.raises(InvalidLabelSet):
        CompatibilityTable.from_mapping(mapping)


def test_zero_label_count():
    with pytest.raises(InvalidLabelSet):
        CompatibilityTable.unconstrained(0)


def test_direct_construction_normalizes_neighbor_sets():
    table = CompatibilityTable(labels=["A", "B"], allowed={"A": ["A", "B"], "B": ("A",)})
    assert table.labels == ("A", "B")
    assert table.neighbors("A") == frozenset({"A", "B"})
    assert isinstance(table.neighbors("B"), frozenset)
    assert table.allowed_for_neighbor({"B"}) == {"A"}
    assert hash(table) == hash(CompatibilityTable.from_mapping({"A": ["B", "A"], "B": ["A"]}))


def test_table_is_read_only():
    source = {"A": ["A"]}
    table = CompatibilityTable(labels=("A",), allowed=source)
    source["A"].append("B")
    assert table.neighbors("A") == {"A"}
    with pytest.raises(TypeError):
        table.allowed["A"] = frozenset()


def test_directly_built_table_drives_a_step():
    table = CompatibilityTable(labels=("A",), allowed={"A": ["A"]})
    grid = create_grid(2, 1, table)
    result = step(grid, random.Random(0))
    assert result.status is StepStatus.PROGRESSED
    other = (1, 0) if result.collapsed == (0, 0) else (0, 0)
    assert grid.cell_at(*other).domain == {"A"}
