"""Tests for skilltree.validate — cycle detection and reporting."""

import pytest

from skilltree.errors import CyclicDependencyError
from skilltree.ir.graph import build
from skilltree.types import NodeRecord
from skilltree.validate import Validator, find_cycle, validate


def _rec(name: str, *requires: str) -> NodeRecord:
    return NodeRecord(name=name, label=name, requires=tuple(requires))


class TestFindCycle:
    def test_dag_has_no_cycle(self):
        g = build([_rec("A"), _rec("B", "A"), _rec("C", "A", "B")])
        assert find_cycle(g) is None

    def test_empty_graph(self):
        assert find_cycle(build([])) is None

    def test_two_cycle(self):
        g = build([_rec("X", "Y"), _rec("Y", "X")])
        assert find_cycle(g) == [0, 1, 0]

    def test_self_requirement(self):
        g = build([_rec("A"), _rec("B", "B")])
        assert find_cycle(g) == [1, 1]

    def test_cycle_reported_from_repeated_node(self):
        """Entry point D is on the path but not part of the cycle."""
        g = build([_rec("D", "A"), _rec("A", "B"), _rec("B", "C"), _rec("C", "A")])
        assert find_cycle(g) == [1, 2, 3, 1]

    def test_diamond_is_not_a_cycle(self):
        g = build([_rec("top"), _rec("l", "top"), _rec("r", "top"), _rec("bottom", "l", "r")])
        assert find_cycle(g) is None

    def test_deep_chain_does_not_recurse(self):
        depth = 5000
        records = [_rec("n0")] + [_rec(f"n{i}", f"n{i - 1}") for i in range(1, depth)]
        assert find_cycle(build(records)) is None


class TestValidate:
    def test_returns_same_graph(self):
        g = build([_rec("A"), _rec("B", "A")])
        assert validate(g) is g

    def test_two_cycle_names(self):
        g = build([_rec("X", "Y"), _rec("Y", "X")])
        with pytest.raises(CyclicDependencyError) as exc:
            Validator().validate(g)
        assert exc.value.cycle == ["X", "Y", "X"]
        assert "X -> Y -> X" in str(exc.value)

    def test_first_cycle_in_declaration_order_is_reported(self):
        g = build([_rec("P", "Q"), _rec("Q", "P"), _rec("R", "S"), _rec("S", "R")])
        with pytest.raises(CyclicDependencyError) as exc:
            validate(g)
        assert exc.value.cycle == ["P", "Q", "P"]

    def test_reported_cycle_is_deterministic(self):
        records = [_rec("a", "b"), _rec("b", "c"), _rec("c", "a"), _rec("d", "c")]
        cycles = []
        for _ in range(3):
            with pytest.raises(CyclicDependencyError) as exc:
                validate(build(records))
            cycles.append(exc.value.cycle)
        assert cycles[0] == cycles[1] == cycles[2] == ["a", "b", "c", "a"]
