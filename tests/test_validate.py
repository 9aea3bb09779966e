"""Tests for the routing graph validator."""

from fm_routing.model import RoutingGraph
from fm_routing.validate import (
    Severity,
    check_acyclic,
    check_carriers_are_sinks,
    check_reaches_carrier,
    check_sinks_are_carriers,
    validate_graph,
)


def _graph(modulates_to, carriers, feedback_op=None):
    return RoutingGraph(
        modulates_to=modulates_to, carriers=carriers, feedback_op=feedback_op
    )


def test_clean_graph_has_no_violations(serial_chain, parallel_pairs):
    assert validate_graph(serial_chain) == []
    assert validate_graph(parallel_pairs) == []


def test_isolated_operator_flagged():
    g = _graph(((1,), (), (), (), (), ()), (1, 2, 3, 4))
    violations = check_sinks_are_carriers(g)
    assert len(violations) == 1
    assert violations[0].severity == Severity.ERROR
    assert "operator 6" in violations[0].message


def test_carrier_that_modulates_is_warning():
    g = _graph(((1,), (), (), (), (), ()), (0, 1, 2, 3, 4, 5))
    violations = check_carriers_are_sinks(g)
    assert [v.severity for v in violations] == [Severity.WARNING]
    assert "carrier 1" in violations[0].message


def test_cycle_flagged():
    g = _graph(((1,), (0, 2), (), (), (), ()), (2, 3, 4, 5))
    violations = check_acyclic(g)
    assert len(violations) == 1
    assert violations[0].check == "acyclic"
    assert violations[0].severity == Severity.ERROR


def test_acyclic_graph_passes(serial_chain):
    assert check_acyclic(serial_chain) == []


def test_modulator_without_carrier_flagged():
    # 1>2 where 2 is a sink but not a carrier: 1 reaches nothing audible
    g = _graph(((1,), (), (), (), (), ()), (2, 3, 4, 5))
    messages = [v.message for v in check_reaches_carrier(g)]
    assert messages == ["operator 1 never reaches a carrier"]


def test_validate_graph_collects_all_checks():
    g = _graph(((1,), (), (), (), (), ()), (2, 3, 4, 5))
    checks = {v.check for v in validate_graph(g)}
    assert checks == {"sinks_are_carriers", "reaches_carrier"}
