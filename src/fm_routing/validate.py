"""Consistency checks for routing graphs and the algorithm catalogue.

Each check returns a list of Violations; an empty list means the graph
passes. ERROR violations make a graph unusable for display, WARNING
violations are tolerated but worth knowing about.
"""

from __future__ import annotations

__all__ = [
    "Severity",
    "Violation",
    "check_acyclic",
    "check_carriers_are_sinks",
    "check_reaches_carrier",
    "check_sinks_are_carriers",
    "validate_catalogue",
    "validate_graph",
]

from dataclasses import dataclass
from enum import Enum

import networkx as nx

from fm_routing.catalogue import ALGORITHMS
from fm_routing.model import RoutingGraph


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str


def check_sinks_are_carriers(graph: RoutingGraph) -> list[Violation]:
    """Every operator without an outgoing edge must be a carrier.

    An operator that neither modulates nor outputs would be silent and
    float unconnected in the display.
    """
    return [
        Violation(
            "sinks_are_carriers",
            Severity.ERROR,
            f"operator {op + 1} has no modulation target and is not a carrier",
        )
        for op in graph.sinks()
        if not graph.is_carrier(op)
    ]


def check_carriers_are_sinks(graph: RoutingGraph) -> list[Violation]:
    return [
        Violation(
            "carriers_are_sinks",
            Severity.WARNING,
            f"carrier {c + 1} also modulates "
            f"{[t + 1 for t in graph.modulates_to[c]]}",
        )
        for c in graph.carriers
        if graph.modulates_to[c]
    ]


def check_acyclic(graph: RoutingGraph) -> list[Violation]:
    G = graph.to_digraph()
    if nx.is_directed_acyclic_graph(G):
        return []
    cycle = [u + 1 for u, _v in nx.find_cycle(G)]
    return [
        Violation(
            "acyclic",
            Severity.ERROR,
            f"modulation cycle through operators {cycle}",
        )
    ]


def check_reaches_carrier(graph: RoutingGraph) -> list[Violation]:
    """Every modulator must eventually feed at least one carrier."""
    G = graph.to_digraph()
    carriers = set(graph.carriers)
    violations = []
    for op in graph.modulators():
        if op in carriers:
            continue
        if not carriers & nx.descendants(G, op):
            violations.append(
                Violation(
                    "reaches_carrier",
                    Severity.ERROR,
                    f"operator {op + 1} never reaches a carrier",
                )
            )
    return violations


_CHECKS = (
    check_sinks_are_carriers,
    check_carriers_are_sinks,
    check_acyclic,
    check_reaches_carrier,
)


def validate_graph(graph: RoutingGraph) -> list[Violation]:
    """Run every check against one graph."""
    violations: list[Violation] = []
    for check in _CHECKS:
        violations.extend(check(graph))
    return violations


def validate_catalogue() -> dict[int, list[Violation]]:
    """Validate all catalogue entries; only entries with violations are returned."""
    report: dict[int, list[Violation]] = {}
    for index, graph in enumerate(ALGORITHMS):
        violations = validate_graph(graph)
        if violations:
            report[index] = violations
    return report
