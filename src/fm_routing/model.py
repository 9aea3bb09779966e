"""Data model for six-operator FM routing graphs."""

from __future__ import annotations

__all__ = ["OPERATOR_COUNT", "RoutingGraph"]

from collections.abc import Iterator
from dataclasses import dataclass

import networkx as nx

OPERATOR_COUNT = 6


def _check_operator(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an int, got {value!r}")
    if not 0 <= value < OPERATOR_COUNT:
        raise ValueError(f"{what} {value} outside [0, {OPERATOR_COUNT})")


@dataclass(frozen=True)
class RoutingGraph:
    """Modulation routing between the six operators of one algorithm.

    ``modulates_to[i]`` lists the operators that operator ``i`` frequency
    modulates. ``carriers`` is the ordered list of operators that reach the
    audio output. ``feedback_op`` marks the single self-modulating operator;
    it is metadata and never appears as an edge.
    """

    modulates_to: tuple[tuple[int, ...], ...]
    carriers: tuple[int, ...]
    feedback_op: int | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the graph stays hashable.
        object.__setattr__(
            self, "modulates_to", tuple(tuple(t) for t in self.modulates_to)
        )
        object.__setattr__(self, "carriers", tuple(self.carriers))

        if len(self.modulates_to) != OPERATOR_COUNT:
            raise ValueError(
                f"expected {OPERATOR_COUNT} operator slots, "
                f"got {len(self.modulates_to)}"
            )
        for op, targets in enumerate(self.modulates_to):
            for target in targets:
                _check_operator(target, f"edge target of operator {op}")
                if target == op:
                    raise ValueError(
                        f"operator {op} modulates itself; use feedback_op"
                    )
            if len(set(targets)) != len(targets):
                raise ValueError(f"operator {op} lists a target twice")
        for carrier in self.carriers:
            _check_operator(carrier, "carrier")
        if len(set(self.carriers)) != len(self.carriers):
            raise ValueError("carrier listed twice")
        if self.feedback_op is not None:
            _check_operator(self.feedback_op, "feedback operator")

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield (modulator, target) pairs in operator then declaration order."""
        for op, targets in enumerate(self.modulates_to):
            for target in targets:
                yield op, target

    def is_carrier(self, op: int) -> bool:
        return op in self.carriers

    def sinks(self) -> list[int]:
        """Operators with no outgoing modulation edge."""
        return [op for op, targets in enumerate(self.modulates_to) if not targets]

    def modulators(self) -> list[int]:
        return [op for op, targets in enumerate(self.modulates_to) if targets]

    @property
    def has_modulation(self) -> bool:
        return any(self.modulates_to)

    def to_digraph(self) -> nx.DiGraph:
        """Build a DiGraph holding all six operators and the modulation edges."""
        G = nx.DiGraph()
        G.add_nodes_from(range(OPERATOR_COUNT))
        G.add_edges_from(self.edges())
        return G
