"""Level assignment: distance of each operator from the carriers it feeds.

Carriers sit at level 0. A modulator sits one level above the deepest
operator it modulates, so every edge points strictly downward.
"""

from __future__ import annotations

__all__ = ["LevelingError", "assign_levels", "group_by_level"]

import warnings
from collections import defaultdict

import networkx as nx

from fm_routing.layout.constants import MAX_LEVEL_PASSES
from fm_routing.model import OPERATOR_COUNT, RoutingGraph


class LevelingError(RuntimeError):
    """Level assignment did not reach a fixed point within the pass limit."""


def assign_levels(
    graph: RoutingGraph,
    max_passes: int = MAX_LEVEL_PASSES,
    stacklevel: int = 2,
) -> dict[int, int]:
    """Assign every operator a level by fixed-point iteration.

    Each pass visits the non-carriers in ascending operator order and sets
    ``level = max(level[target] + 1)`` over targets that already have a
    level. Iteration stops after a pass with no change.

    Raises LevelingError if ``max_passes`` passes all changed something,
    which only happens when the modulation edges contain a cycle, or when
    the operators left without a level contain a cycle. Other operators
    left without a level are placed at level 0 with a warning reported
    ``stacklevel`` frames up.

    Returns a dict mapping operator -> level for all six operators.
    """
    G = graph.to_digraph()
    carriers = set(graph.carriers)

    levels: dict[int, int | None] = {op: None for op in range(OPERATOR_COUNT)}
    for c in carriers:
        levels[c] = 0

    converged = False
    for _ in range(max_passes):
        changed = False
        for op in range(OPERATOR_COUNT):
            if op in carriers:
                continue
            known = [levels[t] for t in G.successors(op) if levels[t] is not None]
            if not known:
                continue
            new_level = max(known) + 1
            if new_level != levels[op]:
                levels[op] = new_level
                changed = True
        if not changed:
            converged = True
            break

    if not converged:
        moving = sorted(op + 1 for op in G if op not in carriers and G.out_degree(op))
        raise LevelingError(
            f"levels did not converge after {max_passes} passes; "
            f"check operators {moving} for a modulation cycle"
        )

    unassigned = [op for op, lvl in levels.items() if lvl is None]
    stranded = G.subgraph(unassigned)
    if not nx.is_directed_acyclic_graph(stranded):
        cycle = [u + 1 for u, _v in nx.find_cycle(stranded)]
        raise LevelingError(
            f"operators {cycle} form a modulation cycle that reaches no carrier"
        )
    if unassigned:
        warnings.warn(
            f"Operators {[op + 1 for op in unassigned]} feed no carrier; "
            f"placing them at level 0",
            stacklevel=stacklevel,
        )

    return {op: (lvl if lvl is not None else 0) for op, lvl in levels.items()}


def group_by_level(levels: dict[int, int]) -> dict[int, list[int]]:
    """Group operators by level, ascending operator index within a level."""
    by_level: dict[int, list[int]] = defaultdict(list)
    for op in sorted(levels):
        by_level[levels[op]].append(op)
    return dict(by_level)
