"""One-line text summary of a routing graph."""

from __future__ import annotations

__all__ = ["build_description"]

from fm_routing.model import RoutingGraph

ARROW = "→"
PART_SEP = "  "
SECTION_SEP = "   "


def _modulation_part(op: int, targets: tuple[int, ...]) -> str:
    if len(targets) == 1:
        return f"{op + 1}{ARROW}{targets[0] + 1}"
    joined = ",".join(str(t + 1) for t in targets)
    return f"{op + 1}{ARROW}({joined})"


def build_description(graph: RoutingGraph) -> str:
    """Summarise modulation, outputs and feedback with 1-based operator numbers.

    Example for the serial chain::

        MOD: 1→2  2→3  3→4  4→5  5→6   OUT: 6   FB: 1

    The ``MOD:`` section is omitted when no operator modulates another.
    """
    sections: list[str] = []

    mod_parts = [
        _modulation_part(op, targets)
        for op, targets in enumerate(graph.modulates_to)
        if targets
    ]
    if mod_parts:
        sections.append("MOD: " + PART_SEP.join(mod_parts))

    sections.append("OUT: " + ",".join(str(c + 1) for c in graph.carriers))

    if graph.feedback_op is not None:
        sections.append(f"FB: {graph.feedback_op + 1}")

    return SECTION_SEP.join(sections)
