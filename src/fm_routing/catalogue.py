"""The fixed table of 32 six-operator routing algorithms.

Index ``n`` here is the same index the synth engine's algorithm selector
understands; the display numbers algorithms from 1.
"""

from __future__ import annotations

__all__ = ["ALGORITHMS", "ALGORITHM_COUNT", "algorithm_label", "graph_at"]

from fm_routing.model import RoutingGraph


def _alg(modulates_to, feedback_op, carriers) -> RoutingGraph:
    return RoutingGraph(
        modulates_to=modulates_to, carriers=carriers, feedback_op=feedback_op
    )


ALGORITHMS: tuple[RoutingGraph, ...] = (
    # ALG 1: serial 1>2>3>4>5>6
    _alg(((1,), (2,), (3,), (4,), (5,), ()), 0, (5,)),
    # ALG 2: serial, FB on 2
    _alg(((1,), (2,), (3,), (4,), (5,), ()), 1, (5,)),
    # ALG 3: 1>3, 2>3>4>5>6
    _alg(((2,), (2,), (3,), (4,), (5,), ()), 2, (5,)),
    # ALG 4: serial, FB on 4
    _alg(((1,), (2,), (3,), (4,), (5,), ()), 3, (5,)),
    # ALG 5: 1>2, 3>4, 5>6
    _alg(((1,), (), (3,), (), (5,), ()), 0, (1, 3, 5)),
    # ALG 6: 1>2, 3>4, 5>6, FB on 5
    _alg(((1,), (), (3,), (), (5,), ()), 4, (1, 3, 5)),
    # ALG 7: 1>2, 3>(4,5,6)
    _alg(((1,), (), (3, 4, 5), (), (), ()), 0, (1, 3, 4, 5)),
    # ALG 8: 1>2, 3>4>(5,6)
    _alg(((1,), (), (3,), (4, 5), (), ()), 3, (1, 4, 5)),
    # ALG 9: 1>2, 3>4>5>6
    _alg(((1,), (), (3,), (4,), (5,), ()), 1, (1, 5)),
    # ALG 10: 3>(1,2), 4>5>6
    _alg(((), (), (0, 1), (4,), (5,), ()), 2, (0, 1, 5)),
    # ALG 11: 1>2, 3>4>5>6, FB on 3
    _alg(((1,), (), (3,), (4,), (5,), ()), 2, (1, 5)),
    # ALG 12: parallel pairs, FB on 2
    _alg(((1,), (), (3,), (), (5,), ()), 1, (1, 3, 5)),
    # ALG 13: 1>2, 3>(4,5,6), FB on 3
    _alg(((1,), (), (3, 4, 5), (), (), ()), 2, (1, 3, 4, 5)),
    # ALG 14: 1>2>(3,4,5,6)
    _alg(((1,), (2, 3, 4, 5), (), (), (), ()), 0, (2, 3, 4, 5)),
    # ALG 15: 1>2, 3>4>(5,6)
    _alg(((1,), (), (3,), (4, 5), (), ()), 0, (1, 4, 5)),
    # ALG 16: 1>(2,3,4,5,6)
    _alg(((1, 2, 3, 4, 5), (), (), (), (), ()), 0, (1, 2, 3, 4, 5)),
    # ALG 17: 1>(2,3), 4>5, 6
    _alg(((1, 2), (), (), (4,), (), ()), 0, (1, 2, 4, 5)),
    # ALG 18: 1>2>3, 4>(5,6)
    _alg(((1,), (2,), (), (4, 5), (), ()), 2, (2, 4, 5)),
    # ALG 19: 1>2, 3>(4,5), 6
    _alg(((1,), (), (3, 4), (), (), ()), 0, (1, 3, 4, 5)),
    # ALG 20: 1>2, 3>4, 5, 6
    _alg(((1,), (), (3,), (), (), ()), 2, (1, 3, 4, 5)),
    # ALG 21: 1>2, 3, 4, 5, 6
    _alg(((1,), (), (), (), (), ()), 2, (1, 2, 3, 4, 5)),
    # ALG 22: 1>(2,3,4,5), 6
    _alg(((1, 2, 3, 4), (), (), (), (), ()), 0, (1, 2, 3, 4, 5)),
    # ALG 23: 1>2, 3>(4,5), 6, FB on 3
    _alg(((1,), (), (3, 4), (), (), ()), 2, (1, 3, 4, 5)),
    # ALG 24: 1>2, 3>4, 5, 6, FB on 6
    _alg(((1,), (), (3,), (), (), ()), 5, (1, 3, 4, 5)),
    # ALG 25: 1>2, 3, 4, 5, 6, FB on 6
    _alg(((1,), (), (), (), (), ()), 5, (1, 2, 3, 4, 5)),
    # ALG 26: 3>(1,2), 6>(4,5)
    _alg(((), (), (0, 1), (), (), (3, 4)), 5, (0, 1, 3, 4)),
    # ALG 27: 3>(1,2), 5>4, 6
    _alg(((), (), (0, 1), (), (3,), ()), 4, (0, 1, 3, 5)),
    # ALG 28: 1>2>3, 4, 5>6
    _alg(((1,), (2,), (), (), (5,), ()), 0, (2, 3, 5)),
    # ALG 29: 1>2, 3, 4>5, 6
    _alg(((1,), (), (), (4,), (), ()), 0, (1, 2, 4, 5)),
    # ALG 30: 1>2>3, 4>5, 6
    _alg(((1,), (2,), (), (4,), (), ()), 0, (2, 4, 5)),
    # ALG 31: 1, 2, 3, 4, 5>6
    _alg(((), (), (), (), (5,), ()), 5, (0, 1, 2, 3, 5)),
    # ALG 32: all carriers
    _alg(((), (), (), (), (), ()), 5, (0, 1, 2, 3, 4, 5)),
)

ALGORITHM_COUNT = len(ALGORITHMS)


def graph_at(index: int) -> RoutingGraph:
    """Return the routing graph for catalogue ``index`` (0-based).

    Callers are expected to keep the index in range; anything outside
    ``[0, ALGORITHM_COUNT)`` raises IndexError rather than wrapping around.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexError(f"algorithm index must be an int, got {index!r}")
    if not 0 <= index < ALGORITHM_COUNT:
        raise IndexError(
            f"algorithm index {index} outside [0, {ALGORITHM_COUNT})"
        )
    return ALGORITHMS[index]


def algorithm_label(index: int) -> str:
    """Display title for an algorithm, e.g. ``ALG 1`` for index 0."""
    graph_at(index)
    return f"ALG {index + 1}"
