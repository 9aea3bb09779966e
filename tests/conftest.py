"""Shared test fixtures and helpers for the fm-routing test suite."""

from __future__ import annotations

import pytest

from fm_routing.catalogue import ALGORITHM_COUNT, graph_at
from fm_routing.layout.engine import LayoutResult, compute_layout
from fm_routing.model import RoutingGraph

# --- Graph constants ---

SERIAL_CHAIN = RoutingGraph(
    modulates_to=((1,), (2,), (3,), (4,), (5,), ()),
    carriers=(5,),
    feedback_op=0,
)

PARALLEL_PAIRS = RoutingGraph(
    modulates_to=((1,), (), (3,), (), (5,), ()),
    carriers=(1, 3, 5),
    feedback_op=None,
)

ALL_INDICES = list(range(ALGORITHM_COUNT))


# --- Layout helpers ---


def layout_algorithm(index: int, width: float = 300, height: float = 200) -> LayoutResult:
    """Look up a catalogue entry and lay it out on a width x height canvas."""
    return compute_layout(graph_at(index), width, height)


# --- Pytest fixtures ---


@pytest.fixture
def serial_chain() -> RoutingGraph:
    """Six operators in one chain 1>2>3>4>5>6, carrier 6."""
    return SERIAL_CHAIN


@pytest.fixture
def parallel_pairs() -> RoutingGraph:
    """Three independent pairs 1>2, 3>4, 5>6."""
    return PARALLEL_PAIRS


@pytest.fixture(params=ALL_INDICES, ids=[f"alg{i + 1}" for i in ALL_INDICES])
def catalogue_entry(request) -> tuple[int, RoutingGraph]:
    """Each catalogue entry with its index."""
    return request.param, graph_at(request.param)
