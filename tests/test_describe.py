"""Tests for the routing description line."""

import pytest

from fm_routing.catalogue import graph_at
from fm_routing.describe import build_description
from fm_routing.model import RoutingGraph


def test_serial_chain_description():
    assert (
        build_description(graph_at(0))
        == "MOD: 1→2  2→3  3→4  4→5  5→6   OUT: 6   FB: 1"
    )


def test_all_parallel_description_has_no_mod_section():
    assert build_description(graph_at(31)) == "OUT: 1,2,3,4,5,6   FB: 6"


@pytest.mark.parametrize(
    "index, expected",
    [
        (9, "MOD: 3→(1,2)  4→5  5→6   OUT: 1,2,6   FB: 3"),
        (15, "MOD: 1→(2,3,4,5,6)   OUT: 2,3,4,5,6   FB: 1"),
        (25, "MOD: 3→(1,2)  6→(4,5)   OUT: 1,2,4,5   FB: 6"),
        (30, "MOD: 5→6   OUT: 1,2,3,4,6   FB: 6"),
    ],
)
def test_catalogue_descriptions(index, expected):
    assert build_description(graph_at(index)) == expected


def test_description_without_feedback():
    graph = RoutingGraph(
        modulates_to=((1,), (), (3,), (), (5,), ()),
        carriers=(1, 3, 5),
    )
    assert build_description(graph) == "MOD: 1→2  3→4  5→6   OUT: 2,4,6"


def test_carriers_keep_declared_order():
    graph = RoutingGraph(
        modulates_to=((), (), (), (), (), ()),
        carriers=(5, 0, 3, 1, 4, 2),
    )
    assert build_description(graph).startswith("OUT: 6,1,4,2,5,3")


def test_targets_keep_declared_order():
    graph = RoutingGraph(
        modulates_to=((3, 1), (), (), (), (), ()),
        carriers=(1, 2, 3, 4, 5),
    )
    assert build_description(graph).startswith("MOD: 1→(4,2)   ")


def test_description_deterministic(catalogue_entry):
    _, graph = catalogue_entry
    assert build_description(graph) == build_description(graph)
    assert "\n" not in build_description(graph)
