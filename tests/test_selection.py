"""Tests for algorithm selection and the engine hand-off."""

import pytest

from fm_routing.catalogue import graph_at
from fm_routing.selection import AlgorithmSelector


class RecordingEngine:
    def __init__(self):
        self.calls = []

    def set_algorithm(self, index):
        self.calls.append(index)


def test_default_selection_is_first_algorithm():
    selector = AlgorithmSelector()
    assert selector.index == 0
    assert selector.graph is graph_at(0)
    assert selector.label == "ALG 1"


def test_select_forwards_same_index_to_engine():
    engine = RecordingEngine()
    selector = AlgorithmSelector(engine)
    for index in (5, 31, 15):
        assert selector.select(index) is True
    assert engine.calls == [5, 31, 15]
    assert selector.graph is graph_at(15)


def test_reselecting_current_index_is_ignored():
    engine = RecordingEngine()
    selector = AlgorithmSelector(engine, index=3)
    assert selector.select(3) is False
    assert engine.calls == []


@pytest.mark.parametrize("index", [-1, 32, True])
def test_out_of_range_selection_is_ignored(index):
    engine = RecordingEngine()
    selector = AlgorithmSelector(engine, index=7)
    with pytest.warns(UserWarning, match="Ignoring algorithm index"):
        assert selector.select(index) is False
    assert selector.index == 7
    assert engine.calls == []


def test_invalid_initial_index_raises():
    with pytest.raises(IndexError):
        AlgorithmSelector(index=32)


def test_description_follows_selection():
    selector = AlgorithmSelector()
    selector.select(31)
    assert selector.description == "OUT: 1,2,3,4,5,6   FB: 6"
