"""Algorithm selection and its hand-off to the synth engine.

The engine's algorithm selector takes the same 0-based index as the
catalogue, so the selector forwards indices untouched.
"""

from __future__ import annotations

__all__ = ["AlgorithmSelector", "AudioEngine"]

import warnings
from typing import Protocol

from fm_routing.catalogue import ALGORITHM_COUNT, algorithm_label, graph_at
from fm_routing.describe import build_description
from fm_routing.model import RoutingGraph


class AudioEngine(Protocol):
    def set_algorithm(self, index: int) -> None: ...


class AlgorithmSelector:
    """Holds the current algorithm index and notifies the engine on change."""

    def __init__(self, engine: AudioEngine | None = None, index: int = 0):
        graph_at(index)
        self.engine = engine
        self.index = index

    def select(self, index: int) -> bool:
        """Switch to ``index``; returns True when the selection changed.

        Out-of-range indices are ignored with a warning, as is re-selecting
        the current algorithm.
        """
        if isinstance(index, bool) or not isinstance(index, int) or not (
            0 <= index < ALGORITHM_COUNT
        ):
            warnings.warn(
                f"Ignoring algorithm index {index!r}; "
                f"expected 0-{ALGORITHM_COUNT - 1}",
                stacklevel=2,
            )
            return False
        if index == self.index:
            return False
        self.index = index
        if self.engine is not None:
            self.engine.set_algorithm(index)
        return True

    @property
    def graph(self) -> RoutingGraph:
        return graph_at(self.index)

    @property
    def label(self) -> str:
        return algorithm_label(self.index)

    @property
    def description(self) -> str:
        return build_description(self.graph)
