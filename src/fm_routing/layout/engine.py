"""Layout coordinator: combines leveling and row placement into coordinates.

Standard graphs get one row per level with carriers at the bottom. Long
single-carrier chains fold into two rows (zigzag) so they do not stretch
the display vertically.
"""

from __future__ import annotations

__all__ = ["LayoutPolicy", "LayoutResult", "choose_policy", "compute_layout"]

from dataclasses import dataclass
from enum import Enum

from fm_routing.layout.constants import (
    MAX_LEVEL_PASSES,
    PADDING_BOTTOM,
    PADDING_TOP,
    PADDING_X,
    ZIGZAG_BOTTOM_ROW,
    ZIGZAG_MIN_LEVEL,
    ZIGZAG_TOP_ROW,
)
from fm_routing.layout.levels import assign_levels, group_by_level
from fm_routing.model import RoutingGraph


class LayoutPolicy(Enum):
    STANDARD = "standard"
    ZIGZAG = "zigzag"


@dataclass
class LayoutResult:
    """Operator positions for one layout call, owned by the caller."""

    positions: dict[int, tuple[float, float]]
    levels: dict[int, int]
    policy: LayoutPolicy
    width: float
    height: float

    @property
    def max_level(self) -> int:
        return max(self.levels.values()) if self.levels else 0

    def rows(self) -> list[list[int]]:
        """Operators grouped by y, top row first, left to right within a row."""
        by_y: dict[float, list[int]] = {}
        for op, (_x, y) in self.positions.items():
            by_y.setdefault(y, []).append(op)
        return [
            sorted(ops, key=lambda op: self.positions[op][0])
            for _y, ops in sorted(by_y.items())
        ]


def choose_policy(graph: RoutingGraph, levels: dict[int, int]) -> LayoutPolicy:
    """Zigzag for a deep chain ending in a single carrier, standard otherwise."""
    max_level = max(levels.values()) if levels else 0
    if max_level >= ZIGZAG_MIN_LEVEL and len(graph.carriers) == 1:
        return LayoutPolicy.ZIGZAG
    return LayoutPolicy.STANDARD


def compute_layout(
    graph: RoutingGraph,
    width: float,
    height: float,
    padding_x: float = PADDING_X,
    padding_top: float = PADDING_TOP,
    padding_bottom: float = PADDING_BOTTOM,
    max_passes: int = MAX_LEVEL_PASSES,
) -> LayoutResult:
    """Compute a position for each of the six operators.

    Args:
        graph: The routing graph to lay out.
        width: Canvas width.
        height: Canvas height.
        padding_x: Horizontal padding on both sides.
        padding_top: Padding above the top row.
        padding_bottom: Padding below the bottom row, reserved for the
            output bar.
        max_passes: Leveling pass limit.

    Raises ValueError when the canvas is smaller than its padding.
    """
    available_width = width - 2 * padding_x
    available_height = height - padding_top - padding_bottom
    if available_width < 0 or available_height < 0:
        raise ValueError(
            f"canvas {width}x{height} is smaller than its padding "
            f"({2 * padding_x} horizontal, {padding_top + padding_bottom} vertical)"
        )

    levels = assign_levels(graph, max_passes=max_passes, stacklevel=3)
    by_level = group_by_level(levels)
    max_level = max(levels.values())
    policy = choose_policy(graph, levels)

    if policy is LayoutPolicy.ZIGZAG:
        positions = _place_zigzag(
            by_level, max_level, padding_x, padding_top,
            available_width, available_height,
        )
    else:
        positions = _place_standard(
            by_level, max_level, padding_x, padding_top,
            available_width, available_height,
        )

    return LayoutResult(
        positions=positions,
        levels=levels,
        policy=policy,
        width=width,
        height=height,
    )


def _spread(
    ops: list[int], y: float, padding_x: float, available_width: float
) -> dict[int, tuple[float, float]]:
    """Space operators evenly, 1-based slots so none touch the padding edge."""
    spacing = available_width / (len(ops) + 1)
    return {op: (padding_x + spacing * (i + 1), y) for i, op in enumerate(ops)}


def _place_standard(
    by_level: dict[int, list[int]],
    max_level: int,
    padding_x: float,
    padding_top: float,
    available_width: float,
    available_height: float,
) -> dict[int, tuple[float, float]]:
    """One row per level, highest level on top and carriers at the bottom."""
    row_height = available_height / (max_level + 1)
    positions: dict[int, tuple[float, float]] = {}

    for level in range(max_level + 1):
        ops = by_level.get(level, [])
        if not ops:
            continue
        y = padding_top + (max_level - level) * row_height + row_height / 2
        positions.update(_spread(ops, y, padding_x, available_width))

    return positions


def _place_zigzag(
    by_level: dict[int, list[int]],
    max_level: int,
    padding_x: float,
    padding_top: float,
    available_width: float,
    available_height: float,
) -> dict[int, tuple[float, float]]:
    """Fold the chain into a top and a bottom row at the midpoint level.

    Both rows read left to right from the deepest level down, so the chain
    runs along the top row and continues on the bottom row.
    """
    mid_level = (max_level + 1) // 2
    top_y = padding_top + available_height * ZIGZAG_TOP_ROW
    bottom_y = padding_top + available_height * ZIGZAG_BOTTOM_ROW

    top_ops: list[int] = []
    bottom_ops: list[int] = []
    for level in range(max_level, -1, -1):
        ops = by_level.get(level, [])
        if level > mid_level:
            top_ops.extend(ops)
        else:
            bottom_ops.extend(ops)

    positions = _spread(top_ops, top_y, padding_x, available_width)
    positions.update(_spread(bottom_ops, bottom_y, padding_x, available_width))
    return positions
