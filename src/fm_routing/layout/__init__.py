"""Operator layout subpackage.

Public API:
- compute_layout: Level-based layout of a routing graph on a canvas
- LayoutResult: Positions, levels and the chosen policy
- assign_levels: Per-operator distance from the carriers
"""

from fm_routing.layout.engine import (
    LayoutPolicy,
    LayoutResult,
    choose_policy,
    compute_layout,
)
from fm_routing.layout.levels import LevelingError, assign_levels, group_by_level

__all__ = [
    "LayoutPolicy",
    "LayoutResult",
    "LevelingError",
    "assign_levels",
    "choose_policy",
    "compute_layout",
    "group_by_level",
]
