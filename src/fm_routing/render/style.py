"""Theme definition for the algorithm display."""

from __future__ import annotations

__all__ = ["Theme", "brighter"]

from dataclasses import dataclass, field


@dataclass
class Theme:
    """Colour scheme for one display style."""

    name: str
    background_color: str
    panel_color: str
    border_color: str
    title_color: str
    connection_color: str
    feedback_color: str
    output_bar_color: str
    output_label_color: str
    description_color: str
    carrier_border_color: str
    carrier_text_color: str
    operator_colors: list[str] = field(default_factory=list)

    def operator_color(self, op: int) -> str:
        return self.operator_colors[op % len(self.operator_colors)]


def brighter(color: str, amount: float) -> str:
    """Lighten a ``#rrggbb`` colour, shrinking each channel's distance to white.

    The distance is divided by ``1 + amount``, so 0 leaves the colour unchanged.
    """
    scale = 1.0 / (1.0 + amount)
    channels = [int(color[i : i + 2], 16) for i in (1, 3, 5)]
    return "#" + "".join(f"{round(255 - scale * (255 - c)):02x}" for c in channels)
