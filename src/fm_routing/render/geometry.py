"""Drawing geometry for operators, connections and feedback loops.

Pure coordinate math; the SVG renderer turns these shapes into elements.
Angles for the feedback arc follow the dial convention: 0 at 12 o'clock,
increasing clockwise on a y-down canvas.
"""

from __future__ import annotations

__all__ = [
    "Arc",
    "Segment",
    "arrow_head",
    "connection_segment",
    "feedback_loop",
    "output_bar",
]

import math
from dataclasses import dataclass

from fm_routing.render.constants import (
    ARROW_HALF_ANGLE,
    ARROW_LENGTH,
    FEEDBACK_END_ANGLE,
    FEEDBACK_LOOP_SCALE,
    FEEDBACK_START_ANGLE,
    OUTPUT_BAR_END,
    OUTPUT_BAR_START,
    OUTPUT_BAR_Y,
)

Point = tuple[float, float]


@dataclass
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def angle(self) -> float:
        """Direction of travel from start to end, in radians."""
        return math.atan2(self.y2 - self.y1, self.x2 - self.x1)


@dataclass
class Arc:
    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float

    def point_at(self, angle: float) -> Point:
        return (
            self.cx + self.radius * math.sin(angle),
            self.cy - self.radius * math.cos(angle),
        )

    @property
    def start(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self.point_at(self.end_angle)

    @property
    def large_arc(self) -> bool:
        return abs(self.end_angle - self.start_angle) > math.pi

    @property
    def clockwise(self) -> bool:
        return self.end_angle > self.start_angle

    @property
    def end_tangent(self) -> float:
        """Direction of travel at the end of the arc, in canvas radians."""
        sign = 1.0 if self.clockwise else -1.0
        return math.atan2(
            sign * math.sin(self.end_angle), sign * math.cos(self.end_angle)
        )


def connection_segment(source: Point, target: Point, radius: float) -> Segment:
    """Line from the bottom of the modulator circle to the top of its target."""
    return Segment(source[0], source[1] + radius, target[0], target[1] - radius)


def arrow_head(
    tip: Point,
    angle: float,
    length: float = ARROW_LENGTH,
    half_angle: float = ARROW_HALF_ANGLE,
) -> list[Point]:
    """Triangle pointing along ``angle`` with its point at ``tip``."""
    x, y = tip
    return [
        (x, y),
        (
            x - length * math.cos(angle - half_angle),
            y - length * math.sin(angle - half_angle),
        ),
        (
            x - length * math.cos(angle + half_angle),
            y - length * math.sin(angle + half_angle),
        ),
    ]


def feedback_loop(center: Point, radius: float) -> Arc:
    """Self-modulation loop hugging the right side of an operator."""
    loop_radius = radius * FEEDBACK_LOOP_SCALE
    return Arc(
        cx=center[0] + radius + loop_radius * 0.5,
        cy=center[1],
        radius=loop_radius,
        start_angle=FEEDBACK_START_ANGLE,
        end_angle=FEEDBACK_END_ANGLE,
    )


def output_bar(
    offset_x: float, offset_y: float, width: float, height: float
) -> Segment:
    y = offset_y + height * OUTPUT_BAR_Y
    return Segment(
        offset_x + width * OUTPUT_BAR_START,
        y,
        offset_x + width * OUTPUT_BAR_END,
        y,
    )
