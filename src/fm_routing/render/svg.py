"""SVG rendering of an algorithm display using drawsvg.

Panel layout, top to bottom: title band, graph area (operators,
connections, output bar), description line.
"""

from __future__ import annotations

__all__ = ["render_svg"]

import drawsvg as draw

from fm_routing.describe import build_description
from fm_routing.layout.engine import LayoutResult, compute_layout
from fm_routing.model import RoutingGraph
from fm_routing.render.constants import (
    CARRIER_BORDER_OPACITY,
    CONNECTION_STROKE,
    CORNER_RADIUS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    DESCRIPTION_BASELINE,
    DESCRIPTION_FONT_SIZE,
    DESCRIPTION_HEIGHT,
    DISPLAY_INSET_X,
    FEEDBACK_ARROW_LENGTH,
    FONT_FAMILY,
    INNER_CORNER_RADIUS,
    INNER_INSET,
    MODULATOR_FILL_OPACITY,
    MODULATOR_TEXT_BRIGHTEN,
    OPERATOR_FONT_SCALE,
    OPERATOR_RADIUS,
    OPERATOR_STROKE,
    OUTPUT_BAR_STROKE,
    OUTPUT_FONT_SIZE,
    OUTPUT_LABEL_OFFSET,
    TITLE_FONT_SIZE,
    TITLE_HEIGHT,
)
from fm_routing.render.geometry import (
    arrow_head,
    connection_segment,
    feedback_loop,
    output_bar,
)
from fm_routing.render.style import Theme, brighter
from fm_routing.themes import LCD_THEME


def render_svg(
    graph: RoutingGraph,
    theme: Theme = LCD_THEME,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    title: str | None = None,
    radius: float = OPERATOR_RADIUS,
) -> str:
    """Render a routing graph as a standalone SVG document.

    The graph area is the panel minus the title band, the description
    band and a horizontal inset; the layout engine works in that area's
    local coordinates and the renderer translates them.
    """
    offset_x = DISPLAY_INSET_X
    offset_y = TITLE_HEIGHT
    display_w = width - 2 * DISPLAY_INSET_X
    display_h = height - TITLE_HEIGHT - DESCRIPTION_HEIGHT
    layout = compute_layout(graph, display_w, display_h)

    d = draw.Drawing(width, height)
    _render_panel(d, theme, width, height)

    if title:
        d.append(
            draw.Text(
                title,
                TITLE_FONT_SIZE,
                width / 2,
                TITLE_HEIGHT / 2,
                fill=theme.title_color,
                font_family=FONT_FAMILY,
                font_weight="bold",
                text_anchor="middle",
                dominant_baseline="central",
            )
        )

    # Connections first so operators sit on top of them
    _render_connections(d, graph, layout, offset_x, offset_y, radius, theme)
    _render_output_bar(d, offset_x, offset_y, display_w, display_h, theme)
    _render_operators(d, graph, layout, offset_x, offset_y, radius, theme)

    d.append(
        draw.Text(
            build_description(graph),
            DESCRIPTION_FONT_SIZE,
            width / 2,
            height - DESCRIPTION_BASELINE,
            fill=theme.description_color,
            font_family=FONT_FAMILY,
            text_anchor="middle",
        )
    )

    return d.as_svg()


def _render_panel(d: draw.Drawing, theme: Theme, width: float, height: float) -> None:
    d.append(
        draw.Rectangle(
            0, 0, width, height,
            rx=CORNER_RADIUS,
            fill=theme.background_color,
        )
    )
    d.append(
        draw.Rectangle(
            0.5, 0.5, width - 1, height - 1,
            rx=CORNER_RADIUS,
            fill="none",
            stroke=theme.border_color,
            stroke_width=1,
        )
    )
    d.append(
        draw.Rectangle(
            INNER_INSET,
            INNER_INSET,
            width - 2 * INNER_INSET,
            height - 2 * INNER_INSET,
            rx=INNER_CORNER_RADIUS,
            fill=theme.panel_color,
        )
    )


def _render_connections(
    d: draw.Drawing,
    graph: RoutingGraph,
    layout: LayoutResult,
    offset_x: float,
    offset_y: float,
    radius: float,
    theme: Theme,
) -> None:
    for source, target in graph.edges():
        sx, sy = layout.positions[source]
        tx, ty = layout.positions[target]
        seg = connection_segment(
            (offset_x + sx, offset_y + sy), (offset_x + tx, offset_y + ty), radius
        )
        d.append(
            draw.Line(
                seg.x1, seg.y1, seg.x2, seg.y2,
                stroke=theme.connection_color,
                stroke_width=CONNECTION_STROKE,
                class_="connection",
            )
        )
        head = arrow_head((seg.x2, seg.y2), seg.angle)
        d.append(
            draw.Lines(
                *[c for pt in head for c in pt],
                close=True,
                fill=theme.connection_color,
            )
        )


def _render_output_bar(
    d: draw.Drawing,
    offset_x: float,
    offset_y: float,
    display_w: float,
    display_h: float,
    theme: Theme,
) -> None:
    bar = output_bar(offset_x, offset_y, display_w, display_h)
    d.append(
        draw.Line(
            bar.x1, bar.y1, bar.x2, bar.y2,
            stroke=theme.output_bar_color,
            stroke_width=OUTPUT_BAR_STROKE,
        )
    )
    d.append(
        draw.Text(
            "OUTPUT",
            OUTPUT_FONT_SIZE,
            (bar.x1 + bar.x2) / 2,
            bar.y1 + OUTPUT_LABEL_OFFSET,
            fill=theme.output_label_color,
            font_family=FONT_FAMILY,
            text_anchor="middle",
        )
    )


def _render_operators(
    d: draw.Drawing,
    graph: RoutingGraph,
    layout: LayoutResult,
    offset_x: float,
    offset_y: float,
    radius: float,
    theme: Theme,
) -> None:
    for op in sorted(layout.positions):
        x, y = layout.positions[op]
        x += offset_x
        y += offset_y
        color = theme.operator_color(op)
        carrier = graph.is_carrier(op)

        if carrier:
            d.append(
                draw.Circle(
                    x, y, radius,
                    fill=color,
                    stroke=theme.carrier_border_color,
                    stroke_opacity=CARRIER_BORDER_OPACITY,
                    stroke_width=OPERATOR_STROKE,
                )
            )
        else:
            d.append(
                draw.Circle(
                    x, y, radius,
                    fill=color,
                    fill_opacity=MODULATOR_FILL_OPACITY,
                    stroke=color,
                    stroke_width=OPERATOR_STROKE,
                )
            )

        d.append(
            draw.Text(
                str(op + 1),
                radius * OPERATOR_FONT_SCALE,
                x,
                y,
                fill=(
                    theme.carrier_text_color
                    if carrier
                    else brighter(color, MODULATOR_TEXT_BRIGHTEN)
                ),
                font_family=FONT_FAMILY,
                font_weight="bold",
                text_anchor="middle",
                dominant_baseline="central",
                class_="operator",
            )
        )

        if op == graph.feedback_op:
            _render_feedback(d, (x, y), radius, theme)


def _render_feedback(
    d: draw.Drawing, center: tuple[float, float], radius: float, theme: Theme
) -> None:
    arc = feedback_loop(center, radius)
    sx, sy = arc.start
    ex, ey = arc.end
    path = draw.Path(
        fill="none",
        stroke=theme.feedback_color,
        stroke_width=CONNECTION_STROKE,
        class_="feedback",
    )
    path.M(sx, sy).A(
        arc.radius, arc.radius, 0,
        int(arc.large_arc), int(arc.clockwise),
        ex, ey,
    )
    d.append(path)
    head = arrow_head((ex, ey), arc.end_tangent, length=FEEDBACK_ARROW_LENGTH)
    d.append(
        draw.Lines(
            *[c for pt in head for c in pt],
            close=True,
            fill=theme.feedback_color,
        )
    )
