"""Built-in display themes."""

from fm_routing.render.style import Theme

# One colour per operator, OP1..OP6
OPERATOR_COLORS = [
    "#ff6b6b",  # Red
    "#ffd93d",  # Yellow
    "#6bcb77",  # Green
    "#4d96ff",  # Blue
    "#c792ea",  # Purple
    "#ff9f43",  # Orange
]

LCD_THEME = Theme(
    name="lcd",
    background_color="#151515",
    panel_color="#1a1a1a",
    border_color="#404040",
    title_color="#ffcc00",
    connection_color="#aaaaaa",
    feedback_color="#ffaa00",
    output_bar_color="#666666",
    output_label_color="#888888",
    description_color="#aaaaaa",
    carrier_border_color="#ffffff",
    carrier_text_color="#000000",
    operator_colors=list(OPERATOR_COLORS),
)

LIGHT_THEME = Theme(
    name="light",
    background_color="#f4f4f4",
    panel_color="#ffffff",
    border_color="#cccccc",
    title_color="#333333",
    connection_color="#666666",
    feedback_color="#d97a00",
    output_bar_color="#999999",
    output_label_color="#777777",
    description_color="#333333",
    carrier_border_color="#333333",
    carrier_text_color="#000000",
    operator_colors=list(OPERATOR_COLORS),
)

THEMES = {
    "lcd": LCD_THEME,
    "light": LIGHT_THEME,
}
