"""Rendering constants for the algorithm display."""

# Canvas
DEFAULT_WIDTH = 320.0
DEFAULT_HEIGHT = 240.0
CORNER_RADIUS = 6.0
INNER_INSET = 3.0
INNER_CORNER_RADIUS = 4.0

# Panel bands
TITLE_HEIGHT = 24.0
DESCRIPTION_HEIGHT = 40.0  # Reserved below the graph area
DISPLAY_INSET_X = 10.0

# Operators
OPERATOR_RADIUS = 14.0
OPERATOR_STROKE = 2.0
OPERATOR_FONT_SCALE = 1.2  # Font size relative to radius
MODULATOR_FILL_OPACITY = 0.3
MODULATOR_TEXT_BRIGHTEN = 0.3
CARRIER_BORDER_OPACITY = 0.8

# Connections
CONNECTION_STROKE = 1.5
ARROW_LENGTH = 8.0
ARROW_HALF_ANGLE = 0.5  # Radians

# Feedback loop
FEEDBACK_LOOP_SCALE = 0.8  # Loop radius relative to operator radius
FEEDBACK_START_ANGLE = -2.5  # Radians, clockwise from 12 o'clock
FEEDBACK_END_ANGLE = 0.8
FEEDBACK_ARROW_LENGTH = 6.0

# Output bar
OUTPUT_BAR_Y = 0.82  # Fraction of display height
OUTPUT_BAR_START = 0.15  # Fractions of display width
OUTPUT_BAR_END = 0.85
OUTPUT_BAR_STROKE = 2.0
OUTPUT_LABEL_OFFSET = 12.0

# Text
TITLE_FONT_SIZE = 16.0
OUTPUT_FONT_SIZE = 10.0
DESCRIPTION_FONT_SIZE = 11.0
DESCRIPTION_BASELINE = 10.0  # Distance above the bottom edge
FONT_FAMILY = "Helvetica, Arial, sans-serif"
