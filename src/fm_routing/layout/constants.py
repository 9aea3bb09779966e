"""Layout constants for operator placement."""

# Canvas padding
PADDING_X = 20.0  # Left and right
PADDING_TOP = 10.0
PADDING_BOTTOM = 30.0  # Room for the output bar

# Leveling
MAX_LEVEL_PASSES = 10

# Zigzag policy
ZIGZAG_MIN_LEVEL = 4  # Deepest level that triggers the two-row layout
ZIGZAG_TOP_ROW = 0.25  # Fraction of available height
ZIGZAG_BOTTOM_ROW = 0.75
