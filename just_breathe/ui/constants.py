"""Window layout, timing and color definitions."""

# Timing
FPS = 60

# Layout dimensions
WINDOW_SIZE = 512
TITLE = "Just Breathe"

# Colors
BG_COLOR = (0, 0, 0)
OUTLINE_LIFT = 40
