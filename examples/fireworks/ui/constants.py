"""Window layout, timing and color definitions."""

# Timing
FPS = 60

# Window
WIDTH = 960
HEIGHT = 600
TITLE = "skyburst"

# Launch control
BURST_RANGE = (6, 10)
BUTTON_W = 120
BUTTON_H = 40
BUTTON_MARGIN = 16

# Colors
SKY_COLOR = (4, 8, 16)
BUTTON_BG = (40, 44, 72)
BUTTON_HOVER = (64, 70, 110)
BUTTON_BORDER = (140, 150, 210)
TEXT_COLOR = (230, 230, 240)
TEXT_DIM = (120, 120, 140)
BANNER_BG = (10, 14, 30, 200)

# Gradient quality
GLOW_RINGS = 32

MESSAGE_TEXT = "That's the show! Press Fire! for another round."
