from .rgba import RGBA

# NEUTRALS
WHITE = RGBA(255, 255, 255)
BLACK = RGBA(0, 0, 0)

# RAINBOW
RED = RGBA(255, 0, 0)
ORANGE = RGBA(255, 127, 0)
YELLOW = RGBA(255, 255, 0)
GREEN = RGBA(0, 255, 0)
CYAN = RGBA(0, 255, 255)
BLUE = RGBA(0, 0, 255)
VIOLET = RGBA(139, 0, 255)

RAINBOW = (RED, ORANGE, YELLOW, GREEN, CYAN, BLUE, VIOLET)
