"""
Construction defaults for the built-in palettes.

Constructor keyword arguments override these values.
"""
import math

from .colors import samples
from .types.color_types import PaletteKind

# Each anchor color of an interpolating palette spans this many input units.
ANCHOR_SPAN = 256.0

TWO_COLOR_WAVE_LENGTH = ANCHOR_SPAN
TWO_COLOR_START = samples.WHITE
TWO_COLOR_END = samples.BLACK

MULTI_COLOR_ANCHORS = samples.RAINBOW

COSINE_R_TERM = 11.0
COSINE_G_TERM = 17.0
COSINE_B_TERM = 13.0
COSINE_WAVE_LENGTH = math.inf

scale_modifiers = {
    PaletteKind.COSINE: 1.0,
    PaletteKind.TWO_COLOR: 40.0,
    PaletteKind.MULTI_COLOR: 68.0,
}

DEFAULT_SELECTION = PaletteKind.COSINE
