from .base import Palette
from .cosine import CosineOscillatorPalette
from .multi_color import MultiColorPalette
from .two_color import TwoColorPalette

__all__ = [
    "Palette",
    "CosineOscillatorPalette",
    "MultiColorPalette",
    "TwoColorPalette",
]
