"""
wavepalette: waveform-driven color palettes.

Maps a scalar sample position (a pixel coordinate, an iteration count, a
distance estimate) to an 8-bit RGBA color, for colorizing fractal renders
and similar visualizations.

Quick Start
-----------
>>> from wavepalette import PaletteRegistry, PaletteKind
>>>
>>> registry = PaletteRegistry()
>>> registry.active_palette.get_color(0)
RGBA(red=255, green=255, blue=255, alpha=255)
>>> registry.select_variant(PaletteKind.TWO_COLOR).get_color(128)
RGBA(red=0, green=0, blue=0, alpha=255)

Modules
-------
- colors: the RGBA color value and named sample colors
- palettes: two-color, multi-color and cosine oscillator palettes
- registry: active palette selection with change notifications
- utils.waveform: the triangle wave shared by the interpolating palettes
"""

from .colors import RGBA
from .errors import PaletteConstructionError
from .palettes import (
    Palette,
    CosineOscillatorPalette,
    MultiColorPalette,
    TwoColorPalette,
)
from .registry import PaletteRegistry
from .types.color_types import PaletteKind
from .utils.waveform import triangle_phase, np_triangle_phase

__version__ = "1.0.0"

__all__ = [
    # colors
    "RGBA",
    # palettes
    "Palette",
    "CosineOscillatorPalette",
    "MultiColorPalette",
    "TwoColorPalette",
    "PaletteKind",
    "PaletteRegistry",
    # waveform
    "triangle_phase",
    "np_triangle_phase",
    # errors
    "PaletteConstructionError",
    "__version__",
]
