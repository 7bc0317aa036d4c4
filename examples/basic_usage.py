"""Basic wavepalette usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from wavepalette import (
    RGBA,
    MultiColorPalette,
    Palette,
    PaletteKind,
    PaletteRegistry,
    TwoColorPalette,
)


def demonstrate_palettes() -> None:
    # Sample each built-in palette at a few positions.
    for palette in (TwoColorPalette(), MultiColorPalette()):
        print(palette.__class__.__name__, [palette.get_color(n).value for n in (0, 64, 128)])

    sunset = MultiColorPalette([(255, 94, 77), (255, 195, 113), (91, 44, 111)])
    print("Custom anchors, wave length", sunset.wave_length, "->", sunset.get_color(200))


def demonstrate_registry() -> None:
    # Switch palettes the way a UI would and react to the change.
    registry = PaletteRegistry()
    registry.subscribe(lambda reg, kind: print("selected:", kind.value, reg.active_palette))

    print("Cosine origin:", registry.active_palette.get_color(0))
    registry.select_variant(PaletteKind.TWO_COLOR)
    registry.replace_variant(TwoColorPalette(RGBA(0, 0, 64), RGBA(255, 220, 0)))
    registry.refresh()
    print("Refreshed two-color origin:", registry.active_palette.get_color(0))


def demonstrate_arrays() -> None:
    # Colorize a small grid of iteration counts in one call.
    palette = PaletteRegistry().select_variant(PaletteKind.MULTI_COLOR)
    counts = np.arange(0, 1792, 112, dtype=np.float64).reshape(4, 4)
    image = palette.sample(counts)
    print("Grid colors shape:", image.shape)
    print("Display floats (first pixel):", Palette.colors_to_unit(image)[0, 0])


if __name__ == "__main__":
    demonstrate_palettes()
    demonstrate_registry()
    demonstrate_arrays()
