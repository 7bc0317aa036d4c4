from .color_types import PaletteKind, as_palette_kind

__all__ = ["PaletteKind", "as_palette_kind"]
