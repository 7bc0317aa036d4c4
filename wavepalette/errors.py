class PaletteConstructionError(ValueError):
    """Raised when a palette is built from invalid parameters."""
