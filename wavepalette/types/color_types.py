from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelTuple = Tuple[int, int, int, int]
UnitTuple = Tuple[float, float, float, float]
SampleInput = Union[Scalar, ndarray]
ColorInput = Union[ScalarVector, list, ndarray]

CHANNEL_MAX = 255
CHANNEL_MIN = 0


class PaletteKind(str, Enum):
    COSINE = "cosine"
    TWO_COLOR = "two_color"
    MULTI_COLOR = "multi_color"


def as_palette_kind(kind: PaletteKind | str) -> PaletteKind:
    """
    Resolve a palette tag from an enum member or its string value.

    Args:
        kind: A ``PaletteKind`` or one of "cosine", "two_color", "multi_color"

    Returns:
        The matching ``PaletteKind``
    """
    if isinstance(kind, PaletteKind):
        return kind
    try:
        return PaletteKind(str(kind).lower())
    except ValueError:
        valid = ", ".join(k.value for k in PaletteKind)
        raise ValueError(f"Unknown palette kind {kind!r}; expected one of: {valid}") from None
