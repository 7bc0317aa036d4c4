from typing import Union
import numpy as np

from .rgba import RGBA
from ..types.color_types import ColorInput

AnchorInput = Union[RGBA, ColorInput]


def normalize_anchor(anchor: AnchorInput) -> RGBA:
    """
    Coerce an anchor color given as RGBA, tuple, list or 1D array to RGBA.

    Raises:
        TypeError: for any other input type
        ValueError: for a sequence without 3 or 4 channels
    """
    if isinstance(anchor, RGBA):
        return anchor
    if isinstance(anchor, (tuple, list, np.ndarray)):
        return RGBA.from_array(anchor)
    raise TypeError(f"Unsupported anchor color type: {type(anchor).__name__}")
