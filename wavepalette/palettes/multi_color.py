from __future__ import annotations
from typing import ClassVar, Optional, Sequence, Tuple
import math
import warnings

import numpy as np

from .base import Palette
from .. import defaults
from ..colors.normalizer import AnchorInput, normalize_anchor
from ..colors.rgba import RGBA
from ..errors import PaletteConstructionError
from ..types.color_types import PaletteKind, SampleInput, Scalar
from ..utils.channels import lerp_channels, np_lerp_channels
from ..utils.default import value_or_default
from ..utils.waveform import np_triangle_phase, triangle_phase


class MultiColorPalette(Palette):
    """
    Cyclic gradient through N anchor colors driven by a triangle wave.

    Each anchor spans ``defaults.ANCHOR_SPAN`` input units, so the wave length
    is ``len(colors) * 256``. The gradient visits the anchors in order and
    wraps from the last one back to the first.
    """

    kind: ClassVar[PaletteKind] = PaletteKind.MULTI_COLOR

    def __init__(self, colors: Optional[Sequence[AnchorInput]] = None) -> None:
        colors = value_or_default(colors, defaults.MULTI_COLOR_ANCHORS)
        if len(colors) == 0:
            raise PaletteConstructionError("MultiColorPalette requires at least one anchor color")
        self._colors: Tuple[RGBA, ...] = tuple(normalize_anchor(c) for c in colors)
        if len(self._colors) == 1:
            warnings.warn(
                "MultiColorPalette built with a single anchor color; "
                "every sample will return that color."
            )
        self._anchors = np.array([c.rgb for c in self._colors], dtype=np.float64)
        super().__init__(len(self._colors) * defaults.ANCHOR_SPAN)

    @property
    def colors(self) -> Tuple[RGBA, ...]:
        return self._colors

    @property
    def color_count(self) -> int:
        return len(self._colors)

    def get_color(self, n: Scalar = 0.0) -> RGBA:
        count = len(self._colors)
        scaled_phase = triangle_phase(n, self._wave_length) * count
        whole = math.floor(scaled_phase)
        index = whole % count
        next_index = (index + 1) % count
        t = scaled_phase - whole
        return RGBA(*lerp_channels(self._colors[index].rgb, self._colors[next_index].rgb, t))

    def sample(self, ns: SampleInput) -> np.ndarray:
        count = len(self._colors)
        scaled_phase = np_triangle_phase(ns, self._wave_length) * count
        whole = np.floor(scaled_phase)
        index = whole.astype(np.int64) % count
        next_index = (index + 1) % count
        t = scaled_phase - whole
        rgb = np_lerp_channels(self._anchors[index], self._anchors[next_index], t)
        return self._with_opaque_alpha(rgb)

    def __repr__(self) -> str:
        return f"MultiColorPalette(colors={list(self._colors)!r})"
