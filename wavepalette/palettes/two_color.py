from __future__ import annotations
from typing import ClassVar, Optional
import math

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


class TwoColorPalette(Palette):
    """
    Triangle-wave blend between two anchor colors.

    ``get_color(0)`` is the start color, half a wave length later the end
    color, and a full wave length later the start color again.
    """

    kind: ClassVar[PaletteKind] = PaletteKind.TWO_COLOR

    def __init__(
        self,
        start_color: Optional[AnchorInput] = None,
        end_color: Optional[AnchorInput] = None,
        wave_length: Optional[float] = None,
    ) -> None:
        wave_length = value_or_default(wave_length, defaults.TWO_COLOR_WAVE_LENGTH)
        if not wave_length > 0 or math.isinf(wave_length):
            raise PaletteConstructionError(
                f"TwoColorPalette wave_length must be positive and finite, got {wave_length}"
            )
        self._start_color = normalize_anchor(value_or_default(start_color, defaults.TWO_COLOR_START))
        self._end_color = normalize_anchor(value_or_default(end_color, defaults.TWO_COLOR_END))
        super().__init__(wave_length)

    @property
    def start_color(self) -> RGBA:
        return self._start_color

    @property
    def end_color(self) -> RGBA:
        return self._end_color

    def get_color(self, n: Scalar = 0.0) -> RGBA:
        t = triangle_phase(n, self._wave_length)
        return RGBA(*lerp_channels(self._start_color.rgb, self._end_color.rgb, t))

    def sample(self, ns: SampleInput) -> np.ndarray:
        t = np_triangle_phase(ns, self._wave_length)
        start = np.array(self._start_color.rgb, dtype=np.float64)
        end = np.array(self._end_color.rgb, dtype=np.float64)
        return self._with_opaque_alpha(np_lerp_channels(start, end, t))

    def __repr__(self) -> str:
        return (
            f"TwoColorPalette(start_color={self._start_color!r}, "
            f"end_color={self._end_color!r}, wave_length={self._wave_length})"
        )
