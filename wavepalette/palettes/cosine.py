from __future__ import annotations
from typing import ClassVar, Optional, Tuple
import math

import numpy as np

from .base import Palette
from .. import defaults
from ..colors.rgba import RGBA
from ..errors import PaletteConstructionError
from ..types.color_types import PaletteKind, SampleInput, Scalar
from ..utils.channels import np_to_channels, to_channel
from ..utils.default import value_or_default
from ..utils.waveform import np_require_finite, require_finite

TAU = 2.0 * math.pi
AMPLITUDE = 128.0
OFFSET = 128.0


class CosineOscillatorPalette(Palette):
    """
    Three independent cosine oscillators, one per channel.

    Each channel is ``128 * cos(2π n / term) + 128``, so a channel repeats
    every ``term`` input units. The sample position is used as-is; the
    palette reports an infinite wave length to tell callers there is no
    periodic normalization to apply.
    """

    kind: ClassVar[PaletteKind] = PaletteKind.COSINE

    def __init__(
        self,
        r_term: Optional[float] = None,
        g_term: Optional[float] = None,
        b_term: Optional[float] = None,
    ) -> None:
        terms = (
            float(value_or_default(r_term, defaults.COSINE_R_TERM)),
            float(value_or_default(g_term, defaults.COSINE_G_TERM)),
            float(value_or_default(b_term, defaults.COSINE_B_TERM)),
        )
        for name, term in zip(("r_term", "g_term", "b_term"), terms):
            if term == 0.0 or not math.isfinite(term):
                raise PaletteConstructionError(
                    f"CosineOscillatorPalette {name} must be finite and non-zero, got {term}"
                )
        self._terms = terms
        super().__init__(defaults.COSINE_WAVE_LENGTH)

    @property
    def r_term(self) -> float:
        return self._terms[0]

    @property
    def g_term(self) -> float:
        return self._terms[1]

    @property
    def b_term(self) -> float:
        return self._terms[2]

    @property
    def terms(self) -> Tuple[float, float, float]:
        return self._terms

    def get_color(self, n: Scalar = 0.0) -> RGBA:
        require_finite(n)
        return RGBA(*(
            to_channel(AMPLITUDE * math.cos((TAU / term) * n) + OFFSET)
            for term in self._terms
        ))

    def sample(self, ns: SampleInput) -> np.ndarray:
        ns = np_require_finite(ns)[..., None]
        frequencies = TAU / np.array(self._terms, dtype=np.float64)
        rgb = np_to_channels(AMPLITUDE * np.cos(frequencies * ns) + OFFSET)
        return self._with_opaque_alpha(rgb)

    def __repr__(self) -> str:
        r, g, b = self._terms
        return f"CosineOscillatorPalette(r_term={r}, g_term={g}, b_term={b})"
