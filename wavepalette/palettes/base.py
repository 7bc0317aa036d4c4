from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar
import math

import numpy as np

from ..colors.rgba import RGBA
from ..defaults import scale_modifiers
from ..types.color_types import PaletteKind, SampleInput, Scalar


class Palette(ABC):
    """
    Base class for all palettes.

    A palette maps a scalar sample position ``n`` to an 8-bit color. How the
    caller scales its coordinates before sampling is its own business;
    ``scale_modifier`` is only a hint for that and never enters the color math.
    """

    kind: ClassVar[PaletteKind]

    def __init__(self, wave_length: float) -> None:
        self._wave_length = float(wave_length)
        self._scale_modifier = scale_modifiers[self.kind]

    @property
    def wave_length(self) -> float:
        """Period of the triangle wave; ``math.inf`` means no periodic wrapping."""
        return self._wave_length

    @property
    def scale_modifier(self) -> float:
        return self._scale_modifier

    @property
    def is_periodic(self) -> bool:
        return not math.isinf(self._wave_length)

    @abstractmethod
    def get_color(self, n: Scalar = 0.0) -> RGBA:
        """
        Color at sample position ``n``.

        Raises:
            ValueError: if ``n`` is NaN or infinite
        """

    @abstractmethod
    def sample(self, ns: SampleInput) -> np.ndarray:
        """
        Colors at many sample positions at once.

        Args:
            ns: Scalar or array of sample positions

        Returns:
            uint8 array of shape ``(*ns.shape, 4)``, equal element-wise to
            ``get_color``

        Raises:
            ValueError: if any position is NaN or infinite, as ``get_color``
        """

    @staticmethod
    def colors_to_unit(colors: np.ndarray) -> np.ndarray:
        """
        Convert an 8-bit RGBA array to float32 channels in [0, 1].

        As with ``RGBA.to_unit``, alpha is always 1.0.
        """
        colors = np.asarray(colors)
        if colors.shape[-1] not in (3, 4):
            raise ValueError(f"Expected last dimension of 3 or 4 channels, got shape {colors.shape}")
        unit = np.ones(colors.shape[:-1] + (4,), dtype=np.float32)
        unit[..., :3] = colors[..., :3].astype(np.float32) / 255.0
        return unit

    @staticmethod
    def _with_opaque_alpha(rgb: np.ndarray) -> np.ndarray:
        alpha = np.full(rgb.shape[:-1] + (1,), 255, dtype=np.uint8)
        return np.concatenate([rgb, alpha], axis=-1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(wave_length={self._wave_length})"
