from __future__ import annotations
from collections.abc import Sized
from typing import Any, ClassVar, Iterator, Tuple, cast, Self
from ..types.color_types import ChannelTuple, ColorInput, Scalar, UnitTuple, CHANNEL_MAX
from numpy import ndarray
import numpy as np


class RGBA:
    """
    Immutable 8-bit sRGB color with an alpha channel.

    Channels are coerced to ``int`` and clamped to [0, 255] on construction.
    Alpha defaults to fully opaque.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    maxima: ClassVar[ChannelTuple] = (255, 255, 255, 255)
    null_value: ClassVar[ChannelTuple] = (0, 0, 0, 0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = CHANNEL_MAX) -> None:
        channels = (red, green, blue, alpha)
        value = tuple(
            max(0, min(int(v), m)) for v, m in zip(channels, self.maxima)
        )
        self._value = cast(ChannelTuple, value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_array(cls, values: ColorInput) -> Self:
        """
        Build a color from a 3- or 4-element sequence or 1D array.

        A missing alpha channel defaults to 255.
        """
        if isinstance(values, ndarray):
            if values.ndim != 1:
                raise ValueError(f"Input array must be 1-dimensional, got shape {values.shape}")
            values = values.tolist()
        if not isinstance(values, Sized):
            raise TypeError(f"RGBA expects a sequence of channels, got {type(values).__name__}")
        if len(values) not in (3, 4):
            raise ValueError(f"RGBA expects 3 or 4 channels, got {len(values)}")
        return cls(*cast(Tuple[Any, ...], values))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._value[3]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[:3]

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a copy with the alpha channel replaced (clamped to [0, 255])."""
        return self.__class__(*self.rgb, alpha)

    def to_unit(self) -> UnitTuple:
        """
        Convert to float channels in [0, 1] for a display surface.

        Alpha is always emitted as 1.0, whatever alpha the color stores.
        """
        r, g, b = self.rgb
        return (r / 255.0, g / 255.0, b / 255.0, 1.0)

    def as_array(self) -> np.ndarray:
        return np.array(self._value, dtype=np.uint8)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBA):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"RGBA(red={r}, green={g}, blue={b}, alpha={a})"
