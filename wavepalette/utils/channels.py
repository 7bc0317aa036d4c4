from typing import Sequence, Tuple
from boundednumbers.functions import clamp
import numpy as np

from ..types.color_types import CHANNEL_MAX, CHANNEL_MIN, Scalar


def to_channel(value: Scalar) -> int:
    """Round a float channel to the nearest integer and clamp it to [0, 255]."""
    return int(clamp(round(value), CHANNEL_MIN, CHANNEL_MAX))


def lerp_channels(start: Sequence[int], end: Sequence[int], t: float) -> Tuple[int, ...]:
    """
    Linearly interpolate two channel sequences.

    Args:
        start: Channels at t=0
        end: Channels at t=1
        t: Interpolation factor in [0, 1]

    Returns:
        Tuple of rounded, clamped 8-bit channels
    """
    return tuple(to_channel(s * (1.0 - t) + e * t) for s, e in zip(start, end))


def np_to_channels(values: np.ndarray) -> np.ndarray:
    """Vectorized ``to_channel``; returns a uint8 array."""
    return np.clip(np.rint(values), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)


def np_lerp_channels(start: np.ndarray, end: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Vectorized ``lerp_channels``.

    ``start`` and ``end`` broadcast against ``t[..., None]``; the last axis
    holds the channels.
    """
    t = np.asarray(t, dtype=np.float64)[..., None]
    start = np.asarray(start, dtype=np.float64)
    end = np.asarray(end, dtype=np.float64)
    return np_to_channels(start * (1.0 - t) + end * t)
