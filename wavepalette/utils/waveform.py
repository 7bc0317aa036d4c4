"""
Triangle waveform used by the interpolating palettes.

The wave rises linearly from 0 to 1 over the first half of each period and
falls back to 0 over the second half.
"""

import math

import numpy as np


def _validate_period(period: float) -> None:
    if not period > 0 or math.isinf(period):
        raise ValueError(f"Triangle wave period must be positive and finite, got {period}")


def require_finite(x: float) -> float:
    """Raise ``ValueError`` unless the sample position ``x`` is finite."""
    if not math.isfinite(x):
        raise ValueError(f"Sample position must be finite, got {x}")
    return x


def np_require_finite(x) -> np.ndarray:
    """
    Vectorized ``require_finite``.

    Returns:
        ``x`` as a float64 array
    """
    x = np.asarray(x, dtype=np.float64)
    if not np.all(np.isfinite(x)):
        raise ValueError("Sample positions must be finite; got NaN or infinite values")
    return x


def triangle_phase(x: float, period: float) -> float:
    """
    Triangle wave of the given period.

    Args:
        x: Input value, any finite real number
        period: Wave length, positive and finite

    Returns:
        Phase in [0, 1], peaking at half a period

    Raises:
        ValueError: if ``x`` is NaN or infinite, or ``period`` is invalid
    """
    _validate_period(period)
    require_finite(x)
    remainder = math.fmod(x, period)
    if remainder < 0.0:
        remainder += period
    normalized = remainder / period

    if normalized < 0.5:
        # Ascending
        return 2.0 * normalized
    # Descending
    return 2.0 * (1.0 - normalized)


def np_triangle_phase(x: np.ndarray, period: float) -> np.ndarray:
    """
    Vectorized ``triangle_phase``.

    Args:
        x: Array of input values
        period: Wave length, positive and finite

    Returns:
        float64 array of phases with the same shape as ``x``
    """
    _validate_period(period)
    x = np_require_finite(x)
    remainder = np.fmod(x, period)
    remainder = np.where(remainder < 0.0, remainder + period, remainder)
    normalized = remainder / period
    return np.where(normalized < 0.5, 2.0 * normalized, 2.0 * (1.0 - normalized))
