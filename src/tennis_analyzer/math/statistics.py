"""Shared descriptive statistics used by every session metric.

All helpers accept any sequence of numbers and compute in float64.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from tennis_analyzer.models.enums import EPSILON, MAX_INTENSITY, MIN_INTENSITY


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean. Returns 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(_as_array(values)))


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (Bessel-corrected, ddof=1).

    Returns 0.0 when fewer than two values are given.
    """
    if len(values) < 2:
        return 0.0
    return float(np.std(_as_array(values), ddof=1))


def coefficient_of_variation(values: Sequence[float]) -> float:
    """Standard deviation divided by the mean.

    Returns 0.0 for an empty sequence or when |mean| < EPSILON. The result
    keeps the sign of the mean and is not clamped.
    """
    if len(values) == 0:
        return 0.0
    mean_value = mean(values)
    if abs(mean_value) < EPSILON:
        return 0.0
    return standard_deviation(values) / mean_value


def normalize_intensity(intensity: float) -> float:
    """Map the 1-5 intensity scale onto [0.0, 1.0]."""
    return (float(intensity) - MIN_INTENSITY) / (MAX_INTENSITY - MIN_INTENSITY)


def clamp_unit(value: float) -> float:
    """Clamp *value* into [0.0, 1.0]."""
    return max(0.0, min(1.0, value))
