"""Boundary adapter between loosely typed callers and the analyzer.

Callers such as UIs or foreign-language bindings hand over whatever numeric
containers they hold (lists, tuples, numpy arrays, strings from a form).
This module coerces them into analyzer inputs and collapses every
validation failure into one "invalid input" signal: ``None`` for a full
analysis and ``0.0`` for a single metric. Nothing raised by the analyzer
crosses this boundary.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np

from tennis_analyzer import analyzer
from tennis_analyzer.exceptions import InvalidInputError, TennisAnalyzerError
from tennis_analyzer.models.analysis_result import AnalysisResult

logger = logging.getLogger(__name__)


def to_durations(values: Iterable[object] | None) -> tuple[float, ...]:
    """Coerce *values* into a tuple of float seconds.

    Raises:
        InvalidInputError: If any entry is not numeric, or if *values* is a
            bare string rather than a sequence.
    """
    if values is None:
        return ()
    if isinstance(values, (str, bytes)):
        raise InvalidInputError(f"Expected a sequence of numbers, got a string: {values!r}")
    try:
        arr = np.asarray(list(values), dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Durations must be numeric: {exc}") from exc
    return tuple(float(v) for v in arr.ravel())


def to_intensities(values: Iterable[object] | None) -> tuple[int, ...]:
    """Coerce *values* into a tuple of integer intensities.

    Raises:
        InvalidInputError: If any entry is not numeric or not a whole number.
    """
    if values is None:
        return ()
    floats = to_durations(values)
    intensities: list[int] = []
    for i, value in enumerate(floats):
        if not math.isfinite(value) or value != int(value):
            raise InvalidInputError(f"Intensity at index {i} is not a whole number (got {value!r})")
        intensities.append(int(value))
    return tuple(intensities)


def analyze_or_none(
    durations: Iterable[object] | None,
    intensities: Iterable[object] | None,
    rest_durations: Iterable[object] | None = None,
) -> AnalysisResult | None:
    """Run a full analysis, returning None for any invalid input.

    Empty sessions and negative rest durations are also rejected here even
    though the analyzer itself accepts the former.
    """
    try:
        duration_values = to_durations(durations)
        intensity_values = to_intensities(intensities)
        rest_values = to_durations(rest_durations)
        if not duration_values:
            raise InvalidInputError("No sets to analyze")
        for i, rest in enumerate(rest_values):
            if not rest >= 0.0:
                raise InvalidInputError(f"Rest duration at index {i} is negative (got {rest!r})")
        return analyzer.analyze(duration_values, intensity_values, rest_values)
    except TennisAnalyzerError as exc:
        logger.warning("Rejected session input: %s", exc)
        return None


def total_active_time_or_zero(durations: Iterable[object] | None) -> float:
    try:
        return analyzer.calculate_total_active_time(to_durations(durations))
    except TennisAnalyzerError as exc:
        logger.warning("Rejected durations: %s", exc)
        return 0.0


def work_rest_ratio_or_zero(
    durations: Iterable[object] | None,
    rest_durations: Iterable[object] | None = None,
) -> float:
    try:
        return analyzer.calculate_work_rest_ratio(
            to_durations(durations), to_durations(rest_durations)
        )
    except TennisAnalyzerError as exc:
        logger.warning("Rejected work/rest input: %s", exc)
        return 0.0


def _paired_or_none(
    durations: Iterable[object] | None,
    intensities: Iterable[object] | None,
) -> tuple[tuple[float, ...], tuple[int, ...]] | None:
    try:
        duration_values = to_durations(durations)
        intensity_values = to_intensities(intensities)
    except TennisAnalyzerError as exc:
        logger.warning("Rejected session input: %s", exc)
        return None
    if not duration_values or len(duration_values) != len(intensity_values):
        logger.warning(
            "Rejected session input: %d durations, %d intensities",
            len(duration_values),
            len(intensity_values),
        )
        return None
    return duration_values, intensity_values


def consistency_score_or_zero(
    durations: Iterable[object] | None,
    intensities: Iterable[object] | None,
) -> float:
    paired = _paired_or_none(durations, intensities)
    if paired is None:
        return 0.0
    return analyzer.calculate_consistency_score(*paired)


def training_density_score_or_zero(
    durations: Iterable[object] | None,
    intensities: Iterable[object] | None,
) -> float:
    paired = _paired_or_none(durations, intensities)
    if paired is None:
        return 0.0
    return analyzer.calculate_training_density_score(*paired)
