"""Tennis training session analysis: active time, work/rest, consistency, density.

Every function here is pure: inputs are read, never mutated, and no state
survives between calls. ``analyze`` is the only entry point that performs
full validation; the single-metric calculators compute over whatever they
are given.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from tennis_analyzer.exceptions import RangeError, SizeMismatchError
from tennis_analyzer.math.statistics import (
    clamp_unit,
    coefficient_of_variation,
    mean,
    normalize_intensity,
)
from tennis_analyzer.models.analysis_result import AnalysisResult
from tennis_analyzer.models.enums import (
    CONSISTENCY_WEIGHT_DURATION,
    CONSISTENCY_WEIGHT_INTENSITY,
    DENSITY_LONG_SET_S,
    DENSITY_REFERENCE_SET_S,
    DENSITY_SHORT_SET_S,
    DENSITY_WEIGHT_DURATION,
    DENSITY_WEIGHT_INTENSITY,
    DENSITY_WEIGHT_VOLUME,
    EPSILON,
    MAX_DURATION_S,
    MAX_INTENSITY,
    MIN_DURATION_S,
    MIN_INTENSITY,
)
from tennis_analyzer.models.training_session import TrainingSession

logger = logging.getLogger(__name__)


def validate_inputs(durations: Sequence[float], intensities: Sequence[int]) -> None:
    """Check that durations and intensities describe a well-formed session.

    Args:
        durations: Set durations in seconds.
        intensities: Per-set intensity ratings (1-5).

    Raises:
        SizeMismatchError: If the sequences differ in length.
        RangeError: On the first duration outside [0, 86400] or the first
            intensity that is not a whole number in [1, 5]. Durations are
            checked first.
    """
    if len(durations) != len(intensities):
        raise SizeMismatchError(
            "Durations and intensities must have the same length "
            f"(got {len(durations)} and {len(intensities)})",
            expected=len(durations),
            actual=len(intensities),
        )

    for i, duration in enumerate(durations):
        # Written so that NaN also fails
        if not MIN_DURATION_S <= duration <= MAX_DURATION_S:
            raise RangeError("duration", i, duration, MIN_DURATION_S, MAX_DURATION_S, unit="seconds")

    for i, intensity in enumerate(intensities):
        if not MIN_INTENSITY <= intensity <= MAX_INTENSITY or intensity != int(intensity):
            raise RangeError("intensity", i, intensity, MIN_INTENSITY, MAX_INTENSITY, unit="(whole numbers)")


def analyze(
    durations: Sequence[float],
    intensities: Sequence[int],
    rest_durations: Sequence[float] = (),
) -> AnalysisResult:
    """Validate a session and compute every metric.

    Args:
        durations: Set durations in seconds, each in [0, 86400].
        intensities: Intensity per set, each in [1, 5].
        rest_durations: Optional rest per set (len n) or between sets
            (len n - 1). Empty means rest equals work.

    Returns:
        AnalysisResult. An empty session yields ``AnalysisResult.empty()``.

    Raises:
        SizeMismatchError: Mismatched durations/intensities, or rest
            durations of unsupported length.
        RangeError: A duration or intensity out of range.
    """
    validate_inputs(durations, intensities)

    if len(durations) == 0:
        logger.debug("Empty session, returning zero-activity result")
        return AnalysisResult.empty()

    result = AnalysisResult(
        total_active_time=calculate_total_active_time(durations),
        work_rest_ratio=calculate_work_rest_ratio(durations, rest_durations),
        consistency_score=calculate_consistency_score(durations, intensities),
        training_density_score=calculate_training_density_score(durations, intensities),
        average_intensity=sum(float(i) for i in intensities) / len(intensities),
        total_work_volume=sum(float(d) * float(i) for d, i in zip(durations, intensities)),
        total_sets=len(durations),
    )
    logger.debug(
        "Analyzed %d sets: active=%.1fs consistency=%.3f density=%.3f",
        result.total_sets,
        result.total_active_time,
        result.consistency_score,
        result.training_density_score,
    )
    return result


def analyze_session(
    session: TrainingSession,
    rest_durations: Sequence[float] | None = None,
) -> AnalysisResult:
    """Analyze the completed sets of a TrainingSession.

    Rest defaults to the gaps between consecutive completed sets.
    """
    rest = session.rest_durations if rest_durations is None else rest_durations
    return analyze(session.durations, session.intensities, rest)


def calculate_total_active_time(durations: Sequence[float]) -> float:
    """Sum of all set durations in seconds (0.0 when empty)."""
    total = 0.0
    for duration in durations:
        total += duration
    return float(total)


def calculate_work_rest_ratio(
    durations: Sequence[float],
    rest_durations: Sequence[float] = (),
) -> float:
    """Calculate total work time divided by total rest time.

    With no rest durations, rest is assumed equal to work (1:1). Rest may be
    given per set (same length as durations) or per gap between sets (one
    fewer).

    Returns:
        The ratio; 0.0 for no sets; ``math.inf`` when total rest is zero.

    Raises:
        SizeMismatchError: If rest_durations has any other non-zero length.
    """
    if len(durations) == 0:
        return 0.0

    total_work = calculate_total_active_time(durations)

    if len(rest_durations) == 0:
        total_rest = total_work
    else:
        per_set = len(durations)
        per_gap = len(durations) - 1
        if len(rest_durations) not in (per_set, per_gap):
            raise SizeMismatchError(
                "Rest durations must match the number of sets or be one less "
                f"(gaps between sets); got {len(rest_durations)} for {per_set} sets",
                expected=per_set,
                actual=len(rest_durations),
            )
        total_rest = calculate_total_active_time(rest_durations)

    if total_rest < EPSILON:
        return math.inf
    return total_work / total_rest


def calculate_consistency_score(
    durations: Sequence[float],
    intensities: Sequence[int],
) -> float:
    """Score how regular the session's set durations and intensities are.

    Each dimension maps its coefficient of variation through 1 / (1 + CV),
    then the two are blended 60/40 in favour of duration.

    Returns:
        Score in [0.0, 1.0]; exactly 1.0 for fewer than two sets.
    """
    if len(durations) < 2:
        return 1.0

    duration_consistency = 1.0 / (1.0 + coefficient_of_variation(durations))
    intensity_cv = coefficient_of_variation([float(i) for i in intensities])
    intensity_consistency = 1.0 / (1.0 + intensity_cv)

    score = (
        CONSISTENCY_WEIGHT_DURATION * duration_consistency
        + CONSISTENCY_WEIGHT_INTENSITY * intensity_consistency
    )
    return clamp_unit(score)


def calculate_training_density_score(
    durations: Sequence[float],
    intensities: Sequence[int],
) -> float:
    """Score how much intensity-weighted work the session packs in.

    Components:
        - average normalized intensity (40%)
        - intensity-weighted volume against one hour per set at max (40%)
        - set length penalty below 30 s or above 30 min (20%)

    Returns:
        Score in [0.0, 1.0]; 0.0 for no sets.
    """
    if len(durations) == 0:
        return 0.0

    normalized = [normalize_intensity(i) for i in intensities]
    avg_intensity_norm = mean(normalized)

    work_volume_norm = 0.0
    for duration, norm in zip(durations, normalized):
        work_volume_norm += duration * norm
    volume_component = min(1.0, work_volume_norm / (DENSITY_REFERENCE_SET_S * len(durations)))

    avg_duration = mean(durations)
    duration_component = 1.0
    if avg_duration < DENSITY_SHORT_SET_S:
        duration_component = avg_duration / DENSITY_SHORT_SET_S
    elif avg_duration > DENSITY_LONG_SET_S:
        duration_component = DENSITY_LONG_SET_S / avg_duration

    density = (
        DENSITY_WEIGHT_INTENSITY * avg_intensity_norm
        + DENSITY_WEIGHT_VOLUME * volume_component
        + DENSITY_WEIGHT_DURATION * duration_component
    )
    return clamp_unit(density)
