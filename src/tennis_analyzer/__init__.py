"""Tennis training session analyzer — pure metrics over set durations and intensities."""

from tennis_analyzer.analyzer import (
    analyze,
    analyze_session,
    calculate_consistency_score,
    calculate_total_active_time,
    calculate_training_density_score,
    calculate_work_rest_ratio,
    validate_inputs,
)
from tennis_analyzer.exceptions import (
    InvalidInputError,
    RangeError,
    SizeMismatchError,
    TennisAnalyzerError,
)
from tennis_analyzer.models import (
    AnalysisResult,
    Intensity,
    SetType,
    TrainingSession,
    TrainingSet,
)

__all__ = [
    "AnalysisResult",
    "Intensity",
    "InvalidInputError",
    "RangeError",
    "SetType",
    "SizeMismatchError",
    "TennisAnalyzerError",
    "TrainingSession",
    "TrainingSet",
    "analyze",
    "analyze_session",
    "calculate_consistency_score",
    "calculate_total_active_time",
    "calculate_training_density_score",
    "calculate_work_rest_ratio",
    "validate_inputs",
]
