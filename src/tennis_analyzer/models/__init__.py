"""Data models for the tennis session analyzer."""

from tennis_analyzer.models.analysis_result import AnalysisResult
from tennis_analyzer.models.enums import Intensity, SetType
from tennis_analyzer.models.training_session import TrainingSession
from tennis_analyzer.models.training_set import TrainingSet

__all__ = [
    "AnalysisResult",
    "Intensity",
    "SetType",
    "TrainingSession",
    "TrainingSet",
]
