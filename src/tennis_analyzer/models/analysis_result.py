"""Analysis result — the single output record of the analyzer."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Metrics computed for one training session.

    Attributes:
        total_active_time: Sum of set durations in seconds.
        work_rest_ratio: Total work / total rest (``math.inf`` with no rest).
        consistency_score: 0.0 (inconsistent) to 1.0 (perfectly consistent).
        training_density_score: 0.0 (low density) to 1.0 (high density).
        average_intensity: Mean intensity on the 1-5 scale.
        total_work_volume: Intensity-weighted seconds.
        total_sets: Number of sets analyzed.
    """

    total_active_time: float
    work_rest_ratio: float
    consistency_score: float
    training_density_score: float
    average_intensity: float
    total_work_volume: float
    total_sets: int

    @classmethod
    def empty(cls) -> AnalysisResult:
        """The degenerate zero-activity session."""
        return cls(
            total_active_time=0.0,
            work_rest_ratio=0.0,
            consistency_score=0.0,
            training_density_score=0.0,
            average_intensity=0.0,
            total_work_volume=0.0,
            total_sets=0,
        )

    def to_dict(self) -> dict:
        return asdict(self)
