"""A single timed set within a training session."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from tennis_analyzer.models.enums import (
    MAX_DURATION_S,
    MIN_SET_DURATION_S,
    Intensity,
    SetType,
)


@dataclass(frozen=True)
class TrainingSet:
    """One set with a start time, an optional end time and an effort rating.

    A set without ``end_time`` is still in progress.
    """

    start_time: datetime
    set_type: SetType
    end_time: datetime | None = None
    intensity: int = Intensity.MODERATE

    @classmethod
    def completed(
        cls,
        set_type: SetType,
        duration_s: float,
        start_time: datetime,
        intensity: int = Intensity.MODERATE,
    ) -> TrainingSet:
        """Create a finished set lasting *duration_s* seconds from *start_time*."""
        return cls(
            start_time=start_time,
            set_type=set_type,
            end_time=start_time + timedelta(seconds=duration_s),
            intensity=intensity,
        )

    @property
    def duration(self) -> float | None:
        """Seconds between start and end, or None if active or reversed."""
        if self.end_time is None:
            return None
        seconds = (self.end_time - self.start_time).total_seconds()
        if seconds < 0:
            return None
        return seconds

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    @property
    def is_valid(self) -> bool:
        if self.end_time is None:
            return True
        duration = self.duration
        if duration is None:
            return False
        return MIN_SET_DURATION_S <= duration <= MAX_DURATION_S

    @property
    def is_completed(self) -> bool:
        return self.end_time is not None and self.is_valid

    @property
    def validation_errors(self) -> list[str]:
        """Human-readable problems with this set's timing."""
        errors: list[str] = []
        if self.end_time is None:
            return errors
        if self.end_time < self.start_time:
            errors.append("End time cannot be before start time")
        duration = self.duration
        if duration is None:
            errors.append("Invalid duration calculation")
        else:
            if duration < MIN_SET_DURATION_S:
                errors.append("Duration must be at least 1 second")
            if duration > MAX_DURATION_S:
                errors.append("Duration exceeds maximum limit (24 hours)")
        return errors
