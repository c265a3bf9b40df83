"""Training session — an ordered collection of sets with derived rest gaps."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date

from tennis_analyzer.models.enums import MAX_NOTES_LENGTH, MIN_REST_GAP_S, SetType
from tennis_analyzer.models.training_set import TrainingSet


@dataclass(frozen=True)
class TrainingSession:
    """Frozen session with query helpers over its completed sets.

    Only completed, valid sets feed the analyzer; active or malformed sets
    are ignored by every derived property except the validation helpers.
    """

    session_date: date
    sets: tuple[TrainingSet, ...] = field(default_factory=tuple)
    notes: str | None = None

    # -- Analyzer inputs --------------------------------------------------

    @property
    def completed_sets(self) -> tuple[TrainingSet, ...]:
        """Completed sets ordered by start time."""
        done = (s for s in self.sets if s.is_completed)
        return tuple(sorted(done, key=lambda s: s.start_time))

    @property
    def durations(self) -> tuple[float, ...]:
        return tuple(s.duration for s in self.completed_sets)  # type: ignore[misc]

    @property
    def intensities(self) -> tuple[int, ...]:
        return tuple(int(s.intensity) for s in self.completed_sets)

    @property
    def rest_durations(self) -> tuple[float, ...]:
        """Gaps between consecutive completed sets, in seconds.

        Overlapping or back-to-back sets count as MIN_REST_GAP_S of rest.
        """
        ordered = self.completed_sets
        gaps: list[float] = []
        for current, nxt in zip(ordered, ordered[1:]):
            gap = (nxt.start_time - current.end_time).total_seconds()  # type: ignore[operator]
            gaps.append(gap if gap > 0 else MIN_REST_GAP_S)
        return tuple(gaps)

    # -- Duration summaries -----------------------------------------------

    @property
    def total_duration(self) -> float:
        return sum(self.durations)

    @property
    def average_set_duration(self) -> float | None:
        durations = self.durations
        if not durations:
            return None
        return sum(durations) / len(durations)

    @property
    def longest_set_duration(self) -> float | None:
        return max(self.durations, default=None)

    @property
    def shortest_set_duration(self) -> float | None:
        return min(self.durations, default=None)

    @property
    def sets_by_type(self) -> dict[SetType, int]:
        """Count of all recorded sets per type."""
        return dict(Counter(s.set_type for s in self.sets))

    # -- State ------------------------------------------------------------

    @property
    def active_set(self) -> TrainingSet | None:
        for s in self.sets:
            if s.is_active:
                return s
        return None

    @property
    def is_completed(self) -> bool:
        return bool(self.sets) and self.active_set is None

    # -- Validation -------------------------------------------------------

    @property
    def validation_errors(self) -> list[str]:
        errors: list[str] = []
        for i, s in enumerate(self.sets, start=1):
            set_errors = s.validation_errors
            if set_errors:
                errors.append(f"Set {i}: {', '.join(set_errors)}")
        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            errors.append(f"Notes exceed maximum length ({MAX_NOTES_LENGTH} characters)")
        if sum(1 for s in self.sets if s.is_active) > 1:
            errors.append("Multiple active sets found (only one allowed)")
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors
