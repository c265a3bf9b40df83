"""Shared test fixtures: sample sessions as parallel sequences and as models."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from tennis_analyzer.models.enums import SetType
from tennis_analyzer.models.training_session import TrainingSession
from tennis_analyzer.models.training_set import TrainingSet


@pytest.fixture
def consistent_session() -> tuple[tuple[float, ...], tuple[int, ...]]:
    """Five 5-minute sets, all moderate intensity."""
    return (300.0, 300.0, 300.0, 300.0, 300.0), (3, 3, 3, 3, 3)


@pytest.fixture
def variable_session() -> tuple[tuple[float, ...], tuple[int, ...]]:
    """Pyramid of durations with intensities peaking in the middle set."""
    return (180.0, 240.0, 300.0, 240.0, 180.0), (2, 3, 5, 4, 2)


@pytest.fixture
def high_intensity_session() -> tuple[tuple[float, ...], tuple[int, ...]]:
    """Four 2-minute sets at maximum intensity."""
    return (120.0, 120.0, 120.0, 120.0), (5, 5, 5, 5)


@pytest.fixture
def session_start() -> datetime:
    return datetime(2026, 5, 4, 9, 0, 0)


@pytest.fixture
def make_session(session_start: datetime):
    """Build a TrainingSession from (type, duration_s, rest_after_s, intensity) rows."""

    def _make(rows: list[tuple[SetType, float, float, int]], notes: str | None = None) -> TrainingSession:
        clock = session_start
        sets = []
        for set_type, duration, rest_after, intensity in rows:
            s = TrainingSet.completed(set_type, duration, clock, intensity=intensity)
            sets.append(s)
            clock = s.end_time + timedelta(seconds=rest_after)
        return TrainingSession(session_date=date(2026, 5, 4), sets=tuple(sets), notes=notes)

    return _make
