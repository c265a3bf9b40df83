"""Utility helpers bridging the Streamlit UI and the analyzer.

Pure functions for building sessions from the set editor, synthetic sample
data and chart frames.
"""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta

import pandas as pd

from tennis_analyzer.models.enums import MAX_INTENSITY, MIN_INTENSITY, Intensity, SetType
from tennis_analyzer.models.training_session import TrainingSession
from tennis_analyzer.models.training_set import TrainingSet

# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

SET_TYPE_COLORS: dict[SetType, str] = {
    SetType.RALLY: "#2ECC71",  # green
    SetType.SERVE: "#4A90D9",  # blue
    SetType.DRILL: "#F5B041",  # amber
}

ACTIVE_COLOR = "#2ECC71"
REST_COLOR = "#D5DBDB"

SET_TABLE_COLUMNS = ("Type", "Duration (s)", "Rest after (s)", "Intensity")


# ---------------------------------------------------------------------------
# Synthetic data generation
# ---------------------------------------------------------------------------


def sample_set_table(
    n_sets: int = 6,
    default_intensity: int = 3,
    seed: int | None = None,
) -> pd.DataFrame:
    """Generate a plausible practice session for the set editor.

    Rallies and drills run 2-6 minutes, serve blocks 1-3 minutes, with
    60-120 s of rest between sets and intensity jittered by one step around
    *default_intensity*.
    """
    rng = random.Random(seed)
    rows = []
    for _ in range(n_sets):
        set_type = rng.choice(list(SetType))
        if set_type == SetType.SERVE:
            duration = rng.randint(60, 180)
        else:
            duration = rng.randint(120, 360)
        intensity = default_intensity + rng.choice((-1, 0, 0, 1))
        rows.append(
            {
                "Type": set_type.value,
                "Duration (s)": float(duration),
                "Rest after (s)": float(rng.randint(60, 120)),
                "Intensity": max(MIN_INTENSITY, min(MAX_INTENSITY, intensity)),
            }
        )
    return pd.DataFrame(rows, columns=list(SET_TABLE_COLUMNS))


# ---------------------------------------------------------------------------
# Session construction
# ---------------------------------------------------------------------------


def build_session(
    table: pd.DataFrame,
    session_date: date,
    start: datetime | None = None,
    notes: str | None = None,
) -> TrainingSession:
    """Convert the set editor table into a TrainingSession.

    Sets are laid out back to back from *start*, separated by each row's
    "Rest after" value. Rows with a missing duration are skipped.
    """
    clock = start or datetime.combine(session_date, datetime.min.time()).replace(hour=9)
    sets: list[TrainingSet] = []
    for row in table.to_dict("records"):
        duration = row.get("Duration (s)")
        if duration is None or pd.isna(duration):
            continue
        rest = row.get("Rest after (s)")
        rest = 0.0 if rest is None or pd.isna(rest) else float(rest)
        intensity = row.get("Intensity")
        type_label = row.get("Type")
        training_set = TrainingSet.completed(
            set_type=SetType(type_label) if isinstance(type_label, str) else SetType.RALLY,
            duration_s=float(duration),
            start_time=clock,
            intensity=int(intensity) if intensity is not None and not pd.isna(intensity) else Intensity.MODERATE,
        )
        sets.append(training_set)
        clock = training_set.end_time + timedelta(seconds=rest)  # type: ignore[operator]
    return TrainingSession(session_date=session_date, sets=tuple(sets), notes=notes or None)


# ---------------------------------------------------------------------------
# Chart frames
# ---------------------------------------------------------------------------


def set_duration_frame(session: TrainingSession) -> pd.DataFrame:
    """One row per completed set: set number, duration (s), type and bar color."""
    rows = [
        {
            "Set": i,
            "Duration (s)": s.duration,
            "Type": s.set_type.value,
            "Color": SET_TYPE_COLORS[s.set_type],
        }
        for i, s in enumerate(session.completed_sets, start=1)
    ]
    return pd.DataFrame(rows, columns=["Set", "Duration (s)", "Type", "Color"])


def active_rest_frame(session: TrainingSession) -> pd.DataFrame:
    """Total active vs. rest seconds, omitting categories with no time."""
    rows = []
    if session.total_duration > 0:
        rows.append({"Category": "Active", "Seconds": session.total_duration, "Color": ACTIVE_COLOR})
    total_rest = sum(session.rest_durations)
    if total_rest > 0:
        rows.append({"Category": "Rest", "Seconds": total_rest, "Color": REST_COLOR})
    return pd.DataFrame(rows, columns=["Category", "Seconds", "Color"])
