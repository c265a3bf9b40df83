"""Human-readable rendering of analysis results.

Pure string helpers shared by the example driver and the dashboard.
"""

from __future__ import annotations

import math

from tennis_analyzer.models.analysis_result import AnalysisResult

# (lower bound, label), checked top-down
_CONSISTENCY_LEVELS: tuple[tuple[float, str], ...] = (
    (0.8, "Very Consistent"),
    (0.6, "Consistent"),
    (0.4, "Moderate"),
    (0.2, "Inconsistent"),
)
_DENSITY_LEVELS: tuple[tuple[float, str], ...] = (
    (0.8, "Very High"),
    (0.6, "High"),
    (0.4, "Moderate"),
    (0.2, "Low"),
)


def format_active_time(seconds: float) -> str:
    """e.g. 300.0 -> '5m 00s', 45.0 -> '45s'."""
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    if minutes > 0:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"


def format_clock(seconds: float) -> str:
    """e.g. 3725.0 -> '1:02:05', 125.0 -> '02:05'."""
    total = int(seconds)
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_percent(score: float) -> str:
    """e.g. 0.874 -> '87%'."""
    return f"{score * 100:.0f}%"


def format_ratio(ratio: float) -> str:
    if math.isinf(ratio):
        return "∞"
    return f"{ratio:.2f}"


def _level(score: float, levels: tuple[tuple[float, str], ...], floor_label: str) -> str:
    for lower, label in levels:
        if score >= lower:
            return label
    return floor_label


def consistency_level(score: float) -> str:
    return _level(score, _CONSISTENCY_LEVELS, "Very Inconsistent")


def density_level(score: float) -> str:
    return _level(score, _DENSITY_LEVELS, "Very Low")


def format_result(result: AnalysisResult) -> str:
    """Multi-line plain-text report of every metric in *result*."""
    lines = [
        "=== Training Session Analysis ===",
        "",
        "Basic Metrics:",
        f"  Total Active Time: {result.total_active_time:.2f} seconds "
        f"({result.total_active_time / 60.0:.2f} minutes)",
        f"  Work/Rest Ratio: {format_ratio(result.work_rest_ratio)}",
        f"  Consistency Score: {result.consistency_score:.2f} "
        f"({consistency_level(result.consistency_score)})",
        f"  Training Density Score: {result.training_density_score:.2f} "
        f"({density_level(result.training_density_score)})",
        "",
        "Additional Metrics:",
        f"  Total Sets: {result.total_sets}",
        f"  Average Intensity: {result.average_intensity:.2f} / 5.0",
        f"  Total Work Volume: {result.total_work_volume:.2f} (intensity-weighted seconds)",
    ]
    return "\n".join(lines)
