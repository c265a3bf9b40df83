"""Example driver — runs the analyzer over built-in sample sessions.

Usage:
    python -m example.demo              # all sample sessions
    python -m example.demo --session 2  # a single sample
    python -m example.demo --durations 240 300 180 --intensities 3 4 3
"""

from __future__ import annotations

import argparse
import logging
import sys

from tennis_analyzer import (
    TennisAnalyzerError,
    analyze,
    calculate_consistency_score,
    calculate_total_active_time,
    calculate_training_density_score,
    calculate_work_rest_ratio,
)
from tennis_analyzer.formatting import format_ratio, format_result

from example.config import LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# (title, durations, intensities)
SAMPLE_SESSIONS: tuple[tuple[str, tuple[float, ...], tuple[int, ...]], ...] = (
    ("Consistent Training Session", (300.0, 300.0, 300.0, 300.0, 300.0), (3, 3, 3, 3, 3)),
    ("Variable Intensity Session", (180.0, 240.0, 300.0, 240.0, 180.0), (2, 3, 5, 4, 2)),
    ("High-Intensity Session", (120.0, 120.0, 120.0, 120.0), (5, 5, 5, 5)),
)


def run_session(
    title: str,
    durations: tuple[float, ...],
    intensities: tuple[int, ...],
    rest_durations: tuple[float, ...] = (),
) -> bool:
    """Analyze and print one session. Returns False if the input was rejected."""
    print(f"\n--- {title} ---")
    try:
        result = analyze(durations, intensities, rest_durations)
    except TennisAnalyzerError as exc:
        logger.error("Analysis failed: %s", exc)
        return False
    print(format_result(result))
    return True


def run_individual_calculations() -> None:
    """Show the single-metric calculators on a short session."""
    durations = (240.0, 300.0, 180.0)
    intensities = (3, 4, 3)
    print("\n--- Individual Calculations ---")
    print(f"Total Active Time: {calculate_total_active_time(durations):.2f} seconds")
    print(f"Work/Rest Ratio: {format_ratio(calculate_work_rest_ratio(durations))}")
    print(f"Consistency Score: {calculate_consistency_score(durations, intensities):.2f}")
    print(f"Training Density Score: {calculate_training_density_score(durations, intensities):.2f}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tennis training session analyzer example")
    parser.add_argument(
        "--session",
        type=int,
        choices=range(1, len(SAMPLE_SESSIONS) + 1),
        help="Run only the given sample session (1-based)",
    )
    parser.add_argument("--durations", type=float, nargs="+", help="Custom set durations in seconds")
    parser.add_argument("--intensities", type=int, nargs="+", help="Custom set intensities (1-5)")
    parser.add_argument("--rest", type=float, nargs="*", default=[], help="Optional rest durations")
    args = parser.parse_args(argv)

    print("Tennis Training Session Analyzer - Example")
    print("==========================================")

    if args.durations is not None or args.intensities is not None:
        ok = run_session(
            "Custom Session",
            tuple(args.durations or ()),
            tuple(args.intensities or ()),
            tuple(args.rest),
        )
        return 0 if ok else 1

    if args.session is not None:
        title, durations, intensities = SAMPLE_SESSIONS[args.session - 1]
        return 0 if run_session(title, durations, intensities) else 1

    ok = True
    for title, durations, intensities in SAMPLE_SESSIONS:
        ok = run_session(title, durations, intensities) and ok
    run_individual_calculations()
    logger.info("Example run complete")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
