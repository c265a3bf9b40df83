"""Tests for the example driver."""

from __future__ import annotations

import pytest

from example.demo import SAMPLE_SESSIONS, main, run_session


class TestExampleDriver:
    def test_runs_all_samples(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        for title, _, _ in SAMPLE_SESSIONS:
            assert f"--- {title} ---" in out
        assert "--- Individual Calculations ---" in out
        assert "Total Active Time: 720.00 seconds" in out

    def test_single_sample(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--session", "2"]) == 0
        out = capsys.readouterr().out
        assert "Total Active Time: 1140.00 seconds" in out
        assert "Average Intensity: 3.20 / 5.0" in out
        assert "Individual Calculations" not in out

    def test_custom_session_with_rest(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--durations", "300", "300", "--intensities", "3", "4", "--rest", "100", "100"])
        assert code == 0
        assert "Work/Rest Ratio: 3.00" in capsys.readouterr().out

    def test_invalid_custom_session_fails(self) -> None:
        assert main(["--durations", "300", "--intensities", "6"]) == 1

    def test_run_session_reports_mismatch(self) -> None:
        assert run_session("Broken", (300.0, 300.0), (3,)) is False
