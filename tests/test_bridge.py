"""Tests for the boundary adapter: coercion and single-signal error translation."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from tennis_analyzer import bridge
from tennis_analyzer.exceptions import InvalidInputError


class TestCoercion:
    def test_durations_from_numpy(self) -> None:
        assert bridge.to_durations(np.array([30, 45.5])) == (30.0, 45.5)

    def test_durations_from_strings(self) -> None:
        assert bridge.to_durations(["30", 45]) == (30.0, 45.0)

    def test_none_is_empty(self) -> None:
        assert bridge.to_durations(None) == ()
        assert bridge.to_intensities(None) == ()

    def test_non_numeric_duration(self) -> None:
        with pytest.raises(InvalidInputError):
            bridge.to_durations(["fast"])

    def test_whole_float_intensities(self) -> None:
        assert bridge.to_intensities([1.0, np.int64(4)]) == (1, 4)

    def test_fractional_intensity_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="index 1"):
            bridge.to_intensities([3, 2.5])

    @pytest.mark.parametrize("text", ["300", b"300"])
    def test_bare_string_rejected(self, text) -> None:
        with pytest.raises(InvalidInputError, match="string"):
            bridge.to_durations(text)
        with pytest.raises(InvalidInputError):
            bridge.to_intensities(text)


class TestAnalyzeOrNone:
    def test_valid_session(self, variable_session) -> None:
        durations, intensities = variable_session
        result = bridge.analyze_or_none(np.array(durations), list(intensities))
        assert result is not None
        assert result.total_active_time == 1140.0

    def test_with_rest(self) -> None:
        result = bridge.analyze_or_none([300, 300], [3, 3], [100, 100])
        assert result is not None
        assert result.work_rest_ratio == pytest.approx(3.0)

    @pytest.mark.parametrize(
        "durations, intensities, rest",
        [
            ([300.0, 300.0], [3], None),  # size mismatch
            ([300.0], [6], None),  # intensity range
            ([-5.0], [3], None),  # duration range
            ([], [], None),  # no sets
            ([300.0, 300.0], [3, 3], [60.0, -1.0]),  # negative rest
            ([300.0, 300.0], [3, 3], [60.0, 60.0, 60.0]),  # rest length
            (["abc"], [3], None),  # not numeric
            ([300.0], [2.5], None),  # fractional intensity
        ],
    )
    def test_invalid_input_returns_none(self, durations, intensities, rest) -> None:
        assert bridge.analyze_or_none(durations, intensities, rest) is None

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tennis_analyzer.bridge"):
            bridge.analyze_or_none([300.0], [9])
        assert "Rejected session input" in caplog.text


class TestScalarCalculators:
    def test_total_active_time(self) -> None:
        assert bridge.total_active_time_or_zero([60, 90]) == 150.0
        assert bridge.total_active_time_or_zero(["bad"]) == 0.0
        assert bridge.total_active_time_or_zero("300") == 0.0
        assert bridge.analyze_or_none("300", [3]) is None

    def test_work_rest_ratio(self) -> None:
        assert bridge.work_rest_ratio_or_zero([300, 300]) == 1.0
        assert bridge.work_rest_ratio_or_zero([300, 300], [0, 0]) == math.inf
        assert bridge.work_rest_ratio_or_zero([300, 300], [1, 1, 1]) == 0.0

    def test_consistency_score(self) -> None:
        assert bridge.consistency_score_or_zero([300] * 3, [3] * 3) == 1.0
        assert bridge.consistency_score_or_zero([300, 300], [3]) == 0.0
        assert bridge.consistency_score_or_zero([], []) == 0.0

    def test_training_density_score(self, consistent_session) -> None:
        durations, intensities = consistent_session
        assert bridge.training_density_score_or_zero(durations, intensities) == pytest.approx(0.4166667, rel=1e-6)
        assert bridge.training_density_score_or_zero([300], [3, 3]) == 0.0
        assert bridge.training_density_score_or_zero([300], ["x"]) == 0.0
