"""Tests for the shared descriptive statistics helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from tennis_analyzer.math.statistics import (
    clamp_unit,
    coefficient_of_variation,
    mean,
    normalize_intensity,
    standard_deviation,
)


class TestMean:
    def test_empty_returns_zero(self) -> None:
        assert mean([]) == 0.0

    def test_arithmetic_mean(self) -> None:
        assert mean([180.0, 240.0, 300.0, 240.0, 180.0]) == pytest.approx(228.0)

    def test_accepts_numpy_array(self) -> None:
        assert mean(np.array([1.0, 2.0, 3.0])) == pytest.approx(2.0)


class TestStandardDeviation:
    def test_fewer_than_two_values(self) -> None:
        assert standard_deviation([]) == 0.0
        assert standard_deviation([42.0]) == 0.0

    def test_uses_sample_denominator(self) -> None:
        # Population std of [2, 4] is 1.0; sample std is sqrt(2)
        assert standard_deviation([2.0, 4.0]) == pytest.approx(math.sqrt(2.0))

    def test_constant_values(self) -> None:
        assert standard_deviation([300.0] * 5) == 0.0


class TestCoefficientOfVariation:
    def test_empty_returns_zero(self) -> None:
        assert coefficient_of_variation([]) == 0.0

    def test_near_zero_mean_returns_zero(self) -> None:
        assert coefficient_of_variation([-1.0, 1.0]) == 0.0

    def test_std_over_mean(self) -> None:
        assert coefficient_of_variation([2.0, 4.0]) == pytest.approx(math.sqrt(2.0) / 3.0)

    def test_negative_mean_keeps_sign(self) -> None:
        cv = coefficient_of_variation([-2.0, -4.0])
        assert cv == pytest.approx(-math.sqrt(2.0) / 3.0)

    def test_single_value_is_zero(self) -> None:
        assert coefficient_of_variation([120.0]) == 0.0


class TestNormalizeIntensity:
    @pytest.mark.parametrize(
        "intensity, expected",
        [(1, 0.0), (2, 0.25), (3, 0.5), (4, 0.75), (5, 1.0)],
    )
    def test_maps_scale_to_unit_interval(self, intensity: int, expected: float) -> None:
        assert normalize_intensity(intensity) == expected


class TestClampUnit:
    def test_clamps_both_ends(self) -> None:
        assert clamp_unit(-0.2) == 0.0
        assert clamp_unit(1.7) == 1.0
        assert clamp_unit(0.42) == 0.42
