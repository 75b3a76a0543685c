"""Tests for linear regression trend analysis."""

import pytest

from analysis.errors import DegenerateTrendError
from analysis.samples import SampleSet
from analysis.trend import classify_slope, fit_trend


class TestFitTrend:
    def test_known_slope(self, five_samples):
        trend = fit_trend(five_samples)
        assert trend.slope == pytest.approx(4.5)
        assert trend.intercept == pytest.approx(97.6)
        assert trend.data_points == 5

    @pytest.mark.parametrize("a, b", [(2.0, 1.0), (-0.5, 100.0), (0.0, 7.0), (1e-3, -3.0)])
    def test_perfect_line(self, a, b):
        samples = SampleSet.from_values([a * x + b for x in range(30)])
        trend = fit_trend(samples)
        assert trend.slope == pytest.approx(a, abs=1e-9)
        assert trend.intercept == pytest.approx(b, abs=1e-9)

    def test_uses_index_not_label(self):
        samples = SampleSet.from_values([1, 2, 3], labels=["1000", "5", "-40"])
        assert fit_trend(samples).slope == pytest.approx(1.0)

    def test_rising_trend(self):
        trend = fit_trend(SampleSet.from_values([i * 2.0 for i in range(30)]))
        assert trend.direction == "increasing"
        assert trend.r_squared > 0.9

    def test_falling_trend(self):
        trend = fit_trend(SampleSet.from_values([100.0 - i * 2.0 for i in range(30)]))
        assert trend.direction == "decreasing"
        assert trend.slope < 0

    def test_stable_trend(self):
        trend = fit_trend(SampleSet.from_values([42.0] * 30))
        assert trend.direction == "stable"
        assert trend.r_squared == 0.0

    def test_single_sample_is_degenerate(self):
        with pytest.raises(DegenerateTrendError):
            fit_trend(SampleSet.from_values([5.0]))

    def test_predict(self, five_samples):
        trend = fit_trend(five_samples)
        assert trend.predict(5) == pytest.approx(4.5 * 5 + 97.6)


class TestClassifySlope:
    @pytest.mark.parametrize(
        "slope, expected",
        [
            (0.0011, "increasing"),
            (0.001, "stable"),
            (0.0, "stable"),
            (-0.001, "stable"),
            (-0.0011, "decreasing"),
        ],
    )
    def test_dead_band(self, slope, expected):
        assert classify_slope(slope) == expected
