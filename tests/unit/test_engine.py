"""Tests for report orchestration."""

import pytest
import structlog

from analysis.anomaly import AnomalyReport
from analysis.engine import ForecastReport, MovingAverageReport, Overview, TrendEngine
from analysis.errors import EmptyDatasetError, InvalidHorizonError
from analysis.samples import SampleSet
from config import Settings


class TestTrendEngine:
    def test_defaults_to_overview(self, settings, records):
        result = TrendEngine(settings).run(records)
        assert list(result.reports) == ["analyze"]
        overview = result.reports["analyze"]
        assert isinstance(overview, Overview)
        assert overview.summary.mean == pytest.approx(106.6)
        assert overview.trend.slope == pytest.approx(4.5)
        assert overview.direction == "increasing"
        assert overview.total_growth_percent == pytest.approx(20.0)

    def test_reports_run_in_caller_order(self, settings, records):
        result = TrendEngine(settings).run(records, ["chart", "growth", "anomalies", "forecast"])
        assert list(result.reports) == ["chart", "growth", "anomalies", "forecast"]
        assert isinstance(result.reports["anomalies"], AnomalyReport)
        forecast = result.reports["forecast"]
        assert isinstance(forecast, ForecastReport)
        assert len(forecast.points) == settings.forecast_periods

    def test_duplicate_report_runs_once(self, settings, records):
        result = TrendEngine(settings).run(records, ["growth", "growth"])
        assert list(result.reports) == ["growth"]

    def test_unknown_report(self, settings, records):
        with pytest.raises(ValueError):
            TrendEngine(settings).run(records, ["regression"])

    def test_degenerate_trend_skips_forecast_only(self, settings):
        result = TrendEngine(settings).run(["t,v", "1,42"], ["forecast", "growth", "analyze"])
        assert "forecast" not in result.reports
        assert [s.name for s in result.skipped] == ["forecast"]
        assert result.degraded
        assert "growth" in result.reports
        overview = result.reports["analyze"]
        assert overview.trend is None
        assert overview.direction is None
        assert overview.summary.stddev == 0

    def test_correlation_without_second_dataset_is_skipped(self, settings, records):
        result = TrendEngine(settings).run(records, ["correlation"])
        assert result.skipped[0].name == "correlation"

    def test_correlation_with_second_dataset(self, settings, records):
        other = ["1,2", "2,4", "3,6", "4,8", "5,10"]
        result = TrendEngine(settings).run(records, ["correlation"], correlation_records=other)
        assert result.reports["correlation"].pairs == 5

    def test_empty_correlation_dataset_skips_correlation_only(self, settings, records):
        result = TrendEngine(settings).run(
            records, ["analyze", "growth", "correlation"], correlation_records=["x,y"]
        )
        assert list(result.reports) == ["analyze", "growth"]
        assert [s.name for s in result.skipped] == ["correlation"]
        assert result.skipped[0].reason.startswith("correlation dataset:")

    def test_correlation_dataset_not_loaded_unless_requested(self, settings, records):
        def broken():
            raise AssertionError("correlation records were read")
            yield

        result = TrendEngine(settings).run(records, ["growth"], correlation_records=broken())
        assert list(result.reports) == ["growth"]

    def test_empty_dataset_is_fatal(self, settings):
        with pytest.raises(EmptyDatasetError):
            TrendEngine(settings).run(["header", "", "nope"])

    def test_invalid_horizon_propagates(self, records):
        engine = TrendEngine(Settings(log_format="console"))
        samples = engine.load(records)
        engine.settings = engine.settings.model_copy(update={"forecast_periods": 0})
        with pytest.raises(InvalidHorizonError):
            engine.analyze(samples, ["forecast"])

    def test_constant_series(self, settings):
        engine = TrendEngine(settings.model_copy(update={"moving_average_window": 2}))
        result = engine.analyze(SampleSet.from_values([5, 5, 5, 5, 5]), ["anomalies", "moving_average"])
        assert result.reports["anomalies"].flagged == []
        ma = result.reports["moving_average"]
        assert isinstance(ma, MovingAverageReport)
        assert ma.values == [5, 5, 5, 5, 5]

    def test_skipped_lines_reported(self, settings):
        result = TrendEngine(settings).run(["1,10", "2,x", "3,30"])
        assert result.skipped_lines == 1
        assert result.sample_count == 2


class TestOverview:
    def test_volatility(self, settings):
        overview = TrendEngine(settings).overview(SampleSet.from_values([100, 101, 99, 100]))
        assert overview.coefficient_of_variation == pytest.approx(0.7071, abs=1e-3)
        assert overview.volatility == "low"

    def test_zero_mean_has_no_cv(self, settings):
        overview = TrendEngine(settings).overview(SampleSet.from_values([-1, 1]))
        assert overview.coefficient_of_variation is None
        assert overview.volatility is None

    def test_zero_first_value_has_no_total_growth(self, settings):
        overview = TrendEngine(settings).overview(SampleSet.from_values([0, 5, 10]))
        assert overview.total_growth_percent is None


class TestEngineLogging:
    def test_uses_injected_logger(self, settings, records):
        with structlog.testing.capture_logs() as logs:
            engine = TrendEngine(settings, log=structlog.get_logger(component="custom"))
            engine.run(records)
        assert any(e["event"] == "samples_loaded" and e["component"] == "custom" for e in logs)

    def test_construction_leaves_logging_config_alone(self, settings):
        before = structlog.get_config()
        TrendEngine(settings.model_copy(update={"log_level": "DEBUG", "log_format": "json"}))
        assert structlog.get_config() == before
