"""Trend engine: loads a sample set once and runs the requested reports against it."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from config import Settings
from analysis.anomaly import detect_anomalies
from analysis.chart import render_chart
from analysis.correlation import correlate
from analysis.descriptive import StatisticsSummary, summarize
from analysis.errors import DegenerateCorrelationError, DegenerateTrendError, EmptyDatasetError
from analysis.forecast import Z_95, ForecastPoint, forecast
from analysis.growth import growth_rates, percent_change
from analysis.samples import SampleSet, load_samples
from analysis.seasonality import detect_seasonality
from analysis.smoothing import moving_average
from analysis.trend import TrendModel, fit_trend

REPORTS = (
    "analyze",
    "forecast",
    "anomalies",
    "growth",
    "seasonality",
    "moving_average",
    "chart",
    "correlation",
)

# Errors that knock out a single report without aborting the run
RECOVERABLE = (DegenerateTrendError, DegenerateCorrelationError)


@dataclass(frozen=True)
class Overview:
    summary: StatisticsSummary
    trend: TrendModel | None
    direction: str | None
    total_growth_percent: float | None
    coefficient_of_variation: float | None
    volatility: str | None


@dataclass(frozen=True)
class ForecastReport:
    trend: TrendModel
    margin: float
    points: list[ForecastPoint]


@dataclass(frozen=True)
class MovingAverageReport:
    window: int
    labels: list[str]
    values: list[float]


@dataclass(frozen=True)
class SkippedReport:
    name: str
    reason: str


@dataclass
class AnalysisResult:
    sample_count: int
    skipped_lines: int
    reports: dict[str, Any] = field(default_factory=dict)
    skipped: list[SkippedReport] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.skipped)


def assess_volatility(cv: float) -> str:
    if cv < 10:
        return "low"
    if cv < 30:
        return "moderate"
    return "high"


class TrendEngine:
    """
    Runs independent reports over one immutable SampleSet.

    Reports execute in caller order. A degenerate trend or correlation skips
    that report only and is recorded on the result. The correlation dataset is
    loaded only when that report runs, so its failures are confined to it.
    Primary dataset and configuration errors propagate.
    """

    def __init__(self, settings: Settings | None = None, log: structlog.BoundLogger | None = None):
        self.settings = settings or Settings()
        self.log = log or structlog.get_logger(component="trend-engine")

    def load(self, records: Iterable[str]) -> SampleSet:
        s = self.settings
        samples = load_samples(
            records,
            delimiter=s.delimiter,
            time_column=s.time_column,
            data_column=s.data_column,
        )
        if samples.skipped_lines:
            self.log.warning("non_numeric_lines_skipped", count=samples.skipped_lines)
        self.log.info("samples_loaded", count=len(samples))
        return samples

    def run(
        self,
        records: Iterable[str],
        reports: Sequence[str] = (),
        correlation_records: Iterable[str] | None = None,
    ) -> AnalysisResult:
        samples = self.load(records)
        return self.analyze(samples, reports, correlation_records=correlation_records)

    def analyze(
        self,
        samples: SampleSet,
        reports: Sequence[str] = (),
        other: SampleSet | None = None,
        correlation_records: Iterable[str] | None = None,
    ) -> AnalysisResult:
        reports = list(reports) or ["analyze"]
        unknown = [r for r in reports if r not in REPORTS]
        if unknown:
            raise ValueError(f"unknown report(s): {', '.join(unknown)}")

        result = AnalysisResult(sample_count=len(samples), skipped_lines=samples.skipped_lines)
        for name in reports:
            if name in result.reports:
                continue
            try:
                result.reports[name] = self._compute(name, samples, other, correlation_records)
            except RECOVERABLE as e:
                result.skipped.append(SkippedReport(name=name, reason=str(e)))
                self.log.warning("report_skipped", report=name, reason=str(e))
                continue
            self.log.debug("report_completed", report=name)
        return result

    def _compute(
        self,
        name: str,
        samples: SampleSet,
        other: SampleSet | None,
        correlation_records: Iterable[str] | None,
    ):
        s = self.settings
        values = samples.values

        if name == "analyze":
            return self.overview(samples)
        if name == "forecast":
            trend = fit_trend(samples)
            summary = summarize(values)
            return ForecastReport(
                trend=trend,
                margin=Z_95 * summary.stddev,
                points=forecast(trend, summary, s.forecast_periods),
            )
        if name == "anomalies":
            return detect_anomalies(samples, summarize(values), s.anomaly_threshold_sigma)
        if name == "growth":
            return growth_rates(samples)
        if name == "seasonality":
            return detect_seasonality(values, s.seasonality_periods)
        if name == "moving_average":
            return MovingAverageReport(
                window=s.moving_average_window,
                labels=samples.labels,
                values=moving_average(values, s.moving_average_window),
            )
        if name == "chart":
            return render_chart(values, s.chart_width, s.chart_height, s.chart_mode)
        if name == "correlation":
            if other is None:
                if correlation_records is None:
                    raise DegenerateCorrelationError("no second dataset supplied")
                other = self._load_correlation(correlation_records)
            return correlate(values, other.values)
        raise ValueError(f"unknown report: {name}")

    def _load_correlation(self, records: Iterable[str]) -> SampleSet:
        try:
            return self.load(records)
        except EmptyDatasetError as e:
            raise DegenerateCorrelationError(f"correlation dataset: {e}") from e
        except OSError as e:
            raise DegenerateCorrelationError(
                f"correlation dataset: {e.strerror}: {e.filename}"
            ) from e

    def overview(self, samples: SampleSet) -> Overview:
        """Descriptive statistics, trend direction, total growth and volatility."""
        values = samples.values
        summary = summarize(values)
        try:
            trend = fit_trend(samples)
        except DegenerateTrendError as e:
            self.log.info("trend_unavailable", reason=str(e))
            trend = None

        cv = summary.stddev / summary.mean * 100 if summary.mean != 0 else None
        return Overview(
            summary=summary,
            trend=trend,
            direction=trend.direction if trend else None,
            total_growth_percent=percent_change(values[0], values[-1]),
            coefficient_of_variation=cv,
            volatility=assess_volatility(abs(cv)) if cv is not None else None,
        )
