"""Linear extrapolation of the fitted trend with a fixed-width confidence band."""

from dataclasses import dataclass

from analysis.descriptive import StatisticsSummary
from analysis.errors import InvalidHorizonError
from analysis.trend import TrendModel

Z_95 = 1.96


@dataclass(frozen=True)
class ForecastPoint:
    period_offset: int
    value: float
    lower_bound: float
    upper_bound: float


def forecast(trend: TrendModel, summary: StatisticsSummary, periods_ahead: int) -> list[ForecastPoint]:
    """
    Project the trend line ``periods_ahead`` steps past the last sample.

    The margin is 1.96 * stddev of the observed values and does not widen with
    the horizon. This is not a prediction interval.
    """
    if periods_ahead < 1:
        raise InvalidHorizonError(f"forecast periods must be >= 1, got {periods_ahead}")

    margin = Z_95 * summary.stddev
    last_index = summary.count - 1
    points = []
    for k in range(1, periods_ahead + 1):
        value = trend.predict(last_index + k)
        points.append(
            ForecastPoint(
                period_offset=k,
                value=value,
                lower_bound=value - margin,
                upper_bound=value + margin,
            )
        )
    return points
