"""Ordinary least squares trend over sample index."""

from dataclasses import dataclass

from analysis.errors import DegenerateTrendError
from analysis.samples import SampleSet

SLOPE_DEAD_BAND = 0.001


@dataclass(frozen=True)
class TrendModel:
    slope: float
    intercept: float
    r_squared: float
    data_points: int

    @property
    def direction(self) -> str:
        return classify_slope(self.slope)

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def classify_slope(slope: float) -> str:
    """'increasing' | 'decreasing' | 'stable', with a +/-0.001 dead band."""
    if slope > SLOPE_DEAD_BAND:
        return "increasing"
    if slope < -SLOPE_DEAD_BAND:
        return "decreasing"
    return "stable"


def fit_trend(samples: SampleSet) -> TrendModel:
    """
    Closed-form OLS fit of value against zero-based sample index.

    The time label is never used as the regressor; samples are assumed to be
    evenly spaced.
    """
    n = len(samples)
    xs = [float(s.index) for s in samples]
    ys = [s.value for s in samples]

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)

    denom = n * sum_x2 - sum_x * sum_x
    if abs(denom) < 1e-10:
        raise DegenerateTrendError(f"trend needs at least 2 samples, got {n}")

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    # R² (coefficient of determination)
    ss_tot = sum_y2 - (sum_y * sum_y) / n
    if abs(ss_tot) < 1e-10:
        r_squared = 0.0
    else:
        ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys))
        r_squared = max(0.0, 1.0 - ss_res / ss_tot)

    return TrendModel(slope=slope, intercept=intercept, r_squared=r_squared, data_points=n)
