"""Lag-product seasonality scoring."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_PERIODS = (7, 12, 24, 30)

STRONG_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.4


@dataclass(frozen=True)
class SeasonalityScore:
    period: int
    score: float  # legacy uncentered lag product, scale-dependent
    normalized: float | None  # lag autocorrelation in [-1, 1]; None for a flat series
    pairs: int

    @property
    def strength(self) -> str:
        return classify_score(self.score)


def classify_score(score: float) -> str:
    """
    Rough label for a legacy score.

    The thresholds assume values of order one; the raw score grows with the
    square of the data's units, so treat the label as a heuristic.
    """
    if score > STRONG_THRESHOLD:
        return "strong"
    if score > MODERATE_THRESHOLD:
        return "moderate"
    return "none"


def lag_product(values: Sequence[float], period: int) -> float:
    n = len(values) - period
    return sum(values[i] * values[i + period] for i in range(n)) / n


def lag_autocorrelation(values: Sequence[float], period: int) -> float | None:
    mean = sum(values) / len(values)
    denom = sum((v - mean) ** 2 for v in values)
    if denom == 0:
        return None
    num = sum(
        (values[i] - mean) * (values[i + period] - mean)
        for i in range(len(values) - period)
    )
    return num / denom


def detect_seasonality(
    values: Sequence[float], periods: Iterable[int] = DEFAULT_PERIODS
) -> list[SeasonalityScore]:
    """Score each candidate period that fits at least twice into the series."""
    count = len(values)
    scores = []
    for period in periods:
        if period < 1 or count < 2 * period:
            continue
        scores.append(
            SeasonalityScore(
                period=period,
                score=lag_product(values, period),
                normalized=lag_autocorrelation(values, period),
                pairs=count - period,
            )
        )
    return scores
