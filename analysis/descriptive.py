"""Descriptive statistics over a value slice."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from analysis.errors import EmptySeriesError


@dataclass(frozen=True)
class StatisticsSummary:
    count: int
    mean: float
    stddev: float
    variance: float
    min: float
    max: float

    @property
    def range(self) -> float:
        return self.max - self.min


def summarize(values: Sequence[float]) -> StatisticsSummary:
    """Mean, population variance/stddev, min and max. Raises EmptySeriesError on an empty slice."""
    n = len(values)
    if n == 0:
        raise EmptySeriesError("cannot summarize an empty series")

    lo, hi = min(values), max(values)
    # fsum/n can land one ulp outside [lo, hi] on constant input
    mean = min(max(math.fsum(values) / n, lo), hi)
    variance = math.fsum((v - mean) ** 2 for v in values) / n
    return StatisticsSummary(
        count=n,
        mean=mean,
        stddev=math.sqrt(variance),
        variance=variance,
        min=lo,
        max=hi,
    )
