"""Pearson correlation between two series."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from analysis.errors import DegenerateCorrelationError


@dataclass(frozen=True)
class CorrelationResult:
    coefficient: float
    pairs: int

    @property
    def strength(self) -> str:
        r = abs(self.coefficient)
        if r >= 0.7:
            return "strong"
        if r >= 0.4:
            return "moderate"
        if r >= 0.2:
            return "weak"
        return "none"


def correlate(a: Sequence[float], b: Sequence[float]) -> CorrelationResult:
    """Correlation over the common prefix of both series."""
    n = min(len(a), len(b))
    if n < 2:
        raise DegenerateCorrelationError(f"correlation needs at least 2 paired points, got {n}")

    xs, ys = a[:n], b[:n]
    mean_x = sum(xs) / n
    mean_y = sum(ys) / n
    cov = sum((x - mean_x) * (y - mean_y) for x, y in zip(xs, ys))
    var_x = sum((x - mean_x) ** 2 for x in xs)
    var_y = sum((y - mean_y) ** 2 for y in ys)
    if var_x == 0 or var_y == 0:
        raise DegenerateCorrelationError("correlation undefined for a constant series")

    r = cov / math.sqrt(var_x * var_y)
    return CorrelationResult(coefficient=max(-1.0, min(1.0, r)), pairs=n)
