"""Trailing-window moving average."""

import math
from collections.abc import Sequence

from analysis.errors import InvalidWindowError


def moving_average(values: Sequence[float], window: int) -> list[float]:
    """
    Same-length series where element i is the mean of the trailing
    min(window, i + 1) values. Early outputs use partial windows.
    """
    if window < 1:
        raise InvalidWindowError(f"moving average window must be >= 1, got {window}")

    out = []
    for i in range(len(values)):
        w = values[max(0, i - window + 1): i + 1]
        out.append(math.fsum(w) / len(w))
    return out
