"""Period-over-period growth rates."""

from dataclasses import dataclass

from analysis.samples import SampleSet


@dataclass(frozen=True)
class GrowthRate:
    period: int  # 1-based
    label: str
    value: float
    growth_percent: float | None
    baseline: bool = False

    @property
    def available(self) -> bool:
        return self.growth_percent is not None


def percent_change(previous: float, current: float) -> float | None:
    """Percentage change, or None when the previous value is zero."""
    if previous == 0:
        return None
    return (current - previous) / previous * 100


def growth_rates(samples: SampleSet) -> list[GrowthRate]:
    rates = []
    previous = None
    for sample in samples:
        if previous is None:
            rates.append(
                GrowthRate(
                    period=sample.index + 1,
                    label=sample.label,
                    value=sample.value,
                    growth_percent=None,
                    baseline=True,
                )
            )
        else:
            rates.append(
                GrowthRate(
                    period=sample.index + 1,
                    label=sample.label,
                    value=sample.value,
                    growth_percent=percent_change(previous, sample.value),
                )
            )
        previous = sample.value
    return rates
