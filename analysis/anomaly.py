"""Sigma-band anomaly detection over the whole series."""

from dataclasses import dataclass, field

from analysis.descriptive import StatisticsSummary
from analysis.errors import InvalidThresholdError
from analysis.samples import SampleSet

CRITICAL_Z = 4.0


@dataclass(frozen=True)
class AnomalyEvent:
    index: int
    label: str
    value: float
    z_score: float | None  # None when stddev is zero
    severity: str  # "warning" | "critical"


@dataclass(frozen=True)
class AnomalyReport:
    threshold: float
    mean: float
    stddev: float
    lower_bound: float
    upper_bound: float
    flagged: list[AnomalyEvent] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.flagged)


def detect_anomalies(
    samples: SampleSet, summary: StatisticsSummary, threshold_sigma: float = 3.0
) -> AnomalyReport:
    """
    Flag every sample strictly outside mean +/- threshold_sigma * stddev.

    Values on a bound are not anomalous. With stddev = 0 the band collapses to
    the mean and any value different from it is flagged.
    Severity: |z| > 4.0 → critical, else → warning.
    """
    if threshold_sigma <= 0:
        raise InvalidThresholdError(f"anomaly threshold must be > 0, got {threshold_sigma}")

    lower = summary.mean - threshold_sigma * summary.stddev
    upper = summary.mean + threshold_sigma * summary.stddev

    flagged = []
    for sample in samples:
        if lower <= sample.value <= upper:
            continue
        if summary.stddev > 0:
            z_score = (sample.value - summary.mean) / summary.stddev
            severity = "critical" if abs(z_score) > CRITICAL_Z else "warning"
        else:
            z_score = None
            severity = "critical"
        flagged.append(
            AnomalyEvent(
                index=sample.index,
                label=sample.label,
                value=sample.value,
                z_score=z_score,
                severity=severity,
            )
        )

    return AnomalyReport(
        threshold=threshold_sigma,
        mean=summary.mean,
        stddev=summary.stddev,
        lower_bound=lower,
        upper_bound=upper,
        flagged=flagged,
    )
