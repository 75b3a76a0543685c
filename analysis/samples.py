"""Sample store: turns delimiter-separated text records into an immutable series."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from analysis.errors import EmptyDatasetError

NUMERIC_PATTERN = re.compile(r"^-?[0-9]+\.?[0-9]*$")

log = structlog.get_logger(component="sample-store")


@dataclass(frozen=True)
class Sample:
    index: int
    label: str  # opaque time/date field, never parsed
    value: float


@dataclass(frozen=True)
class SampleSet:
    """Ordered, read-only sequence of samples. Insertion order is taken as chronological."""

    samples: tuple[Sample, ...]
    skipped_lines: int = 0
    header: str | None = None

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, item):
        return self.samples[item]

    @property
    def values(self) -> list[float]:
        return [s.value for s in self.samples]

    @property
    def labels(self) -> list[str]:
        return [s.label for s in self.samples]

    @classmethod
    def from_values(cls, values: Iterable[float], labels: Iterable[str] | None = None) -> "SampleSet":
        values = [float(v) for v in values]
        if labels is None:
            labels = [str(i + 1) for i in range(len(values))]
        samples = tuple(
            Sample(index=i, label=str(label), value=v)
            for i, (label, v) in enumerate(zip(labels, values))
        )
        if not samples:
            raise EmptyDatasetError("No data loaded: series is empty")
        return cls(samples=samples)


def _field(fields: list[str], column: int) -> str | None:
    if 1 <= column <= len(fields):
        return fields[column - 1]
    return None


def load_samples(
    records: Iterable[str],
    delimiter: str = ",",
    time_column: int = 1,
    data_column: int | None = None,
) -> SampleSet:
    """
    Parse raw text records into a SampleSet.

    The data column defaults to the last field of the first non-blank line and
    is resolved once. A non-numeric data field on physical line 1 is treated
    as a header; anywhere else the line is skipped and counted.
    """
    samples: list[Sample] = []
    skipped = 0
    header = None

    for line_num, raw in enumerate(records, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue

        fields = line.split(delimiter)
        if data_column is None:
            data_column = len(fields)

        label = _field(fields, time_column) or ""
        data_val = _field(fields, data_column)

        if data_val is None or not NUMERIC_PATTERN.match(data_val):
            if line_num == 1:
                header = line
                continue
            skipped += 1
            log.warning("line_skipped", line=line_num, value=data_val)
            continue

        samples.append(Sample(index=len(samples), label=label, value=float(data_val)))

    if not samples:
        raise EmptyDatasetError("No data loaded: no numeric samples found")

    log.debug("samples_loaded", count=len(samples), skipped=skipped)
    return SampleSet(samples=tuple(samples), skipped_lines=skipped, header=header)
