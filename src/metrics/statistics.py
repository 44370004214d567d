"""Summary statistics over hourly metric records.

All functions take a sequence of mapping records and a field name. Extremes
keep the first record reaching the extreme value; an empty sequence raises
:class:`EmptyDatasetError` instead of yielding NaN.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

import numpy as np

Record = Mapping[str, Any]


class EmptyDatasetError(ValueError):
    """Raised when an aggregate is requested over zero records."""


@dataclass(frozen=True)
class StatisticsSummary:
    field: str
    count: int
    mean: float
    max_record: Record
    min_record: Record

    @property
    def max_value(self) -> float:
        return float(self.max_record[self.field])

    @property
    def min_value(self) -> float:
        return float(self.min_record[self.field])


@dataclass(frozen=True)
class EnergyMetrics:
    efficiency: StatisticsSummary
    max_power_record: Record


def _require_records(records: Sequence[Record], field: str) -> None:
    if len(records) == 0:
        raise EmptyDatasetError(f"cannot aggregate '{field}' over zero records")


def mean_of(records: Sequence[Record], field: str) -> float:
    """Arithmetic mean of ``field`` across ``records``."""
    _require_records(records, field)
    values = np.fromiter((float(r[field]) for r in records), dtype=float, count=len(records))
    return float(values.sum() / values.size)


def max_record(records: Sequence[Record], field: str) -> Record:
    """Record holding the highest ``field`` value; first occurrence wins ties."""
    _require_records(records, field)
    best = records[0]
    for record in records[1:]:
        if record[field] > best[field]:
            best = record
    return best


def min_record(records: Sequence[Record], field: str) -> Record:
    """Record holding the lowest ``field`` value; first occurrence wins ties."""
    _require_records(records, field)
    best = records[0]
    for record in records[1:]:
        if record[field] < best[field]:
            best = record
    return best


def summarize(records: Sequence[Record], field: str) -> StatisticsSummary:
    records = tuple(records)
    return StatisticsSummary(
        field=field,
        count=len(records),
        mean=mean_of(records, field),
        max_record=max_record(records, field),
        min_record=min_record(records, field),
    )


def energy_metrics(records: Sequence[Record]) -> EnergyMetrics:
    """Efficiency summary plus the peak-power record for the full energy dataset."""
    records = tuple(records)
    return EnergyMetrics(
        efficiency=summarize(records, "percentual_rendimento"),
        max_power_record=max_record(records, "potencia_kw"),
    )


class StatisticsMemo:
    """Recompute derived statistics only when the record sequence reference changes.

    A failure over an empty sequence is remembered as well, so the same error
    is raised again without rescanning.
    """

    def __init__(self, derive: Callable[[Sequence[Record]], Any]) -> None:
        self.derive = derive
        self._source: Optional[Sequence[Record]] = None
        self._value: Any = None
        self._error: Optional[EmptyDatasetError] = None
        self.computations = 0

    def get(self, records: Sequence[Record]) -> Any:
        if records is not self._source:
            self._source = records
            self.computations += 1
            try:
                self._value, self._error = self.derive(records), None
            except EmptyDatasetError as e:
                self._value, self._error = None, e
        if self._error is not None:
            raise self._error
        return self._value
