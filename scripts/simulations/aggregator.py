"""Summary statistics over decoded simulation records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from config import SEVERITY_LEVELS
from log import sim_log

from .simulation_record import SimulationRecord
from .simulation_status import SimulationStatus


@dataclass(frozen=True)
class SimulationSummary:
    """Read-only view handed to the presentation layer.

    ``severity_histogram[i]`` counts completed records of severity ``i + 1``.
    """

    total_count: int = 0
    counts_by_status: dict[SimulationStatus, int] = field(default_factory=dict)
    severity_histogram: tuple[int, ...] = (0,) * SEVERITY_LEVELS
    records_sorted_by_time_desc: tuple[SimulationRecord, ...] = ()

    @property
    def completed_count(self) -> int:
        return self.counts_by_status.get(SimulationStatus.COMPLETED, 0)

    def bar_heights(self) -> list[float]:
        """Histogram bins as percentages of completed records."""
        denominator = max(1, self.completed_count)
        return [count / denominator * 100 for count in self.severity_histogram]


def summarize(records: Iterable[SimulationRecord]) -> SimulationSummary:
    """Sort records newest first and count them by status and severity.

    Completed records whose severity falls outside ``1..SEVERITY_LEVELS``
    are left out of the histogram.
    """
    # sorted() is stable, so equal timestamps keep encounter order
    ordered = tuple(sorted(records, key=lambda r: r.created_at, reverse=True))

    counts = {status: 0 for status in SimulationStatus}
    histogram = [0] * SEVERITY_LEVELS
    for record in ordered:
        counts[record.status] += 1
        if record.status != SimulationStatus.COMPLETED:
            continue
        if 1 <= record.severity <= SEVERITY_LEVELS:
            histogram[record.severity - 1] += 1
        else:
            sim_log(f"Severity {record.severity} of simulation {record.id} is out of range; not charted")

    return SimulationSummary(
        total_count=len(ordered),
        counts_by_status=counts,
        severity_histogram=tuple(histogram),
        records_sorted_by_time_desc=ordered,
    )
