"""
Summary: Report rows, running totals, and the assembled report table.
Why: Give the renderer plain display strings while keeping totals bookkeeping typed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from wcx.features.metrics import ActiveMetrics, FileResult, Metric

FILE_HEADER: Final[str] = "File"
TOTAL_LABEL: Final[str] = "total"


@dataclass(slots=True)
class TotalsAccumulator:
    """Running sums across files, tracked only for multi-file runs."""

    enabled: bool
    lines: int = 0
    bytes: int = 0
    chars: int = 0
    words: int = 0

    @classmethod
    def for_file_count(cls, file_count: int) -> "TotalsAccumulator":
        return cls(enabled=file_count > 1)

    def add(self, result: FileResult, active: ActiveMetrics) -> None:
        """Add each active metric of ``result``; no-op when disabled."""

        if not self.enabled:
            return
        for metric in active.columns:
            current = getattr(self, metric.value)
            setattr(self, metric.value, current + result.value_of(metric))

    def value_of(self, metric: Metric) -> int:
        return int(getattr(self, metric.value))


@dataclass(slots=True, frozen=True)
class ReportRow:
    """One rendered row; ``emphasized`` marks the totals row for styling."""

    cells: tuple[str, ...]
    emphasized: bool = False


@dataclass(slots=True)
class Report:
    """Ordered file rows plus an optional trailing totals row."""

    columns: tuple[Metric, ...]
    rows: list[ReportRow] = field(default_factory=list)
    totals: ReportRow | None = None

    @property
    def headers(self) -> list[str]:
        """Active metric labels followed by the file column."""

        return [metric.label for metric in self.columns] + [FILE_HEADER]

    def as_rows(self) -> list[list[str]]:
        """All rows as lists of display strings, totals last."""

        rows = [list(row.cells) for row in self.rows]
        if self.totals is not None:
            rows.append(list(self.totals.cells))
        return rows


__all__ = ["FILE_HEADER", "TOTAL_LABEL", "Report", "ReportRow", "TotalsAccumulator"]
