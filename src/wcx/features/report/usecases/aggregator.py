"""src/wcx/features/report/usecases/aggregator.py
What: Resolve requested metrics, drive the engine per file, and build the report.
Why: Keep flag defaulting, bytes/chars exclusivity, and totals in one pure flow.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

from wcx.features.metrics import ActiveMetrics, DecodePolicy, MetricFlags, analyze_file
from wcx.platform.logging import logger
from wcx.shared.errors import ConfigurationError

from ..domain.models import TOTAL_LABEL, Report, ReportRow, TotalsAccumulator
from .ports import FileAnalyzer


def resolve_active_metrics(flags: MetricFlags) -> ActiveMetrics:
    """Apply the show-everything default and let chars suppress bytes."""

    default_on = not flags.any_requested()
    chars = flags.chars
    return ActiveMetrics(
        lines=flags.lines or default_on,
        bytes=(flags.bytes or default_on) and not chars,
        chars=chars,
        words=flags.words or default_on,
    )


def build_report(
    files: Sequence[Path | str],
    flags: MetricFlags,
    policy: DecodePolicy = DecodePolicy.REPLACE,
    analyzer: FileAnalyzer = analyze_file,
) -> Report:
    """Analyze ``files`` in order and return rows plus an optional totals row.

    The first failing file aborts the whole run; no partial report is returned.

    Args:
        files: Paths to analyze, at least one.
        flags: Metrics requested by the caller.
        policy: Decode policy for character counting.
        analyzer: Engine entry point, replaceable in tests.

    Raises:
        ConfigurationError: If ``files`` is empty.
        MetricsIOError: If a file cannot be read.
        DecodeFailure: If strict decoding fails.
    """

    if not files:
        raise ConfigurationError("at least one file is required")

    active = resolve_active_metrics(flags)
    report = Report(columns=active.columns)
    totals = TotalsAccumulator.for_file_count(len(files))
    started = time.perf_counter()

    for raw_path in files:
        path = Path(raw_path)
        result = analyzer(path, active, policy)
        totals.add(result, active)
        cells = tuple(str(result.value_of(metric)) for metric in report.columns)
        report.rows.append(ReportRow(cells=cells + (str(raw_path),)))

    if totals.enabled:
        cells = tuple(str(totals.value_of(metric)) for metric in report.columns)
        report.totals = ReportRow(cells=cells + (TOTAL_LABEL,), emphasized=True)

    logger.debug(
        "Report complete: %d file(s)",
        len(files),
        extra={
            "metrics_event": "metrics.report.complete",
            "total_files": len(files),
            "duration_seconds": time.perf_counter() - started,
        },
    )
    return report


__all__ = ["build_report", "resolve_active_metrics"]
