"""src/wcx/features/metrics/usecases/engine.py
What: Compute the active metrics for one file.
Why: Read each file at most twice, once via stat and once in full for content metrics.
"""

from __future__ import annotations

import time
from pathlib import Path

from wcx.platform.logging import logger

from ..domain.models import ActiveMetrics, DecodePolicy, FileResult, Metric
from .counters import chars_in, count_bytes, lines_in, read_content, words_in


def _content_label(active: ActiveMetrics) -> str:
    """Name the content metrics served by a single read, for error messages."""

    return ",".join(metric.value for metric in active.columns if metric is not Metric.BYTES)


def analyze_file(
    path: Path,
    active: ActiveMetrics,
    policy: DecodePolicy = DecodePolicy.REPLACE,
) -> FileResult:
    """Return a ``FileResult`` with exactly the active metrics populated.

    Args:
        path: File to analyze.
        active: Resolved metric selection.
        policy: Decode policy applied when counting characters.

    Raises:
        MetricsIOError: If the file cannot be stat'ed or read.
        DecodeFailure: If characters are counted strictly and the file is not UTF-8.
    """

    started = time.perf_counter()
    logger.debug(
        "Analyzing %s",
        path,
        extra={"metrics_event": "metrics.file.start", "source_path": str(path)},
    )

    result = FileResult()

    if active.bytes:
        result.bytes = count_bytes(path)

    if active.needs_content:
        data = read_content(path, _content_label(active))
        if active.lines:
            result.lines = lines_in(data)
        if active.chars:
            result.chars = chars_in(data, path, policy)
        if active.words:
            result.words = words_in(data)

    logger.debug(
        "Analyzed %s: lines=%d bytes=%d chars=%d words=%d",
        path,
        result.lines,
        result.bytes,
        result.chars,
        result.words,
        extra={
            "metrics_event": "metrics.file.complete",
            "source_path": str(path),
            "counts": {metric.value: result.value_of(metric) for metric in active.columns},
            "duration_ms": (time.perf_counter() - started) * 1000,
        },
    )
    return result


__all__ = ["analyze_file"]
