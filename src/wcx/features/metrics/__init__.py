# Path: `src/wcx/features/metrics/__init__.py`
# Summary: Export the metrics engine and its value objects.
# Why: Provide a stable import surface for the report aggregator and tests.

from .domain.models import ActiveMetrics, DecodePolicy, FileResult, Metric, MetricFlags
from .usecases.counters import (
    chars_in,
    count_bytes,
    count_chars,
    count_lines,
    count_words,
    lines_in,
    words_in,
)
from .usecases.engine import analyze_file

__all__ = [
    "ActiveMetrics",
    "DecodePolicy",
    "FileResult",
    "Metric",
    "MetricFlags",
    "analyze_file",
    "chars_in",
    "count_bytes",
    "count_chars",
    "count_lines",
    "count_words",
    "lines_in",
    "words_in",
]
