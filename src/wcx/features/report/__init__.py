# Path: `src/wcx/features/report/__init__.py`
# Summary: Export the report aggregator and its row types.
# Why: Give the CLI one import path for building reports.

from .domain.models import FILE_HEADER, TOTAL_LABEL, Report, ReportRow, TotalsAccumulator
from .usecases.aggregator import build_report, resolve_active_metrics
from .usecases.ports import FileAnalyzer

__all__ = [
    "FILE_HEADER",
    "TOTAL_LABEL",
    "FileAnalyzer",
    "Report",
    "ReportRow",
    "TotalsAccumulator",
    "build_report",
    "resolve_active_metrics",
]
