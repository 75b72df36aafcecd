"""Display management for CLI interface."""

from wcx.ui.cli.display.report import ReportDisplay

__all__ = ["ReportDisplay"]
