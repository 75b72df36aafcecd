"""Rich console handler for wcx log records.

Where: platform/logging/handlers.py
What: Render structured ``metrics_event`` records with icons, colors, and compact paths.
Why: Keep per-file progress readable on stderr while stdout carries the table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class MetricsRichHandler(RichHandler):
    """Rich handler that styles counting events and their file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "metrics.file.start": ("📄", "blue"),
        "metrics.file.complete": ("✅", "green"),
        "metrics.report.complete": ("📊", "cyan"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators, keeping only the last segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = anchor
        display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_metrics_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured counting events with dedicated styling."""

        event = getattr(record, "metrics_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "metrics.report.complete":
            _ = body.append("Report complete")
            details: list[str] = []
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        else:
            prefix = "Counting " if event == "metrics.file.start" else "Counted "
            _ = body.append(prefix)
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path)))

            metrics: list[str] = []
            counts = getattr(record, "counts", None)
            if isinstance(counts, Mapping):
                metrics.extend(f"{name}={value}" for name, value in counts.items())
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                metrics.append(f"{duration_ms:.2f} ms")
            if metrics:
                _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_metrics_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["MetricsRichHandler"]
