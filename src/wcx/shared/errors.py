"""
Summary: Exception hierarchy shared by the engine, aggregator, and CLI.
Why: Let every layer raise precise failures while the CLI catches one base type.
"""

from __future__ import annotations

from pathlib import Path


class WcxError(Exception):
    """Base class for all wcx failures."""


class ConfigurationError(WcxError):
    """Raised when a run cannot start because its inputs or settings are invalid."""


class MetricsIOError(WcxError):
    """Filesystem access failed while computing a metric."""

    reason: str = "I/O failure"

    def __init__(self, path: Path, metric: str, detail: str | None = None) -> None:
        self.path = path
        self.metric = metric
        self.detail = detail
        message = f"{path}: {self.reason} while counting {metric}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NotFound(MetricsIOError):
    """The file does not exist."""

    reason = "no such file"


class PermissionDenied(MetricsIOError):
    """The file exists but cannot be read."""

    reason = "permission denied"


class IoFailure(MetricsIOError):
    """Any other filesystem failure, including non-regular files."""


class DecodeFailure(WcxError):
    """Invalid UTF-8 encountered while counting characters in strict mode."""

    def __init__(self, path: Path, metric: str, position: int) -> None:
        self.path = path
        self.metric = metric
        self.position = position
        super().__init__(f"{path}: invalid UTF-8 at byte {position} while counting {metric}")


def wrap_os_error(error: OSError, path: Path, metric: str) -> MetricsIOError:
    """Translate an ``OSError`` into the matching ``MetricsIOError`` subclass."""

    detail = error.strerror or str(error)
    if isinstance(error, FileNotFoundError):
        return NotFound(path, metric, detail)
    if isinstance(error, PermissionError):
        return PermissionDenied(path, metric, detail)
    return IoFailure(path, metric, detail)


__all__ = [
    "ConfigurationError",
    "DecodeFailure",
    "IoFailure",
    "MetricsIOError",
    "NotFound",
    "PermissionDenied",
    "WcxError",
    "wrap_os_error",
]
