"""Ports for the report feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from wcx.features.metrics import ActiveMetrics, DecodePolicy, FileResult


class FileAnalyzer(Protocol):
    """Compute the active metrics for one file."""

    def __call__(
        self,
        path: Path,
        active: ActiveMetrics,
        policy: DecodePolicy = DecodePolicy.REPLACE,
    ) -> FileResult:
        """Return counts for ``path``; raise on I/O or decode failure."""

        ...
