"""Value objects describing which metrics are requested and what was counted."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Metric(str, Enum):
    """A countable file metric, declared in report column order."""

    LINES = "lines"
    BYTES = "bytes"
    CHARS = "chars"
    WORDS = "words"

    @property
    def label(self) -> str:
        """Header label used when the metric is rendered as a column."""

        return self.value.capitalize()


class DecodePolicy(str, Enum):
    """How invalid UTF-8 is treated while counting characters.

    The value doubles as the ``errors`` argument of ``bytes.decode``.
    """

    REPLACE = "replace"
    STRICT = "strict"

    @staticmethod
    def from_strict(strict: bool) -> "DecodePolicy":
        return DecodePolicy.STRICT if strict else DecodePolicy.REPLACE


@dataclass(slots=True, frozen=True)
class MetricFlags:
    """Metrics requested by the caller before defaulting and exclusivity."""

    lines: bool = False
    bytes: bool = False
    chars: bool = False
    words: bool = False

    def any_requested(self) -> bool:
        return self.lines or self.bytes or self.chars or self.words


@dataclass(slots=True, frozen=True)
class ActiveMetrics:
    """Resolved metric selection shared by every row of one report."""

    lines: bool
    bytes: bool
    chars: bool
    words: bool

    def __post_init__(self) -> None:
        if self.bytes and self.chars:
            raise ValueError("bytes and chars cannot be active together")

    def is_active(self, metric: Metric) -> bool:
        return bool(getattr(self, metric.value))

    @property
    def columns(self) -> tuple[Metric, ...]:
        """Active metrics in fixed column order."""

        return tuple(metric for metric in Metric if self.is_active(metric))

    @property
    def needs_content(self) -> bool:
        """Whether any active metric requires reading file content."""

        return self.lines or self.chars or self.words


@dataclass(slots=True)
class FileResult:
    """Counts for one file; inactive metrics stay at zero."""

    lines: int = 0
    bytes: int = 0
    words: int = 0
    chars: int = 0

    def value_of(self, metric: Metric) -> int:
        return int(getattr(self, metric.value))


__all__ = ["ActiveMetrics", "DecodePolicy", "FileResult", "Metric", "MetricFlags"]
