"""
Summary: Line, byte, character, and word counters for a single file.
Why: Keep each counting rule in one place shared by per-path and single-read callers.
"""

from __future__ import annotations

import re
import stat
from pathlib import Path
from typing import Final

from wcx.shared.errors import DecodeFailure, IoFailure, wrap_os_error

from ..domain.models import DecodePolicy, Metric

LINE_TERMINATOR: Final[bytes] = b"\n"

# Words are maximal runs of bytes outside {space, tab, CR, LF}. Vertical tab
# and form feed count as word content, unlike ``bytes.split()``.
_WORD_PATTERN: Final[re.Pattern[bytes]] = re.compile(rb"[^ \t\r\n]+")


def lines_in(data: bytes) -> int:
    """Count segments a line reader would yield, including a trailing partial line."""

    if not data:
        return 0
    count = data.count(LINE_TERMINATOR)
    if not data.endswith(LINE_TERMINATOR):
        count += 1
    return count


def words_in(data: bytes) -> int:
    """Count delimiter-separated words; a word open at end of data still counts."""

    return sum(1 for _ in _WORD_PATTERN.finditer(data))


def chars_in(data: bytes, path: Path, policy: DecodePolicy = DecodePolicy.REPLACE) -> int:
    """Count code points after decoding ``data`` as UTF-8.

    Raises:
        DecodeFailure: If ``policy`` is strict and ``data`` is not valid UTF-8.
    """

    try:
        return len(data.decode("utf-8", errors=policy.value))
    except UnicodeDecodeError as exc:
        raise DecodeFailure(path, Metric.CHARS.value, exc.start) from exc


def read_content(path: Path, metric: str) -> bytes:
    """Read the whole file, translating OS failures for ``metric``."""

    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise wrap_os_error(exc, path, metric) from exc


def count_bytes(path: Path) -> int:
    """Return the file size from filesystem metadata without reading content."""

    try:
        stat_result = path.stat()
    except OSError as exc:
        raise wrap_os_error(exc, path, Metric.BYTES.value) from exc

    if not stat.S_ISREG(stat_result.st_mode):
        raise IoFailure(path, Metric.BYTES.value, "not a regular file")
    return stat_result.st_size


def count_lines(path: Path) -> int:
    """Count lines with a buffered binary line reader."""

    try:
        with open(path, "rb") as handle:
            return sum(1 for _ in handle)
    except OSError as exc:
        raise wrap_os_error(exc, path, Metric.LINES.value) from exc


def count_chars(path: Path, policy: DecodePolicy = DecodePolicy.REPLACE) -> int:
    return chars_in(read_content(path, Metric.CHARS.value), path, policy)


def count_words(path: Path) -> int:
    return words_in(read_content(path, Metric.WORDS.value))


__all__ = [
    "LINE_TERMINATOR",
    "chars_in",
    "count_bytes",
    "count_chars",
    "count_lines",
    "count_words",
    "lines_in",
    "read_content",
    "words_in",
]
