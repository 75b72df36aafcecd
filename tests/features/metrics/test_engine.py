"""Tests for ``analyze_file``."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

import wcx.features.metrics.usecases.engine as engine_module
from wcx.features.metrics import ActiveMetrics, DecodePolicy, FileResult, Metric, analyze_file
from wcx.shared.errors import DecodeFailure, NotFound

MakeFile = Callable[[str, bytes | str], Path]

ALL_BUT_CHARS = ActiveMetrics(lines=True, bytes=True, chars=False, words=True)
CHARS_ONLY = ActiveMetrics(lines=False, bytes=False, chars=True, words=False)


def test_populates_only_active_metrics(make_file: MakeFile) -> None:
    path = make_file("sample.txt", "héllo world\nsecond")

    result = analyze_file(path, ALL_BUT_CHARS)

    assert result == FileResult(lines=2, bytes=19, words=3, chars=0)


def test_chars_only_leaves_other_fields_zero(make_file: MakeFile) -> None:
    path = make_file("sample.txt", "héllo")

    result = analyze_file(path, CHARS_ONLY)

    assert result == FileResult(lines=0, bytes=0, words=0, chars=5)


def test_reads_content_once_and_skips_read_for_bytes_only(make_file: MakeFile, mocker: MockerFixture) -> None:
    path = make_file("sample.txt", "a b\n")
    read_spy = mocker.spy(engine_module, "read_content")

    _ = analyze_file(path, ActiveMetrics(lines=True, bytes=False, chars=True, words=True))
    assert read_spy.call_count == 1

    read_spy.reset_mock()
    result = analyze_file(path, ActiveMetrics(lines=False, bytes=True, chars=False, words=False))
    assert read_spy.call_count == 0
    assert result.bytes == 4


def test_matches_individual_counters(make_file: MakeFile) -> None:
    from wcx.features.metrics import count_bytes, count_chars, count_lines, count_words

    path = make_file("mixed.txt", "one two\tthree\r\nfour ☕\n\nlast")

    with_bytes = analyze_file(path, ALL_BUT_CHARS)
    with_chars = analyze_file(path, ActiveMetrics(lines=True, bytes=False, chars=True, words=True))

    assert with_bytes.lines == with_chars.lines == count_lines(path)
    assert with_bytes.words == with_chars.words == count_words(path)
    assert with_bytes.bytes == count_bytes(path)
    assert with_chars.chars == count_chars(path)


def test_strict_policy_propagates_decode_failure(make_file: MakeFile) -> None:
    path = make_file("bad.bin", b"\xc3\x28")

    assert analyze_file(path, CHARS_ONLY).chars == 2
    with pytest.raises(DecodeFailure):
        _ = analyze_file(path, CHARS_ONLY, DecodePolicy.STRICT)


def test_words_do_not_decode(make_file: MakeFile) -> None:
    """Invalid UTF-8 never fails word or line counting."""

    path = make_file("bad.bin", b"\xff\xfe one\n")
    active = ActiveMetrics(lines=True, bytes=False, chars=False, words=True)

    result = analyze_file(path, active, DecodePolicy.STRICT)

    assert (result.lines, result.words) == (1, 2)


def test_missing_file_names_content_metrics(tmp_path: Path) -> None:
    active = ActiveMetrics(lines=True, bytes=False, chars=False, words=True)

    with pytest.raises(NotFound) as excinfo:
        _ = analyze_file(tmp_path / "gone.txt", active)

    assert excinfo.value.metric == "lines,words"


def test_missing_file_with_bytes_fails_on_stat(tmp_path: Path) -> None:
    with pytest.raises(NotFound) as excinfo:
        _ = analyze_file(tmp_path / "gone.txt", ALL_BUT_CHARS)

    assert excinfo.value.metric == Metric.BYTES.value


def test_emits_structured_debug_events(make_file: MakeFile, caplog: pytest.LogCaptureFixture) -> None:
    path = make_file("sample.txt", "a b\n")
    caplog.set_level(logging.DEBUG, logger="wcx")

    _ = analyze_file(path, ALL_BUT_CHARS)

    events = [getattr(record, "metrics_event", None) for record in caplog.records]
    assert events == ["metrics.file.start", "metrics.file.complete"]
    complete = caplog.records[-1]
    assert getattr(complete, "counts") == {"lines": 1, "bytes": 4, "words": 2}
