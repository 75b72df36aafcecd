"""
Summary: Tests for report rows, totals accumulation, and header ordering.
Why: Guard the totals-only-when-multiple-files rule and the bytes/chars column order.
"""

from wcx.features.metrics import ActiveMetrics, FileResult, Metric
from wcx.features.report import FILE_HEADER, Report, ReportRow, TotalsAccumulator

LINES_AND_WORDS = ActiveMetrics(lines=True, bytes=False, chars=False, words=True)


def test_accumulator_enabled_only_for_multiple_files() -> None:
    assert not TotalsAccumulator.for_file_count(1).enabled
    assert TotalsAccumulator.for_file_count(2).enabled


def test_accumulator_adds_active_fields() -> None:
    totals = TotalsAccumulator.for_file_count(2)

    totals.add(FileResult(lines=2, bytes=10, words=3, chars=9), LINES_AND_WORDS)
    totals.add(FileResult(lines=1, bytes=5, words=4, chars=1), LINES_AND_WORDS)

    assert totals.value_of(Metric.LINES) == 3
    assert totals.value_of(Metric.WORDS) == 7
    assert totals.bytes == 0
    assert totals.chars == 0


def test_disabled_accumulator_ignores_results() -> None:
    totals = TotalsAccumulator.for_file_count(1)

    totals.add(FileResult(lines=5, words=5), LINES_AND_WORDS)

    assert (totals.lines, totals.words) == (0, 0)


def test_headers_end_with_file_column() -> None:
    report = Report(columns=(Metric.BYTES, Metric.WORDS))

    assert report.headers == ["Bytes", "Words", FILE_HEADER]


def test_as_rows_appends_totals_last() -> None:
    report = Report(
        columns=(Metric.LINES,),
        rows=[ReportRow(cells=("1", "a")), ReportRow(cells=("2", "b"))],
        totals=ReportRow(cells=("3", "total"), emphasized=True),
    )

    assert report.as_rows() == [["1", "a"], ["2", "b"], ["3", "total"]]
