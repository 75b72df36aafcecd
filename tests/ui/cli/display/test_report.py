"""Tests for report table display."""

from io import StringIO

import pytest
from rich import box
from rich.console import Console
from pytest_mock import MockerFixture

from wcx.features.metrics import Metric
from wcx.features.report import Report, ReportRow
from wcx.ui.cli.display.report import ReportDisplay


@pytest.fixture
def multi_file_report() -> Report:
    """Create a two-file report with a totals row."""

    return Report(
        columns=(Metric.LINES, Metric.WORDS),
        rows=[
            ReportRow(cells=("10", "20", "a.txt")),
            ReportRow(cells=("5", "7", "[b].txt")),
        ],
        totals=ReportRow(cells=("15", "27", "total"), emphasized=True),
    )


def _render(display: ReportDisplay, report: Report, width: int = 120) -> str:
    display.console = Console(file=StringIO(), width=width, color_system=None)
    display.show_report(report)
    output = display.console.file
    assert isinstance(output, StringIO)
    return output.getvalue()


def test_build_table_columns_and_rows(multi_file_report: Report) -> None:
    table = ReportDisplay().build_table(multi_file_report)

    assert [str(column.header) for column in table.columns] == ["Lines", "Words", "File"]
    assert [column.justify for column in table.columns] == ["right", "right", "left"]
    assert table.row_count == 3
    assert table.header_style == "bold"


def test_totals_row_is_styled(multi_file_report: Report) -> None:
    table = ReportDisplay(totals_style="bold magenta").build_table(multi_file_report)

    assert table.rows[-1].style == "bold magenta"
    assert table.rows[0].style is None


def test_show_report_renders_cells_without_markup(multi_file_report: Report) -> None:
    output = _render(ReportDisplay(), multi_file_report)

    assert "Lines" in output and "File" in output
    assert "a.txt" in output
    assert "[b].txt" in output
    assert "total" in output
    assert "15" in output and "27" in output


def test_table_box_choice_is_applied() -> None:
    assert ReportDisplay(table_box="ascii").table_box is box.ASCII
    assert ReportDisplay(table_box="none").table_box is None


def test_show_report_prints_once(multi_file_report: Report, mocker: MockerFixture) -> None:
    mock_console = mocker.patch("wcx.ui.cli.display.report.Console")
    display = ReportDisplay()

    display.show_report(multi_file_report)

    mock_console.return_value.print.assert_called_once()


def test_long_file_names_fold_instead_of_truncating() -> None:
    """Narrow consoles wrap file names onto extra lines and keep every character."""

    stem = "/tmp/" + "-".join(f"segment{index:02d}" for index in range(9))
    first, second = f"{stem}-first.txt", f"{stem}-second.txt"
    report = Report(
        columns=(Metric.LINES,),
        rows=[ReportRow(cells=("1", first)), ReportRow(cells=("2", second))],
        totals=ReportRow(cells=("3", "total"), emphasized=True),
    )

    output = _render(ReportDisplay(table_box="none"), report, width=40)

    assert len(first) > 90
    assert "…" not in output
    joined = "".join(output.split())
    assert first in joined
    assert second in joined


def test_number_columns_do_not_wrap() -> None:
    table = ReportDisplay().build_table(
        Report(columns=(Metric.LINES, Metric.WORDS), rows=[ReportRow(cells=("1", "2", "a"))])
    )

    assert [column.no_wrap for column in table.columns] == [True, True, False]
    assert table.columns[-1].overflow == "fold"


def test_row_style_follows_emphasized_marker() -> None:
    report = Report(
        columns=(Metric.LINES,),
        rows=[ReportRow(cells=("1", "a.txt"), emphasized=True), ReportRow(cells=("2", "b.txt"))],
        totals=ReportRow(cells=("3", "total")),
    )

    table = ReportDisplay(totals_style="red").build_table(report)

    assert [row.style for row in table.rows] == ["red", None, None]
