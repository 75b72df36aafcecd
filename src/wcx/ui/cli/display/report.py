"""src/wcx/ui/cli/display/report.py
What: Render a count report as a Rich table.
Why: Keep styling of header and totals cells out of the aggregator.
"""

from __future__ import annotations

from typing import Final, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from wcx.features.report import FILE_HEADER, Report

TABLE_BOXES: Final[dict[str, box.Box | None]] = {
    "ascii": box.ASCII,
    "minimal": box.MINIMAL,
    "simple": box.SIMPLE,
    "rounded": box.ROUNDED,
    "heavy": box.HEAVY,
    "none": None,
}


@final
class ReportDisplay:
    """Handles report table display in CLI."""

    console: Console

    def __init__(
        self,
        *,
        table_box: str = "minimal",
        header_style: str = "bold",
        totals_style: str = "bold green",
    ) -> None:
        self.console = Console()
        self.table_box = TABLE_BOXES[table_box]
        self.header_style = header_style
        self.totals_style = totals_style

    def build_table(self, report: Report) -> Table:
        """Build the table; counts are right-aligned, file names left-aligned.

        File names fold onto extra lines rather than being cut, so every
        row keeps its full path on narrow or redirected output.
        """

        table = Table(box=self.table_box, show_lines=True, header_style=self.header_style)
        for label in report.headers:
            if label == FILE_HEADER:
                _ = table.add_column(label, justify="left", overflow="fold")
            else:
                _ = table.add_column(label, justify="right", no_wrap=True)

        rows = list(report.rows)
        if report.totals is not None:
            rows.append(report.totals)

        # Cells are Text so file names containing brackets are not parsed as markup.
        for row in rows:
            table.add_row(
                *(Text(cell) for cell in row.cells),
                style=self.totals_style if row.emphasized else None,
            )
        return table

    def show_report(self, report: Report) -> None:
        """Print the report table to stdout."""

        self.console.print(self.build_table(report))
