"""src/wcx/ui/cli/commands/count.py
What: Execute the ``wc`` subcommand.
Why: Build the whole report before printing so failed runs emit no table.
"""

from typing import final

from wcx.config.config import Config
from wcx.features.report import Report, build_report
from wcx.ui.cli.args.options import CountArgs
from wcx.ui.cli.display.report import ReportDisplay


@final
class CountCommand:
    """Command for counting metrics over a list of files."""

    args: CountArgs
    display: ReportDisplay

    def __init__(self, args: CountArgs, config: Config | None = None) -> None:
        """Initialize count command.

        Args:
            args: Command line arguments.
            config: Loaded configuration; defaults to ``Config.load()``.
        """
        self.args = args
        configuration = config or Config.load()
        self.display = ReportDisplay(
            table_box=configuration.table_box,
            header_style=configuration.header_style,
            totals_style=configuration.totals_style,
        )

    def execute(self) -> Report:
        """Build and print the report.

        Returns:
            Report: The rendered report.
        """
        report = build_report(self.args.files, self.args.flags, self.args.decode_policy)
        self.display.show_report(report)
        return report
