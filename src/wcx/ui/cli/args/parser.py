"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from wcx import __version__
from wcx.config.config import Config
from wcx.config.paths import default_config_path
from wcx.features.metrics import DecodePolicy, MetricFlags
from wcx.platform.logging import setup_logger
from wcx.ui.cli.args.options import CLIArgs, CountArgs, InitConfigArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="wcx",
            description="wcx - count lines, bytes, characters, and words in files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        wc_parser = subparsers.add_parser(
            "wc",
            help="Print line, byte, character, and word counts for each file",
            description=(
                "Print counts for each FILE and a total row when more than one FILE is given. "
                "With no metric flags, lines, bytes, and words are shown. "
                "-m replaces the byte column with a character column."
            ),
        )
        _ = wc_parser.add_argument(
            "-l",
            "--lines",
            action="store_true",
            help="print the line counts",
        )
        _ = wc_parser.add_argument(
            "-c",
            "--bytes",
            action="store_true",
            help="print the byte counts",
        )
        _ = wc_parser.add_argument(
            "-m",
            "--chars",
            action="store_true",
            help="print the character counts (suppresses bytes)",
        )
        _ = wc_parser.add_argument(
            "-w",
            "--words",
            action="store_true",
            help="print the word counts",
        )
        _ = wc_parser.add_argument(
            "--strict-utf8",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="fail on invalid UTF-8 instead of replacing it (overrides config)",
        )
        verbosity = wc_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log per-file progress to stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = wc_parser.add_argument(
            "files",
            nargs="+",
            metavar="FILE",
            help="Files to count",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a commented default configuration file",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors, ``--help``, or ``--version``.
            ConfigurationError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.command == "init-config":
            _ = setup_logger(console_level=logging.INFO)
            return InitConfigArgs(
                command="init-config",
                config_path=default_config_path(),
                force=parsed_args.force,
            )

        return ArgumentParser._process_count(parsed_args)

    @staticmethod
    def _process_count(parsed_args: argparse.Namespace) -> CountArgs:
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        strict: bool = (
            configuration.strict_utf8
            if parsed_args.strict_utf8 is None
            else bool(parsed_args.strict_utf8)
        )

        return CountArgs(
            command="wc",
            files=list(parsed_args.files),
            flags=MetricFlags(
                lines=parsed_args.lines,
                bytes=parsed_args.bytes,
                chars=parsed_args.chars,
                words=parsed_args.words,
            ),
            decode_policy=DecodePolicy.from_strict(strict),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
