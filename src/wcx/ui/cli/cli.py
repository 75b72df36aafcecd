"""Command line interface for wcx."""

import sys
from typing import final

from wcx.platform.logging import logger
from wcx.shared.errors import WcxError
from wcx.ui.cli.args import ArgumentParser
from wcx.ui.cli.args.options import CLIArgs, CountArgs, InitConfigArgs
from wcx.ui.cli.commands import CountCommand, InitConfigCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 on any counting, decoding, or configuration error,
        and 130 when interrupted.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CountArgs):
                _ = CountCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            if not InitConfigCommand(args).execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.warning("Operation cancelled by user")
            sys.exit(130)
        except WcxError as e:
            logger.error("wcx: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
