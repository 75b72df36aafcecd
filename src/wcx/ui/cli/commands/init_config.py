"""Write a default configuration file for the ``init-config`` subcommand."""

from typing import final

from wcx.config.config import Config
from wcx.platform.logging import logger
from wcx.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Command for creating the configuration file."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> bool:
        """Write the defaults; return ``False`` if a file exists and ``--force`` was not given."""

        written = Config().save(self.args.config_path, overwrite=self.args.force)
        if not written:
            logger.error(
                "Configuration already exists at %s; use --force to overwrite",
                self.args.config_path,
            )
        return written
