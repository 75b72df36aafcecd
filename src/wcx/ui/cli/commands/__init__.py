"""Command execution package for CLI."""

from wcx.ui.cli.commands.count import CountCommand
from wcx.ui.cli.commands.init_config import InitConfigCommand

__all__ = ["CountCommand", "InitConfigCommand"]
