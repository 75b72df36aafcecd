"""Command line argument handling package."""

from wcx.ui.cli.args.parser import ArgumentParser
from wcx.ui.cli.args.options import CLIArgs, CountArgs, InitConfigArgs

__all__ = ["ArgumentParser", "CLIArgs", "CountArgs", "InitConfigArgs"]
