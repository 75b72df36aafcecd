"""Command line interface package."""

from wcx.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
