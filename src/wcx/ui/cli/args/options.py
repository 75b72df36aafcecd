"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from wcx.features.metrics import DecodePolicy, MetricFlags


@final
@dataclass(slots=True)
class CountArgs:
    """Command line arguments for the ``wc`` subcommand."""

    command: Literal["wc"]
    files: list[str]
    flags: MetricFlags
    decode_policy: DecodePolicy
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    config_path: Path
    force: bool


CLIArgs = CountArgs | InitConfigArgs

__all__ = ["CLIArgs", "CountArgs", "InitConfigArgs"]
