"""Shared pytest fixtures for wcx tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from wcx.config.config import Config

FileFactory = Callable[[str, bytes | str], Path]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config path at a temporary file and reset the singleton."""

    config_file = tmp_path / "wcx-config" / "config.toml"
    monkeypatch.setenv("WCX_CONFIG_FILE", str(config_file))
    # Keeps each table row on one line so substring checks see whole temp paths.
    monkeypatch.setenv("COLUMNS", "240")
    Config.reset()
    yield config_file
    Config.reset()


@pytest.fixture
def make_file(tmp_path: Path) -> FileFactory:
    """Create a file under ``tmp_path`` from text (UTF-8) or raw bytes."""

    def _make(name: str, content: bytes | str) -> Path:
        path = tmp_path / name
        data = content.encode("utf-8") if isinstance(content, str) else content
        _ = path.write_bytes(data)
        return path

    return _make
