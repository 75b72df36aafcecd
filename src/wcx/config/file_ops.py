"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, content: str, *, overwrite: bool = True) -> bool:
    """Persist textual content ensuring parent directories exist.

    Returns:
        bool: ``True`` when the file was written, ``False`` if it existed and
        ``overwrite`` is false.
    """

    if path.exists() and not overwrite:
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    return True


__all__ = ["write_text_file"]
