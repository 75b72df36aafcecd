"""Shared path utilities for configuration locations.

Policy:
- Config: ``$WCX_CONFIG_FILE`` when set, otherwise
  ``$XDG_CONFIG_HOME/wcx/config.toml`` with ``~/.config`` as the fallback base.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "WCX_CONFIG_FILE"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
CONFIG_FILE_NAME: Final[str] = "config.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory for wcx."""

    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / "wcx"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / CONFIG_FILE_NAME,
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
