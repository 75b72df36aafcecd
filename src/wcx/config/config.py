"""Configuration management for wcx."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from rich.errors import StyleSyntaxError
from rich.style import Style

from wcx.config.file_ops import write_text_file
from wcx.config.paths import default_config_path
from wcx.platform.logging import logger
from wcx.shared.errors import ConfigurationError

TABLE_BOX_CHOICES: Final[tuple[str, ...]] = (
    "ascii",
    "minimal",
    "simple",
    "rounded",
    "heavy",
    "none",
)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file; console logging is always on
    log_file: Path | None = _path_field()

    # Fail on invalid UTF-8 instead of substituting U+FFFD
    strict_utf8: bool = False

    # Table rendering
    table_box: str = "minimal"
    header_style: str = "bold"
    totals_style: str = "bold green"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert path strings and validate value types.

        Raises:
            ConfigurationError: If a value has the wrong type or an unknown box style.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigurationError(f"{f.name} must be a path string")

        if not isinstance(self.strict_utf8, bool):
            raise ConfigurationError("strict_utf8 must be true or false")

        for name in ("table_box", "header_style", "totals_style"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string")

        self.table_box = self.table_box.strip().lower()
        if self.table_box not in TABLE_BOX_CHOICES:
            valid = ", ".join(TABLE_BOX_CHOICES)
            raise ConfigurationError(
                f"Unsupported table_box '{self.table_box}'. Valid options: {valid}"
            )

        for name in ("header_style", "totals_style"):
            try:
                _ = Style.parse(getattr(self, name))
            except StyleSyntaxError as e:
                raise ConfigurationError(f"Invalid {name} '{getattr(self, name)}': {e}") from e

    def save(self, path: Path | None = None, *, overwrite: bool = True) -> bool:
        """Save configuration as commented TOML.

        Returns:
            bool: ``True`` if the file was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        written = write_text_file(target, self._render_toml(config_dict), overwrite=overwrite)
        if written:
            logger.info("Configuration saved to %s", target)
        return written

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# wcx configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Enables a rotating debug log in addition to console output")
        lines.append('# Example: log_file = "~/.cache/wcx/wcx.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Invalid UTF-8 handling for character counts")
        lines.append("# false replaces invalid sequences, true fails the run")
        lines.append(f"strict_utf8 = {self._format_toml_value(config['strict_utf8'])}")
        lines.append("")

        lines.append("# Table rendering")
        lines.append(f"# table_box: one of {', '.join(TABLE_BOX_CHOICES)}")
        lines.append(f"table_box = {self._format_toml_value(config['table_box'])}")
        lines.append(f"header_style = {self._format_toml_value(config['header_style'])}")
        lines.append(f"totals_style = {self._format_toml_value(config['totals_style'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent.

        Args:
            path: Explicit config file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, cached for later calls.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigurationError(f"Failed to load configuration {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
                del config_dict[key]

            instance = cls(**config_dict)
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""
        cls._instance = None


__all__ = ["Config", "TABLE_BOX_CHOICES"]
