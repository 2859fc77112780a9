"""Configuration management for lexpath."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lexpath.config.file_ops import write_text_file
from lexpath.config.paths import default_config_path
from lexpath.platform.logging import logger


GRAMMAR_DEFAULT = "native"
ENCODING_DEFAULT = "utf-8"
CONSOLE_LOG_LEVEL_DEFAULT = "WARNING"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Grammar used when a path is built without an explicit one
    grammar: str = GRAMMAR_DEFAULT

    # Encoding of the process-wide default codec
    encoding: str = ENCODING_DEFAULT

    # Log file path (CLI only)
    log_file: Path | None = _path_field()

    # Console threshold for the CLI logger
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lexpath configuration file")
        lines.append("")

        lines.append("# Grammar used when none is given: native, posix or windows")
        lines.append(f"grammar = {self._format_toml_value(config['grammar'])}")
        lines.append("")

        lines.append("# Encoding of the default codec used to convert between str and bytes")
        lines.append(f"encoding = {self._format_toml_value(config['encoding'])}")
        lines.append("")

        lines.append("# Log file path for the command line tool (optional)")
        lines.append('# Example: log_file = "/path/to/logs/lexpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log threshold for the command line tool")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            source: Config file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if source is None and cls._instance is not None:
            return cls._instance

        config_file = source or default_config_path()

        if not config_file.exists():
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()
