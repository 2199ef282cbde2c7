"""Configuration loading for the roster manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "roster.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class LoggingConfig:
    """Logging settings.

    `dir` and `level` left as None defer to the ROSTER_LOG_DIR and
    ROSTER_LOG_LEVEL environment variables.
    """

    level: str | None = None
    dir: str | None = None
    console: bool = False


@dataclass
class RosterConfig:
    """Roster session configuration."""

    undo_limit: int | None = None
    seed_demo: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> RosterConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a field has an invalid value.
        """
        undo_limit = data.get("undo_limit")
        if undo_limit is not None and (
            isinstance(undo_limit, bool) or not isinstance(undo_limit, int) or undo_limit < 1
        ):
            raise ConfigError(f"undo_limit must be a positive integer, got {undo_limit!r}")

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            raise ConfigError("logging must be a mapping")
        logging_config = LoggingConfig(
            level=logging_data.get("level"),
            dir=logging_data.get("dir"),
            console=bool(logging_data.get("console", False)),
        )

        return cls(
            undo_limit=undo_limit,
            seed_demo=bool(data.get("seed_demo", True)),
            logging=logging_config,
            root_path=root_path,
        )

    def get_log_dir(self) -> Path | None:
        """Get the log directory, resolved against the config location.

        Returns:
            Absolute log directory, or None to use the environment/default.
        """
        if self.logging.dir is None:
            return None
        return self.root_path / self.logging.dir


def load_config(config_path: Path | str) -> RosterConfig:
    """Load roster configuration from a YAML file.

    Args:
        config_path: Path to roster.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RosterConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find roster.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to roster.yaml, or None if there is none.
    """
    current = Path.cwd() if start_path is None else Path(start_path)
    current = current.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path
    return None
