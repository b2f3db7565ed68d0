"""Configuration management for the Task List CLI application."""

import os
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional
import yaml


logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "~/.tasklist"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigModel:
    """Global configuration model for Task List CLI."""

    # File paths
    data_dir: str = DEFAULT_DATA_DIR
    data_file: str = "tasks.txt"
    backup_dir: Optional[str] = None  # defaults to <data_dir>/backups

    # Loading behaviour: stop at the first unreadable line instead of skipping it
    strict_load: bool = False

    # Output
    log_level: str = "WARNING"
    no_color: bool = False

    def __post_init__(self):
        """Expand user paths and normalize values."""
        self.data_dir = os.path.expanduser(self.data_dir)
        if self.backup_dir is None:
            self.backup_dir = os.path.join(self.data_dir, "backups")
        self.backup_dir = os.path.expanduser(self.backup_dir)

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            logger.warning(f"Unknown log level '{self.log_level}', using WARNING")
            self.log_level = "WARNING"

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(asdict(self), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a YAML mapping")

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_data_path(self) -> Path:
        """Get the task file path."""
        path = Path(os.path.expanduser(self.data_file))
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path

    def get_backup_path(self) -> Path:
        """Directory that timestamped copies of the task file go to."""
        return Path(self.backup_dir)


def default_config_path() -> Path:
    """Config file location used when none is given."""
    return Path(os.path.expanduser(DEFAULT_DATA_DIR)) / "config.yaml"


def load_config(config_path: Optional[Path] = None, create: bool = True) -> ConfigModel:
    """Load configuration from file or fall back to defaults.

    Args:
        config_path: YAML file to read; defaults to ``~/.tasklist/config.yaml``
        create: Write a default config file when none exists

    Returns:
        The loaded configuration
    """
    if config_path is None:
        config_path = default_config_path()
    config_path = Path(config_path)

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = ConfigModel.from_yaml(f.read())
            logger.debug(f"Loaded configuration from {config_path}")
            return config
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
            return ConfigModel()

    config = ConfigModel()
    if create:
        try:
            save_config(config, config_path)
            logger.info(f"Created default configuration at {config_path}")
        except OSError as e:
            logger.warning(f"Could not create default configuration at {config_path}: {e}")
    return config


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to file."""
    config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.debug(f"Configuration saved to {config_path}")
