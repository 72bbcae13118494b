"""
Configuration management for PlayWise
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

DEFAULT_CALMING_GENRES = ["Lo-Fi", "Lofi", "Jazz", "Classical", "Ambient", "Chill"]


@dataclass
class DataConfig:
    """Configuration for the session data file."""

    data_file: Optional[str] = None  # default: <data_dir>/playwise_data.txt
    autosave: bool = True  # Save after every mutating command
    history_limit: int = 50  # Playback history entries kept in the data file

    def validate(self) -> None:
        """Validate data configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {self.history_limit}")


@dataclass
class TrackerConfig:
    """Configuration for the recency windows."""

    skip_capacity: int = 10
    recent_capacity: int = 15

    def validate(self) -> None:
        """Validate tracker capacities.

        Raises:
            ValueError: If a capacity is below 1
        """
        for name in ("skip_capacity", "recent_capacity"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass
class AutoReplayConfig:
    """Configuration for calming-track auto-replay."""

    enabled: bool = True
    top_k: int = 3
    calming_genres: List[str] = field(default_factory=lambda: list(DEFAULT_CALMING_GENRES))

    def validate(self) -> None:
        """Validate auto-replay configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.top_k, int) or self.top_k < 0:
            raise ValueError(f"top_k must be a non-negative integer, got {self.top_k!r}")
        if not self.calming_genres:
            raise ValueError("calming_genres cannot be empty")


@dataclass
class UIConfig:
    """Configuration for user interface."""

    use_colors: bool = True
    recent_played_length: int = 5  # Plays shown in snapshot
    recent_added_length: int = 10  # Tracks shown by 'recent'


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # default: <data_dir>/playwise.log
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of rotated files to keep


@dataclass
class Config:
    """Main configuration object."""

    data: DataConfig = field(default_factory=DataConfig)
    trackers: TrackerConfig = field(default_factory=TrackerConfig)
    autoreplay: AutoReplayConfig = field(default_factory=AutoReplayConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "playwise"
    return Path.home() / ".config" / "playwise"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "playwise"
    return Path.home() / ".local" / "share" / "playwise"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/playwise (or ~/.config/playwise)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config
    return get_config_dir() / "config.toml"


def get_data_file_path(config: Config) -> Path:
    """Resolve the session data file location."""
    if config.data.data_file:
        return Path(config.data.data_file).expanduser()
    return get_data_dir() / "playwise_data.txt"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file location."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "playwise.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# PlayWise Configuration

[data]
# Session data file (default: ~/.local/share/playwise/playwise_data.txt)
# data_file = "~/playwise_data.txt"

# Save after every change to the catalog
autosave = true

# Playback history entries kept in the data file
history_limit = 50

[trackers]
# Recently skipped tracks remembered (excluded from auto-replay)
skip_capacity = 10

# Recently added tracks remembered
recent_capacity = 15

[autoreplay]
# Replay calming tracks when the playlist ends
enabled = true

# Number of tracks to replay
top_k = 3

# Genres treated as calming (case-insensitive)
calming_genres = ["Lo-Fi", "Lofi", "Jazz", "Classical", "Ambient", "Chill"]

[ui]
# Use colors in terminal output
use_colors = true

# Recently played tracks shown in the snapshot
recent_played_length = 5

# Recently added tracks shown by 'recent'
recent_added_length = 10

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/playwise/playwise.log)
# log_file = "/path/to/playwise.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5
""".strip()


def _load_section(toml_data: dict, name: str, default):
    """Build one config section, falling back to defaults if it is invalid."""
    if name not in toml_data:
        return default
    if not isinstance(toml_data[name], dict):
        logger.warning(f"Ignoring [{name}]: expected a table, got {type(toml_data[name]).__name__}")
        return default

    section_type = type(default)
    values = {
        key: value
        for key, value in toml_data[name].items()
        if key in section_type.__dataclass_fields__
    }
    unknown = set(toml_data[name]) - set(values)
    if unknown:
        logger.warning(f"Ignoring unknown keys in [{name}]: {sorted(unknown)}")

    section = section_type(**values)
    validate = getattr(section, "validate", None)
    if validate is not None:
        try:
            validate()
        except ValueError as e:
            print(f"Warning: Invalid {name} configuration: {e}")
            print(f"Using default {name} configuration.")
            return section_type()
    return section


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - PLAYWISE_DATA_FILE
    - PLAYWISE_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if not config_path.exists():
        # Create config directory and default file
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            print(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not create default config at {config_path}: {e}")
    else:
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)

            config.data = _load_section(toml_data, "data", config.data)
            config.trackers = _load_section(toml_data, "trackers", config.trackers)
            config.autoreplay = _load_section(toml_data, "autoreplay", config.autoreplay)
            config.ui = _load_section(toml_data, "ui", config.ui)
            config.logging = _load_section(toml_data, "logging", config.logging)
            config.logging.level = config.logging.level.upper()

        except (OSError, tomllib.TOMLDecodeError, TypeError, AttributeError) as e:
            print(f"Error loading configuration from {config_path}: {e}")
            print("Using default configuration.")
            config = Config()

    # Environment overrides
    data_file = os.environ.get("PLAYWISE_DATA_FILE")
    if data_file:
        config.data.data_file = data_file

    log_level = os.environ.get("PLAYWISE_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
