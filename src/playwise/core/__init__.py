"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)

Clean architecture principle: The core layer has no dependencies on
domain or application layers.
"""

# Configuration
from .config import (
    Config,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_data_file_path,
    get_log_file_path,
    create_default_config,
    ensure_directories,
)

# Output
from .output import log, set_quiet, setup_loguru

# Console
from .console import configure_console, get_console, safe_print

__all__ = [
    # Config
    "Config",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_data_file_path",
    "get_log_file_path",
    "create_default_config",
    "ensure_directories",
    # Output
    "log",
    "set_quiet",
    "setup_loguru",
    # Console
    "configure_console",
    "get_console",
    "safe_print",
]
