"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    PlayerctlConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)

# Console
from .console import get_console, get_error_console

# Logging
from .output import setup_loguru

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "PlayerctlConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    # Console
    "get_console",
    "get_error_console",
    # Logging
    "setup_loguru",
]
