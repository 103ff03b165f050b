"""
Configuration management for playerctl-wrapper
"""

import math
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from playerctl_wrapper.domain.playback.runner import PLAYERCTL_BIN


@dataclass
class PlayerctlConfig:
    """Configuration for running the playerctl binary."""

    executable: str = PLAYERCTL_BIN
    timeout: Optional[float] = None  # Seconds; None waits forever

    def validate(self) -> None:
        """Validate playerctl configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.executable.strip():
            raise ValueError("playerctl executable must not be empty")
        if self.timeout is None:
            return
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ValueError(f"timeout must be a number, got {self.timeout!r}")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(
                f"timeout must be a positive finite number, got {self.timeout}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/playerctl-wrapper/playerctl-wrapper.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    playerctl: PlayerctlConfig = field(default_factory=PlayerctlConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "playerctl-wrapper"
    return Path.home() / ".config" / "playerctl-wrapper"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the current working directory first, then
    XDG_CONFIG_HOME/playerctl-wrapper (or ~/.config/playerctl-wrapper).
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "playerctl-wrapper"
    return Path.home() / ".local" / "share" / "playerctl-wrapper"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring a configured override."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "playerctl-wrapper.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# playerctl-wrapper Configuration

[playerctl]
# playerctl binary name or path
executable = "playerctl"

# Seconds to wait for playerctl before giving up (unset waits forever)
# timeout = 5.0

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/playerctl-wrapper/playerctl-wrapper.log)
# log_file = "/path/to/custom/playerctl-wrapper.log"

# Also output logs to stderr (useful for debugging)
console_output = false
""".strip()


def _apply_env_overrides(config: Config) -> None:
    executable = os.environ.get("PLAYERCTL_EXECUTABLE")
    if executable:
        config.playerctl.executable = executable

    timeout = os.environ.get("PLAYERCTL_TIMEOUT")
    if timeout:
        try:
            config.playerctl.timeout = float(timeout)
        except ValueError:
            logger.warning(f"Ignoring invalid PLAYERCTL_TIMEOUT: {timeout!r}")


def _finalize(config: Config) -> Config:
    """Apply environment overrides, then fall back to defaults if invalid."""
    _apply_env_overrides(config)

    try:
        config.playerctl.validate()
    except ValueError as e:
        logger.warning(f"Invalid playerctl configuration: {e}")
        logger.warning("Using default playerctl configuration.")
        config.playerctl = PlayerctlConfig()

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - PLAYERCTL_EXECUTABLE
    - PLAYERCTL_TIMEOUT

    Args:
        config_path: Explicit config file (default: see get_config_path)
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        # Create config directory and default file
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
        return _finalize(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to load configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        return _finalize(Config())

    config = Config()

    if "playerctl" in toml_data:
        playerctl_data = toml_data["playerctl"]
        config.playerctl = PlayerctlConfig(
            executable=str(
                playerctl_data.get("executable", config.playerctl.executable)
            ),
            timeout=playerctl_data.get("timeout", config.playerctl.timeout),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return _finalize(config)
