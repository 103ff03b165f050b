"""
Subprocess invocation of the playerctl binary.
"""

import subprocess
from typing import NamedTuple, Optional, Sequence

from loguru import logger

from .exceptions import PlayerctlIOError

PLAYERCTL_BIN = "playerctl"


class CompletedInvocation(NamedTuple):
    """Exit status and captured output of one playerctl run."""

    returncode: int
    stdout: bytes
    stderr: bytes


def check_playerctl_available(executable: str = PLAYERCTL_BIN) -> bool:
    """Check if playerctl is available on the system."""
    try:
        result = subprocess.run(
            [executable, "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def run_playerctl(
    args: Sequence[str],
    executable: str = PLAYERCTL_BIN,
    timeout: Optional[float] = None,
) -> CompletedInvocation:
    """Run playerctl with args and capture its output.

    A non-zero exit status is returned, not raised; classifying it is up to
    the caller.

    Args:
        args: Arguments following the program name
        executable: playerctl binary name or path
        timeout: Seconds to wait before giving up (None waits forever)

    Returns:
        CompletedInvocation with raw stdout/stderr bytes

    Raises:
        PlayerctlIOError: If the program could not be started or timed out
    """
    cmd = [executable, *args]
    logger.debug(f"Running: {cmd}")

    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise PlayerctlIOError(f"{executable} timed out after {timeout}s") from e
    except OSError as e:
        raise PlayerctlIOError(f"Failed to run {executable}: {e}") from e

    logger.debug(f"{executable} exited with status {result.returncode}")
    return CompletedInvocation(result.returncode, result.stdout, result.stderr)
