"""Playerctl-specific exceptions for error handling."""

from typing import Optional


class PlayerctlError(Exception):
    """Base exception for playerctl operations."""

    pass


class PlayerctlIOError(PlayerctlError):
    """Raised when playerctl could not be started or communicated with."""

    pass


class CommandError(PlayerctlError):
    """Raised when playerctl ran but exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str, message: Optional[str] = None):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            message or f"Command failed with status {returncode}: {stderr}"
        )


class ParseLengthError(PlayerctlError):
    """Raised when a length or position value is not an unsigned integer."""

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(message or f"Invalid length value: {text!r}")


class ParseUrlError(PlayerctlError):
    """Raised when a percent-encoded value cannot be decoded."""

    def __init__(self, value: str, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid percent-encoded value: {value!r}")


class PlayerctlOtherError(PlayerctlError):
    """Raised for playerctl output that fits no other category."""

    pass
