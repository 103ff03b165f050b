"""
Argument formatting for playerctl commands.

Every constant and function gives the argument sequence passed to the
playerctl binary (the program name itself is added by the runner).
"""

import math
from decimal import Decimal

# Separates player name from position in the position query output
POSITION_DELIMITER = ";-;"

POSITION_FORMAT = "{{playerName}}" + POSITION_DELIMITER + "{{position}}"

PLAY = ("play",)
PAUSE = ("pause",)
PLAY_PAUSE = ("play-pause",)
STOP = ("stop",)
NEXT = ("next",)
PREVIOUS = ("previous",)
STATUS = ("status",)
POSITION_ALL = ("-a", "metadata", "--format", POSITION_FORMAT)
METADATA_ALL = ("-a", "metadata")
METADATA_CURRENT = ("metadata",)


def format_magnitude(value: float) -> str:
    """Format a non-negative number in plain decimal notation.

    Integral values drop the fractional part ("10", not "10.0") and small or
    large values never use an exponent.
    """
    return format(Decimal(repr(float(value))).normalize(), "f")


def format_offset(value: float) -> str:
    """Encode a signed offset as playerctl's ``<magnitude><sign>`` token.

    playerctl reads a trailing ``+`` / ``-`` as a relative change; zero is
    treated as non-negative.

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Offset must be a finite number, got {value!r}")

    if value < 0:
        return f"{format_magnitude(-value)}-"
    return f"{format_magnitude(abs(value))}+"


def seek_args(offset: float) -> tuple[str, ...]:
    """Arguments to seek forward/backward by offset seconds."""
    return ("position", format_offset(offset))


def volume_args(delta: float) -> tuple[str, ...]:
    """Arguments to raise/lower the volume by delta percent."""
    return ("volume", format_offset(delta))
