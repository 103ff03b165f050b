"""
Parsing of playerctl output into typed values.

All knowledge of playerctl's line and field layout lives here:

- status query: a single word ("Playing", "Paused", "Stopped")
- position query: one ``<player><delimiter><microseconds>`` line per player
- metadata query: one ``<player> <key> <value...>`` line per field, where
  playerctl pads the key column with spaces and the value may contain spaces
"""

import re
from typing import Callable, Iterator, Optional
from urllib.parse import unquote_to_bytes

from .commands import POSITION_DELIMITER
from .exceptions import (
    CommandError,
    ParseLengthError,
    ParseUrlError,
    PlayerctlOtherError,
)
from .models import PlayerMetadata, TrackStatus
from .runner import CompletedInvocation

MAX_U64 = 2**64 - 1

_UNSIGNED_INT = re.compile(r"[0-9]+")

# '%' not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_stderr(result: CompletedInvocation) -> str:
    """Decode stderr for error reporting, replacing undecodable bytes."""
    return result.stderr.decode("utf-8", errors="replace")


def check_success(result: CompletedInvocation) -> None:
    """Raise CommandError unless the invocation exited with status 0."""
    if result.returncode != 0:
        raise CommandError(result.returncode, decode_stderr(result))


def decode_stdout(result: CompletedInvocation) -> str:
    """Check the exit status and return stdout as text.

    Raises:
        CommandError: If playerctl exited with a non-zero status
        PlayerctlOtherError: If stdout is not valid UTF-8
    """
    check_success(result)
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PlayerctlOtherError(f"playerctl output is not valid UTF-8: {e}") from e


def parse_unsigned(text: str) -> int:
    """Parse a non-negative integer that fits in 64 bits.

    Raises:
        ParseLengthError: If text is not a plain unsigned decimal integer
    """
    stripped = text.strip()
    if not _UNSIGNED_INT.fullmatch(stripped):
        raise ParseLengthError(text)

    value = int(stripped)
    if value > MAX_U64:
        raise ParseLengthError(text, f"Length value out of range: {text!r}")
    return value


def percent_decode(value: str) -> str:
    """Strictly decode a percent-encoded string.

    Unlike urllib's unquote, malformed escapes and byte sequences that are
    not UTF-8 are errors rather than passed through or replaced. ``+`` is
    left alone.

    Raises:
        ParseUrlError: If the value cannot be decoded
    """
    if _BAD_ESCAPE.search(value):
        raise ParseUrlError(value)

    try:
        return unquote_to_bytes(value).decode("utf-8")
    except UnicodeError as e:
        raise ParseUrlError(value) from e


def iter_lines(stdout: str) -> Iterator[str]:
    """Yield newline-separated lines without their line terminators."""
    for line in stdout.split("\n"):
        yield line.rstrip("\r")


def parse_status(stdout: str) -> TrackStatus:
    """Map status text to TrackStatus.

    Anything other than exactly "Playing" or "Paused" is STOPPED.
    """
    text = stdout.strip()
    if text == TrackStatus.PLAYING.value:
        return TrackStatus.PLAYING
    if text == TrackStatus.PAUSED.value:
        return TrackStatus.PAUSED
    return TrackStatus.STOPPED


def parse_positions(
    stdout: str, delimiter: str = POSITION_DELIMITER
) -> dict[str, int]:
    """Parse ``<player><delimiter><position>`` lines into a mapping.

    Lines without the delimiter are skipped. A repeated player name keeps the
    last position seen.

    Raises:
        ParseLengthError: If a position is not an unsigned integer
    """
    positions: dict[str, int] = {}
    for line in iter_lines(stdout):
        player, sep, position = line.partition(delimiter)
        if not sep:
            continue
        positions[player] = parse_unsigned(position)
    return positions


def _set_text(field_name: str) -> Callable[[PlayerMetadata, str], None]:
    def apply(metadata: PlayerMetadata, value: str) -> None:
        setattr(metadata, field_name, value)

    return apply


def _set_url(field_name: str) -> Callable[[PlayerMetadata, str], None]:
    def apply(metadata: PlayerMetadata, value: str) -> None:
        setattr(metadata, field_name, percent_decode(value))

    return apply


def _set_length(metadata: PlayerMetadata, value: str) -> None:
    metadata.length = parse_unsigned(value)


# Native MPRIS key -> typed field setter
METADATA_FIELDS: dict[str, Callable[[PlayerMetadata, str], None]] = {
    "mpris:artUrl": _set_url("art_url"),
    "mpris:length": _set_length,
    "mpris:trackid": _set_text("track_id"),
    "xesam:album": _set_text("album"),
    "xesam:albumArtist": _set_text("album_artist"),
    "xesam:artist": _set_text("artist"),
    "xesam:contentCreated": _set_text("content_created"),
    "xesam:title": _set_text("title"),
    "xesam:url": _set_url("url"),
}


def split_metadata_line(line: str) -> Optional[tuple[str, str, str]]:
    """Split a metadata line into (player, key, value).

    Returns None when the line has no player/key separator or no key/value
    separator.
    """
    player, sep, rest = line.partition(" ")
    if not sep:
        return None

    key, sep, value = rest.lstrip().partition(" ")
    if not sep:
        return None

    return player, key, value.lstrip()


def parse_metadata(stdout: str) -> dict[str, PlayerMetadata]:
    """Parse ``-a metadata`` output into a mapping of player -> metadata.

    Records are created on the first line naming a player; later lines for
    the same player add to that record. Every pair lands in ``raw``; known
    keys also fill their typed field.

    Raises:
        ParseLengthError: If mpris:length is not an unsigned integer
        ParseUrlError: If a URL value has a malformed percent escape
    """
    players: dict[str, PlayerMetadata] = {}
    for line in iter_lines(stdout):
        parts = split_metadata_line(line)
        if parts is None:
            continue

        player, key, value = parts
        metadata = players.setdefault(player, PlayerMetadata())
        metadata.raw[key] = value

        apply = METADATA_FIELDS.get(key)
        if apply is not None:
            apply(metadata, value)

    return players
