"""
Player control and queries through playerctl.

Functional approach: every operation is one independent playerctl run with
no state kept between calls. ``executable`` and ``timeout`` can be given per
call to override the defaults.
"""

from typing import Optional, Sequence

from loguru import logger

from . import commands
from .models import PlayerMetadata, TrackStatus
from .parser import (
    check_success,
    decode_stdout,
    parse_metadata,
    parse_positions,
    parse_status,
)
from .runner import PLAYERCTL_BIN, run_playerctl


def _run_command(
    args: Sequence[str], executable: str, timeout: Optional[float]
) -> None:
    check_success(run_playerctl(args, executable=executable, timeout=timeout))


def _run_query(args: Sequence[str], executable: str, timeout: Optional[float]) -> str:
    return decode_stdout(run_playerctl(args, executable=executable, timeout=timeout))


def play(*, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None) -> None:
    """Command the player to play."""
    _run_command(commands.PLAY, executable, timeout)


def pause(*, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None) -> None:
    """Command the player to pause."""
    _run_command(commands.PAUSE, executable, timeout)


def play_pause(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> None:
    """Command the player to toggle between play/pause."""
    _run_command(commands.PLAY_PAUSE, executable, timeout)


def stop(*, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None) -> None:
    """Command the player to stop."""
    _run_command(commands.STOP, executable, timeout)


def next_track(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> None:
    """Command the player to skip to the next track."""
    _run_command(commands.NEXT, executable, timeout)


def previous_track(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> None:
    """Command the player to skip to the previous track."""
    _run_command(commands.PREVIOUS, executable, timeout)


def seek(
    offset: float,
    *,
    executable: str = PLAYERCTL_BIN,
    timeout: Optional[float] = None,
) -> None:
    """Seek forward (positive) or backward (negative) by offset seconds.

    Raises:
        ValueError: If offset is not finite
        CommandError: If playerctl rejects the command
        PlayerctlIOError: If playerctl could not be run
    """
    _run_command(commands.seek_args(offset), executable, timeout)


def set_volume(
    delta: float,
    *,
    executable: str = PLAYERCTL_BIN,
    timeout: Optional[float] = None,
) -> None:
    """Raise (positive) or lower (negative) the volume by delta percent."""
    _run_command(commands.volume_args(delta), executable, timeout)


def get_status(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> TrackStatus:
    """Get the play status of the active player."""
    return parse_status(_run_query(commands.STATUS, executable, timeout))


def get_position(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> dict[str, int]:
    """Get the playback position of every player, in microseconds.

    Returns:
        Mapping of player name to position

    Raises:
        ParseLengthError: If a reported position is not an unsigned integer
    """
    positions = parse_positions(_run_query(commands.POSITION_ALL, executable, timeout))
    logger.debug(f"Parsed positions for {len(positions)} player(s)")
    return positions


def get_metadata(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> dict[str, PlayerMetadata]:
    """Get metadata for the current track of every player.

    Returns:
        Mapping of player name to PlayerMetadata

    Raises:
        CommandError: If playerctl exits with an error (e.g. no players)
        ParseLengthError: If mpris:length is malformed
        ParseUrlError: If a URL field has a malformed percent escape
    """
    players = parse_metadata(_run_query(commands.METADATA_ALL, executable, timeout))
    logger.debug(f"Parsed metadata for {len(players)} player(s)")
    return players


def get_current_metadata(
    *, executable: str = PLAYERCTL_BIN, timeout: Optional[float] = None
) -> Optional[tuple[str, PlayerMetadata]]:
    """Get metadata for the current track of the active player.

    Returns:
        (player name, PlayerMetadata), or None if playerctl printed no
        usable lines
    """
    players = parse_metadata(
        _run_query(commands.METADATA_CURRENT, executable, timeout)
    )
    return next(iter(players.items()), None)
