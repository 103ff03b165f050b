"""Playback domain - playerctl command formatting, invocation and parsing.

This domain handles:
- Formatting control commands (seek/volume offsets) for playerctl
- Running playerctl and classifying failures
- Parsing status, position and metadata output into typed values
"""

# Models and errors
from .exceptions import (
    CommandError,
    ParseLengthError,
    ParseUrlError,
    PlayerctlError,
    PlayerctlIOError,
    PlayerctlOtherError,
)
from .models import PlayerMetadata, TrackStatus

# Player operations
from .player import (
    get_current_metadata,
    get_metadata,
    get_position,
    get_status,
    next_track,
    pause,
    play,
    play_pause,
    previous_track,
    seek,
    set_volume,
    stop,
)
from .runner import CompletedInvocation, check_playerctl_available, run_playerctl

__all__ = [
    # Errors
    "PlayerctlError",
    "PlayerctlIOError",
    "CommandError",
    "ParseLengthError",
    "ParseUrlError",
    "PlayerctlOtherError",
    # Models
    "TrackStatus",
    "PlayerMetadata",
    # Runner
    "CompletedInvocation",
    "check_playerctl_available",
    "run_playerctl",
    # Player
    "play",
    "pause",
    "play_pause",
    "stop",
    "next_track",
    "previous_track",
    "seek",
    "set_volume",
    "get_status",
    "get_position",
    "get_metadata",
    "get_current_metadata",
]
