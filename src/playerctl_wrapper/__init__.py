"""
playerctl-wrapper - control MPRIS media players through playerctl.

Example:
    >>> import playerctl_wrapper as playerctl
    >>> playerctl.seek(10.0)
    >>> for player, metadata in playerctl.get_metadata().items():
    ...     print(player, metadata.title)
"""

from playerctl_wrapper.domain.playback import (
    CommandError,
    ParseLengthError,
    ParseUrlError,
    PlayerctlError,
    PlayerctlIOError,
    PlayerctlOtherError,
    PlayerMetadata,
    TrackStatus,
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

__version__ = "0.1.0"

__all__ = [
    "PlayerctlError",
    "PlayerctlIOError",
    "CommandError",
    "ParseLengthError",
    "ParseUrlError",
    "PlayerctlOtherError",
    "TrackStatus",
    "PlayerMetadata",
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
