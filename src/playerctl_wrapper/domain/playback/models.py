"""
Playback domain models.

Contains the track status enum and the per-player metadata record built
from playerctl query output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TrackStatus(Enum):
    """Play status reported by playerctl."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclass
class PlayerMetadata:
    """Metadata reported by a single player.

    Typed fields are None when the player did not report them. ``raw`` holds
    every key/value pair playerctl emitted for the player, undecoded, whether
    or not a typed field was populated from it.
    """

    track_id: Optional[str] = None  # mpris:trackid
    art_url: Optional[str] = None  # mpris:artUrl, percent-decoded
    length: Optional[int] = None  # mpris:length, microseconds
    title: Optional[str] = None
    album: Optional[str] = None
    artist: Optional[str] = None
    album_artist: Optional[str] = None
    url: Optional[str] = None  # xesam:url, percent-decoded
    content_created: Optional[str] = None
    raw: dict[str, str] = field(default_factory=dict)

    @property
    def length_seconds(self) -> Optional[float]:
        """Track length in seconds, or None if the player reported none."""
        if self.length is None:
            return None
        return self.length / 1_000_000
