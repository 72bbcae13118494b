"""
Catalog domain models.

Contains data structures for representing tracks in the catalog.
"""

from dataclasses import dataclass

UNKNOWN_GENRE = "Unknown"


@dataclass(frozen=True)
class Track:
    """Represents a track in the catalog.

    The id is the registry handle assigned when the track is created. Every
    structure other than the registry stores this handle rather than the
    track itself.
    """

    id: int
    title: str
    artist: str
    genre: str = UNKNOWN_GENRE
    duration: int = 0  # in seconds


def get_display_name(track: Track) -> str:
    """Get a display-friendly name for the track."""
    if track.artist and track.title:
        return f"{track.title} by {track.artist}"
    return track.title or "<Unknown Track>"


def format_duration(seconds: int) -> str:
    """Format duration in seconds as M:SS (or H:MM:SS)."""
    if seconds <= 0:
        return "0:00"

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
