"""
System snapshot assembly.

Collects the analytics shown by the ``snapshot`` command into one immutable
value so rendering stays separate from computation.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from .models import Track
from .ordering import longest_tracks


@dataclass(frozen=True)
class CatalogSnapshot:
    """Point-in-time analytics for the catalog."""

    total_tracks: int
    total_duration: int  # seconds
    longest: list[Track]
    recently_played: list[Track]
    rating_counts: dict[int, int]
    play_counts: list[tuple[str, int]]  # (title, plays), most played first


def build_snapshot(
    tracks: Iterable[Track],
    recently_played: Iterable[Track],
    rating_counts: Mapping[int, int],
    play_counts: Mapping[str, int],
    limit: int = 5,
) -> CatalogSnapshot:
    """
    Build a catalog snapshot.

    Args:
        tracks: Catalog tracks in playlist order
        recently_played: Most recent plays, newest first
        rating_counts: Rating -> number of tracks
        play_counts: Title -> play count
        limit: How many longest tracks to include

    Returns:
        CatalogSnapshot with play counts ordered by count desc, then title
    """
    tracks = list(tracks)
    ranked_counts = sorted(play_counts.items(), key=lambda item: (-item[1], item[0]))

    return CatalogSnapshot(
        total_tracks=len(tracks),
        total_duration=sum(track.duration for track in tracks),
        longest=longest_tracks(tracks, limit),
        recently_played=list(recently_played),
        rating_counts=dict(sorted(rating_counts.items())),
        play_counts=ranked_counts,
    )
