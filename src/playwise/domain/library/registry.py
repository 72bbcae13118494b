"""
Track registry - sole owner of track data.

Tracks are addressed everywhere else by their integer handle. Handles come
from an increasing counter and are never reused, so a handle that outlives
its track can only ever resolve to nothing.
"""

from itertools import count
from typing import Iterator, Optional

from loguru import logger

from .models import UNKNOWN_GENRE, Track


class TrackRegistry:
    """Arena of live tracks keyed by handle."""

    def __init__(self) -> None:
        self._tracks: dict[int, Track] = {}
        self._next_id = count(1)

    def create(
        self, title: str, artist: str, genre: str = UNKNOWN_GENRE, duration: int = 0
    ) -> Track:
        """Create and own a new track.

        Raises:
            ValueError: If duration is negative
        """
        if duration < 0:
            raise ValueError(f"Duration must be non-negative, got {duration}")

        track = Track(
            id=next(self._next_id),
            title=title,
            artist=artist,
            genre=genre or UNKNOWN_GENRE,
            duration=int(duration),
        )
        self._tracks[track.id] = track
        return track

    def get(self, handle: int) -> Optional[Track]:
        """Resolve a handle, returning None once the track is gone."""
        return self._tracks.get(handle)

    def is_live(self, handle: int) -> bool:
        return handle in self._tracks

    def release(self, handle: int) -> Optional[Track]:
        """End ownership of a track. Returns the released track, if any."""
        track = self._tracks.pop(handle, None)
        if track is not None:
            logger.debug(f"Released track #{handle}: {track.title}")
        return track

    def clear(self) -> None:
        self._tracks.clear()

    def __len__(self) -> int:
        return len(self._tracks)

    def __contains__(self, track: object) -> bool:
        return isinstance(track, Track) and self._tracks.get(track.id) == track

    def __iter__(self) -> Iterator[Track]:
        return iter(list(self._tracks.values()))
