"""
Bounded recency windows.

A recency tracker keeps the last N distinct tracks it was told about, most
recent first. Touching a track that is already in the window moves it to the
front instead of adding a second entry; overflow evicts the oldest entry.
Two trackers exist per session: recently skipped and recently added.
"""

from collections import deque
from typing import Optional

from loguru import logger

from playwise.domain.library.models import Track
from playwise.domain.library.registry import TrackRegistry

DEFAULT_SKIP_CAPACITY = 10
DEFAULT_RECENT_CAPACITY = 15


class RecencyTracker:
    """Most-recent-first, deduplicated, bounded window of track handles.

    Membership checks are linear in the window size, which is a small
    constant.
    """

    def __init__(self, registry: TrackRegistry, capacity: int, name: str = "recency") -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")
        self._registry = registry
        self._capacity = capacity
        self._name = name
        self._handles: deque[int] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def name(self) -> str:
        return self._name

    def touch(self, track: Track) -> None:
        """Mark a track as the most recent entry, evicting the oldest on overflow."""
        try:
            self._handles.remove(track.id)
        except ValueError:
            pass

        self._handles.appendleft(track.id)

        if len(self._handles) > self._capacity:
            evicted = self._handles.pop()
            logger.debug(f"{self._name} window full, evicted track #{evicted}")

    def contains(self, track: Track) -> bool:
        return track.id in self._handles and self._registry.is_live(track.id)

    def window(self, limit: Optional[int] = None) -> list[Track]:
        """Get up to ``limit`` tracks from the front, most recent first."""
        if limit is not None and limit <= 0:
            return []

        tracks = []
        for handle in self._handles:
            track = self._registry.get(handle)
            if track is None:
                continue
            tracks.append(track)
            if limit is not None and len(tracks) >= limit:
                break
        return tracks

    def latest(self) -> Optional[Track]:
        """Get the most recently touched live track."""
        tracks = self.window(1)
        return tracks[0] if tracks else None

    def discard(self, track: Track) -> bool:
        """Drop a track from the window if present."""
        try:
            self._handles.remove(track.id)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._handles.clear()

    def __contains__(self, track: object) -> bool:
        return isinstance(track, Track) and self.contains(track)

    def __len__(self) -> int:
        return len(self._handles)


class SkipTracker(RecencyTracker):
    """Window of recently skipped tracks; these are kept out of auto-replay."""

    def __init__(self, registry: TrackRegistry, capacity: int = DEFAULT_SKIP_CAPACITY) -> None:
        super().__init__(registry, capacity, name="skipped")


class RecentlyAddedTracker(RecencyTracker):
    """Window of recently added tracks."""

    def __init__(self, registry: TrackRegistry, capacity: int = DEFAULT_RECENT_CAPACITY) -> None:
        super().__init__(registry, capacity, name="recently added")

    def filter_by_genre(self, genre: str, limit: int = 5) -> list[Track]:
        """
        Get the most recently added tracks of a genre.

        Genre comparison ignores case. Scans in recency order and stops once
        ``limit`` matches are collected.

        Args:
            genre: Genre to match
            limit: Maximum number of tracks to return

        Returns:
            Matching tracks, most recent first
        """
        if limit <= 0:
            return []

        wanted = genre.casefold()
        matches = []
        for track in self.window():
            if track.genre.casefold() == wanted:
                matches.append(track)
                if len(matches) >= limit:
                    break
        return matches
