"""Playback history stack with undo."""

from typing import Optional

from playwise.domain.library.models import Track
from playwise.domain.library.registry import TrackRegistry


class PlaybackHistory:
    """LIFO stack of played track handles.

    Unbounded in memory; persistence keeps only the newest entries.
    """

    def __init__(self, registry: TrackRegistry) -> None:
        self._registry = registry
        self._stack: list[int] = []

    def add(self, track: Track) -> None:
        self._stack.append(track.id)

    def undo_last_play(self) -> Optional[Track]:
        """Pop the most recent play. Returns None when history is empty."""
        while self._stack:
            track = self._registry.get(self._stack.pop())
            if track is not None:
                return track
        return None

    def recently_played(self, n: int = 5) -> list[Track]:
        """Get up to ``n`` most recent plays, newest first."""
        if n <= 0:
            return []

        recent = []
        for handle in reversed(self._stack):
            track = self._registry.get(handle)
            if track is None:
                continue
            recent.append(track)
            if len(recent) >= n:
                break
        return recent

    def entries(self, limit: Optional[int] = None) -> list[Track]:
        """Get the history oldest first, optionally only the newest ``limit`` plays."""
        tracks = [
            track
            for track in (self._registry.get(handle) for handle in self._stack)
            if track is not None
        ]
        if limit is not None:
            tracks = tracks[-limit:] if limit > 0 else []
        return tracks

    def purge(self, track: Track) -> int:
        """Remove every occurrence of a track. Returns how many were removed."""
        before = len(self._stack)
        self._stack = [handle for handle in self._stack if handle != track.id]
        return before - len(self._stack)

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)
