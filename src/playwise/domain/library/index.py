"""Title index - O(1) track lookup by title."""

from typing import Optional

from .models import Track
from .registry import TrackRegistry


class TitleIndex:
    """Maps titles to track handles.

    Lookups resolve through the registry, so an entry whose track has been
    released reads as a miss even before it is unregistered.
    """

    def __init__(self, registry: TrackRegistry) -> None:
        self._registry = registry
        self._handles: dict[str, int] = {}

    def register(self, track: Track) -> None:
        """Insert or overwrite the mapping for the track's title."""
        self._handles[track.title] = track.id

    def lookup(self, title: str) -> Optional[Track]:
        """Find a live track by exact title. Never raises."""
        handle = self._handles.get(title)
        if handle is None:
            return None
        return self._registry.get(handle)

    def unregister(self, track: Track) -> bool:
        """Drop the title entry if it still points at this track."""
        if self._handles.get(track.title) != track.id:
            return False
        del self._handles[track.title]
        return True

    def clear(self) -> None:
        self._handles.clear()

    def __contains__(self, title: object) -> bool:
        return isinstance(title, str) and self.lookup(title) is not None

    def __len__(self) -> int:
        return len(self._handles)
