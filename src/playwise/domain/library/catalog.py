"""
Ordered catalog - the active playlist.

Doubly linked sequence of track handles. Links live in two handle-keyed maps
instead of on the tracks themselves, so the registry keeps sole ownership of
track data and a removed handle can never be followed by accident.
"""

from typing import Iterator, Optional

from loguru import logger

from .models import Track
from .registry import TrackRegistry


class OrderedCatalog:
    """Mutable ordered sequence of registry-owned tracks.

    Positions are 0-based. Positional operations with an out-of-range index
    are silent no-ops; callers that need feedback check ``len()`` first.
    """

    def __init__(self, registry: TrackRegistry) -> None:
        self._registry = registry
        self._prev: dict[int, Optional[int]] = {}
        self._next: dict[int, Optional[int]] = {}
        self._head: Optional[int] = None
        self._tail: Optional[int] = None

    @property
    def registry(self) -> TrackRegistry:
        return self._registry

    def append(self, track: Track) -> Track:
        """Link a registered track at the tail. O(1).

        Raises:
            ValueError: If the track is not owned by the registry or is already linked
        """
        if track not in self._registry:
            raise ValueError(f"Track #{track.id} is not in the registry")
        if track.id in self._next:
            raise ValueError(f"Track #{track.id} is already in the catalog")

        self._link_after(self._tail, track.id)
        return track

    def remove_at(self, index: int) -> Optional[Track]:
        """Remove the track at ``index`` and release it from the registry.

        Returns:
            The removed track, or None if the index was out of range
        """
        handle = self._handle_at(index)
        if handle is None:
            return None

        self._unlink(handle)
        track = self._registry.release(handle)
        logger.debug(f"Removed position {index} from catalog (track #{handle})")
        return track

    def move_to(self, from_index: int, to_index: int) -> None:
        """Relocate a track so it ends up at ``to_index`` in the result.

        ``to_index`` is read against the sequence after the track has been
        taken out: ``move_to(0, 2)`` on [A, B, C] gives [B, C, A]. Targets past
        the tail land at the end, targets at or below zero land at the front.
        """
        if from_index == to_index or self._head is None:
            return

        handle = self._handle_at(from_index)
        if handle is None:
            return

        self._unlink(handle)

        if to_index <= 0:
            self._link_after(None, handle)
            return

        anchor = self._handle_at(to_index - 1)
        if anchor is None:
            anchor = self._tail
        self._link_after(anchor, handle)

    def reverse(self) -> None:
        """Reverse the traversal order in one pass."""
        current = self._head
        while current is not None:
            self._prev[current], self._next[current] = (
                self._next[current],
                self._prev[current],
            )
            # after the swap, prev points at the old next element
            current = self._prev[current]
        self._head, self._tail = self._tail, self._head

    def clear(self) -> None:
        """Unlink and release every track."""
        for handle in list(self._next):
            self._registry.release(handle)
        self._prev.clear()
        self._next.clear()
        self._head = self._tail = None

    def snapshot(self) -> list[Track]:
        """Materialize the tracks in order. Does not mutate the catalog."""
        return list(self)

    def track_at(self, index: int) -> Optional[Track]:
        handle = self._handle_at(index)
        return self._registry.get(handle) if handle is not None else None

    def index_of(self, track: Track) -> Optional[int]:
        """Get the 0-based position of a track, or None if not in the catalog."""
        for position, handle in enumerate(self._iter_handles()):
            if handle == track.id:
                return position
        return None

    def iter_backward(self) -> Iterator[Track]:
        """Walk the catalog from tail to head."""
        current = self._tail
        while current is not None:
            track = self._registry.get(current)
            if track is not None:
                yield track
            current = self._prev[current]

    def __iter__(self) -> Iterator[Track]:
        for handle in self._iter_handles():
            track = self._registry.get(handle)
            if track is not None:
                yield track

    def __len__(self) -> int:
        return len(self._next)

    def __contains__(self, track: object) -> bool:
        return isinstance(track, Track) and track.id in self._next

    def _iter_handles(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current
            current = self._next[current]

    def _handle_at(self, index: int) -> Optional[int]:
        """Locate the handle at a position, walking from the nearer end."""
        size = len(self)
        if index < 0 or index >= size:
            return None

        if index <= size // 2:
            current = self._head
            for _ in range(index):
                current = self._next[current]
        else:
            current = self._tail
            for _ in range(size - 1 - index):
                current = self._prev[current]
        return current

    def _link_after(self, anchor: Optional[int], handle: int) -> None:
        """Insert ``handle`` after ``anchor``, or at the head when anchor is None."""
        if anchor is None:
            following = self._head
            self._head = handle
        else:
            following = self._next[anchor]
            self._next[anchor] = handle

        self._prev[handle] = anchor
        self._next[handle] = following

        if following is None:
            self._tail = handle
        else:
            self._prev[following] = handle

    def _unlink(self, handle: int) -> None:
        before = self._prev.pop(handle)
        after = self._next.pop(handle)

        if before is None:
            self._head = after
        else:
            self._next[before] = after

        if after is None:
            self._tail = before
        else:
            self._prev[after] = before
