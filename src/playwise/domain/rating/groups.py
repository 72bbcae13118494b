"""
Star-rating groups.

Groups tracks by a 1-5 star rating. Each group behaves as an ordered set and
a track holds at most one rating at a time: rating it again under a different
value moves it to the new group.
"""

from typing import Iterator, Optional

from loguru import logger

from playwise.domain.library.models import Track
from playwise.domain.library.registry import TrackRegistry

MIN_RATING = 1
MAX_RATING = 5
RATING_VALUES = range(MIN_RATING, MAX_RATING + 1)


class InvalidRatingError(ValueError):
    """Raised when a rating falls outside 1-5."""

    def __init__(self, rating: object):
        self.rating = rating
        super().__init__(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating!r}"
        )


def is_valid_rating(rating: object) -> bool:
    return isinstance(rating, int) and not isinstance(rating, bool) and rating in RATING_VALUES


class RatingGroups:
    """Rating -> tracks mapping, enumerated in ascending rating order."""

    def __init__(self, registry: TrackRegistry) -> None:
        self._registry = registry
        self._groups: dict[int, list[int]] = {rating: [] for rating in RATING_VALUES}
        self._rating_by_handle: dict[int, int] = {}

    def insert(self, track: Track, rating: int) -> None:
        """Add a track to a rating group.

        Raises:
            InvalidRatingError: If rating is not an integer in 1-5
        """
        if not is_valid_rating(rating):
            raise InvalidRatingError(rating)

        previous = self._rating_by_handle.get(track.id)
        if previous == rating:
            return
        if previous is not None:
            self._groups[previous].remove(track.id)
            logger.debug(f"Moving '{track.title}' from {previous} to {rating} stars")

        self._groups[rating].append(track.id)
        self._rating_by_handle[track.id] = rating

    def search(self, rating: int) -> list[Track]:
        """Get tracks with a rating in insertion order. Empty for unused ratings."""
        handles = self._groups.get(rating, [])
        return [
            track
            for track in (self._registry.get(handle) for handle in handles)
            if track is not None
        ]

    def remove(self, track: Track, rating: int) -> bool:
        """Remove a track from one rating group. No-op if it is not there."""
        handles = self._groups.get(rating)
        if not handles or track.id not in handles:
            return False

        handles.remove(track.id)
        del self._rating_by_handle[track.id]
        return True

    def purge(self, track: Track) -> None:
        """Drop a track from whichever group holds it."""
        rating = self._rating_by_handle.get(track.id)
        if rating is not None:
            self.remove(track, rating)

    def rating_of(self, track: Track) -> Optional[int]:
        if not self._registry.is_live(track.id):
            return None
        return self._rating_by_handle.get(track.id)

    def counts_by_rating(self) -> dict[int, int]:
        """Get the number of tracks per rating, 1 through 5 in ascending order."""
        return {rating: len(self.search(rating)) for rating in RATING_VALUES}

    def items(self) -> Iterator[tuple[Track, int]]:
        """Iterate (track, rating) pairs, grouped by ascending rating."""
        for rating in RATING_VALUES:
            for track in self.search(rating):
                yield track, rating

    def clear(self) -> None:
        for handles in self._groups.values():
            handles.clear()
        self._rating_by_handle.clear()

    def __len__(self) -> int:
        return sum(self.counts_by_rating().values())
