"""
Track ordering helpers.

Sorting here never touches the catalog; callers get a new list back.
"""

from typing import Callable, Iterable

from .models import Track

SORT_KEYS: dict[str, Callable[[Track], object]] = {
    "title": lambda track: track.title,
    "duration": lambda track: track.duration,
}


def sort_tracks(tracks: Iterable[Track], by: str) -> list[Track]:
    """
    Sort tracks ascending by title or duration.

    The sort is stable, so tracks with equal keys keep their catalog order.

    Args:
        tracks: Tracks to sort (not modified)
        by: Sort key, "title" or "duration"

    Returns:
        New sorted list

    Raises:
        ValueError: If ``by`` is not a known sort key
    """
    key = SORT_KEYS.get(by.lower())
    if key is None:
        raise ValueError(f"Invalid sort key: {by}. Must be one of {sorted(SORT_KEYS)}")
    return sorted(tracks, key=key)


def longest_tracks(tracks: Iterable[Track], limit: int = 5) -> list[Track]:
    """Get the ``limit`` longest tracks, longest first."""
    if limit <= 0:
        return []
    return sorted(tracks, key=lambda track: track.duration, reverse=True)[:limit]
