"""
Auto-replay selection.

When the playlist runs out, the most-played calming tracks are replayed.
Selection is pure: it reads the catalog, play counts and the skip window and
never mutates them. Only ``apply_replay`` records plays.
"""

from typing import Iterable, Mapping, MutableMapping, Sequence

from loguru import logger

from playwise.domain.history.playback import PlaybackHistory
from playwise.domain.history.recency import SkipTracker
from playwise.domain.library.models import Track

CALMING_GENRES = frozenset({"lo-fi", "lofi", "jazz", "classical", "ambient", "chill"})

DEFAULT_TOP_K = 3


def normalize_genres(genres: Iterable[str]) -> frozenset[str]:
    """Casefold a genre list into a lookup set."""
    return frozenset(genre.strip().casefold() for genre in genres if genre.strip())


def is_calming(genre: str, calming_genres: frozenset[str] = CALMING_GENRES) -> bool:
    """Check whether a genre counts as calming (case-insensitive)."""
    return genre.strip().casefold() in calming_genres


def top_calming(
    all_tracks: Sequence[Track],
    play_counts: Mapping[str, int],
    skip_tracker: SkipTracker,
    k: int = DEFAULT_TOP_K,
    calming_genres: frozenset[str] = CALMING_GENRES,
) -> list[Track]:
    """
    Pick the most-played calming tracks that were not recently skipped.

    Ranking is by play count descending. The sort is stable, so ties keep
    their order in ``all_tracks``.

    Args:
        all_tracks: Candidate tracks in catalog order
        play_counts: Title -> play count (missing titles count as 0)
        skip_tracker: Tracks in this window are excluded
        k: Maximum number of tracks to return
        calming_genres: Casefolded genre names that qualify

    Returns:
        Up to ``k`` tracks, empty when nothing qualifies
    """
    if k <= 0:
        return []

    candidates = [
        track
        for track in all_tracks
        if is_calming(track.genre, calming_genres) and not skip_tracker.contains(track)
    ]

    if not candidates:
        logger.info("No calming tracks eligible for auto-replay")
        return []

    ranked = sorted(candidates, key=lambda track: play_counts.get(track.title, 0), reverse=True)
    return ranked[:k]


def apply_replay(
    selected: Iterable[Track],
    history: PlaybackHistory,
    play_counts: MutableMapping[str, int],
) -> list[Track]:
    """
    Record one play per selected track.

    Args:
        selected: Tracks chosen by ``top_calming``
        history: Playback history to push onto
        play_counts: Title -> play count to increment

    Returns:
        The tracks that were played, in order
    """
    played = []
    for track in selected:
        history.add(track)
        play_counts[track.title] = play_counts.get(track.title, 0) + 1
        played.append(track)

    if played:
        logger.info(f"Auto-replay played {len(played)} calming tracks")
    return played
