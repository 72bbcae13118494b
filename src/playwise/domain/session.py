"""
Catalog session - explicit owner of all catalog state.

A CatalogSession is built once per run and passed through the application
context. It owns the registry, the ordered catalog, the title index, the
rating groups, both recency windows, the playback history and the play
counts, and it is the only place where removing a track cascades through
all of them.
"""

from collections import Counter
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from playwise.domain.history.playback import PlaybackHistory
from playwise.domain.history.recency import (
    DEFAULT_RECENT_CAPACITY,
    DEFAULT_SKIP_CAPACITY,
    RecentlyAddedTracker,
    SkipTracker,
)
from playwise.domain.library.catalog import OrderedCatalog
from playwise.domain.library.index import TitleIndex
from playwise.domain.library.models import UNKNOWN_GENRE, Track
from playwise.domain.library.registry import TrackRegistry
from playwise.domain.persistence.codec import END, SECTIONS, PersistedState, SongRecord
from playwise.domain.persistence.exceptions import PersistenceError
from playwise.domain.persistence.store import read_state, write_state
from playwise.domain.playback.autoreplay import (
    CALMING_GENRES,
    DEFAULT_TOP_K,
    apply_replay,
    top_calming,
)
from playwise.domain.rating.groups import RatingGroups

DEFAULT_HISTORY_LIMIT = 50


class DuplicateTitleError(ValueError):
    """Raised when adding a track whose title is already in the catalog."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"A track titled '{title}' is already in the catalog")


class CatalogSession:
    """All catalog state for one interactive session."""

    def __init__(
        self,
        data_file: Optional[Path] = None,
        skip_capacity: int = DEFAULT_SKIP_CAPACITY,
        recent_capacity: int = DEFAULT_RECENT_CAPACITY,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        calming_genres: frozenset[str] = CALMING_GENRES,
        top_k: int = DEFAULT_TOP_K,
    ) -> None:
        self.data_file = data_file
        self.history_limit = history_limit
        self.calming_genres = calming_genres
        self.top_k = top_k

        self.registry = TrackRegistry()
        self.catalog = OrderedCatalog(self.registry)
        self.index = TitleIndex(self.registry)
        self.ratings = RatingGroups(self.registry)
        self.skipped = SkipTracker(self.registry, skip_capacity)
        self.recently_added = RecentlyAddedTracker(self.registry, recent_capacity)
        self.history = PlaybackHistory(self.registry)
        self.play_counts: Counter[str] = Counter()

        self._closed = False

    # Catalog

    def add_track(
        self, title: str, artist: str, genre: str = UNKNOWN_GENRE, duration: int = 0
    ) -> Track:
        """
        Add a track at the end of the catalog.

        The track is indexed by title and becomes the newest entry in the
        recently added window.

        Raises:
            DuplicateTitleError: If the title is already taken
            ValueError: If the title is blank or duration is negative
        """
        track = self._admit(title, artist, genre, duration)
        self.recently_added.touch(track)
        logger.info(f"Added track '{track.title}' ({len(self.catalog)} in catalog)")
        return track

    def remove_track(self, index: int) -> Optional[Track]:
        """
        Remove the track at a 0-based position.

        Removal is the single invalidation event for a track: it is dropped
        from the title index, its rating group, both recency windows and the
        playback history. Play counts are keyed by title and are kept.

        Returns:
            The removed track, or None if the index was out of range
        """
        track = self.catalog.remove_at(index)
        if track is None:
            return None

        self.index.unregister(track)
        self.ratings.purge(track)
        self.skipped.discard(track)
        self.recently_added.discard(track)
        purged = self.history.purge(track)

        logger.info(f"Removed track '{track.title}' (purged {purged} history entries)")
        return track

    def move_track(self, from_index: int, to_index: int) -> None:
        self.catalog.move_to(from_index, to_index)

    def reverse(self) -> None:
        self.catalog.reverse()

    def tracks(self) -> list[Track]:
        return self.catalog.snapshot()

    def find(self, title: str) -> Optional[Track]:
        return self.index.lookup(title)

    def __len__(self) -> int:
        return len(self.catalog)

    # Ratings

    def rate(self, title: str, rating: int) -> Optional[Track]:
        """
        Rate a track by title.

        Returns:
            The rated track, or None if no track has that title

        Raises:
            InvalidRatingError: If rating is outside 1-5
        """
        track = self.find(title)
        if track is None:
            return None
        self.ratings.insert(track, rating)
        return track

    def unrate(self, title: str) -> Optional[Track]:
        """Clear a track's rating. Returns the track if it had one."""
        track = self.find(title)
        if track is None:
            return None

        rating = self.ratings.rating_of(track)
        if rating is None:
            return None
        self.ratings.remove(track, rating)
        return track

    def tracks_with_rating(self, rating: int) -> list[Track]:
        return self.ratings.search(rating)

    def rating_counts(self) -> dict[int, int]:
        return self.ratings.counts_by_rating()

    # Playback

    def record_play(self, track: Track) -> None:
        """Record a play event: push to history and bump the play count."""
        self.history.add(track)
        self.play_counts[track.title] += 1

    def play_title(self, title: str) -> Optional[Track]:
        track = self.find(title)
        if track is not None:
            self.record_play(track)
        return track

    def play_count(self, title: str) -> int:
        return self.play_counts.get(title, 0)

    def undo_last_play(self) -> Optional[Track]:
        """Pop the last play from history. Play counts are not decremented."""
        return self.history.undo_last_play()

    def recently_played(self, n: int = 5) -> list[Track]:
        return self.history.recently_played(n)

    def select_auto_replay(self) -> list[Track]:
        """Choose the calming tracks auto-replay would play, without playing them."""
        return top_calming(
            self.tracks(),
            self.play_counts,
            self.skipped,
            k=self.top_k,
            calming_genres=self.calming_genres,
        )

    def auto_replay(self) -> list[Track]:
        """Select and play the top calming tracks."""
        return apply_replay(self.select_auto_replay(), self.history, self.play_counts)

    # Recency windows

    def skip_title(self, title: str) -> Optional[Track]:
        track = self.find(title)
        if track is not None:
            self.skipped.touch(track)
            logger.debug(f"Skipped '{title}' ({len(self.skipped)}/{self.skipped.capacity})")
        return track

    def clear_skips(self) -> None:
        self.skipped.clear()
        logger.info("Cleared skip history")

    def clear_recently_added(self) -> None:
        self.recently_added.clear()
        logger.info("Cleared recently added history")

    # Persistence

    def to_state(self) -> PersistedState:
        """Capture the session as a PersistedState."""
        return PersistedState(
            songs=[
                SongRecord(t.title, t.artist, t.genre, t.duration) for t in self.catalog
            ],
            play_counts=dict(self.play_counts),
            ratings=[(track.title, rating) for track, rating in self.ratings.items()],
            history=[t.title for t in self.history.entries(self.history_limit)],
            skipped=[t.title for t in self.skipped.window()],
            recent_added=[t.title for t in self.recently_added.window()],
        )

    def restore(self, state: PersistedState) -> None:
        """
        Replace the session contents with a PersistedState.

        Songs are admitted first so every other section can resolve titles.
        Titles that do not resolve are skipped.
        """
        self.reset()

        for song in state.songs:
            try:
                self._admit(song.title, song.artist, song.genre, song.duration)
            except ValueError as e:
                logger.warning(f"Skipping stored song: {e}")

        self.play_counts.update(state.play_counts)

        for title, rating in state.ratings:
            track = self.find(title)
            if track is not None:
                self.ratings.insert(track, rating)

        for track in self._resolve(state.history):
            self.history.add(track)

        # windows are stored most recent first; replay oldest first
        for track in reversed(self._resolve(state.skipped)):
            self.skipped.touch(track)
        for track in reversed(self._resolve(state.recent_added)):
            self.recently_added.touch(track)

        logger.info(f"Restored session with {len(self.catalog)} tracks")

    def reset(self) -> None:
        """Drop every track and all derived state."""
        self.catalog.clear()
        self.registry.clear()
        self.index.clear()
        self.ratings.clear()
        self.skipped.clear()
        self.recently_added.clear()
        self.history.clear()
        self.play_counts.clear()

    def load(self) -> bool:
        """
        Load the data file into the session.

        Returns:
            True if a data file was loaded

        Raises:
            PersistenceCorruptError: If the file is malformed (session untouched)
            PersistenceError: If the file cannot be read
        """
        if self.data_file is None:
            return False

        state = read_state(self.data_file)
        if state is None:
            return False

        self.restore(state)
        return True

    def save(self) -> bool:
        """Write the session to the data file. Returns True on success."""
        if self.data_file is None:
            return False

        try:
            write_state(self.data_file, self.to_state())
        except PersistenceError as e:
            logger.error(str(e))
            return False
        return True

    def close(self) -> None:
        """Flush to the data file. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self.save():
            logger.info(f"Session saved to {self.data_file}")

    def __enter__(self) -> "CatalogSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _admit(self, title: str, artist: str, genre: str, duration: int) -> Track:
        title = title.strip()
        if not title:
            raise ValueError("Track title cannot be empty")
        if title in SECTIONS or title == END:
            raise ValueError(f"{title} is reserved by the data file format")
        if any(ch in value for value in (title, artist, genre) for ch in "\r\n"):
            raise ValueError("Track fields cannot contain line breaks")
        # the data file splits song lines from the right
        if "," in artist or "," in genre:
            raise ValueError("Artist and genre cannot contain commas")
        if self.find(title) is not None:
            raise DuplicateTitleError(title)

        track = self.registry.create(title, artist.strip(), genre.strip(), duration)
        self.catalog.append(track)
        self.index.register(track)
        return track

    def _resolve(self, titles: Iterable[str]) -> list[Track]:
        tracks = []
        for title in titles:
            track = self.find(title)
            if track is None:
                logger.debug(f"Skipping unknown title '{title}' in stored data")
                continue
            tracks.append(track)
        return tracks
