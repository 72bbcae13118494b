"""
Flat-file codec for session data.

Line-oriented, section-tagged text:

    [SONGS]         title,artist,genre,duration
    [PLAY_COUNTS]   title,count
    [RATINGS]       title,rating
    [HISTORY]       title            (oldest first)
    [SKIPPED]       title            (most recent first)
    [RECENT_ADDED]  title            (most recent first)
    [END]

Fields are not escaped. Lines are split from the right, so a title may
contain commas but artist and genre may not.

Decoding is staged: the whole text becomes a PersistedState before anything
touches a session, so a corrupt line never leaves a half-applied load.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from playwise.domain.rating.groups import is_valid_rating

from .exceptions import PersistenceCorruptError

SONGS = "[SONGS]"
PLAY_COUNTS = "[PLAY_COUNTS]"
RATINGS = "[RATINGS]"
HISTORY = "[HISTORY]"
SKIPPED = "[SKIPPED]"
RECENT_ADDED = "[RECENT_ADDED]"
END = "[END]"

SECTIONS = (SONGS, PLAY_COUNTS, RATINGS, HISTORY, SKIPPED, RECENT_ADDED)
TITLE_SECTIONS = (HISTORY, SKIPPED, RECENT_ADDED)


@dataclass(frozen=True)
class SongRecord:
    """A persisted track's metadata."""

    title: str
    artist: str
    genre: str
    duration: int


@dataclass
class PersistedState:
    """Everything the data file holds, with titles standing in for tracks."""

    songs: list[SongRecord] = field(default_factory=list)
    play_counts: dict[str, int] = field(default_factory=dict)
    ratings: list[tuple[str, int]] = field(default_factory=list)
    history: list[str] = field(default_factory=list)  # oldest first
    skipped: list[str] = field(default_factory=list)  # most recent first
    recent_added: list[str] = field(default_factory=list)  # most recent first


def encode_state(state: PersistedState) -> str:
    """Serialize a PersistedState to data file text."""
    lines = [SONGS]
    lines.extend(f"{s.title},{s.artist},{s.genre},{s.duration}" for s in state.songs)

    lines.append(PLAY_COUNTS)
    lines.extend(f"{title},{count}" for title, count in state.play_counts.items())

    lines.append(RATINGS)
    lines.extend(f"{title},{rating}" for title, rating in state.ratings)

    lines.append(HISTORY)
    lines.extend(state.history)

    lines.append(SKIPPED)
    lines.extend(state.skipped)

    lines.append(RECENT_ADDED)
    lines.extend(state.recent_added)

    lines.append(END)
    return "\n".join(lines) + "\n"


def _parse_int(value: str, line_number: int, line: str, section: str, what: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise PersistenceCorruptError(line_number, line, f"invalid {what} {value!r}", section)


def _split_fields(line: str, count: int, line_number: int, section: str) -> list[str]:
    fields = line.rsplit(",", count - 1)
    if len(fields) != count:
        raise PersistenceCorruptError(
            line_number, line, f"expected {count} fields, got {len(fields)}", section
        )
    return fields


def decode_state(text: str) -> PersistedState:
    """
    Parse data file text into a PersistedState.

    Blank lines are ignored, unknown sections are skipped with a warning and
    anything after [END] is ignored.

    Raises:
        PersistenceCorruptError: On a malformed line (missing fields, bad or
            negative numbers, rating outside 1-5)
    """
    state = PersistedState()
    section: Optional[str] = None
    saw_end = False

    # only "\n" ends a line; fields may hold other Unicode separators
    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.rstrip("\r")
        if not line.strip():
            continue

        if line == END:
            saw_end = True
            break
        if line in SECTIONS:
            section = line
            continue
        # a bracketed title like "[Intro]" is data inside title-only sections
        if line.startswith("[") and line.endswith("]") and section not in TITLE_SECTIONS:
            logger.warning(f"Skipping unknown data file section {line} (line {line_number})")
            section = line
            continue

        if section is None:
            logger.warning(f"Ignoring data file line {line_number} outside any section")
            continue

        if section == SONGS:
            title, artist, genre, duration_str = _split_fields(line, 4, line_number, section)
            duration = _parse_int(duration_str, line_number, line, section, "duration")
            if duration < 0:
                raise PersistenceCorruptError(line_number, line, "negative duration", section)
            state.songs.append(SongRecord(title, artist, genre, duration))

        elif section == PLAY_COUNTS:
            title, count_str = _split_fields(line, 2, line_number, section)
            count = _parse_int(count_str, line_number, line, section, "play count")
            if count < 0:
                raise PersistenceCorruptError(line_number, line, "negative play count", section)
            state.play_counts[title] = count

        elif section == RATINGS:
            title, rating_str = _split_fields(line, 2, line_number, section)
            rating = _parse_int(rating_str, line_number, line, section, "rating")
            if not is_valid_rating(rating):
                raise PersistenceCorruptError(line_number, line, f"rating {rating} out of range", section)
            state.ratings.append((title, rating))

        elif section == HISTORY:
            state.history.append(line)

        elif section == SKIPPED:
            state.skipped.append(line)

        elif section == RECENT_ADDED:
            state.recent_added.append(line)

    if not saw_end:
        logger.warning("Data file has no [END] marker; it may have been truncated")

    return state
