"""Persistence domain - the section-tagged session data file.

This domain handles:
- Encoding and staged decoding of the data file
- Reading and writing it on disk
"""

from .codec import (
    END,
    HISTORY,
    PLAY_COUNTS,
    RATINGS,
    RECENT_ADDED,
    SECTIONS,
    SKIPPED,
    SONGS,
    PersistedState,
    SongRecord,
    decode_state,
    encode_state,
)
from .exceptions import PersistenceCorruptError, PersistenceError
from .store import read_state, write_state

__all__ = [
    # Format
    "END",
    "HISTORY",
    "PLAY_COUNTS",
    "RATINGS",
    "RECENT_ADDED",
    "SECTIONS",
    "SKIPPED",
    "SONGS",
    "PersistedState",
    "SongRecord",
    "decode_state",
    "encode_state",
    # Errors
    "PersistenceCorruptError",
    "PersistenceError",
    # Storage
    "read_state",
    "write_state",
]
