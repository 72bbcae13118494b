"""
Data file storage.

Reads and writes the session data file. Encoding and decoding live in
``codec``; this module only deals with the filesystem.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from .codec import PersistedState, decode_state, encode_state
from .exceptions import PersistenceError


def read_state(path: Path) -> Optional[PersistedState]:
    """
    Load a PersistedState from a data file.

    Args:
        path: Data file location

    Returns:
        Decoded state, or None if the file does not exist

    Raises:
        PersistenceCorruptError: If a line is malformed
        PersistenceError: If the file exists but cannot be read
    """
    if not path.exists():
        logger.info(f"No data file at {path}, starting fresh")
        return None

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Could not read data file {path}: {e}") from e

    state = decode_state(text)
    logger.info(
        f"Loaded data file {path}: {len(state.songs)} songs, "
        f"{len(state.ratings)} ratings, {len(state.history)} history entries"
    )
    return state


def write_state(path: Path, state: PersistedState) -> None:
    """
    Write a PersistedState to a data file.

    The text goes to a sibling temp file first and is then moved into place,
    so a crash mid-write leaves the previous file intact.

    Raises:
        PersistenceError: If the file cannot be written
    """
    temp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(encode_state(state))
        os.replace(temp_path, path)
    except OSError as e:
        raise PersistenceError(f"Could not write data file {path}: {e}") from e

    logger.debug(f"Saved data file {path} ({len(state.songs)} songs)")
