"""Persistence-specific exceptions for error handling."""

from typing import Optional


class PersistenceError(Exception):
    """Base exception for data file operations."""

    pass


class PersistenceCorruptError(PersistenceError):
    """Raised when a data file line cannot be parsed.

    Nothing from the file is applied when this is raised.
    """

    def __init__(self, line_number: int, line: str, reason: str, section: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        self.section = section
        where = f" in {section}" if section else ""
        super().__init__(f"Corrupt data file at line {line_number}{where}: {reason} ({line!r})")
