"""
Argument and command parsing utilities.

Cross-cutting utilities for parsing user input and command arguments.
"""

import shlex
from typing import List, Optional


def parse_command(user_input: str) -> tuple[str, List[str]]:
    """
    Parse user input into command and arguments.

    Quoted arguments keep their spaces, so titles can be passed as
    ``play "Rainy Day"``. Unbalanced quotes fall back to whitespace splitting.

    Args:
        user_input: Raw user input string

    Returns:
        Tuple of (command, args) where command is lowercase and args is a list

    Example:
        'rate "Rainy Day" 5' -> ('rate', ['Rainy Day', '5'])
    """
    try:
        parts = shlex.split(user_input)
    except ValueError:
        parts = user_input.split()

    if not parts:
        return "", []

    return parts[0].lower(), parts[1:]


def parse_int(value: str) -> Optional[int]:
    """Parse an integer argument, returning None if it is not one."""
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None


def parse_position(value: str) -> Optional[int]:
    """
    Convert a 1-based position typed by the user to a 0-based index.

    IMPORTANT: Positions are 1-indexed at the command line (as displayed by
    'list') and 0-indexed in the catalog.

    Returns:
        0-based index, or None if the value is not a positive integer
    """
    position = parse_int(value)
    if position is None or position < 1:
        return None
    return position - 1


__all__ = ["parse_command", "parse_int", "parse_position"]
