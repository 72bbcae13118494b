"""
Cross-cutting utilities for PlayWise.

Contains:
- parsers: Argument and command parsing
"""

from .parsers import parse_command, parse_int, parse_position

__all__ = [
    "parse_command",
    "parse_int",
    "parse_position",
]
