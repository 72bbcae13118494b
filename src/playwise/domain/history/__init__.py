"""History domain - recency windows and the playback stack.

This domain handles:
- Recently skipped and recently added windows
- Playback history with undo
"""

from .recency import (
    DEFAULT_RECENT_CAPACITY,
    DEFAULT_SKIP_CAPACITY,
    RecencyTracker,
    RecentlyAddedTracker,
    SkipTracker,
)
from .playback import PlaybackHistory

__all__ = [
    "DEFAULT_RECENT_CAPACITY",
    "DEFAULT_SKIP_CAPACITY",
    "RecencyTracker",
    "RecentlyAddedTracker",
    "SkipTracker",
    "PlaybackHistory",
]
