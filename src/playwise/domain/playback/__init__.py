"""Playback domain - sequential player and auto-replay.

This domain handles:
- Player state (stopped / playing at an index)
- Next, previous and play-all transitions
- Calming-track auto-replay selection when the playlist ends
"""

# Player
from .player import (
    PlayerState,
    PlaySink,
    PlayStep,
    current_track,
    play_all,
    play_next,
    play_previous,
)

# Auto-replay
from .autoreplay import (
    CALMING_GENRES,
    DEFAULT_TOP_K,
    apply_replay,
    is_calming,
    normalize_genres,
    top_calming,
)

__all__ = [
    # Player
    "PlayerState",
    "PlaySink",
    "PlayStep",
    "current_track",
    "play_all",
    "play_next",
    "play_previous",
    # Auto-replay
    "CALMING_GENRES",
    "DEFAULT_TOP_K",
    "apply_replay",
    "is_calming",
    "normalize_genres",
    "top_calming",
]
