"""
Sequential playlist player.

Functional approach with explicit state management: every call takes the
current PlayerState and returns a PlayStep holding the next one. Play events
(history push and count increment) go through the ``on_play`` sink and are
emitted only when a track actually starts.
"""

from typing import Any, Callable, NamedTuple, Optional, Sequence

from loguru import logger

from playwise.domain.library.models import Track

PlaySink = Callable[[Track], None]


class PlayerState(NamedTuple):
    """Immutable player state.

    Stopped is ``is_playing=False``; Playing(index) is ``is_playing=True``
    with ``current_index`` pointing into the catalog.
    """

    current_index: int = -1  # -1 until the first track starts
    current_track_id: Optional[int] = None
    is_playing: bool = False

    def __getattr__(self, name: str) -> Any:
        """Provide helpful error for missing attributes, especially with_* methods."""
        if name.startswith("with_"):
            raise AttributeError(
                f"PlayerState is a NamedTuple and does not have '{name}' method. "
                f"Use '._replace({name[5:]}=value)' instead."
            )
        raise AttributeError(f"PlayerState has no attribute '{name}'")


class PlayStep(NamedTuple):
    """Outcome of a player transition."""

    state: PlayerState
    track: Optional[Track] = None
    end_reached: bool = False


def _start(state: PlayerState, index: int, track: Track, on_play: PlaySink) -> PlayStep:
    on_play(track)
    new_state = state._replace(current_index=index, current_track_id=track.id, is_playing=True)
    return PlayStep(state=new_state, track=track)


def play_next(state: PlayerState, tracks: Sequence[Track], on_play: PlaySink) -> PlayStep:
    """
    Advance to the next track.

    Args:
        state: Current player state
        tracks: Catalog snapshot in play order
        on_play: Sink that records a play event

    Returns:
        PlayStep with the new track, or a stopped state with
        ``end_reached=True`` when there is no next track
    """
    if not tracks:
        return PlayStep(state=state._replace(is_playing=False))

    next_index = state.current_index + 1
    if next_index >= len(tracks):
        logger.debug("Reached end of playlist")
        return PlayStep(state=state._replace(is_playing=False), end_reached=True)

    return _start(state, next_index, tracks[next_index], on_play)


def play_previous(state: PlayerState, tracks: Sequence[Track], on_play: PlaySink) -> PlayStep:
    """
    Step back to the previous track.

    Returns:
        PlayStep with the new track, or the unchanged state (track None)
        when already at the start
    """
    if not tracks or state.current_index <= 0:
        return PlayStep(state=state)

    previous_index = min(state.current_index, len(tracks)) - 1
    return _start(state, previous_index, tracks[previous_index], on_play)


def play_all(state: PlayerState, tracks: Sequence[Track], on_play: PlaySink) -> tuple[PlayerState, list[Track]]:
    """
    Play every track from the start, in order.

    Returns:
        (stopped state positioned on the last track, tracks played)
    """
    played = []
    for index, track in enumerate(tracks):
        state = _start(state, index, track, on_play).state
        played.append(track)

    return state._replace(is_playing=False), played


def current_track(state: PlayerState, tracks: Sequence[Track]) -> Optional[Track]:
    """Get the playing track, or None when stopped or out of sync with the catalog."""
    if not state.is_playing or not 0 <= state.current_index < len(tracks):
        return None

    track = tracks[state.current_index]
    if track.id != state.current_track_id:
        return None
    return track
