"""
Playback command handlers for PlayWise.

Handles: play, playall, next, prev, current, undo
"""

from typing import List

from loguru import logger

from playwise.context import AppContext
from playwise.core.output import log
from playwise.domain.library.models import get_display_name
from playwise.domain.playback import player
from playwise.helpers import autosave


def _auto_replay(ctx: AppContext) -> None:
    """Replay the most-played calming tracks once the playlist is exhausted."""
    if not ctx.config.autoreplay.enabled:
        logger.debug("Auto-replay disabled, not replaying")
        return

    replayed = ctx.session.auto_replay()
    if not replayed:
        log("Playlist finished. No calming tracks to auto-replay.", level="info")
        return

    log(f"Playlist finished. Auto-replaying {len(replayed)} calming tracks:", level="info")
    for track in replayed:
        log(f"  Playing: {get_display_name(track)}", level="info")


def handle_play_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle play command - play a single track by title.

    The player is positioned on the track, so 'next' continues from it.

    Args:
        ctx: Application context
        args: Command arguments (title)

    Returns:
        (updated_context, should_continue)
    """
    if not args:
        log("Usage: play <title>", level="warning")
        return ctx, True

    title = " ".join(args)
    track = ctx.session.play_title(title)
    if track is None:
        log(f"No track titled '{title}'", level="warning")
        return ctx, True

    index = ctx.session.catalog.index_of(track)
    state = ctx.player_state._replace(
        current_index=index, current_track_id=track.id, is_playing=True
    )
    log(f"Playing: {get_display_name(track)}", level="info")
    autosave(ctx)
    return ctx.with_player_state(state), True


def handle_playall_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle playall command - play the whole catalog, then auto-replay."""
    tracks = ctx.session.tracks()
    if not tracks:
        log("Catalog is empty, nothing to play", level="warning")
        return ctx, True

    state, played = player.play_all(ctx.player_state, tracks, ctx.session.record_play)
    for track in played:
        log(f"Playing: {get_display_name(track)}", level="info")

    _auto_replay(ctx)
    autosave(ctx)
    return ctx.with_player_state(state), True


def handle_next_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle next command - advance the player; auto-replay at the end."""
    tracks = ctx.session.tracks()
    if not tracks:
        log("Catalog is empty, nothing to play", level="warning")
        return ctx, True

    step = player.play_next(ctx.player_state, tracks, ctx.session.record_play)
    if step.end_reached:
        _auto_replay(ctx)
    elif step.track is not None:
        log(f"Playing: {get_display_name(step.track)}", level="info")

    autosave(ctx)
    return ctx.with_player_state(step.state), True


def handle_prev_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle prev command - step the player back one track."""
    tracks = ctx.session.tracks()
    step = player.play_previous(ctx.player_state, tracks, ctx.session.record_play)
    if step.track is None:
        log("Already at the start of the playlist", level="warning")
        return ctx, True

    log(f"Playing: {get_display_name(step.track)}", level="info")
    autosave(ctx)
    return ctx.with_player_state(step.state), True


def handle_current_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle current command - show the playing track."""
    track = player.current_track(ctx.player_state, ctx.session.tracks())
    if track is None:
        log("Nothing is playing", level="info")
        return ctx, True

    position = ctx.player_state.current_index + 1
    log(f"Now playing: {get_display_name(track)} (position {position})", level="info")
    return ctx, True


def handle_undo_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle undo command - pop the last play from history.

    Play counts are left as they are.
    """
    track = ctx.session.undo_last_play()
    if track is None:
        log("No plays to undo", level="warning")
        return ctx, True

    log(f"Undid play of {get_display_name(track)}", level="success")
    autosave(ctx)
    return ctx, True
