"""
Catalog command handlers for PlayWise.

Handles: add, delete, move, reverse, search, list, sort, snapshot
"""

from typing import List

from rich.table import Table
from rich.text import Text

from playwise.context import AppContext
from playwise.core.output import log
from playwise.domain.library import (
    SORT_KEYS,
    build_snapshot,
    format_duration,
    get_display_name,
    sort_tracks,
)
from playwise.domain.session import DuplicateTitleError
from playwise.helpers import autosave, console_for, print_tracks, ratings_by_track
from playwise.utils.parsers import parse_int, parse_position


def handle_add_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle add command - append a track to the catalog.

    Usage: add "<title>" "<artist>" "<genre>" <seconds>

    Args:
        ctx: Application context
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    if len(args) != 4:
        log('Usage: add "<title>" "<artist>" "<genre>" <seconds>', level="warning")
        return ctx, True

    title, artist, genre, seconds = args
    duration = parse_int(seconds)
    if duration is None or duration < 0:
        log(f"Invalid duration: '{seconds}' (expected whole seconds)", level="error")
        return ctx, True

    try:
        track = ctx.session.add_track(title, artist, genre, duration)
    except DuplicateTitleError as e:
        log(str(e), level="warning")
        return ctx, True
    except ValueError as e:
        log(f"Cannot add track: {e}", level="error")
        return ctx, True

    log(f"Added: {get_display_name(track)} ({format_duration(track.duration)})", level="success")
    autosave(ctx)
    return ctx, True


def handle_delete_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle delete command - remove the track at a 1-based position.

    Args:
        ctx: Application context
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    if len(args) != 1:
        log("Usage: delete <position>", level="warning")
        return ctx, True

    index = parse_position(args[0])
    if index is None:
        log(f"Invalid position: '{args[0]}'", level="error")
        return ctx, True

    track = ctx.session.remove_track(index)
    if track is None:
        log(f"No track at position {args[0]} (catalog has {len(ctx.session)})", level="warning")
        return ctx, True

    log(f"Removed: {get_display_name(track)}", level="success")
    autosave(ctx)
    return ctx, True


def handle_move_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle move command - move a track so it lands at the target position.

    Args:
        ctx: Application context
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    if len(args) != 2:
        log("Usage: move <from> <to>", level="warning")
        return ctx, True

    from_index = parse_position(args[0])
    to_index = parse_position(args[1])
    size = len(ctx.session)
    if from_index is None or to_index is None or from_index >= size or to_index >= size:
        log(f"Positions must be between 1 and {size}", level="error")
        return ctx, True

    track = ctx.session.catalog.track_at(from_index)
    ctx.session.move_track(from_index, to_index)
    log(f"Moved '{track.title}' to position {to_index + 1}", level="success")
    autosave(ctx)
    return ctx, True


def handle_reverse_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle reverse command - reverse the catalog order in place."""
    ctx.session.reverse()
    log(f"Reversed catalog ({len(ctx.session)} tracks)", level="success")
    autosave(ctx)
    return ctx, True


def handle_search_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle search command - exact title lookup.

    Args:
        ctx: Application context
        args: Command arguments (the title, possibly split on spaces)

    Returns:
        (updated_context, should_continue)
    """
    if not args:
        log("Usage: search <title>", level="warning")
        return ctx, True

    title = " ".join(args)
    track = ctx.session.find(title)
    if track is None:
        log(f"No track titled '{title}'", level="warning")
        return ctx, True

    position = ctx.session.catalog.index_of(track)
    print_tracks(
        ctx,
        [track],
        title=f"Found at position {position + 1}",
        numbered=False,
        ratings=ratings_by_track(ctx),
    )
    return ctx, True


def handle_list_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle list command - show the catalog in play order."""
    tracks = ctx.session.tracks()
    print_tracks(
        ctx,
        tracks,
        title=f"Catalog ({len(tracks)} tracks)",
        empty_message="Catalog is empty. Use 'add' to add tracks.",
        ratings=ratings_by_track(ctx),
    )
    return ctx, True


def handle_sort_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle sort command - show a sorted view without reordering the catalog.

    Args:
        ctx: Application context
        args: Command arguments (sort key)

    Returns:
        (updated_context, should_continue)
    """
    keys = "|".join(SORT_KEYS)
    if len(args) != 1:
        log(f"Usage: sort <{keys}>", level="warning")
        return ctx, True

    by = args[0].lower()
    try:
        ordered = sort_tracks(ctx.session.tracks(), by)
    except ValueError:
        log(f"Unknown sort key '{args[0]}'. Available: {keys}", level="error")
        return ctx, True

    print_tracks(ctx, ordered, title=f"Sorted by {by}", empty_message="Catalog is empty")
    return ctx, True


def handle_snapshot_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle snapshot command - show catalog analytics.

    Shows the longest tracks, recent plays, rating counts and play counts.
    """
    session = ctx.session
    snapshot = build_snapshot(
        session.tracks(),
        session.recently_played(ctx.config.ui.recent_played_length),
        session.rating_counts(),
        session.play_counts,
    )
    console = console_for(ctx)

    console.print(
        f"Catalog: {snapshot.total_tracks} tracks, "
        f"{format_duration(snapshot.total_duration)} total",
        style="bold",
        markup=False,
    )

    print_tracks(ctx, snapshot.longest, title="Longest tracks", empty_message="No tracks")
    print_tracks(
        ctx, snapshot.recently_played, title="Recently played", empty_message="Nothing played yet"
    )

    ratings = Table(title="Tracks by rating")
    ratings.add_column("Rating", justify="center", style="yellow")
    ratings.add_column("Tracks", justify="right")
    for rating, count in snapshot.rating_counts.items():
        ratings.add_row("*" * rating, str(count))
    console.print(ratings)

    if not snapshot.play_counts:
        console.print("No play counts yet", style="dim")
        return ctx, True

    plays = Table(title="Play counts")
    plays.add_column("Title", style="bold")
    plays.add_column("Plays", justify="right")
    for title, count in snapshot.play_counts:
        plays.add_row(Text(title), str(count))
    console.print(plays)

    return ctx, True
