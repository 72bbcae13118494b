"""
Recency window command handlers for PlayWise.

Handles: skip, skipped, clearskips, recent, clearrecent
"""

from collections import Counter
from typing import List

from rich.table import Table
from rich.text import Text

from playwise.context import AppContext
from playwise.core.output import log
from playwise.helpers import autosave, console_for, print_tracks


def handle_skip_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle skip command - mark a track as recently skipped.

    Skipped tracks are left out of auto-replay while they stay in the window.

    Args:
        ctx: Application context
        args: Command arguments (title)

    Returns:
        (updated_context, should_continue)
    """
    if not args:
        log("Usage: skip <title>", level="warning")
        return ctx, True

    title = " ".join(args)
    track = ctx.session.skip_title(title)
    if track is None:
        log(f"No track titled '{title}'", level="warning")
        return ctx, True

    skipped = ctx.session.skipped
    log(f"Skipped '{track.title}' ({len(skipped)}/{skipped.capacity} in skip history)", level="info")
    autosave(ctx)
    return ctx, True


def handle_skipped_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle skipped command - show the skip window, most recent first."""
    tracks = ctx.session.skipped.window()
    print_tracks(
        ctx,
        tracks,
        title=f"Recently skipped ({len(tracks)}/{ctx.session.skipped.capacity})",
        empty_message="No skipped tracks",
    )
    return ctx, True


def handle_clearskips_command(ctx: AppContext) -> tuple[AppContext, bool]:
    ctx.session.clear_skips()
    log("Skip history cleared", level="success")
    autosave(ctx)
    return ctx, True


def handle_recent_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle recent command - show recently added tracks.

    Without arguments, shows the window and a per-genre breakdown. With a
    genre, shows only recently added tracks of that genre.

    Args:
        ctx: Application context
        args: Command arguments (optional genre)

    Returns:
        (updated_context, should_continue)
    """
    limit = ctx.config.ui.recent_added_length
    recent = ctx.session.recently_added

    if args:
        genre = " ".join(args)
        tracks = recent.filter_by_genre(genre, limit=limit)
        print_tracks(
            ctx,
            tracks,
            title=f"Recently added {genre}",
            empty_message=f"No recently added {genre} tracks",
        )
        return ctx, True

    tracks = recent.window(limit)
    print_tracks(
        ctx, tracks, title=f"Recently added ({len(tracks)})", empty_message="No recently added tracks"
    )
    if not tracks:
        return ctx, True

    breakdown = Counter(track.genre for track in recent.window())
    table = Table(title="By genre")
    table.add_column("Genre", style="cyan")
    table.add_column("Tracks", justify="right")
    for genre, count in breakdown.most_common():
        table.add_row(Text(genre), str(count))
    console_for(ctx).print(table)
    return ctx, True


def handle_clearrecent_command(ctx: AppContext) -> tuple[AppContext, bool]:
    ctx.session.clear_recently_added()
    log("Recently added history cleared", level="success")
    autosave(ctx)
    return ctx, True
