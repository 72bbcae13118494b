"""
Shared helpers for PlayWise command handlers.

Rendering of track listings and autosave after mutating commands.
"""

from typing import Iterable, Optional

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.text import Text

from playwise.context import AppContext
from playwise.core.console import get_console
from playwise.domain.library.models import Track, format_duration


def console_for(ctx: AppContext) -> Console:
    """Get the context's console, falling back to the shared one."""
    return ctx.console if ctx.console is not None else get_console()


def build_track_table(
    tracks: Iterable[Track],
    title: Optional[str] = None,
    numbered: bool = True,
    ratings: Optional[dict[int, int]] = None,
) -> Table:
    """
    Build a Rich table for a list of tracks.

    Args:
        tracks: Tracks to show, in display order
        title: Optional table title
        numbered: Show a 1-based position column
        ratings: Optional track id -> rating map for a rating column

    Returns:
        Table ready to print
    """
    # table titles are plain text, never markup
    table = Table(title=Text(title) if title is not None else None, show_lines=False)
    if numbered:
        table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Artist")
    table.add_column("Genre", style="cyan")
    table.add_column("Duration", justify="right")
    if ratings is not None:
        table.add_column("Rating", justify="center", style="yellow")

    for position, track in enumerate(tracks, start=1):
        row = [track.title, track.artist, track.genre, format_duration(track.duration)]
        if numbered:
            row.insert(0, str(position))
        if ratings is not None:
            rating = ratings.get(track.id)
            row.append(str(rating) if rating is not None else "-")
        table.add_row(*(Text(value) for value in row))

    return table


def print_tracks(
    ctx: AppContext,
    tracks: list[Track],
    title: Optional[str] = None,
    numbered: bool = True,
    empty_message: str = "No tracks",
    ratings: Optional[dict[int, int]] = None,
) -> None:
    """Print tracks as a table, or a dim notice when there are none."""
    console = console_for(ctx)
    if not tracks:
        console.print(empty_message, style="dim", markup=False)
        return
    console.print(build_track_table(tracks, title=title, numbered=numbered, ratings=ratings))


def ratings_by_track(ctx: AppContext) -> dict[int, int]:
    """Map each rated track's id to its rating."""
    return {track.id: rating for track, rating in ctx.session.ratings.items()}


def autosave(ctx: AppContext) -> None:
    """Persist the session after a mutating command, if autosave is enabled."""
    if not ctx.config.data.autosave or ctx.session.data_file is None:
        return
    if not ctx.session.save():
        logger.warning("Autosave failed; changes are only in memory")
