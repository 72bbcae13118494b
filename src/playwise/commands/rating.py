"""
Rating command handlers for PlayWise.

Handles: rate, unrate, ratings
"""

from typing import List

from playwise.context import AppContext
from playwise.core.output import log
from playwise.domain.rating import MAX_RATING, MIN_RATING, InvalidRatingError
from playwise.helpers import autosave, print_tracks
from playwise.utils.parsers import parse_int


def handle_rate_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle rate command - give a track a 1-5 star rating.

    A track holds a single rating; rating it again replaces the old one.

    Args:
        ctx: Application context
        args: Command arguments (title..., rating)

    Returns:
        (updated_context, should_continue)
    """
    if len(args) < 2:
        log(f"Usage: rate <title> <{MIN_RATING}-{MAX_RATING}>", level="warning")
        return ctx, True

    title = " ".join(args[:-1])
    rating = parse_int(args[-1])
    if rating is None:
        log(f"Rating must be a number between {MIN_RATING} and {MAX_RATING}", level="error")
        return ctx, True

    try:
        track = ctx.session.rate(title, rating)
    except InvalidRatingError as e:
        log(str(e), level="error")
        return ctx, True

    if track is None:
        log(f"No track titled '{title}'", level="warning")
        return ctx, True

    log(f"Rated '{track.title}': {'*' * rating}", level="success")
    autosave(ctx)
    return ctx, True


def handle_unrate_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle unrate command - clear a track's rating."""
    if not args:
        log("Usage: unrate <title>", level="warning")
        return ctx, True

    title = " ".join(args)
    track = ctx.session.unrate(title)
    if track is None:
        log(f"No rated track titled '{title}'", level="warning")
        return ctx, True

    log(f"Cleared rating for '{track.title}'", level="success")
    autosave(ctx)
    return ctx, True


def handle_ratings_command(ctx: AppContext, args: List[str]) -> tuple[AppContext, bool]:
    """Handle ratings command - list tracks with a given rating.

    Args:
        ctx: Application context
        args: Command arguments (rating)

    Returns:
        (updated_context, should_continue)
    """
    if len(args) != 1:
        log(f"Usage: ratings <{MIN_RATING}-{MAX_RATING}>", level="warning")
        return ctx, True

    rating = parse_int(args[0])
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        log(f"Rating must be a number between {MIN_RATING} and {MAX_RATING}", level="error")
        return ctx, True

    tracks = ctx.session.tracks_with_rating(rating)
    print_tracks(
        ctx,
        tracks,
        title=f"Rated {'*' * rating} ({len(tracks)})",
        numbered=False,
        empty_message=f"No tracks rated {rating}",
    )
    return ctx, True
