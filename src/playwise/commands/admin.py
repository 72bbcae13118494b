"""
Admin command handlers for PlayWise.

Handles: init, save, status
"""

from playwise.context import AppContext
from playwise.core import config
from playwise.core.output import log
from playwise.domain.library.models import format_duration


def handle_init_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle init command - create directories and reload configuration.

    Tracker capacities are fixed for the running session; the reloaded
    autosave, auto-replay and display settings apply immediately.

    Args:
        ctx: Application context

    Returns:
        (updated_context, should_continue)
    """
    log("Initializing PlayWise configuration...")
    config.ensure_directories()
    cfg = config.load_config()
    log(f"Configuration loaded from: {config.get_config_path()}")
    log(f"Data directory: {config.get_data_dir()}")
    log("PlayWise is ready to use!")

    return ctx.with_config(cfg), True


def handle_save_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle save command - write the session to the data file now."""
    session = ctx.session
    if session.data_file is None:
        log("Persistence is disabled for this session", level="warning")
        return ctx, True

    if session.save():
        log(f"Saved {len(session)} tracks to {session.data_file}", level="success")
    else:
        log(f"Could not save to {session.data_file} (see log for details)", level="error")
    return ctx, True


def handle_status_command(ctx: AppContext) -> tuple[AppContext, bool]:
    """Handle status command - summarize the session and where it is stored."""
    session = ctx.session
    total = sum(track.duration for track in session.tracks())

    log(f"Tracks: {len(session)} ({format_duration(total)})")
    log(f"Rated: {len(session.ratings)}")
    log(f"History: {len(session.history)} plays")
    log(f"Skipped: {len(session.skipped)}/{session.skipped.capacity}")
    log(f"Recently added: {len(session.recently_added)}/{session.recently_added.capacity}")
    log(f"Data file: {session.data_file or 'disabled'}")
    log(f"Autosave: {'on' if ctx.config.data.autosave else 'off'}")
    return ctx, True
