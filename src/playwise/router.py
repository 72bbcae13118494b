"""
Command routing for PlayWise.

Routes user commands to appropriate handler functions.
"""

from typing import List, Tuple

from playwise.context import AppContext
from playwise.core.console import safe_print

# Import command handlers
from playwise.commands import admin
from playwise.commands import library
from playwise.commands import playback
from playwise.commands import rating
from playwise.commands import tracking


def print_help() -> None:
    """Display help information for available commands."""
    help_text = """
PlayWise - Playlist Catalog Engine

Catalog:
  add "<title>" "<artist>" "<genre>" <seconds>
                      Add a track to the end of the catalog
  delete <pos>        Remove the track at a position
  move <from> <to>    Move a track so it ends up at <to>
  reverse             Reverse the catalog order
  list                Show the catalog in play order
  search <title>      Find a track by exact title
  sort title|duration Show a sorted view (catalog order unchanged)
  snapshot            Show longest tracks, recent plays, ratings and play counts

Ratings:
  rate <title> <1-5>  Rate a track (replaces any earlier rating)
  unrate <title>      Clear a track's rating
  ratings <1-5>       List tracks with a rating

Playback:
  play <title>        Play one track
  playall             Play the whole catalog, then auto-replay calming tracks
  next                Play the next track (auto-replay at the end)
  prev                Play the previous track
  current             Show the current track
  undo                Undo the last play

Skips and recent additions:
  skip <title>        Mark a track as skipped (kept out of auto-replay)
  skipped             Show skip history
  clearskips          Clear skip history
  recent [genre]      Show recently added tracks, optionally by genre
  clearrecent         Clear recently added history

  init                Create directories and reload configuration
  status              Show session summary
  save                Save the session now
  help                Show this help message
  quit, exit          Save and exit

Positions are 1-based, as shown by 'list'. Quote titles with spaces:
  rate "Rainy Day" 5
"""
    safe_print(help_text.strip())


def handle_command(ctx: AppContext, command: str, args: List[str]) -> Tuple[AppContext, bool]:
    """
    Handle a single command with explicit state passing.

    Args:
        ctx: Application context
        command: Command name
        args: Command arguments

    Returns:
        (updated_context, should_continue) - Updated context and whether to continue
    """
    if command in ['quit', 'exit']:
        safe_print("Goodbye!", style="green")
        return ctx, False

    elif command == 'help':
        print_help()
        return ctx, True

    elif command == 'add':
        return library.handle_add_command(ctx, args)

    elif command == 'delete':
        return library.handle_delete_command(ctx, args)

    elif command == 'move':
        return library.handle_move_command(ctx, args)

    elif command == 'reverse':
        return library.handle_reverse_command(ctx)

    elif command == 'list':
        return library.handle_list_command(ctx)

    elif command == 'search':
        return library.handle_search_command(ctx, args)

    elif command == 'sort':
        return library.handle_sort_command(ctx, args)

    elif command == 'snapshot':
        return library.handle_snapshot_command(ctx)

    elif command == 'rate':
        return rating.handle_rate_command(ctx, args)

    elif command == 'unrate':
        return rating.handle_unrate_command(ctx, args)

    elif command == 'ratings':
        return rating.handle_ratings_command(ctx, args)

    elif command == 'play':
        return playback.handle_play_command(ctx, args)

    elif command == 'playall':
        return playback.handle_playall_command(ctx)

    elif command == 'next':
        return playback.handle_next_command(ctx)

    elif command == 'prev':
        return playback.handle_prev_command(ctx)

    elif command == 'current':
        return playback.handle_current_command(ctx)

    elif command == 'undo':
        return playback.handle_undo_command(ctx)

    elif command == 'skip':
        return tracking.handle_skip_command(ctx, args)

    elif command == 'skipped':
        return tracking.handle_skipped_command(ctx)

    elif command == 'clearskips':
        return tracking.handle_clearskips_command(ctx)

    elif command == 'recent':
        return tracking.handle_recent_command(ctx, args)

    elif command == 'clearrecent':
        return tracking.handle_clearrecent_command(ctx)

    elif command == 'init':
        return admin.handle_init_command(ctx)

    elif command == 'save':
        return admin.handle_save_command(ctx)

    elif command == 'status':
        return admin.handle_status_command(ctx)

    elif command == '':
        # Empty command, do nothing
        return ctx, True

    else:
        safe_print(f"Unknown command: '{command}'. Type 'help' for available commands.", style="yellow")
        return ctx, True
