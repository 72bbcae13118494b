"""
Command-line entry point for PlayWise.
"""

import argparse
import shlex
from pathlib import Path
from typing import List, Optional

from loguru import logger

from playwise.context import AppContext
from playwise.core import config
from playwise.core.console import configure_console
from playwise.core.output import log, set_quiet, setup_loguru
from playwise.domain.persistence.exceptions import (
    PersistenceCorruptError,
    PersistenceError,
)
from playwise.domain.playback.autoreplay import normalize_genres
from playwise.domain.session import CatalogSession
from playwise.main import interactive_mode, run_command

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playwise",
        description="PlayWise - Playlist Catalog Engine",
        epilog="Without a command, starts interactive mode. Type 'help' there for all commands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--config',
        type=Path,
        help='Path to config.toml (default: ./config.toml or ~/.config/playwise/config.toml)'
    )
    parser.add_argument(
        '--data-file',
        type=Path,
        help='Session data file (overrides config and PLAYWISE_DATA_FILE)'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Log file level (overrides config and PLAYWISE_LOG_LEVEL)'
    )
    parser.add_argument(
        '--no-autosave',
        action='store_true',
        help='Only save on exit or with the save command'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only write messages to the log file (tables are still shown)'
    )
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='Run a single command and exit, e.g. playwise add "Rain" "Nils" "Ambient" 240'
    )

    return parser


def create_session(cfg: config.Config, data_file: Path) -> CatalogSession:
    """Build a CatalogSession from configuration and load the data file.

    A corrupt data file leaves the session empty and turns persistence off
    for the run, so the file is not overwritten.
    """
    session = CatalogSession(
        data_file=data_file,
        skip_capacity=cfg.trackers.skip_capacity,
        recent_capacity=cfg.trackers.recent_capacity,
        history_limit=cfg.data.history_limit,
        calming_genres=normalize_genres(cfg.autoreplay.calming_genres),
        top_k=cfg.autoreplay.top_k,
    )

    try:
        if session.load():
            log(f"Loaded {len(session)} tracks from {data_file}")
    except PersistenceCorruptError as e:
        log(f"Data file is corrupt: {e}", level="error")
        log("Starting with an empty catalog; saving is disabled for this run.", level="warning")
        session.data_file = None
    except PersistenceError as e:
        log(f"Could not read data file: {e}", level="error")
        log("Starting with an empty catalog; saving is disabled for this run.", level="warning")
        session.data_file = None

    return session


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the playwise command."""
    args = build_parser().parse_args(argv)

    cfg = config.load_config(args.config)
    if args.data_file:
        cfg.data.data_file = str(args.data_file)
    if args.log_level:
        cfg.logging.level = args.log_level
    if args.no_autosave:
        cfg.data.autosave = False

    setup_loguru(
        config.get_log_file_path(cfg),
        level=cfg.logging.level,
        max_file_size_mb=cfg.logging.max_file_size_mb,
        backup_count=cfg.logging.backup_count,
    )
    console = configure_console(cfg.ui.use_colors)
    set_quiet(args.quiet)

    session = create_session(cfg, config.get_data_file_path(cfg))
    ctx = AppContext.create(cfg, session, console)

    try:
        if args.command:
            ctx, _ = run_command(ctx, shlex.join(args.command))
        else:
            interactive_mode(ctx)
    except KeyboardInterrupt:
        log("Interrupted by user. Saving...", level="warning")
    finally:
        session.close()
        logger.info("PlayWise exiting")


if __name__ == "__main__":
    main()
