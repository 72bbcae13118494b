"""Application context for explicit state passing.

This module provides the AppContext dataclass that encapsulates all application state.
Command handlers receive the context and return an updated one instead of reaching
for module-level globals.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from playwise.core.config import Config
from playwise.domain.playback.player import PlayerState
from playwise.domain.session import CatalogSession


@dataclass
class AppContext:
    """Application context passed to all command handlers.

    The player state is immutable and replaced on every transition. The
    session is a single mutable owner of the catalog and is shared by every
    context derived from this one.

    Attributes:
        config: Application configuration
        session: Catalog session (tracks, ratings, windows, history, counts)
        player_state: Current sequential player state
        console: Rich Console for formatted output
    """

    # Configuration
    config: Config

    # State
    session: CatalogSession
    player_state: PlayerState

    # UI
    console: Optional[Console] = None

    @classmethod
    def create(
        cls, config: Config, session: CatalogSession, console: Optional[Console] = None
    ) -> "AppContext":
        """Create initial application context.

        Args:
            config: Application configuration
            session: Catalog session, already loaded if persistence is enabled
            console: Optional Rich Console instance

        Returns:
            New AppContext with a stopped player
        """
        return cls(
            config=config,
            session=session,
            player_state=PlayerState(),
            console=console,
        )

    def with_player_state(self, state: PlayerState) -> "AppContext":
        """Return new context with updated player state.

        Args:
            state: New player state

        Returns:
            New AppContext with updated player state, other fields unchanged
        """
        return AppContext(
            config=self.config,
            session=self.session,
            player_state=state,
            console=self.console,
        )

    def with_config(self, config: Config) -> "AppContext":
        """Return new context with updated configuration."""
        return AppContext(
            config=config,
            session=self.session,
            player_state=self.player_state,
            console=self.console,
        )
