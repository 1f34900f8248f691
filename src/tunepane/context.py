"""Application context for explicit state passing.

This module provides the AppContext dataclass that encapsulates application
state (config, library index, player), so functions receive what they need
as arguments instead of reaching for module-level globals.
"""

from dataclasses import dataclass, replace
from typing import Optional

from tunepane.core.config import Config
from tunepane.domain.library.index import derive
from tunepane.domain.library.models import LibraryIndex, Song
from tunepane.domain.playback.player import PlayerState


@dataclass
class AppContext:
    """Application context passed to the UI and command handlers.

    Attributes:
        config: Application configuration
        index: Library index derived from the scanned songs
        player_state: Current mpv player state (None when mpv is not running)
        playback_enabled: False when started with --no-playback
    """

    config: Config
    index: LibraryIndex
    player_state: Optional[PlayerState] = None
    playback_enabled: bool = True

    @classmethod
    def create(
        cls, config: Config, songs: list[Song], playback_enabled: bool = True
    ) -> "AppContext":
        """Create initial application context.

        Args:
            config: Application configuration
            songs: Songs from the cache or a fresh scan
            playback_enabled: Whether Activate should hand files to mpv

        Returns:
            New AppContext with the derived index and no player yet
        """
        return cls(
            config=config,
            index=derive(songs),
            player_state=None,
            playback_enabled=playback_enabled,
        )

    def with_player_state(self, player_state: Optional[PlayerState]) -> "AppContext":
        """Return new context with updated player state."""
        return replace(self, player_state=player_state)
