"""Command execution."""

from loguru import logger

from tunepane.context import AppContext
from tunepane.core.errors import PlaybackFailure
from tunepane.domain.playback import play_file

from ..state import BrowserState, NavCommand, handle_command, set_status


def execute_command(
    ctx: AppContext, ui_state: BrowserState, command: NavCommand
) -> tuple[AppContext, BrowserState, bool]:
    """
    Execute command and return updated state.

    Failures never end the session: they are logged, shown on the status
    line, and the state from before the command is kept.

    Args:
        ctx: Application context
        ui_state: Browser state
        command: Navigation command decoded from a key press

    Returns:
        Tuple of (updated AppContext, updated BrowserState, should_quit)
    """
    try:
        new_state, song, should_quit = handle_command(ui_state, command)
    except Exception as e:
        logger.exception(f"Error handling {command.value}")
        return ctx, set_status(ui_state, f"Error: {e}"), False

    if song is None:
        return ctx, new_state, should_quit

    if not ctx.playback_enabled:
        logger.info(f"Selected (playback disabled): {song.path}")
        return ctx, set_status(new_state, f"Selected: {song.path}"), should_quit

    try:
        player_state = play_file(ctx.player_state, song.path)
    except PlaybackFailure as e:
        logger.error(f"Playback failed: {e}")
        return ctx, set_status(new_state, f"Playback failed: {e}"), should_quit

    ctx = ctx.with_player_state(player_state)
    new_state = set_status(new_state, f"Playing: {song.artist} - {song.title}")
    return ctx, new_state, should_quit
