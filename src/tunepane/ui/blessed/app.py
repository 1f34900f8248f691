"""Main event loop and entry point for blessed UI."""

import sys

from blessed import Terminal
from loguru import logger

from tunepane.context import AppContext
from tunepane.core.output import (
    clear_blessed_mode,
    drain_pending_status_messages,
    set_blessed_mode,
)

from .components import paint, render_columns
from .events import execute_command, handle_key
from .state import BrowserState, create_browser_state, resize, set_status

# Seconds to wait for a key before polling terminal size and queued messages
INPUT_TIMEOUT = 0.25


def run_interactive_ui(ctx: AppContext) -> AppContext:
    """
    Run the main interactive UI event loop.

    Args:
        ctx: Application context with config, library index and player state

    Returns:
        Updated AppContext after UI session ends
    """
    term = Terminal()

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            ctx = main_loop(term, ctx)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - exiting browser")

    return ctx


def _apply_pending_messages(ui_state: BrowserState) -> BrowserState:
    messages = drain_pending_status_messages()
    if messages:
        ui_state = set_status(ui_state, messages[-1][0])
    return ui_state


def main_loop(term: Terminal, ctx: AppContext) -> AppContext:
    """
    Main event loop - functional style.

    Each iteration re-reads the terminal size, redraws if anything changed,
    then waits for one key and processes it completely before the next.

    Args:
        term: blessed Terminal instance
        ctx: Application context

    Returns:
        Updated AppContext after loop exits
    """
    ui_state = create_browser_state(ctx.index, term.width, term.height)
    if not ctx.index.songs:
        ui_state = set_status(ui_state, "Library is empty")

    set_blessed_mode()
    logger.info(
        f"Browser started: {len(ctx.index.artists)} artists, "
        f"{len(ctx.index.albums)} albums, {len(ctx.index.songs)} songs"
    )

    should_quit = False
    needs_full_redraw = True
    last_frame = None

    try:
        while not should_quit:
            # Terminal size is polled, not signalled
            if (term.width, term.height) != (ui_state.term_width, ui_state.term_height):
                ui_state = resize(ui_state, term.width, term.height)
                needs_full_redraw = True

            ui_state = _apply_pending_messages(ui_state)

            frame = render_columns(ui_state)
            if needs_full_redraw or frame != last_frame:
                if needs_full_redraw:
                    sys.stdout.write(term.home + term.clear)
                paint(term, frame)
                last_frame = frame
                needs_full_redraw = False

            key = term.inkey(timeout=INPUT_TIMEOUT)
            if not key:
                continue

            command = handle_key(key)
            if command is None:
                continue

            ctx, ui_state, should_quit = execute_command(ctx, ui_state, command)
    finally:
        clear_blessed_mode()

    return ctx
