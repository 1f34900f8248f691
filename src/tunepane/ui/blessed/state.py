"""UI state management - immutable state updates.

The browser is a fixed chain of three panes: artists, the selected artist's
albums, and the selected album's tracks. Any selection change at one level
throws away every pane below it and rebuilds them from the library index,
so a child pane never shows options for a stale parent selection.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Optional

from tunepane.domain.library.index import (
    albums_for_artist,
    find_album,
    find_song_by_title,
    songs_for_album,
)
from tunepane.domain.library.models import Album, LibraryIndex, Song
from tunepane.ui.blessed.helpers.layout import COLUMNS, calculate_layout
from tunepane.ui.blessed.helpers.scrolling import clamp_viewport, step_viewport


class PaneLevel(IntEnum):
    """Depth of a pane in the chain; also which pane has focus."""

    ARTIST = 1
    ALBUM = 2
    TRACK = 3


class NavCommand(Enum):
    """Logical navigation commands decoded from key presses."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    FOCUS_NEXT = "focus_next"
    FOCUS_PREV = "focus_prev"
    ACTIVATE = "activate"
    QUIT = "quit"


@dataclass
class Pane:
    """One column of the browser: a scrolling list with its own cursor."""

    level: PaneLevel
    options: list[str] = field(default_factory=list)
    reference: int = 0  # index of first visible option
    cursor: int = 0  # row within the viewport
    width: int = 0
    height: int = 1
    x: int = 0
    y: int = 0
    album: Optional[Album] = None  # bound album, track pane only


@dataclass
class BrowserState:
    """Whole browser session, threaded explicitly through the event loop."""

    index: LibraryIndex
    panes: tuple[Pane, Pane, Pane]
    focused: PaneLevel = PaneLevel.ARTIST
    term_width: int = 80
    term_height: int = 24
    status: str = ""


def selected_index(pane: Pane) -> Optional[int]:
    """Index of the selected option, or None for an empty pane."""
    if not pane.options:
        return None
    return pane.reference + pane.cursor


def selected_option(pane: Pane) -> Optional[str]:
    """Text of the selected option, or None for an empty pane."""
    idx = selected_index(pane)
    return pane.options[idx] if idx is not None else None


def get_pane(state: BrowserState, level: PaneLevel) -> Pane:
    """Pane at a given level of the chain."""
    return state.panes[level - 1]


def _place(pane: Pane, layout: dict[str, int]) -> Pane:
    column = COLUMNS[pane.level - 1]
    return replace(
        pane,
        x=layout[f"{column}_x"],
        y=layout["pane_y"],
        width=layout[f"{column}_width"],
        height=layout["pane_height"],
    )


def build_pane(
    index: LibraryIndex,
    level: PaneLevel,
    parent_selection: Optional[str],
    layout: dict[str, int],
) -> Pane:
    """Build a fresh pane for `level` from its parent's selection.

    Artist panes list every artist. Album panes list the albums of the
    selected artist; track panes list the titles of the selected album and
    carry that album for the header. A missing parent selection yields an
    empty pane.
    """
    album = None
    if level == PaneLevel.ARTIST:
        options = [artist.name for artist in index.artists]
    elif level == PaneLevel.ALBUM:
        options = (
            [a.title for a in albums_for_artist(index, parent_selection)]
            if parent_selection is not None
            else []
        )
    else:
        album = find_album(index, parent_selection) if parent_selection else None
        options = (
            [song.title for song in songs_for_album(index, album)] if album else []
        )

    return _place(Pane(level=level, options=options, album=album), layout)


def rebuild_below(state: BrowserState, level: PaneLevel) -> BrowserState:
    """Discard and rebuild every pane below `level` from its new selection."""
    layout = calculate_layout(state.term_width, state.term_height)
    panes = list(state.panes)
    for depth in range(level, len(panes)):
        parent = panes[depth - 1]
        panes[depth] = build_pane(
            state.index, PaneLevel(depth + 1), selected_option(parent), layout
        )
    return replace(state, panes=tuple(panes))


def create_browser_state(
    index: LibraryIndex, term_width: int = 80, term_height: int = 24
) -> BrowserState:
    """Initial state: all panes at their first option, artists focused."""
    layout = calculate_layout(term_width, term_height)
    artist_pane = build_pane(index, PaneLevel.ARTIST, None, layout)
    placeholder = (
        artist_pane,
        Pane(level=PaneLevel.ALBUM),
        Pane(level=PaneLevel.TRACK),
    )
    state = BrowserState(
        index=index,
        panes=placeholder,
        term_width=term_width,
        term_height=term_height,
    )
    return rebuild_below(state, PaneLevel.ARTIST)


def move_selection(state: BrowserState, delta: int) -> BrowserState:
    """Move the focused pane's selection and rebuild the panes below it."""
    level = state.focused
    pane = get_pane(state, level)
    reference, cursor = step_viewport(
        pane.reference, pane.cursor, delta, pane.height, len(pane.options)
    )

    panes = list(state.panes)
    panes[level - 1] = replace(pane, reference=reference, cursor=cursor)
    return rebuild_below(replace(state, panes=tuple(panes)), level)


def move_up(state: BrowserState) -> BrowserState:
    return move_selection(state, -1)


def move_down(state: BrowserState) -> BrowserState:
    return move_selection(state, 1)


def focus_next(state: BrowserState) -> BrowserState:
    """Focus the pane to the right, stopping at the track pane."""
    return replace(state, focused=PaneLevel(min(state.focused + 1, PaneLevel.TRACK)))


def focus_prev(state: BrowserState) -> BrowserState:
    """Focus the pane to the left, stopping at the artist pane."""
    return replace(state, focused=PaneLevel(max(state.focused - 1, PaneLevel.ARTIST)))


def activate(state: BrowserState) -> Optional[Song]:
    """Resolve the selected track to a Song when the track pane has focus."""
    if state.focused != PaneLevel.TRACK:
        return None

    pane = get_pane(state, PaneLevel.TRACK)
    title = selected_option(pane)
    if title is None:
        return None
    return find_song_by_title(state.index, title, album=pane.album)


def resize(state: BrowserState, term_width: int, term_height: int) -> BrowserState:
    """Recompute every pane's geometry and re-clamp its viewport."""
    if (term_width, term_height) == (state.term_width, state.term_height):
        return state

    layout = calculate_layout(term_width, term_height)
    panes = []
    for pane in state.panes:
        pane = _place(pane, layout)
        reference, cursor = clamp_viewport(
            pane.reference, pane.cursor, pane.height, len(pane.options)
        )
        panes.append(replace(pane, reference=reference, cursor=cursor))

    return replace(
        state,
        panes=tuple(panes),
        term_width=term_width,
        term_height=term_height,
    )


def set_status(state: BrowserState, message: str) -> BrowserState:
    return replace(state, status=message)


def handle_command(
    state: BrowserState, command: NavCommand
) -> tuple[BrowserState, Optional[Song], bool]:
    """
    Apply one navigation command.

    Args:
        state: Current browser state
        command: Decoded navigation command

    Returns:
        Tuple of (updated state, song to play or None, should_quit)
    """
    if command == NavCommand.MOVE_UP:
        return move_up(state), None, False
    if command == NavCommand.MOVE_DOWN:
        return move_down(state), None, False
    if command == NavCommand.FOCUS_NEXT:
        return focus_next(state), None, False
    if command == NavCommand.FOCUS_PREV:
        return focus_prev(state), None, False
    if command == NavCommand.ACTIVATE:
        return state, activate(state), False
    if command == NavCommand.QUIT:
        return state, None, True
    return state, None, False
