"""Three-column browser rendering.

`render_columns` projects the browser state into a flat list of draw
instructions and never touches the state; `paint` turns those instructions
into blessed output.
"""

import sys
from typing import NamedTuple

from blessed import Terminal

from ..helpers.layout import COLUMNS, calculate_layout
from ..state import BrowserState, Pane, PaneLevel

HORZ_BOUNDARY = "─"
VERT_BOUNDARY = "│"
TOP_LEFT_CORNER = "┌"
TOP_RIGHT_CORNER = "┐"
BOTTOM_LEFT_CORNER = "└"
BOTTOM_RIGHT_CORNER = "┘"

ELLIPSIS = ".."
ELLIPSIS_MARGIN = len(ELLIPSIS)

HEADERS = {
    PaneLevel.ARTIST: "Artists",
    PaneLevel.ALBUM: "Albums",
    PaneLevel.TRACK: "Tracks",
}


class DrawInstruction(NamedTuple):
    """Write `text` at (x, y) with a named style."""

    x: int
    y: int
    text: str
    style: str  # border, header, plain, highlight, status


def truncate_option(text: str, width: int) -> str:
    """Fit text into `width` characters, ending in ".." when cut.

    Works on characters, so multi-byte text is never split mid-character.

    Examples:
        >>> truncate_option("Led Zeppelin", 20)
        'Led Zeppelin'
        >>> truncate_option("Led Zeppelin", 8)
        'Led Ze..'
    """
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    keep = max(0, width - ELLIPSIS_MARGIN)
    return (text[:keep] + ELLIPSIS)[:width]


def pane_header(pane: Pane) -> str:
    """Header text: level name, or album title and artists for tracks."""
    if pane.level == PaneLevel.TRACK and pane.album is not None:
        return f"{pane.album.title} - {', '.join(pane.album.artists)}"
    return HEADERS[pane.level]


def _render_box(
    box_x: int, box_width: int, pane_height: int
) -> list[DrawInstruction]:
    if box_width < 2:
        return []

    inner = box_width - 2
    bottom_y = 2 + pane_height
    instructions = [
        DrawInstruction(
            box_x,
            0,
            TOP_LEFT_CORNER + HORZ_BOUNDARY * inner + TOP_RIGHT_CORNER,
            "border",
        ),
        DrawInstruction(
            box_x,
            bottom_y,
            BOTTOM_LEFT_CORNER + HORZ_BOUNDARY * inner + BOTTOM_RIGHT_CORNER,
            "border",
        ),
    ]
    for y in range(1, bottom_y):
        instructions.append(DrawInstruction(box_x, y, VERT_BOUNDARY, "border"))
        instructions.append(
            DrawInstruction(box_x + box_width - 1, y, VERT_BOUNDARY, "border")
        )
    return instructions


def render_pane(pane: Pane, focused: bool) -> list[DrawInstruction]:
    """Header plus the visible window of options for one pane."""
    instructions = [
        DrawInstruction(
            pane.x,
            pane.y - 1,
            truncate_option(pane_header(pane), pane.width).ljust(pane.width),
            "header",
        )
    ]

    for row in range(pane.height):
        idx = pane.reference + row
        has_option = idx < len(pane.options)
        text = pane.options[idx] if has_option else ""
        is_cursor = focused and has_option and row == pane.cursor
        style = "highlight" if is_cursor else "plain"
        instructions.append(
            DrawInstruction(
                pane.x,
                pane.y + row,
                truncate_option(text, pane.width).ljust(pane.width),
                style,
            )
        )
    return instructions


def render_columns(state: BrowserState) -> list[DrawInstruction]:
    """
    Pure function: project browser state into draw instructions.

    Args:
        state: Current browser state

    Returns:
        Instructions for the three boxed columns, left to right, followed by
        the status line
    """
    layout = calculate_layout(state.term_width, state.term_height)
    instructions: list[DrawInstruction] = []

    for column, pane in zip(COLUMNS, state.panes):
        instructions.extend(
            _render_box(
                layout[f"{column}_box_x"],
                layout[f"{column}_box_width"],
                layout["pane_height"],
            )
        )
        instructions.extend(render_pane(pane, focused=pane.level == state.focused))

    instructions.append(
        DrawInstruction(
            0,
            layout["status_y"],
            truncate_option(state.status, state.term_width).ljust(state.term_width),
            "status",
        )
    )
    return instructions


def paint(term: Terminal, instructions: list[DrawInstruction]) -> None:
    """Write draw instructions to the terminal as a single buffered frame.

    Rows are never cleared to end of line: columns are painted left to right
    and each one pads its own rows, so clearing would erase the neighbours.
    """
    styles = {
        "border": term.dim,
        "header": term.bold,
        "highlight": term.reverse,
        "status": term.dim,
    }
    frame = []
    for instruction in instructions:
        style = styles.get(instruction.style)
        text = style(instruction.text) if style else instruction.text
        frame.append(term.move_xy(instruction.x, instruction.y) + text)
    sys.stdout.write("".join(frame))
    sys.stdout.flush()
