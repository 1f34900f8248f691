"""Keyboard event handling: decode key presses into navigation commands.

Bindings:
    k / Up          move up
    j / Down        move down
    l / Right       focus next pane
    h / Left        focus previous pane
    Enter / Space   play selected track
    q / Ctrl+C      quit
"""

from typing import Optional

from blessed.keyboard import Keystroke

from tunepane.ui.blessed.state import NavCommand

from .keys import parse_key

EVENT_COMMANDS = {
    "arrow_up": NavCommand.MOVE_UP,
    "arrow_down": NavCommand.MOVE_DOWN,
    "arrow_right": NavCommand.FOCUS_NEXT,
    "arrow_left": NavCommand.FOCUS_PREV,
    "enter": NavCommand.ACTIVATE,
    "ctrl_c": NavCommand.QUIT,
}

CHAR_COMMANDS = {
    "k": NavCommand.MOVE_UP,
    "j": NavCommand.MOVE_DOWN,
    "l": NavCommand.FOCUS_NEXT,
    "h": NavCommand.FOCUS_PREV,
    " ": NavCommand.ACTIVATE,
    "q": NavCommand.QUIT,
}


def handle_key(key: Keystroke) -> Optional[NavCommand]:
    """
    Map a keystroke to a navigation command.

    Args:
        key: blessed Keystroke

    Returns:
        The bound command, or None for unbound keys
    """
    event = parse_key(key)
    if event["type"] == "char":
        return CHAR_COMMANDS.get(event["char"])
    return EVENT_COMMANDS.get(event["type"])
