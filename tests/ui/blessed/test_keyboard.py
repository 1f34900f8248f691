"""Tests for key decoding."""

import pytest
from blessed.keyboard import Keystroke

from tunepane.ui.blessed.events.keyboard import handle_key
from tunepane.ui.blessed.state import NavCommand


def named(name: str) -> Keystroke:
    return Keystroke("\x1b[?", code=1, name=name)


class TestHandleKey:
    """Test the key bindings."""

    @pytest.mark.parametrize(
        "char,command",
        [
            ("k", NavCommand.MOVE_UP),
            ("j", NavCommand.MOVE_DOWN),
            ("l", NavCommand.FOCUS_NEXT),
            ("h", NavCommand.FOCUS_PREV),
            (" ", NavCommand.ACTIVATE),
            ("q", NavCommand.QUIT),
        ],
    )
    def test_character_bindings(self, char, command):
        assert handle_key(Keystroke(char)) == command

    @pytest.mark.parametrize(
        "name,command",
        [
            ("KEY_UP", NavCommand.MOVE_UP),
            ("KEY_DOWN", NavCommand.MOVE_DOWN),
            ("KEY_RIGHT", NavCommand.FOCUS_NEXT),
            ("KEY_LEFT", NavCommand.FOCUS_PREV),
            ("KEY_ENTER", NavCommand.ACTIVATE),
        ],
    )
    def test_named_keys(self, name, command):
        assert handle_key(named(name)) == command

    def test_newline_activates(self):
        assert handle_key(Keystroke("\n")) == NavCommand.ACTIVATE

    def test_ctrl_c_quits(self):
        assert handle_key(Keystroke("\x03")) == NavCommand.QUIT

    @pytest.mark.parametrize("char", ["x", "K", "1", "/"])
    def test_unbound_characters(self, char):
        assert handle_key(Keystroke(char)) is None

    def test_escape_is_unbound(self):
        assert handle_key(named("KEY_ESCAPE")) is None
