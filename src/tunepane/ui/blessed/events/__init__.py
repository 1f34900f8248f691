"""Event handling for the blessed UI: key decoding and command execution."""

from .commands import execute_command
from .keyboard import handle_key

__all__ = ["execute_command", "handle_key"]
