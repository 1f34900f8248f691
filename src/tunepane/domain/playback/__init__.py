"""Playback domain - MPV integration.

This domain hands a single file path to an mpv subprocess over JSON IPC.
Pause, queue and position tracking are left to mpv itself.
"""

from .player import (
    PlayerState,
    check_mpv_available,
    start_mpv,
    stop_mpv,
    is_mpv_running,
    send_mpv_command,
    play_file,
)

__all__ = [
    "PlayerState",
    "check_mpv_available",
    "start_mpv",
    "stop_mpv",
    "is_mpv_running",
    "send_mpv_command",
    "play_file",
]
