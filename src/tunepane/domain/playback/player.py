"""
MPV player integration with JSON IPC for tunepane
Functional approach with explicit state management
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional

from loguru import logger

from tunepane.core.config import Config
from tunepane.core.errors import PlaybackFailure


class PlayerState(NamedTuple):
    """Immutable player state."""

    socket_path: Optional[str] = None
    process: Optional[subprocess.Popen] = None
    current_track: Optional[str] = None


def check_mpv_available() -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def start_mpv(config: Config) -> Optional[PlayerState]:
    """Start MPV with JSON IPC and return initial state."""
    # Create socket path
    if config.player.mpv_socket_path:
        socket_path = config.player.mpv_socket_path
    else:
        temp_dir = Path(tempfile.gettempdir())
        socket_path = str(temp_dir / f"tunepane-mpv-{os.getpid()}")

    logger.info(f"Starting MPV player with socket: {socket_path}")

    try:
        # Remove existing socket if it exists
        if os.path.exists(socket_path):
            logger.debug(f"Removing existing socket: {socket_path}")
            os.unlink(socket_path)

        cmd = [
            "mpv",
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            f"--volume={config.player.volume}",
            "--load-scripts=no",
        ]

        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )

        # Wait for socket to be created
        timeout = 5.0
        start_time = time.time()
        while not os.path.exists(socket_path):
            if time.time() - start_time > timeout:
                logger.error(f"MPV socket creation timeout after {timeout}s")
                process.kill()
                return None
            time.sleep(0.1)

        # Test connection
        if send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            logger.info("MPV started successfully")
            return PlayerState(socket_path=socket_path, process=process)
        else:
            logger.error("MPV socket connection test failed")
            process.kill()
            return None

    except (subprocess.SubprocessError, OSError) as e:
        logger.error(f"Failed to start MPV: {e}")
        return None


def stop_mpv(state: PlayerState) -> None:
    """Stop MPV process and cleanup."""
    if state.process:
        try:
            state.process.kill()
            state.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired):
            pass  # Process already terminated or couldn't be killed

    if state.socket_path and os.path.exists(state.socket_path):
        try:
            os.unlink(state.socket_path)
        except OSError:
            pass


def is_mpv_running(state: Optional[PlayerState]) -> bool:
    """Check if MPV process is still running."""
    if state is None or not state.process:
        return False

    if state.process.poll() is not None:
        return False

    if not state.socket_path or not os.path.exists(state.socket_path):
        return False

    return True


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return False

    try:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(2.0)
        sock.connect(socket_path)

        command_json = json.dumps(command) + "\n"
        sock.send(command_json.encode("utf-8"))

        # mpv may interleave event lines; the reply is the line with "error"
        response = sock.recv(4096).decode("utf-8").strip()
        sock.close()

        for line in response.splitlines():
            try:
                response_data = json.loads(line)
            except json.JSONDecodeError:
                continue
            if "error" in response_data:
                return response_data.get("error") == "success"

        return True

    except (socket.error, OSError):
        return False


def play_file(state: Optional[PlayerState], local_path: str) -> PlayerState:
    """Replace whatever is playing with `local_path` and return updated state.

    Raises:
        PlaybackFailure: If the file is missing, mpv is not running, or mpv
            rejects the file
    """
    if not os.path.isfile(local_path):
        raise PlaybackFailure(f"File not found: {local_path}")

    if not is_mpv_running(state):
        raise PlaybackFailure("mpv is not running")

    success = send_mpv_command(
        state.socket_path, {"command": ["loadfile", local_path, "replace"]}
    )
    if not success:
        raise PlaybackFailure(f"mpv could not load {local_path}")

    # Explicitly unpause to ensure playback starts
    send_mpv_command(state.socket_path, {"command": ["set_property", "pause", False]})

    logger.info(f"Playing: {local_path}")
    return state._replace(current_track=local_path)
