"""
Unified output system using Loguru and a shared Rich Console.

Every message lands in the log file once logging is set up; user-facing
ones are also printed through the console in CLI mode, or queued for the
status line while the blessed UI owns the screen.
"""

import threading
from pathlib import Path

from loguru import logger
from rich.console import Console

_console: Console | None = None

# Global blessed mode tracking (set when blessed UI starts)
_blessed_mode_active = False
_blessed_mode_lock = threading.Lock()

# Messages logged while the blessed UI is active, drained by the main loop
_pending_status_messages: list[tuple[str, str]] = []
_pending_messages_lock = threading.Lock()

# Console styles for user-facing log levels
LEVEL_STYLES = {
    "warning": "yellow",
    "error": "bold red",
}


def get_console() -> Console:
    """Shared console for CLI output; never used while blessed owns stdout."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print through the shared console, optionally styled."""
    get_console().print(message, style=style)


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging (blessed UI handles console display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Rotate the file once it reaches this size
        backup_count: Number of rotated files to keep
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    # File output only - no console handler (blessed UI manages display)
    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes (thread-safe but blocking)
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_blessed_mode() -> None:
    """Enable blessed mode - suppresses stdout printing, queues for status line."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = True
        logger.debug("Blessed mode enabled - log() will queue status messages")


def clear_blessed_mode() -> None:
    """Disable blessed mode - restores stdout printing."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = False
        logger.debug("Blessed mode disabled - log() will print to stdout")


def drain_pending_status_messages() -> list[tuple[str, str]]:
    """
    Get and clear all pending status messages.

    Returns:
        List of (message, level) tuples, oldest first
    """
    global _pending_status_messages
    with _pending_messages_lock:
        messages = _pending_status_messages[:]
        _pending_status_messages = []
        return messages


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to file AND surfaces the message to the user.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    with _blessed_mode_lock:
        if _blessed_mode_active:
            with _pending_messages_lock:
                _pending_status_messages.append((message, level))
            return

    safe_print(message, LEVEL_STYLES.get(level))
