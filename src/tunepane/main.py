"""
tunepane - startup pipeline and interactive session
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from tunepane.context import AppContext
from tunepane.core import config
from tunepane.core.errors import ConfigUnavailable, ScanFailure
from tunepane.core.output import get_console, log, safe_print, setup_loguru
from tunepane.domain import library
from tunepane.domain import playback


def load_library(cfg: config.Config, library_override: Optional[str] = None) -> list:
    """Load songs from the cache, or scan the configured library root.

    The cache is only reused when it was built from the same root, so
    `--library` and TUNEPANE_MUSIC_DIR take effect even after a previous
    run cached another library.

    Raises:
        ScanFailure: If a scan is needed and the root cannot be enumerated
    """
    root = config.expand_library_path(library_override or cfg.music.library_path)
    cache_path = config.get_cache_path()

    with get_console().status(f"Loading {root}..."):
        songs = library.build_songs(
            root, cache_path, cfg.music.supported_formats, cfg.music.scan_workers
        )
    log(f"Library ready: {len(songs)} songs from {root}")
    return songs


def print_library_stats(songs: list) -> None:
    """Print library statistics to the console."""
    stats = library.get_library_stats(songs)
    safe_print("📚 Library Overview:", "cyan")
    safe_print(f"  Songs: {stats['total_songs']}")
    safe_print(f"  Artists: {stats['artists']}")
    safe_print(f"  Albums: {stats['albums']}")
    safe_print(f"  Total duration: {library.format_duration(stats['total_duration'])}")
    if stats["formats"]:
        formats = ", ".join(
            f"{ext}: {count}" for ext, count in sorted(stats["formats"].items())
        )
        safe_print(f"  Formats: {formats}")


def run(
    library_override: Optional[str] = None,
    show_stats: bool = False,
    log_level: Optional[str] = None,
    playback_enabled: bool = True,
    config_path: Optional[Path] = None,
) -> int:
    """Run tunepane. Returns a process exit code."""
    # No sinks until the config names the log file; startup messages use log()
    logger.remove()

    try:
        cfg = config.load_config(config_path)
    except ConfigUnavailable as e:
        safe_print(f"❌ {e}", "bold red")
        return 1

    setup_loguru(
        config.get_log_file_path(cfg),
        level=(log_level or cfg.logging.level).upper(),
        max_file_size_mb=cfg.logging.max_file_size_mb,
        backup_count=cfg.logging.backup_count,
    )

    try:
        songs = load_library(cfg, library_override)
    except ScanFailure as e:
        log(f"❌ {e}", "error")
        return 1

    if show_stats:
        print_library_stats(songs)
        return 0

    ctx = AppContext.create(cfg, songs, playback_enabled=playback_enabled)

    if playback_enabled:
        if playback.check_mpv_available():
            ctx = ctx.with_player_state(playback.start_mpv(cfg))
        else:
            log("mpv not found; tracks can be browsed but not played", "warning")

    # Imported here so --stats never touches the terminal UI
    from tunepane.ui.blessed.app import run_interactive_ui

    try:
        ctx = run_interactive_ui(ctx)
    finally:
        if ctx.player_state:
            playback.stop_mpv(ctx.player_state)

    logger.info("Session ended")
    return 0
