"""
Configuration management for tunepane
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import ConfigUnavailable
from .output import log

# Environment variable that replaces [music] library_path for a single run
MUSIC_DIR_ENV = "TUNEPANE_MUSIC_DIR"

CACHE_FILE_NAME = "metadata.bin"


@dataclass
class MusicConfig:
    """Configuration for music library settings."""

    library_path: str = "~/Music"
    supported_formats: List[str] = field(
        default_factory=lambda: [".flac", ".mp3", ".wav"]
    )
    scan_workers: int = 4


@dataclass
class PlayerConfig:
    """Configuration for music player settings."""

    mpv_socket_path: Optional[str] = None
    volume: int = 50


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/tunepane/tunepane.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "tunepane"
    return Path.home() / ".config" / "tunepane"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/tunepane (or ~/.config/tunepane)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "tunepane"
    return Path.home() / ".local" / "share" / "tunepane"


def get_cache_path() -> Path:
    """Get the metadata cache path (lives beside the config file)."""
    return get_config_dir() / CACHE_FILE_NAME


def get_log_file_path(config: Optional[Config] = None) -> Path:
    """Get the log file path, honouring [logging] log_file when set."""
    if config and config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "tunepane.log"


def expand_library_path(path_str: str) -> Path:
    """Expand a configured library path, resolving a leading ``~/``."""
    return Path(path_str).expanduser()


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# tunepane Configuration

[music]
# Root directory of your music library
library_path = "~/Music"

# Audio file extensions picked up by the scanner
supported_formats = [".flac", ".mp3", ".wav"]

# Number of tag-reading workers used during a scan
scan_workers = 4

[player]
# Path for mpv socket (auto-generated if not specified)
# mpv_socket_path = "/tmp/tunepane-mpv"

# Default volume (0-100)
volume = 50

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/tunepane/tunepane.log)
# log_file = "/path/to/custom/tunepane.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - TUNEPANE_MUSIC_DIR

    Raises:
        ConfigUnavailable: If the file exists but cannot be read or parsed
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            log(f"Created default configuration at: {config_path}")
        except OSError as e:
            log(f"Could not write default config to {config_path}: {e}", "warning")
        return _apply_env_overrides(config)

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except OSError as e:
        raise ConfigUnavailable(f"Cannot read {config_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigUnavailable(f"Invalid TOML in {config_path}: {e}") from e

    # Parse configuration sections
    config = Config()

    if "music" in toml_data:
        music_data = toml_data["music"]
        config.music = MusicConfig(
            library_path=music_data.get("library_path", config.music.library_path),
            supported_formats=[
                ext.lower() if ext.startswith(".") else f".{ext.lower()}"
                for ext in music_data.get(
                    "supported_formats", config.music.supported_formats
                )
            ],
            scan_workers=music_data.get("scan_workers", config.music.scan_workers),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            mpv_socket_path=player_data.get("mpv_socket_path"),
            volume=player_data.get("volume", config.player.volume),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
        )

    if config.music.scan_workers < 1:
        log(
            f"scan_workers must be at least 1, got {config.music.scan_workers}; using 4",
            "warning",
        )
        config.music.scan_workers = 4

    return _apply_env_overrides(config)


def _apply_env_overrides(config: Config) -> Config:
    music_dir = os.environ.get(MUSIC_DIR_ENV)
    if music_dir:
        config.music.library_path = music_dir
    return config
