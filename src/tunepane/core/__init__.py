"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Error kinds shared by every layer
- Output routing (Loguru + Rich)

Clean architecture principle: The core layer has no dependencies on
domain or application layers.
"""

# Configuration
from .config import (
    Config,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_cache_path,
    get_log_file_path,
    expand_library_path,
    create_default_config,
)

# Errors
from .errors import (
    TunepaneError,
    ConfigUnavailable,
    ScanFailure,
    TagReadFailure,
    CacheCorrupt,
    CacheStale,
    CacheWriteFailure,
    PlaybackFailure,
)

# Console output
from .output import get_console, log, safe_print

__all__ = [
    # Config
    "Config",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_cache_path",
    "get_log_file_path",
    "expand_library_path",
    "create_default_config",
    # Errors
    "TunepaneError",
    "ConfigUnavailable",
    "ScanFailure",
    "TagReadFailure",
    "CacheCorrupt",
    "CacheStale",
    "CacheWriteFailure",
    "PlaybackFailure",
    # Console
    "get_console",
    "safe_print",
    "log",
]
