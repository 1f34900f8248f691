"""
tunepane CLI - Entry point

Parses command-line flags and hands off to the startup pipeline in main.py.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tunepane",
        description="Browse a local music library by artist, album and track.",
    )
    parser.add_argument(
        "--library",
        metavar="PATH",
        help="Library root for this run (overrides [music] library_path)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        type=Path,
        help="Path to config.toml",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print library statistics and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--no-playback",
        action="store_true",
        help="Browse without starting mpv",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    from tunepane import main as app_main

    return app_main.run(
        library_override=args.library,
        show_stats=args.stats,
        log_level=args.log_level,
        playback_enabled=not args.no_playback,
        config_path=args.config,
    )


if __name__ == "__main__":
    sys.exit(main())
