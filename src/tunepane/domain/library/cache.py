"""
Binary metadata cache.

The Song collection is pickled inside a small versioned envelope that also
records the library root it was scanned from. Songs are stored as plain
tuples so the file does not depend on class import paths. There is no
staleness check beyond the root: picking up changes inside the same library
means deleting the cache.
"""

import os
import pickle
import tempfile
from pathlib import Path
from typing import Optional

from loguru import logger

from tunepane.core.errors import CacheCorrupt, CacheStale, CacheWriteFailure

from .models import Song

CACHE_VERSION = 2


def root_key(root: Path) -> str:
    """Normalized form of a library root as stored in the cache."""
    return str(Path(root).expanduser().resolve())


def save_cache(path: Path, songs: list[Song], root: Optional[Path] = None) -> None:
    """Write songs to the cache, creating the parent directory if missing.

    Raises:
        CacheWriteFailure: If the directory or file cannot be written
    """
    payload = {
        "version": CACHE_VERSION,
        "root": root_key(root) if root is not None else None,
        "songs": [tuple(song) for song in songs],
    }

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write to a temp file in the same directory, then swap it in
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".metadata-")
        try:
            with os.fdopen(fd, "wb") as f:
                pickle.dump(payload, f, protocol=pickle.HIGHEST_PROTOCOL)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except (OSError, pickle.PicklingError) as e:
        raise CacheWriteFailure(f"Could not write cache {path}: {e}") from e

    logger.info(f"Saved {len(songs)} songs to cache {path}")


def load_cache(path: Path, root: Optional[Path] = None) -> Optional[list[Song]]:
    """Load songs from the cache.

    Args:
        path: Cache file
        root: When given, the library root the cache must have been built from

    Returns:
        The cached songs, or None when no cache file exists

    Raises:
        CacheCorrupt: If the file exists but cannot be decoded
        CacheStale: If the cache was built from a different library root
    """
    if not path.exists():
        return None

    try:
        with open(path, "rb") as f:
            payload = pickle.load(f)
    except Exception as e:
        raise CacheCorrupt(f"Could not decode cache {path}: {e}") from e

    if not isinstance(payload, dict) or payload.get("version") != CACHE_VERSION:
        raise CacheCorrupt(f"Unrecognized cache format in {path}")

    if root is not None and payload.get("root") != root_key(root):
        raise CacheStale(
            f"Cache {path} was built from {payload.get('root')}, not {root_key(root)}"
        )

    records = payload.get("songs")
    if not isinstance(records, list):
        raise CacheCorrupt(f"Cache {path} has no song list")

    songs = []
    for record in records:
        if not isinstance(record, tuple) or len(record) != len(Song._fields):
            raise CacheCorrupt(f"Malformed song record in cache {path}")
        songs.append(Song(*record))

    logger.info(f"Loaded {len(songs)} songs from cache {path}")
    return songs
