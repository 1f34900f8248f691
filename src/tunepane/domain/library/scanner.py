"""
Music library scanning.

Enumerates audio files under the library root, reads their tags on a small
fixed worker pool, and persists the result to the metadata cache.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from tunepane.core.errors import (
    CacheCorrupt,
    CacheStale,
    CacheWriteFailure,
    ScanFailure,
    TagReadFailure,
)

from .cache import load_cache, save_cache
from .metadata import extract_song_metadata
from .models import Song

DEFAULT_FORMATS = (".flac", ".mp3", ".wav")
SCAN_WORKERS = 4


def is_supported_format(local_path: Path, supported_formats: Iterable[str]) -> bool:
    """Check if file format is supported."""
    return local_path.suffix.lower() in supported_formats


def find_audio_files(
    directory: Path, supported_formats: Iterable[str] = DEFAULT_FORMATS
) -> list[Path]:
    """Recursively list audio files under a directory, sorted by path.

    Raises:
        ScanFailure: If the directory is missing or cannot be enumerated
    """
    supported_formats = tuple(ext.lower() for ext in supported_formats)

    if not directory.is_dir():
        raise ScanFailure(f"Library path is not a directory: {directory}")

    try:
        files = [
            path
            for path in directory.rglob("*")
            if is_supported_format(path, supported_formats) and path.is_file()
        ]
    except OSError as e:
        raise ScanFailure(f"Error scanning directory {directory}: {e}") from e

    return sorted(files)


def partition_files(files: list[Path], workers: int = SCAN_WORKERS) -> list[list[Path]]:
    """Split files into at most `workers` contiguous, disjoint chunks.

    The first `len(files) % workers` chunks take one extra file, so the
    remainder is never dropped and chunk sizes differ by at most one.
    Concatenating the chunks gives back the input.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    base, extra = divmod(len(files), workers)
    chunks = []
    start = 0
    for i in range(workers):
        size = base + (1 if i < extra else 0)
        if size == 0:
            break
        chunks.append(files[start : start + size])
        start += size
    return chunks


def scan_chunk(chunk: list[Path]) -> list[Song]:
    """Read tags for one chunk, skipping files whose tags cannot be read."""
    songs = []
    for local_path in chunk:
        try:
            songs.append(extract_song_metadata(str(local_path)))
        except TagReadFailure as e:
            logger.warning(str(e))
    return songs


def scan_library(
    directory: Path,
    supported_formats: Iterable[str] = DEFAULT_FORMATS,
    workers: int = SCAN_WORKERS,
) -> list[Song]:
    """Scan a library root and return its songs.

    Chunks are read in parallel and joined in chunk order. That order follows
    the sorted file list, not necessarily the order the filesystem yields
    entries in.

    Raises:
        ScanFailure: If the root cannot be enumerated
    """
    files = find_audio_files(directory, supported_formats)
    chunks = partition_files(files, workers)
    logger.info(
        f"Scanning {len(files)} audio files in {directory} "
        f"({len(chunks)} chunks, {workers} workers)"
    )

    songs: list[Song] = []
    if not chunks:
        return songs

    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields results in submission order
        for chunk_songs in executor.map(scan_chunk, chunks):
            songs.extend(chunk_songs)

    skipped = len(files) - len(songs)
    logger.info(f"Library scan complete: {len(songs)} songs, {skipped} skipped")
    return songs


def build_songs(
    directory: Path,
    cache_path: Path,
    supported_formats: Iterable[str] = DEFAULT_FORMATS,
    workers: int = SCAN_WORKERS,
) -> list[Song]:
    """Load songs from the cache, or scan the library and cache the result.

    A corrupt cache, or one built from a different library root, falls back
    to a fresh scan that replaces it. A cache that cannot be written is
    logged and the scanned songs are still returned.

    Raises:
        ScanFailure: If a scan is needed and the root cannot be enumerated
    """
    cached: Optional[list[Song]] = None
    try:
        cached = load_cache(cache_path, root=directory)
    except (CacheCorrupt, CacheStale) as e:
        logger.warning(f"{e}; rescanning library")

    if cached is not None:
        return cached

    songs = scan_library(directory, supported_formats, workers)

    try:
        save_cache(cache_path, songs, root=directory)
    except CacheWriteFailure as e:
        logger.error(f"{e}; continuing with in-memory library")

    return songs
