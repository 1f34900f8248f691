"""Library domain - music file scanning, metadata and index derivation.

This domain handles:
- Song, Album and Artist models
- Tag extraction from audio files
- Parallel library scanning and the metadata cache
- Deriving the sorted artist/album index
"""

# Models
from .models import Album, Artist, LibraryIndex, Song

# Metadata extraction and display
from .metadata import (
    get_tag_value,
    extract_song_metadata,
    format_duration,
)

# Cache
from .cache import load_cache, save_cache

# Library scanning
from .scanner import (
    is_supported_format,
    find_audio_files,
    partition_files,
    scan_chunk,
    scan_library,
    build_songs,
)

# Index derivation
from .index import (
    album_has_artist,
    derive,
    albums_for_artist,
    find_album,
    songs_for_album,
    find_song_by_title,
    get_library_stats,
)

__all__ = [
    # Models
    "Album",
    "Artist",
    "LibraryIndex",
    "Song",
    # Metadata
    "get_tag_value",
    "extract_song_metadata",
    "format_duration",
    # Cache
    "load_cache",
    "save_cache",
    # Scanning
    "is_supported_format",
    "find_audio_files",
    "partition_files",
    "scan_chunk",
    "scan_library",
    "build_songs",
    # Index
    "album_has_artist",
    "derive",
    "albums_for_artist",
    "find_album",
    "songs_for_album",
    "find_song_by_title",
    "get_library_stats",
]
