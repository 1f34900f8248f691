"""
Music metadata extraction and track information utilities.

Reads tags from audio files using Mutagen and provides formatting helpers
for displaying song information.
"""

from typing import Any, Optional

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from tunepane.core.errors import TagReadFailure

from .models import Song

UNKNOWN = "Unknown"


def get_tag_value(audio_file: Any, tag_names: list[str]) -> Optional[str]:
    """Get tag value, trying multiple possible tag names."""
    for tag_name in tag_names:
        try:
            value = audio_file.get(tag_name)
            if value:
                # Handle different formats
                if isinstance(value, list) and value:
                    return str(value[0])
                return str(value)
        except (KeyError, ValueError):
            # Some formats (like Vorbis) raise ValueError for non-existent keys
            continue
    return None


def parse_leading_int(value: Optional[str]) -> int:
    """Parse the leading integer of tag text such as "3/12" or "1999-04-01".

    Returns 0 when no number can be read.
    """
    if not value:
        return 0
    digits = ""
    for char in value.strip():
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else 0


def extract_song_metadata(local_path: str) -> Song:
    """Extract tags from an audio file using mutagen.

    Raises:
        TagReadFailure: If mutagen cannot open or parse the file
    """
    try:
        audio_file = MutagenFile(local_path)
    except (MutagenError, OSError) as e:
        raise TagReadFailure(local_path, str(e)) from e

    if audio_file is None:
        raise TagReadFailure(local_path, "unrecognized audio format")

    # ID3 (MP3/WAV) frames, then Vorbis comments (FLAC)
    title = get_tag_value(audio_file, ["TIT2", "TITLE", "title"])
    artist = get_tag_value(audio_file, ["TPE1", "ARTIST", "artist"])
    album = get_tag_value(audio_file, ["TALB", "ALBUM", "album"])
    genre = get_tag_value(audio_file, ["TCON", "GENRE", "genre"])
    track_str = get_tag_value(audio_file, ["TRCK", "TRACKNUMBER", "tracknumber"])
    year_str = get_tag_value(
        audio_file, ["TDRC", "TYER", "DATE", "YEAR", "date", "year"]
    )

    duration = None
    info = getattr(audio_file, "info", None)
    if info is not None:
        duration = getattr(info, "length", None)

    song = Song(
        artist=artist or UNKNOWN,
        album=album or UNKNOWN,
        title=title or UNKNOWN,
        path=str(local_path),
        duration=duration,
        track=parse_leading_int(track_str),
        year=parse_leading_int(year_str),
        genre=genre or UNKNOWN,
    )
    logger.debug(f"Read tags: {song.artist} / {song.album} / {song.title}")
    return song


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human readable string."""
    if not seconds:
        return "0:00"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
