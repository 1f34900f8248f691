"""
Music library domain models.

Contains the flat Song collection and the Album/Artist views derived from it.
Albums and artists hold integer indices into the owning collections rather
than copies, so any change to song data means re-deriving the whole index.
"""

from typing import NamedTuple, Optional


class Song(NamedTuple):
    """Represents one audio file and its tags.

    Missing text tags are stored as "Unknown", missing numbers as 0.
    """

    artist: str
    album: str
    title: str
    path: str
    duration: Optional[float] = None  # in seconds
    track: int = 0
    year: int = 0
    genre: str = "Unknown"


class Album(NamedTuple):
    """An album keyed by title.

    `artists` must stay sorted: membership is tested by binary search.
    Albums sharing a title are merged, even across unrelated releases.
    """

    title: str
    artists: tuple[str, ...]
    song_indices: tuple[int, ...]  # into LibraryIndex.songs


class Artist(NamedTuple):
    """An artist and the albums that list them."""

    name: str
    album_indices: tuple[int, ...]  # into LibraryIndex.albums


class LibraryIndex(NamedTuple):
    """Songs plus the sorted, deduplicated album and artist views."""

    songs: tuple[Song, ...]
    albums: tuple[Album, ...]
    artists: tuple[Artist, ...]
