"""
Library index derivation.

Turns the flat Song collection into sorted, deduplicated Album and Artist
views. Pure functions only: no I/O, and the same songs always produce the
same orderings.
"""

from bisect import bisect_left
from typing import Any, Iterable, Optional

from .models import Album, Artist, LibraryIndex, Song


def album_has_artist(album: Album, name: str) -> bool:
    """Binary-search membership test over the album's sorted artists."""
    pos = bisect_left(album.artists, name)
    return pos < len(album.artists) and album.artists[pos] == name


def derive_albums(songs: tuple[Song, ...]) -> tuple[Album, ...]:
    """Group songs into albums keyed by exact title, sorted by title."""
    members: dict[str, list[int]] = {}
    for i, song in enumerate(songs):
        members.setdefault(song.album, []).append(i)

    albums = []
    for title in sorted(members):
        indices = tuple(members[title])
        artists = tuple(sorted({songs[i].artist for i in indices}))
        albums.append(Album(title=title, artists=artists, song_indices=indices))
    return tuple(albums)


def derive_artists(
    songs: tuple[Song, ...], albums: tuple[Album, ...]
) -> tuple[Artist, ...]:
    """Build one Artist per distinct song artist, sorted by name."""
    names = sorted({song.artist for song in songs})
    return tuple(
        Artist(
            name=name,
            album_indices=tuple(
                i for i, album in enumerate(albums) if album_has_artist(album, name)
            ),
        )
        for name in names
    )


def derive(songs: Iterable[Song]) -> LibraryIndex:
    """Derive the full library index from a Song collection."""
    songs = tuple(songs)
    albums = derive_albums(songs)
    artists = derive_artists(songs, albums)
    return LibraryIndex(songs=songs, albums=albums, artists=artists)


def albums_for_artist(index: LibraryIndex, name: str) -> list[Album]:
    """Albums credited to an artist, in index order."""
    for artist in index.artists:
        if artist.name == name:
            return [index.albums[i] for i in artist.album_indices]
    return []


def find_album(index: LibraryIndex, title: str) -> Optional[Album]:
    """Look up an album by exact title."""
    pos = bisect_left([album.title for album in index.albums], title)
    if pos < len(index.albums) and index.albums[pos].title == title:
        return index.albums[pos]
    return None


def songs_for_album(index: LibraryIndex, album: Album) -> list[Song]:
    """Songs of an album, in Song-collection order."""
    return [index.songs[i] for i in album.song_indices]


def find_song_by_title(
    index: LibraryIndex, title: str, album: Optional[Album] = None
) -> Optional[Song]:
    """Resolve a displayed title to a Song by exact match.

    When `album` is given its songs are searched first, so a title shared by
    songs on different albums resolves to the one being browsed. Otherwise
    the first match in the full collection wins.
    """
    if album is not None:
        for song in songs_for_album(index, album):
            if song.title == title:
                return song

    for song in index.songs:
        if song.title == title:
            return song
    return None


def get_library_stats(songs: Iterable[Song]) -> dict[str, Any]:
    """Get statistics about the music library."""
    songs = list(songs)
    if not songs:
        return {
            "total_songs": 0,
            "total_duration": 0,
            "artists": 0,
            "albums": 0,
            "formats": {},
            "genres": {},
        }

    formats: dict[str, int] = {}
    genres: dict[str, int] = {}
    for song in songs:
        ext = song.path.rsplit(".", 1)[-1].lower() if "." in song.path else ""
        formats[ext] = formats.get(ext, 0) + 1
        genres[song.genre] = genres.get(song.genre, 0) + 1

    return {
        "total_songs": len(songs),
        "total_duration": sum(song.duration or 0 for song in songs),
        "artists": len({song.artist for song in songs}),
        "albums": len({song.album for song in songs}),
        "formats": formats,
        "genres": genres,
    }
