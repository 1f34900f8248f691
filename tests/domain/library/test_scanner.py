"""Tests for library scanning, partitioning and the cache fallbacks."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tunepane.core.errors import CacheWriteFailure, ScanFailure, TagReadFailure
from tunepane.domain.library.cache import load_cache, save_cache
from tunepane.domain.library.models import Song
from tunepane.domain.library.scanner import (
    build_songs,
    find_audio_files,
    partition_files,
    scan_chunk,
    scan_library,
)


def fake_extract(local_path: str) -> Song:
    """Stand-in for tag reading: derive a Song from the file name."""
    path = Path(local_path)
    if path.stem.startswith("broken"):
        raise TagReadFailure(local_path, "bad header")
    return Song(
        artist=path.parent.name,
        album="Album",
        title=path.stem,
        path=local_path,
    )


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Library with 7 audio files, a cover image and a nested directory."""
    root = tmp_path / "music"
    (root / "artist_a").mkdir(parents=True)
    (root / "artist_b" / "disc2").mkdir(parents=True)
    for name in ["01.flac", "02.mp3", "03.WAV"]:
        (root / "artist_a" / name).write_bytes(b"")
    for name in ["01.flac", "02.flac"]:
        (root / "artist_b" / name).write_bytes(b"")
    for name in ["03.mp3", "04.mp3"]:
        (root / "artist_b" / "disc2" / name).write_bytes(b"")
    (root / "artist_a" / "cover.jpg").write_bytes(b"")
    (root / "notes.txt").write_text("not audio")
    return root


class TestFindAudioFiles:
    """Test directory enumeration and extension filtering."""

    def test_filters_extensions_recursively(self, library_dir):
        files = find_audio_files(library_dir)
        assert len(files) == 7
        assert all(f.suffix.lower() in {".flac", ".mp3", ".wav"} for f in files)

    def test_sorted(self, library_dir):
        files = find_audio_files(library_dir)
        assert files == sorted(files)

    def test_custom_formats(self, library_dir):
        files = find_audio_files(library_dir, [".mp3"])
        assert len(files) == 3

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(ScanFailure):
            find_audio_files(tmp_path / "does-not-exist")

    def test_file_root_raises(self, tmp_path):
        file_root = tmp_path / "song.mp3"
        file_root.write_bytes(b"")
        with pytest.raises(ScanFailure):
            find_audio_files(file_root)


class TestPartitionFiles:
    """Test contiguous, remainder-aware chunking."""

    @pytest.mark.parametrize("count", [0, 1, 3, 4, 5, 7, 8, 13, 101])
    def test_every_file_exactly_once(self, count):
        files = [Path(f"/m/{i:03d}.mp3") for i in range(count)]
        chunks = partition_files(files, 4)
        flattened = [f for chunk in chunks for f in chunk]
        assert flattened == files

    def test_remainder_spread_over_first_chunks(self):
        files = [Path(f"/m/{i}.mp3") for i in range(10)]
        sizes = [len(chunk) for chunk in partition_files(files, 4)]
        assert sizes == [3, 3, 2, 2]

    def test_fewer_files_than_workers(self):
        files = [Path("/m/a.mp3"), Path("/m/b.mp3")]
        assert partition_files(files, 4) == [[files[0]], [files[1]]]

    def test_no_files_no_chunks(self):
        assert partition_files([], 4) == []

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            partition_files([Path("/m/a.mp3")], 0)


class TestScanChunk:
    """Test per-chunk tag extraction."""

    def test_skips_unreadable_files(self):
        chunk = [Path("/m/a/good.mp3"), Path("/m/a/broken.mp3"), Path("/m/a/fine.mp3")]
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = scan_chunk(chunk)
        assert [s.title for s in songs] == ["good", "fine"]


class TestScanLibrary:
    """Test the parallel scan."""

    def test_processes_every_file_once(self, library_dir):
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = scan_library(library_dir, workers=4)

        paths = [song.path for song in songs]
        assert len(paths) == 7
        assert len(set(paths)) == 7

    def test_order_is_chunk_order(self, library_dir):
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = scan_library(library_dir, workers=4)

        expected = [str(f) for f in find_audio_files(library_dir)]
        assert [song.path for song in songs] == expected

    def test_broken_file_excluded(self, library_dir):
        (library_dir / "artist_a" / "broken.flac").write_bytes(b"")
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = scan_library(library_dir)
        assert len(songs) == 7
        assert all(song.title != "broken" for song in songs)

    def test_empty_library(self, tmp_path):
        assert scan_library(tmp_path) == []


class TestBuildSongs:
    """Test cache-or-scan behaviour."""

    def test_scan_writes_cache(self, library_dir, tmp_path):
        cache_path = tmp_path / "config" / "tunepane" / "metadata.bin"
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = build_songs(library_dir, cache_path)

        assert cache_path.exists()
        assert load_cache(cache_path) == songs

    def test_cache_hit_skips_scan(self, tmp_path):
        cache_path = tmp_path / "metadata.bin"
        cached = [Song("A", "X", "1", "/m/1.mp3")]
        save_cache(cache_path, cached, root=tmp_path / "missing-root")

        with patch("tunepane.domain.library.scanner.scan_library") as mock_scan:
            songs = build_songs(tmp_path / "missing-root", cache_path)

        mock_scan.assert_not_called()
        assert songs == cached

    def test_cache_from_other_root_rescans(self, library_dir, tmp_path):
        cache_path = tmp_path / "metadata.bin"
        save_cache(
            cache_path, [Song("A", "X", "1", "/m/1.mp3")], root=tmp_path / "elsewhere"
        )

        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = build_songs(library_dir, cache_path)

        assert len(songs) == 7
        assert load_cache(cache_path, root=library_dir) == songs

    def test_corrupt_cache_rescans(self, library_dir, tmp_path):
        cache_path = tmp_path / "metadata.bin"
        cache_path.write_bytes(b"\x00garbage")

        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ):
            songs = build_songs(library_dir, cache_path)

        assert len(songs) == 7
        assert load_cache(cache_path) == songs

    def test_cache_write_failure_keeps_songs(self, library_dir, tmp_path):
        with patch(
            "tunepane.domain.library.scanner.extract_song_metadata",
            side_effect=fake_extract,
        ), patch(
            "tunepane.domain.library.scanner.save_cache",
            side_effect=CacheWriteFailure("read-only"),
        ):
            songs = build_songs(library_dir, tmp_path / "metadata.bin")

        assert len(songs) == 7

    def test_unreadable_root_raises(self, tmp_path):
        with pytest.raises(ScanFailure):
            build_songs(tmp_path / "missing", tmp_path / "metadata.bin")
