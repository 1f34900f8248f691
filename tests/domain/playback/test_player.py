"""Tests for the mpv hand-off."""

from unittest.mock import MagicMock, patch

import pytest

from tunepane.core.errors import PlaybackFailure
from tunepane.domain.playback.player import (
    PlayerState,
    is_mpv_running,
    play_file,
    send_mpv_command,
)


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "song.flac"
    path.write_bytes(b"")
    return str(path)


class TestPlayFile:
    """Test play_file failure modes and the success path."""

    def test_missing_file_raises(self, tmp_path):
        state = PlayerState(socket_path=str(tmp_path / "mpv.sock"))
        with pytest.raises(PlaybackFailure, match="File not found"):
            play_file(state, str(tmp_path / "gone.flac"))

    def test_no_player_raises(self, audio_file):
        with pytest.raises(PlaybackFailure, match="not running"):
            play_file(None, audio_file)

    def test_rejected_load_raises(self, audio_file):
        state = PlayerState(socket_path="/tmp/mpv.sock")
        with patch(
            "tunepane.domain.playback.player.is_mpv_running", return_value=True
        ), patch(
            "tunepane.domain.playback.player.send_mpv_command", return_value=False
        ):
            with pytest.raises(PlaybackFailure):
                play_file(state, audio_file)

    def test_success_replaces_current_track(self, audio_file):
        state = PlayerState(socket_path="/tmp/mpv.sock", current_track="/old.mp3")
        with patch(
            "tunepane.domain.playback.player.is_mpv_running", return_value=True
        ), patch(
            "tunepane.domain.playback.player.send_mpv_command", return_value=True
        ) as mock_send:
            new_state = play_file(state, audio_file)

        assert new_state.current_track == audio_file
        first_command = mock_send.call_args_list[0].args[1]
        assert first_command == {"command": ["loadfile", audio_file, "replace"]}


class TestIsMpvRunning:
    """Test is_mpv_running."""

    def test_none_state(self):
        assert not is_mpv_running(None)

    def test_exited_process(self, tmp_path):
        process = MagicMock()
        process.poll.return_value = 0
        assert not is_mpv_running(PlayerState(str(tmp_path), process))

    def test_live_process_with_socket(self, tmp_path):
        sock = tmp_path / "mpv.sock"
        sock.write_bytes(b"")
        process = MagicMock()
        process.poll.return_value = None
        assert is_mpv_running(PlayerState(str(sock), process))


class TestSendMpvCommand:
    """Test send_mpv_command without a live socket."""

    def test_missing_socket(self, tmp_path):
        assert not send_mpv_command(str(tmp_path / "nope.sock"), {"command": []})

    def test_no_socket_path(self):
        assert not send_mpv_command(None, {"command": []})
