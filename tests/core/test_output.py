"""Tests for the unified output helpers."""

from unittest.mock import patch

from loguru import logger

from tunepane.core.output import (
    clear_blessed_mode,
    drain_pending_status_messages,
    log,
    set_blessed_mode,
    setup_loguru,
)


class TestLog:
    """Test log() routing between stdout and the status queue."""

    def test_prints_outside_blessed_mode(self, capsys):
        log("Library scan complete: 3 songs found")
        assert "Library scan complete" in capsys.readouterr().out
        assert drain_pending_status_messages() == []

    def test_queues_in_blessed_mode(self, capsys):
        set_blessed_mode()
        try:
            log("mpv exited", "warning")
        finally:
            clear_blessed_mode()

        assert capsys.readouterr().out == ""
        assert drain_pending_status_messages() == [("mpv exited", "warning")]
        assert drain_pending_status_messages() == []


class TestSetupLoguru:
    """Test file logging setup."""

    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "tunepane.log"
        setup_loguru(log_file, level="DEBUG")
        logger.debug("scan started")
        logger.remove()

        content = log_file.read_text()
        assert "Loguru initialized" in content
        assert "scan started" in content


class TestConsole:
    """Test styled console printing for user-facing levels."""

    def test_level_style_applied(self):
        with patch("tunepane.core.output.safe_print") as mock_print:
            log("Cache unreadable", "warning")
            log("Library ready")

        assert mock_print.call_args_list[0].args == ("Cache unreadable", "yellow")
        assert mock_print.call_args_list[1].args == ("Library ready", None)
