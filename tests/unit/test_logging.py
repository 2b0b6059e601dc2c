"""Tests for logging setup."""

import json
import logging
from pathlib import Path

import pytest

from drush_shell.utils.logging import (
    ConsoleFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


def make_record(message: str = "Forwarding command", **context: object) -> logging.LogRecord:
    record = logging.LogRecord(
        "drush_shell.commands.proxy", logging.WARNING, __file__, 1, message, (), None
    )
    if context:
        record.extra = context
    return record


class TestFormatters:
    """Tests for the console and JSON formatters."""

    def test_console_plain(self) -> None:
        line = ConsoleFormatter(use_color=False).format(make_record())
        assert line == "WARNING  drush_shell.commands.proxy: Forwarding command"

    def test_console_context(self) -> None:
        line = ConsoleFormatter(use_color=False).format(make_record(returncode=2))
        assert line.endswith("Forwarding command (returncode=2)")

    def test_console_color(self) -> None:
        line = ConsoleFormatter(use_color=True).format(make_record())
        assert line.startswith("\033[33mWARNING ")

    def test_json(self) -> None:
        data = json.loads(JSONFormatter().format(make_record(command="status")))

        assert data["level"] == "WARNING"
        assert data["logger"] == "drush_shell.commands.proxy"
        assert data["message"] == "Forwarding command"
        assert data["command"] == "status"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_and_handlers(self) -> None:
        configured = setup_logging(level="debug")

        assert configured.name == "drush_shell"
        assert configured.level == logging.DEBUG
        assert len(configured.handlers) == 1
        assert configured.propagate is False

    def test_unknown_level_falls_back(self) -> None:
        assert setup_logging(level="chatty").level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging()
        assert len(setup_logging().handlers) == 1

    def test_log_file_gets_json(self, temp_dir: Path) -> None:
        log_file = temp_dir / "logs" / "drush-shell.log"
        setup_logging(level="INFO", log_file=log_file)

        log_with_context(get_logger("drush_shell.test"), logging.INFO, "Ran", returncode=0)
        for handler in logging.getLogger("drush_shell").handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "Ran"
        assert data["returncode"] == 0


class TestLogWithContext:
    """Tests for log_with_context."""

    def test_context_on_record(self, caplog: pytest.LogCaptureFixture) -> None:
        log = logging.getLogger("test_drush_shell")
        with caplog.at_level(logging.DEBUG, logger="test_drush_shell"):
            log_with_context(log, logging.DEBUG, "Forwarding command", command="st")

        (record,) = caplog.records
        assert record.getMessage() == "Forwarding command"
        assert record.extra == {"command": "st"}

    def test_disabled_level_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        log = logging.getLogger("test_drush_shell")
        with caplog.at_level(logging.WARNING, logger="test_drush_shell"):
            log_with_context(log, logging.DEBUG, "quiet", command="st")

        assert caplog.records == []
