"""Pytest fixtures for drush-shell tests."""

import logging
import tempfile
from collections.abc import Generator
from io import StringIO
from pathlib import Path
from typing import Any

import pytest

from drush_shell.commands.base import CommandContext
from drush_shell.config import reset_config
from drush_shell.config.schema import ShellConfig
from drush_shell.output.plain import PlainOutput


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_config_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset config singleton between tests and keep the user's config out."""
    monkeypatch.setenv("DRUSH_SHELL_CONFIG", "/nonexistent/drush-shell/config.toml")
    for name in ("DRUSH_SHELL_LOG_LEVEL", "DRUSH_SHELL_TOOL", "DRUSH_SHELL_NO_PAGER"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
    log = logging.getLogger("drush_shell")
    for handler in log.handlers:
        handler.close()
    log.handlers.clear()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
tool_name = "drush"
wrap_width = 40
use_shell = false

[category_titles]
core = "Core drush commands"

[output]
default_format = "plain"
pager = false
""")
    return config_path


@pytest.fixture
def stdout() -> StringIO:
    return StringIO()


@pytest.fixture
def stderr() -> StringIO:
    return StringIO()


@pytest.fixture
def plain_output(stdout: StringIO, stderr: StringIO) -> PlainOutput:
    """A plain output sink writing to in-memory streams."""
    return PlainOutput(stream=stdout, error_stream=stderr, pager=False)


@pytest.fixture
def ctx(plain_output: PlainOutput) -> CommandContext:
    """A command context forwarding to `drush @site`."""
    return CommandContext(
        output=plain_output,
        config=ShellConfig(),
        argv=["/usr/local/bin/drush", "@site", "shell"],
    )


@pytest.fixture
def status_record() -> dict[str, Any]:
    """A drush-style command record."""
    return {
        "command": "core-status",
        "aliases": ["status", "st"],
        "category": "core",
        "path": "/usr/share/drush/commands/core",
        "description": "Provides a birds-eye view of the current Drupal installation, if any.",
        "arguments": {
            "item": "Optional.  The status item line(s) to display.",
        },
        "required-arguments": False,
        "options": {
            "show-passwords": {"description": "Show database password."},
            "format": {
                "description": "Select output format.",
                "value": "optional",
            },
            "hidden-thing": {"description": "Internal.", "hidden": True},
        },
        "examples": {
            "drush core-status --format=json": "Show all status items as JSON.",
            "drush core-status | grep version": "Pipelines are skipped.",
            "": "Empty examples are skipped.",
        },
        "bootstrap": 1,
        "engines": [],
    }
