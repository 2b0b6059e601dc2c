"""CLI layer for drush-shell.

This module provides the command-line interface for drush-shell,
built on Typer with Rich formatting support.

Usage:
    # Start the shell, forwarding to `drush @site <command>`
    drush-shell shell --commands commands.json drush @site

    # Run one line
    drush-shell exec "status" --commands commands.json
"""

from drush_shell.cli.app import app, main
from drush_shell.cli.context import build_shell, create_context, load_records
from drush_shell.cli.options import (
    CommandsOption,
    ConfigOption,
    FormatChoice,
    FormatOption,
    NoPagerOption,
    VerboseOption,
)

__all__ = [
    # App
    "app",
    "main",
    # Context
    "build_shell",
    "create_context",
    "load_records",
    # Options
    "CommandsOption",
    "ConfigOption",
    "FormatChoice",
    "FormatOption",
    "NoPagerOption",
    "VerboseOption",
]
