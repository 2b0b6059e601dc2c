"""Shared CLI options for drush-shell commands.

This module provides reusable Typer options that are shared across
the shell and exec commands.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from drush_shell.config.schema import OutputFormat


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    RICH = "rich"


FormatOption = Annotated[
    FormatChoice | None,
    typer.Option(
        "--format",
        "-f",
        help="Output format (plain, rich). Defaults to config setting.",
        case_sensitive=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file to use instead of the default location.",
        dir_okay=False,
    ),
]

CommandsOption = Annotated[
    Path | None,
    typer.Option(
        "--commands",
        help="JSON file with the external tool's command records.",
        exists=True,
        dir_okay=False,
    ),
]

NoPagerOption = Annotated[
    bool,
    typer.Option(
        "--no-pager",
        help="Never page long help output.",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show debug logging, including forwarded command lines.",
    ),
]

InvocationArgument = Annotated[
    list[str] | None,
    typer.Argument(
        help="How the external tool is invoked, e.g. 'drush @site --root=/srv'. "
        "Options this command doesn't know are passed through; put them after "
        "`--` if they clash. Defaults to the configured tool name.",
    ),
]


def get_output_format(
    format_choice: FormatChoice | None, default: str = "rich"
) -> OutputFormat:
    """Convert CLI format choice to OutputFormat."""
    if format_choice is None:
        return OutputFormat(default)
    return OutputFormat(format_choice.value)
