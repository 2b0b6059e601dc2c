"""Factories for building a configured shell from CLI options."""

import json
from pathlib import Path
from typing import Any

from drush_shell.cli.options import FormatChoice, get_output_format
from drush_shell.commands.base import CommandContext
from drush_shell.commands.schema import CommandConfig
from drush_shell.config import get_config, load_config
from drush_shell.config.schema import ShellConfig
from drush_shell.exceptions import ConfigError, ConfigValidationError
from drush_shell.output import get_output
from drush_shell.output.base import OutputSink
from drush_shell.shell import Shell, create_shell
from drush_shell.utils.logging import setup_logging


def resolve_config(config_path: Path | None = None) -> ShellConfig:
    """Load an explicit config file, or fall back to the global config."""
    if config_path is not None:
        return load_config(config_path)
    return get_config()


def load_records(path: Path) -> list[CommandConfig]:
    """Read command records from a JSON file.

    The file holds either a list of records or an object mapping command
    names to records; in the latter case a record's missing ``command``
    key is filled from its name.

    Raises:
        ConfigError: If the file cannot be read or parsed.
        ConfigValidationError: If a record is invalid.
    """
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to load command records from {path}: {e}") from e

    items: list[Any]
    if isinstance(data, dict):
        items = [
            {"command": name, **record} if isinstance(record, dict) else record
            for name, record in data.items()
        ]
    elif isinstance(data, list):
        items = data
    else:
        raise ConfigValidationError(
            f"Command records in {path} must be a JSON list or object"
        )

    try:
        return [CommandConfig.model_validate(item) for item in items]
    except Exception as e:
        raise ConfigValidationError(f"Invalid command record in {path}: {e}") from e


def create_output(
    format_choice: FormatChoice | None = None,
    verbose: bool = False,
    no_pager: bool = False,
    config: ShellConfig | None = None,
) -> OutputSink:
    """Create an output sink from configuration and CLI overrides."""
    if config is None:
        config = get_config()

    output_format = get_output_format(format_choice, config.output.default_format)
    return get_output(
        output_format,
        verbose=verbose,
        pager=config.output.pager and not no_pager,
        color=config.output.color,
    )


def create_context(
    *,
    invocation: list[str] | None = None,
    format_choice: FormatChoice | None = None,
    no_pager: bool = False,
    verbose: bool = False,
    config: ShellConfig | None = None,
) -> CommandContext:
    """Create a CommandContext from CLI options.

    Args:
        invocation: The external tool's invocation vector. Defaults to
            the configured tool name alone.
        format_choice: Output format override.
        no_pager: Disable paging.
        verbose: Enable debug logging.
        config: Configuration to use. If None, uses global config.
    """
    if config is None:
        config = get_config()

    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        use_color=config.output.color,
    )

    return CommandContext(
        output=create_output(format_choice, verbose, no_pager, config),
        config=config,
        argv=list(invocation) if invocation else [config.tool_name],
        verbose=verbose,
    )


def build_shell(
    *,
    commands_file: Path | None = None,
    config_path: Path | None = None,
    invocation: list[str] | None = None,
    format_choice: FormatChoice | None = None,
    no_pager: bool = False,
    verbose: bool = False,
) -> Shell:
    """Build a ready-to-run shell from CLI options."""
    config = resolve_config(config_path)
    ctx = create_context(
        invocation=invocation,
        format_choice=format_choice,
        no_pager=no_pager,
        verbose=verbose,
        config=config,
    )
    records = load_records(commands_file) if commands_file else []
    return create_shell(records, ctx=ctx)
