"""Shell commands: the command pattern, the registry and the two adapters.

Usage:
    from drush_shell.commands import CommandConfig, CommandRegistry
    from drush_shell.commands import HelpCommand, ProxyCommand

    registry = CommandRegistry()
    registry.register(HelpCommand(registry))
    registry.register(ProxyCommand(CommandConfig.model_validate(record)))

    cmd = registry.get("status")
    cmd.execute(ctx, parse_input("status --format=json", cmd.definition))
"""

from drush_shell.commands.base import BaseCommand, CommandContext
from drush_shell.commands.categories import StaticTitleLookup, TitleLookup
from drush_shell.commands.definition import (
    ArgumentMode,
    InputArgument,
    InputDefinition,
    InputOption,
    OptionMode,
)
from drush_shell.commands.help import HelpCommand
from drush_shell.commands.input import CommandInput, parse_input, tokenize
from drush_shell.commands.proxy import ProxyCommand, escape_arg, truncate_argv
from drush_shell.commands.registry import CommandRegistry
from drush_shell.commands.schema import ArgumentSpec, CommandConfig, OptionSpec

__all__ = [
    # Base classes
    "BaseCommand",
    "CommandContext",
    # Input
    "ArgumentMode",
    "CommandInput",
    "InputArgument",
    "InputDefinition",
    "InputOption",
    "OptionMode",
    "parse_input",
    "tokenize",
    # Records
    "ArgumentSpec",
    "CommandConfig",
    "OptionSpec",
    # Registry
    "CommandRegistry",
    "StaticTitleLookup",
    "TitleLookup",
    # Commands
    "HelpCommand",
    "ProxyCommand",
    "escape_arg",
    "truncate_argv",
]
