"""Base command pattern implementation.

This module provides the foundation for all shell commands,
including the CommandContext for dependency injection and
BaseCommand abstract class for command implementations.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from rich.markup import escape

from drush_shell.commands.definition import InputDefinition
from drush_shell.commands.input import CommandInput
from drush_shell.config.schema import ShellConfig
from drush_shell.output.base import OutputSink


@dataclass
class CommandContext:
    """Context object passed to commands for dependency injection.

    Attributes:
        output: The sink commands write and page their output through.
        config: The application configuration.
        argv: The original invocation vector of the process. Proxy
            commands rebuild the external tool's command line from it.
        verbose: Whether to show verbose output.
    """

    output: OutputSink
    config: ShellConfig = field(default_factory=ShellConfig)
    argv: list[str] = field(default_factory=lambda: list(sys.argv))
    verbose: bool = False

    def with_output(self, output: OutputSink) -> "CommandContext":
        """Create a new context with a different output sink."""
        return replace(self, output=output)

    def with_argv(self, argv: list[str]) -> "CommandContext":
        """Create a new context with a different invocation vector."""
        return replace(self, argv=list(argv))


class BaseCommand(ABC):
    """Abstract base class for all shell commands.

    Commands describe themselves (name, aliases, input definition, help)
    and do their work in ``execute``. Failures are raised, not returned.

    Example:
        class EchoCommand(BaseCommand):
            @property
            def name(self) -> str:
                return "echo"

            @property
            def description(self) -> str:
                return "Print the arguments"

            def execute(self, ctx: CommandContext, command_input: CommandInput) -> None:
                ctx.output.write(str(command_input))
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The command name (used in the shell)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """A short description of what the command does."""
        pass

    @property
    def aliases(self) -> list[str]:
        """Alternative names for the command."""
        return []

    @property
    def definition(self) -> InputDefinition:
        """The arguments and options the command accepts."""
        return InputDefinition()

    @property
    def help(self) -> str:
        """Long help text, as console markup. Defaults to the description."""
        return escape(self.description)

    @property
    def synopsis(self) -> str:
        usage = self.definition.synopsis()
        return f"{self.name} {usage}" if usage else self.name

    @abstractmethod
    def execute(self, ctx: CommandContext, command_input: CommandInput) -> None:
        """Execute the command.

        Args:
            ctx: The command context with dependencies.
            command_input: The parsed command line.
        """
        pass

    def as_text(self) -> str:
        """Render the full help for this command as console markup."""
        definition = self.definition
        lines = ["[yellow]Usage:[/yellow]", f" {escape(self.synopsis)}", ""]

        if self.aliases:
            lines.append(f"[yellow]Aliases:[/yellow] [cyan]{escape(', '.join(self.aliases))}[/cyan]")
            lines.append("")

        labels = [argument.name for argument in definition.arguments]
        labels.extend(f"--{option.name}" for option in definition.options)
        width = max((len(label) for label in labels), default=0) + 2

        if definition.arguments:
            lines.append("[yellow]Arguments:[/yellow]")
            for argument in definition.arguments:
                lines.append(
                    f"  [cyan]{escape(argument.name.ljust(width))}[/cyan] "
                    f"{escape(argument.description)}"
                )
            lines.append("")

        if definition.options:
            lines.append("[yellow]Options:[/yellow]")
            for option in definition.options:
                label = f"--{option.name}".ljust(width)
                lines.append(f"  [cyan]{escape(label)}[/cyan] {escape(option.description)}")
            lines.append("")

        lines.append("[yellow]Help:[/yellow]")
        lines.extend(f" {line}" for line in self.help.splitlines())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
