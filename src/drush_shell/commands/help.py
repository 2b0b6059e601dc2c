"""The shell's help command.

Lists available commands grouped by category, and gives command-specific
help when asked nicely.
"""

from rich.markup import escape

from drush_shell.commands.base import BaseCommand, CommandContext
from drush_shell.commands.definition import ArgumentMode, InputArgument, InputDefinition
from drush_shell.commands.input import CommandInput
from drush_shell.commands.proxy import ProxyCommand
from drush_shell.commands.registry import CommandRegistry


class HelpCommand(BaseCommand):
    """Show a list of commands, or help for one command."""

    NON_PROXY_CATEGORY = "PsySH commands"

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry
        self._command: BaseCommand | None = None

    @property
    def name(self) -> str:
        return "help"

    @property
    def description(self) -> str:
        return "Show a list of commands. Type `help [foo]` for information about [foo]."

    @property
    def aliases(self) -> list[str]:
        return ["?"]

    @property
    def definition(self) -> InputDefinition:
        return InputDefinition(
            arguments=[
                InputArgument("command_name", ArgumentMode.OPTIONAL, "The command name"),
            ]
        )

    @property
    def help(self) -> str:
        return "My. How meta."

    def set_command(self, command: BaseCommand | None) -> None:
        """Set a command to show help for on the next run, bypassing name lookup."""
        self._command = command

    def execute(self, ctx: CommandContext, command_input: CommandInput) -> None:
        if self._command is not None:
            command, self._command = self._command, None
            ctx.output.page(command.as_text())
            return

        name = command_input.get_argument("command_name")
        if name:
            ctx.output.page(self._registry.get(name).as_text())
            return

        ctx.output.page(self.list_commands())

    def category_of(self, command: BaseCommand) -> str:
        if isinstance(command, ProxyCommand):
            return command.category
        return self.NON_PROXY_CATEGORY

    def list_commands(self) -> list[str]:
        """Render the categorized command listing as lines of markup."""
        commands = self._registry.all()
        width = max((len(command.name) for command in commands.values()), default=0) + 2

        categories: dict[str, list[str]] = {}
        for name, command in commands.items():
            if name != command.name:
                continue

            if command.aliases:
                aliases = f"  [yellow]Aliases:[/yellow] {escape(', '.join(command.aliases))}"
            else:
                aliases = ""

            categories.setdefault(self.category_of(command), []).append(
                f"    [cyan]{escape(name.ljust(width))}[/cyan] "
                f"{escape(command.description)}{aliases}"
            )

        messages: list[str] = []
        for category, lines in categories.items():
            messages.append("")
            messages.append(f"[yellow]{escape(category)}[/yellow]")
            messages.extend(lines)

        return messages
