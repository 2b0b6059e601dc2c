"""Command registry for managing the shell's commands."""

import difflib

from drush_shell.commands.base import BaseCommand
from drush_shell.exceptions import CommandNotFoundError
from drush_shell.utils.logging import get_logger

logger = get_logger(__name__)


class CommandRegistry:
    """Registry of command instances, looked up by name or alias.

    Registration order is preserved, so listings are stable.

    Usage:
        registry = CommandRegistry()
        registry.register(HelpCommand(registry))

        # Get a command
        cmd = registry.get("help")

        # Every name and alias, each alias right after its command
        for name, cmd in registry.all().items():
            print(name, cmd.name)
    """

    def __init__(self) -> None:
        self._commands: dict[str, BaseCommand] = {}
        self._aliases: dict[str, str] = {}  # alias -> command name

    def register(self, command: BaseCommand) -> BaseCommand:
        """Register a command instance.

        Args:
            command: The command to register.

        Returns:
            The command (unchanged).

        Raises:
            ValueError: If the name or an alias is already taken.
        """
        name = command.name

        if name in self._commands or name in self._aliases:
            raise ValueError(f"Command '{name}' is already registered")

        for alias in command.aliases:
            if alias == name or alias in self._aliases or alias in self._commands:
                raise ValueError(
                    f"Alias '{alias}' conflicts with existing command or alias"
                )

        self._commands[name] = command
        for alias in command.aliases:
            self._aliases[alias] = name

        logger.debug("Registered command %s (aliases: %s)", name, command.aliases)
        return command

    def find(self, name: str) -> BaseCommand | None:
        """Get a command by name or alias, or None if not found."""
        if name in self._commands:
            return self._commands[name]

        if name in self._aliases:
            return self._commands[self._aliases[name]]

        return None

    def get(self, name: str) -> BaseCommand:
        """Get a command by name or alias.

        Raises:
            CommandNotFoundError: If nothing is registered under the name.
        """
        command = self.find(name)
        if command is None:
            raise CommandNotFoundError(
                f'Command "{name}" is not defined.{self._suggest(name)}'
            )
        return command

    def _suggest(self, name: str) -> str:
        """Return a short suggestion string for misspelled commands."""
        matches = difflib.get_close_matches(name, self.list_names(aliases=True), n=3, cutoff=0.6)
        return f" Did you mean: {', '.join(matches)}?" if matches else ""

    def all(self) -> dict[str, BaseCommand]:
        """Map every name and alias to its command.

        Each command's entry is followed by its alias entries, so an
        entry whose key differs from the command's name is an alias.
        """
        entries: dict[str, BaseCommand] = {}
        for name, command in self._commands.items():
            entries[name] = command
            for alias in command.aliases:
                if self._aliases.get(alias) == name:
                    entries[alias] = command
        return entries

    def list_commands(self) -> list[BaseCommand]:
        """List all registered commands (no duplicates for aliases)."""
        return list(self._commands.values())

    def list_names(self, aliases: bool = False) -> list[str]:
        """List command names, optionally followed by all aliases."""
        names = list(self._commands.keys())
        if aliases:
            names.extend(self._aliases.keys())
        return names

    def is_registered(self, name: str) -> bool:
        """Check if a name or alias is registered."""
        return name in self._commands or name in self._aliases

    def unregister(self, name: str) -> bool:
        """Unregister a command by name (not alias).

        Returns:
            True if unregistered, False if not found.
        """
        if name not in self._commands:
            return False

        for alias in [a for a, target in self._aliases.items() if target == name]:
            del self._aliases[alias]

        del self._commands[name]
        return True

    def clear(self) -> None:
        """Remove all registered commands."""
        self._commands.clear()
        self._aliases.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)
