"""Prompt-toolkit based interactive shell.

The shell owns a CommandRegistry, dispatches each typed line to the
matching command and reports failures without leaving the loop.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from drush_shell.commands.base import BaseCommand, CommandContext
from drush_shell.commands.categories import StaticTitleLookup, TitleLookup
from drush_shell.commands.help import HelpCommand
from drush_shell.commands.input import parse_input, tokenize
from drush_shell.commands.proxy import ProxyCommand
from drush_shell.commands.registry import CommandRegistry
from drush_shell.commands.schema import CommandConfig
from drush_shell.config.schema import ShellConfig
from drush_shell.exceptions import DrushShellError
from drush_shell.output.base import OutputSink
from drush_shell.utils.logging import get_logger

logger = get_logger(__name__)

EXIT_WORDS = frozenset({"exit", "quit"})
HELP_FLAGS = frozenset({"--help", "-h"})


class Shell:
    """An interactive shell over a command registry."""

    def __init__(
        self,
        ctx: CommandContext,
        registry: CommandRegistry | None = None,
        prompt: str = ">>> ",
    ) -> None:
        self.ctx = ctx
        self.registry = registry or CommandRegistry()
        self.prompt = prompt

        existing = self.registry.find("help")
        if isinstance(existing, HelpCommand):
            self.help_command = existing
        else:
            self.help_command = HelpCommand(self.registry)
            self.registry.register(self.help_command)

    def add_command(self, command: BaseCommand) -> BaseCommand:
        return self.registry.register(command)

    def add_commands(self, commands: Iterable[BaseCommand]) -> None:
        for command in commands:
            self.add_command(command)

    def execute_line(self, line: str) -> bool:
        """Run one line of input.

        Returns:
            True if the line succeeded (or was blank), False otherwise.

        Raises:
            SystemExit: When the line asks to leave the shell.
        """
        line = line.strip()
        if not line:
            return True

        if line.lower() in EXIT_WORDS:
            raise SystemExit(0)

        try:
            tokens = tokenize(line)
            command = self.registry.get(tokens[0])

            if HELP_FLAGS.intersection(tokens[1:]):
                self.help_command.set_command(command)
                command = self.help_command
                line = self.help_command.name

            command.execute(self.ctx, parse_input(line, command.definition))
        except DrushShellError as e:
            logger.debug("Command failed: %s", e)
            self.ctx.output.write_error(str(e))
            return False
        except RuntimeError as e:
            logger.debug("Command failed: %s", e)
            self.ctx.output.write_error(str(e) or type(e).__name__)
            return False

        return True

    def _session(self) -> PromptSession:
        completer = WordCompleter(self.registry.list_names(aliases=True), sentence=True)
        return PromptSession(history=InMemoryHistory(), completer=completer)

    def run(self, session: Any = None) -> int:
        """Enter the interactive loop until the user exits.

        Ctrl-C abandons the current line; Ctrl-D leaves the shell.
        """
        session = session or self._session()
        while True:
            try:
                line = session.prompt(self.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

            try:
                self.execute_line(line)
            except SystemExit:
                break

        return 0


def create_shell(
    records: Iterable[CommandConfig | Mapping[str, Any]],
    *,
    ctx: CommandContext,
    title_lookup: TitleLookup | None = None,
) -> Shell:
    """Build a shell with the help command and one proxy command per record.

    Args:
        records: Command records, parsed or as raw mappings.
        ctx: The command context the shell runs commands with.
        title_lookup: Category title lookup. Defaults to the config's
            ``category_titles`` table.
    """
    config: ShellConfig = ctx.config
    lookup = title_lookup or StaticTitleLookup(config.category_titles)

    shell = Shell(ctx)
    for record in records:
        if not isinstance(record, CommandConfig):
            record = CommandConfig.model_validate(record)
        shell.add_command(
            ProxyCommand(
                record,
                title_lookup=lookup,
                tool_name=config.tool_name,
                wrap_width=config.wrap_width,
            )
        )

    logger.debug("Shell ready with %d commands", len(shell.registry))
    return shell
