"""Proxy commands: shell commands that forward to the external tool.

A ProxyCommand is built from one command record reported by the
external tool. It derives its name, aliases, input definition and help
text from the record and, when invoked, re-runs the tool as a
subprocess with the user's command line appended.
"""

import logging
import os
import re
import shlex
import subprocess
import textwrap
from collections.abc import Sequence
from pathlib import PurePath

from rich.markup import escape

from drush_shell.commands.base import BaseCommand, CommandContext
from drush_shell.commands.categories import TitleLookup, no_titles
from drush_shell.commands.definition import (
    ArgumentMode,
    InputArgument,
    InputDefinition,
    InputOption,
    OptionMode,
)
from drush_shell.commands.input import CommandInput
from drush_shell.commands.schema import CommandConfig
from drush_shell.config.defaults import (
    DEFAULT_CATEGORY,
    DEFAULT_TOOL_NAME,
    DEFAULT_WRAP_WIDTH,
)
from drush_shell.exceptions import CommandFailedError
from drush_shell.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

_SIMPLE_ARG = re.compile(r"[\w-]+", re.ASCII)


def wordwrap(text: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Wrap text at spaces, keeping existing line breaks and long words."""
    return "\n".join(
        textwrap.fill(line, width=width, break_long_words=False, break_on_hyphens=False)
        for line in text.splitlines()
    )


def escape_arg(arg: str) -> str:
    """Escape a single shell argument, unless it's trivial enough not to need it."""
    if _SIMPLE_ARG.fullmatch(arg):
        return arg
    if os.name == "nt":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


def truncate_argv(argv: Sequence[str], entry_tokens: Sequence[str]) -> list[str]:
    """Drop the shell-entry token and everything after it.

    The vector is cut before the earliest token that names the shell
    itself (``shell``, ``repl``, ...). A vector without one is kept whole.
    """
    tokens = set(entry_tokens)
    for index, arg in enumerate(argv):
        if arg in tokens:
            return list(argv[:index])
    return list(argv)


def build_command_line(prefix: Sequence[str], raw_input: str) -> str:
    """Join the escaped invocation prefix and the raw, unescaped user input."""
    return " ".join(escape_arg(arg) for arg in prefix) + " " + raw_input


def build_argv(prefix: Sequence[str], raw_input: str) -> list[str]:
    """Build the structured argument list equivalent of build_command_line."""
    return [*prefix, *shlex.split(raw_input)]


class ProxyCommand(BaseCommand):
    """A shell command proxying one external tool command.

    Example:
        config = CommandConfig.model_validate(record)
        registry.register(ProxyCommand(config, title_lookup=lookup))
    """

    def __init__(
        self,
        config: CommandConfig,
        *,
        title_lookup: TitleLookup | None = None,
        tool_name: str = DEFAULT_TOOL_NAME,
        wrap_width: int = DEFAULT_WRAP_WIDTH,
    ) -> None:
        self._config = config
        self._title_lookup = title_lookup or no_titles
        self._tool_name = tool_name
        self._wrap_width = wrap_width
        self._category: str | None = None

        self._aliases = self.build_aliases()
        self._definition = self.build_definition()
        self._help = self.build_help()

    @property
    def config(self) -> CommandConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.command

    @property
    def description(self) -> str:
        return self._config.description

    @property
    def aliases(self) -> list[str]:
        return list(self._aliases)

    @property
    def definition(self) -> InputDefinition:
        return self._definition

    @property
    def help(self) -> str:
        return self._help

    @property
    def category(self) -> str:
        """The help listing category, resolved once and then cached."""
        if self._category is not None:
            return self._category

        titles: Sequence[str] = []
        if self._config.category:
            titles = self._title_lookup(self._config.category)

        if not titles and self._config.path:
            # Command files stored in a folder named after another command
            # file (e.g. 'core') share that file's category title.
            titles = self._title_lookup(PurePath(self._config.path).name)

        self._category = titles[0] if titles else DEFAULT_CATEGORY
        return self._category

    def get_category(self) -> str:
        return self.category

    def build_aliases(self) -> list[str]:
        return list(self._config.aliases)

    def build_definition(self) -> InputDefinition:
        """Build the input definition from the command record.

        Adds all non-hidden arguments and options. Hidden arguments do not
        use up a required slot. Options always take a value, which is
        optional only when the record says so explicitly.
        """
        definition = InputDefinition()

        arguments = self._config.arguments
        required = self._config.required_arguments
        if required is True:
            remaining = len(arguments)
        elif required is False:
            remaining = 0
        else:
            remaining = int(required)

        for name, arg in arguments.items():
            if arg.hidden:
                continue

            mode = ArgumentMode.REQUIRED if remaining > 0 else ArgumentMode.OPTIONAL
            remaining -= 1
            definition.arguments.append(InputArgument(name, mode, arg.description))

        for name, opt in self._config.options.items():
            if opt.hidden:
                continue

            if opt.value == "optional":
                mode = OptionMode.VALUE_OPTIONAL
            else:
                mode = OptionMode.VALUE_REQUIRED
            definition.options.append(InputOption(name, mode, opt.description))

        return definition

    def build_help(self) -> str:
        """Build help markup: the wrapped description plus any examples."""
        help_text = escape(wordwrap(self._config.description, self._wrap_width))

        prefix = re.compile(rf"^{re.escape(self._tool_name)}\s+")
        examples: dict[str, str] = {}
        for example, description in self._config.examples.items():
            # Pipelines would not round-trip as a single tool invocation.
            if not example or "|" in example:
                continue
            examples[prefix.sub("", example)] = description

        if not examples:
            return help_text

        help_text += "\n\ne.g."
        for example, description in examples.items():
            wrapped = wordwrap(description, self._wrap_width).splitlines() or [""]
            comment = "\n".join(f"[green]// {escape(line)}[/green]" for line in wrapped)
            help_text += f"\n{comment}\n"
            help_text += f"[green]>>> {escape(example)}[/green]\n"

        return help_text

    def command_line(self, ctx: CommandContext, command_input: CommandInput) -> str:
        """The shell command line this invocation forwards to."""
        return build_command_line(self._prefix(ctx), str(command_input))

    def _prefix(self, ctx: CommandContext) -> list[str]:
        prefix = truncate_argv(ctx.argv, ctx.config.shell_entry_tokens)
        return prefix or [ctx.config.tool_name]

    def execute(self, ctx: CommandContext, command_input: CommandInput) -> None:
        """Run the external tool with the user's command line.

        Output goes straight to the inherited terminal.

        Raises:
            CommandFailedError: If the tool exits with a non-zero status.
        """
        prefix = self._prefix(ctx)
        raw_input = str(command_input)
        command_line = build_command_line(prefix, raw_input)

        log_with_context(
            logger,
            logging.DEBUG,
            "Forwarding command",
            command=self.name,
            command_line=command_line,
            use_shell=ctx.config.use_shell,
        )

        try:
            if ctx.config.use_shell:
                completed = subprocess.run(command_line, shell=True, check=False)
            else:
                completed = subprocess.run(build_argv(prefix, raw_input), check=False)
        except OSError as e:
            logger.warning("Could not start %s: %s", prefix[0], e)
            raise CommandFailedError(returncode=127) from e

        if completed.returncode != 0:
            log_with_context(
                logger,
                logging.WARNING,
                "Forwarded command failed",
                command=self.name,
                returncode=completed.returncode,
            )
            raise CommandFailedError(returncode=completed.returncode)
