"""Parsing a typed command line into a structured input object."""

import shlex
from dataclasses import dataclass, field

from drush_shell.commands.definition import InputDefinition, InputOption, OptionMode
from drush_shell.exceptions import InvalidArgumentError

OptionValue = str | bool | None


@dataclass
class CommandInput:
    """A command line bound to a command's input definition.

    Attributes:
        command_name: The name (or alias) the command was invoked as.
        arguments: Positional argument values keyed by argument name.
        options: Option values keyed by option name. Only options that
            were present on the command line have a key.
        raw: The command line exactly as typed.
    """

    command_name: str
    arguments: dict[str, str | None] = field(default_factory=dict)
    options: dict[str, OptionValue] = field(default_factory=dict)
    raw: str = ""

    def get_argument(self, name: str) -> str | None:
        return self.arguments.get(name)

    def get_option(self, name: str) -> OptionValue:
        return self.options.get(name)

    def has_option(self, name: str) -> bool:
        return name in self.options

    def __str__(self) -> str:
        return self.raw


def tokenize(line: str) -> list[str]:
    """Split a raw command line into tokens using POSIX rules."""
    try:
        return shlex.split(line, posix=True)
    except ValueError as e:
        raise InvalidArgumentError(f"Cannot parse input: {e}") from e


def _is_option_token(token: str) -> bool:
    return token.startswith("-") and token != "-"


def _bind_option(
    definition: InputDefinition,
    token: str,
    remaining: list[str],
    options: dict[str, OptionValue],
) -> None:
    """Bind one ``--name[=value]`` or ``-x`` token, consuming a value if needed."""
    value: str | None
    if token.startswith("--"):
        name, sep, inline = token[2:].partition("=")
        value = inline if sep else None
        option = definition.get_option(name)
        display = f"--{name}"
    else:
        name, value = token[1:2], (token[2:] or None)
        option = definition.get_option_by_shortcut(name)
        display = f"-{name}"

    if option is None:
        raise InvalidArgumentError(f'The "{display}" option does not exist.')

    if option.mode is OptionMode.VALUE_NONE:
        if value is not None:
            raise InvalidArgumentError(
                f'The "{display}" option does not accept a value.'
            )
        options[option.name] = True
        return

    if value is None and option.mode is OptionMode.VALUE_REQUIRED:
        if not remaining or _is_option_token(remaining[0]):
            raise InvalidArgumentError(f'The "{display}" option requires a value.')
        value = remaining.pop(0)

    options[option.name] = value


def _check_option(option: InputOption, options: dict[str, OptionValue]) -> None:
    if option.is_value_required and option.name in options and options[option.name] == "":
        raise InvalidArgumentError(f'The "--{option.name}" option requires a value.')


def parse_input(line: str, definition: InputDefinition) -> CommandInput:
    """Parse a command line against an input definition.

    The first token is the command name. Remaining tokens bind to the
    definition's options (``--name=value``, ``--name value``, ``-x``) and,
    in order, to its positional arguments. ``--`` ends option parsing.

    Args:
        line: The command line as typed.
        definition: The command's input definition.

    Returns:
        The bound CommandInput.

    Raises:
        InvalidArgumentError: On unknown options, missing values, missing
            required arguments or surplus arguments.
    """
    tokens = tokenize(line)
    if not tokens:
        raise InvalidArgumentError("No command given.")

    command_name, *remaining = tokens
    positionals: list[str] = []
    options: dict[str, OptionValue] = {}
    options_done = False

    while remaining:
        token = remaining.pop(0)
        if options_done or not _is_option_token(token):
            positionals.append(token)
        elif token == "--":
            options_done = True
        else:
            _bind_option(definition, token, remaining, options)

    if len(positionals) > len(definition.arguments):
        raise InvalidArgumentError(
            f"Too many arguments, expected at most {len(definition.arguments)}."
        )

    arguments: dict[str, str | None] = {}
    missing: list[str] = []
    for index, argument in enumerate(definition.arguments):
        if index < len(positionals):
            arguments[argument.name] = positionals[index]
        elif argument.is_required:
            missing.append(argument.name)
        else:
            arguments[argument.name] = argument.default

    if missing:
        names = ", ".join(missing)
        raise InvalidArgumentError(f'Not enough arguments (missing: "{names}").')

    for option in definition.options:
        _check_option(option, options)

    return CommandInput(
        command_name=command_name,
        arguments=arguments,
        options=options,
        raw=line.strip(),
    )
