"""Input definitions: the arguments and options a command accepts."""

from dataclasses import dataclass, field
from enum import Enum


class ArgumentMode(str, Enum):
    """Whether a positional argument must be supplied."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class OptionMode(str, Enum):
    """Whether an option takes a value."""

    VALUE_REQUIRED = "value_required"
    VALUE_OPTIONAL = "value_optional"
    VALUE_NONE = "value_none"


@dataclass(frozen=True)
class InputArgument:
    """A positional argument.

    Attributes:
        name: Argument name, used for lookup on the parsed input.
        mode: Required or optional.
        description: Help text.
        default: Value used when an optional argument is omitted.
    """

    name: str
    mode: ArgumentMode = ArgumentMode.OPTIONAL
    description: str = ""
    default: str | None = None

    @property
    def is_required(self) -> bool:
        return self.mode is ArgumentMode.REQUIRED

    @property
    def synopsis(self) -> str:
        return f"<{self.name}>" if self.is_required else f"[{self.name}]"


@dataclass(frozen=True)
class InputOption:
    """A long ``--name`` option.

    Attributes:
        name: Option name without the leading dashes.
        mode: Whether the option takes a value.
        description: Help text.
        shortcut: Optional single-letter shortcut (without the dash).
    """

    name: str
    mode: OptionMode = OptionMode.VALUE_NONE
    description: str = ""
    shortcut: str | None = None

    @property
    def accepts_value(self) -> bool:
        return self.mode is not OptionMode.VALUE_NONE

    @property
    def is_value_required(self) -> bool:
        return self.mode is OptionMode.VALUE_REQUIRED

    @property
    def synopsis(self) -> str:
        placeholder = self.name.upper().replace("-", "_")
        if self.mode is OptionMode.VALUE_REQUIRED:
            return f"[--{self.name}={placeholder}]"
        if self.mode is OptionMode.VALUE_OPTIONAL:
            return f"[--{self.name}[={placeholder}]]"
        return f"[--{self.name}]"


@dataclass
class InputDefinition:
    """The ordered arguments and options of a command."""

    arguments: list[InputArgument] = field(default_factory=list)
    options: list[InputOption] = field(default_factory=list)

    def get_argument(self, name: str) -> InputArgument | None:
        for argument in self.arguments:
            if argument.name == name:
                return argument
        return None

    def get_option(self, name: str) -> InputOption | None:
        for option in self.options:
            if option.name == name:
                return option
        return None

    def get_option_by_shortcut(self, shortcut: str) -> InputOption | None:
        for option in self.options:
            if option.shortcut == shortcut:
                return option
        return None

    @property
    def required_count(self) -> int:
        return sum(1 for argument in self.arguments if argument.is_required)

    def synopsis(self) -> str:
        """Render the options then arguments, e.g. ``[--format=FORMAT] <name>``."""
        parts = [option.synopsis for option in self.options]
        parts.extend(argument.synopsis for argument in self.arguments)
        return " ".join(parts)
