"""Exception hierarchy for drush-shell."""


class DrushShellError(Exception):
    """Base exception for all drush-shell errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Config Errors
class ConfigError(DrushShellError):
    """Configuration errors."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 22
    user_message = "Invalid configuration"


# Command Errors
class CommandError(DrushShellError):
    """Command execution errors."""

    exit_code = 40
    user_message = "Command error"


class CommandNotFoundError(CommandError):
    """No command registered under the requested name or alias."""

    exit_code = 41
    user_message = "Command not found"


class InvalidArgumentError(CommandError):
    """Invalid argument provided."""

    exit_code = 42
    user_message = "Invalid argument"


class CommandFailedError(CommandError, RuntimeError):
    """A forwarded subprocess exited with a non-zero status.

    The message stays generic: the subprocess already wrote its own
    diagnostics to the inherited terminal.
    """

    exit_code = 43
    user_message = "Something has gone horribly wrong."

    def __init__(
        self,
        message: str | None = None,
        *,
        returncode: int | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.returncode = returncode
