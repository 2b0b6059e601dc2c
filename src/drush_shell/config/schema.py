"""Pydantic models for drush-shell configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from drush_shell.config.defaults import (
    DEFAULT_SHELL_ENTRY_TOKENS,
    DEFAULT_TOOL_NAME,
    DEFAULT_WRAP_WIDTH,
)


class OutputFormat(str, Enum):
    """Supported output formats."""

    RICH = "rich"
    PLAIN = "plain"


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: OutputFormat = OutputFormat.RICH
    pager: bool = True
    color: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


class ShellConfig(BaseModel):
    """Root configuration for drush-shell."""

    model_config = ConfigDict(use_enum_values=True)

    tool_name: str = DEFAULT_TOOL_NAME
    shell_entry_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SHELL_ENTRY_TOKENS)
    )
    wrap_width: int = Field(default=DEFAULT_WRAP_WIDTH, gt=0)
    use_shell: bool = False
    category_titles: dict[str, str] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
