"""Pydantic models for external tool command records.

A record describes one subcommand of the external tool as the tool
itself reports it (drush's command metadata, for instance). Unknown
keys are ignored; records routinely carry far more than a shell needs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _empty_to_dict(value: Any) -> Any:
    # PHP serializes empty associative arrays as JSON lists.
    if value is None or value == []:
        return {}
    return value


def _describe_bare_strings(value: Any) -> Any:
    value = _empty_to_dict(value)
    if isinstance(value, dict):
        return {
            name: {"description": spec} if isinstance(spec, str) else spec
            for name, spec in value.items()
        }
    return value


class ArgumentSpec(BaseModel):
    """A positional argument of an external command."""

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    hidden: bool = False


class OptionSpec(BaseModel):
    """An option of an external command.

    ``value`` is ``"optional"``, ``"required"`` or absent.
    """

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    hidden: bool = False
    value: str | None = None


class CommandConfig(BaseModel):
    """Configuration record for one external command."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    command: str
    aliases: list[str] = Field(default_factory=list)
    category: str | None = None
    path: str | None = None
    description: str = ""
    arguments: dict[str, ArgumentSpec] = Field(default_factory=dict)
    required_arguments: bool | int = Field(default=False, alias="required-arguments")
    options: dict[str, OptionSpec] = Field(default_factory=dict)
    examples: dict[str, str] = Field(default_factory=dict)

    @field_validator("aliases", mode="before")
    @classmethod
    def _aliases_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _description_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("arguments", "options", mode="before")
    @classmethod
    def _spec_mapping(cls, value: Any) -> Any:
        return _describe_bare_strings(value)

    @field_validator("examples", mode="before")
    @classmethod
    def _example_mapping(cls, value: Any) -> Any:
        return _empty_to_dict(value)

    @field_validator("required_arguments", mode="before")
    @classmethod
    def _required_count(cls, value: Any) -> Any:
        return False if value is None else value
