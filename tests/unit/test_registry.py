"""Tests for the command registry."""

from typing import Any

import pytest

from drush_shell.commands.base import BaseCommand, CommandContext
from drush_shell.commands.input import CommandInput
from drush_shell.commands.registry import CommandRegistry
from drush_shell.exceptions import CommandNotFoundError

# --- Sample Command Implementations ---


class SampleCommand(BaseCommand):
    """A sample command for testing."""

    def __init__(self, name: str = "sample", aliases: list[str] | None = None) -> None:
        self._name = name
        self._aliases = aliases if aliases is not None else ["s", "samp"]
        self.calls: list[Any] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return f"The {self._name} command"

    @property
    def aliases(self) -> list[str]:
        return self._aliases

    def execute(self, ctx: CommandContext, command_input: CommandInput) -> None:
        self.calls.append(command_input)


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_register_and_get(self, registry: CommandRegistry) -> None:
        command = SampleCommand()
        assert registry.register(command) is command
        assert registry.get("sample") is command

    def test_get_by_alias(self, registry: CommandRegistry) -> None:
        command = registry.register(SampleCommand())
        assert registry.get("s") is command
        assert registry.get("samp") is command

    def test_get_missing_raises(self, registry: CommandRegistry) -> None:
        with pytest.raises(CommandNotFoundError) as exc_info:
            registry.get("nope")
        assert "nope" in str(exc_info.value)

    def test_get_missing_suggests(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())
        with pytest.raises(CommandNotFoundError, match="Did you mean: sample"):
            registry.get("sampel")

    def test_find_missing_returns_none(self, registry: CommandRegistry) -> None:
        assert registry.find("nope") is None

    def test_duplicate_name(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(SampleCommand(aliases=[]))

    def test_alias_conflict(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())
        with pytest.raises(ValueError, match="conflicts"):
            registry.register(SampleCommand("other", aliases=["s"]))
        # A rejected command leaves nothing behind.
        assert not registry.is_registered("other")

    def test_name_conflicts_with_alias(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())
        with pytest.raises(ValueError):
            registry.register(SampleCommand("s", aliases=[]))

    def test_all_lists_aliases_after_their_command(self, registry: CommandRegistry) -> None:
        first = registry.register(SampleCommand("first", aliases=["f"]))
        second = registry.register(SampleCommand("second", aliases=[]))

        entries = registry.all()

        assert list(entries) == ["first", "f", "second"]
        assert entries["f"] is first
        assert entries["second"] is second

    def test_list_commands_and_names(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand("b", aliases=["bb"]))
        registry.register(SampleCommand("a", aliases=[]))

        assert [c.name for c in registry.list_commands()] == ["b", "a"]
        assert registry.list_names() == ["b", "a"]
        assert registry.list_names(aliases=True) == ["b", "a", "bb"]

    def test_unregister(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())

        assert registry.unregister("sample") is True
        assert not registry.is_registered("sample")
        assert not registry.is_registered("s")
        assert registry.unregister("sample") is False

    def test_clear(self, registry: CommandRegistry) -> None:
        registry.register(SampleCommand())
        registry.clear()
        assert len(registry) == 0
        assert "s" not in registry
