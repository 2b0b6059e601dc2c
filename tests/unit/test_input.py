"""Tests for input definitions and command line parsing."""

import pytest

from drush_shell.commands.definition import (
    ArgumentMode,
    InputArgument,
    InputDefinition,
    InputOption,
    OptionMode,
)
from drush_shell.commands.input import parse_input, tokenize
from drush_shell.exceptions import InvalidArgumentError


@pytest.fixture
def definition() -> InputDefinition:
    return InputDefinition(
        arguments=[
            InputArgument("name", ArgumentMode.REQUIRED, "The name"),
            InputArgument("other", ArgumentMode.OPTIONAL, "Another", default="x"),
        ],
        options=[
            InputOption("format", OptionMode.VALUE_REQUIRED, "Format"),
            InputOption("fields", OptionMode.VALUE_OPTIONAL, "Fields"),
            InputOption("yes", OptionMode.VALUE_NONE, "Assume yes", shortcut="y"),
        ],
    )


class TestInputDefinition:
    """Tests for InputDefinition."""

    def test_synopsis(self, definition: InputDefinition) -> None:
        assert definition.synopsis() == (
            "[--format=FORMAT] [--fields[=FIELDS]] [--yes] <name> [other]"
        )

    def test_lookup(self, definition: InputDefinition) -> None:
        assert definition.get_argument("name").is_required
        assert definition.get_argument("missing") is None
        assert definition.get_option("yes").accepts_value is False
        assert definition.get_option_by_shortcut("y").name == "yes"
        assert definition.required_count == 1


class TestParseInput:
    """Tests for parse_input."""

    def test_positionals(self, definition: InputDefinition) -> None:
        parsed = parse_input("cmd alpha", definition)
        assert parsed.command_name == "cmd"
        assert parsed.get_argument("name") == "alpha"
        assert parsed.get_argument("other") == "x"
        assert parsed.options == {}

    def test_raw_text_is_kept(self, definition: InputDefinition) -> None:
        line = "cmd 'a b' --format=json"
        parsed = parse_input(f"  {line} ", definition)
        assert str(parsed) == line
        assert parsed.get_argument("name") == "a b"

    def test_option_forms(self, definition: InputDefinition) -> None:
        parsed = parse_input("cmd a --format json --fields -y", definition)
        assert parsed.get_option("format") == "json"
        assert parsed.has_option("fields")
        assert parsed.get_option("fields") is None
        assert parsed.get_option("yes") is True

    def test_inline_values(self, definition: InputDefinition) -> None:
        parsed = parse_input("cmd a --format=yaml --fields=uid,name", definition)
        assert parsed.get_option("format") == "yaml"
        assert parsed.get_option("fields") == "uid,name"

    def test_double_dash_ends_options(self, definition: InputDefinition) -> None:
        parsed = parse_input("cmd -- --literal", definition)
        assert parsed.get_argument("name") == "--literal"

    def test_missing_required_argument(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError, match="missing: \"name\""):
            parse_input("cmd", definition)

    def test_too_many_arguments(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError, match="Too many arguments"):
            parse_input("cmd a b c", definition)

    def test_unknown_option(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError, match="--nope"):
            parse_input("cmd a --nope", definition)

    def test_missing_option_value(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError, match="requires a value"):
            parse_input("cmd a --format", definition)

    def test_flag_rejects_value(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError, match="does not accept a value"):
            parse_input("cmd a --yes=1", definition)

    def test_unbalanced_quotes(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_input("cmd 'a", definition)

    def test_empty_line(self, definition: InputDefinition) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_input("   ", definition)


def test_tokenize() -> None:
    assert tokenize("status --format='json pretty'") == ["status", "--format=json pretty"]
