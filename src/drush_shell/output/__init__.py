"""Output sinks (rich, plain).

Commands write rich console markup; a sink renders it to the terminal
and pages long help text.

Usage:
    from drush_shell.output import get_output

    output = get_output("rich")
    output.page(["[yellow]Core commands[/yellow]", "    status  Show status"])
"""

from typing import Any

from drush_shell.config.schema import OutputFormat
from drush_shell.output.base import OutputSink, strip_markup, to_text
from drush_shell.output.plain import PlainOutput
from drush_shell.output.rich_fmt import RichOutput

__all__ = [
    "OutputSink",
    "OutputFormat",
    "PlainOutput",
    "RichOutput",
    "get_output",
    "strip_markup",
    "to_text",
]


def get_output(
    format_type: OutputFormat | str,
    verbose: bool = False,
    **kwargs: Any,
) -> OutputSink:
    """Get an output sink instance by format type.

    Args:
        format_type: The output format to use.
        verbose: Whether to enable verbose output.
        **kwargs: Additional sink-specific options.

    Raises:
        ValueError: If format_type is not recognized.
    """
    if isinstance(format_type, str):
        format_type = OutputFormat(format_type.lower())

    sinks: dict[OutputFormat, type[OutputSink]] = {
        OutputFormat.PLAIN: PlainOutput,
        OutputFormat.RICH: RichOutput,
    }

    sink_class = sinks.get(format_type)
    if sink_class is None:
        raise ValueError(f"Unknown format type: {format_type}")

    if sink_class is PlainOutput:
        kwargs.pop("color", None)
        kwargs.pop("width", None)

    return sink_class(verbose=verbose, **kwargs)
