"""Output sink protocol and base classes.

Command output is written as rich console markup. Sinks decide how that
markup is rendered: styled on a terminal, or stripped to plain text.
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

from rich.markup import escape
from rich.text import Text

from drush_shell.config.schema import OutputFormat


def to_text(content: str | Sequence[str]) -> str:
    """Join a sequence of lines into one block of text."""
    if isinstance(content, str):
        return content
    return "\n".join(content)


def strip_markup(markup: str) -> str:
    """Render console markup down to its plain text."""
    return Text.from_markup(markup).plain


class OutputSink(ABC):
    """Abstract base class for output sinks.

    Sinks are responsible for displaying command output and errors,
    including paging long help text one screen at a time.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        pager: bool = True,
    ) -> None:
        """Initialize the sink.

        Args:
            stream: Output stream (defaults to stdout).
            error_stream: Error stream (defaults to stderr).
            verbose: Whether to show verbose output.
            pager: Whether long output may be sent through a pager.
        """
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose
        self._pager = pager

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def error_stream(self) -> TextIO:
        return self._error_stream

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def pager(self) -> bool:
        return self._pager

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the format type of this sink."""
        pass

    @abstractmethod
    def write(self, markup: str) -> None:
        """Write a block of markup to the output stream."""
        pass

    @abstractmethod
    def write_error(self, message: str) -> None:
        """Write an error message (plain text, not markup) to the error stream."""
        pass

    def page(self, content: str | Sequence[str]) -> None:
        """Display text, or a sequence of lines, one screen at a time.

        The default implementation does not page; subclasses that can
        drive a pager override this.
        """
        self.write(to_text(content))

    def error_markup(self, message: str) -> str:
        """Build the markup line used for error messages."""
        return f"[bold red]Error:[/bold red] {escape(message)}"
