"""Rich terminal output sink."""

from collections.abc import Sequence
from typing import TextIO

from rich.console import Console

from drush_shell.config.schema import OutputFormat
from drush_shell.output.base import OutputSink, to_text


class RichOutput(OutputSink):
    """Rich terminal output sink.

    Renders console markup with the Rich library and pages long output
    through the system pager when attached to a terminal.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        pager: bool = True,
        color: bool = True,
        width: int | None = None,
    ) -> None:
        """Initialize rich output.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            pager: Whether long output may be sent through a pager.
            color: Whether to emit colors.
            width: Console width (None for auto-detect).
        """
        super().__init__(stream, error_stream, verbose, pager)
        self._color = color
        self._width = width

        # Lazy initialization of Rich consoles
        self._console: Console | None = None
        self._error_console: Console | None = None

    def _get_console(self) -> Console:
        """Lazily initialize and return the Rich console."""
        if self._console is None:
            self._console = Console(
                file=self._stream,
                width=self._width,
                no_color=not self._color,
                highlight=False,
            )
        return self._console

    def _get_error_console(self) -> Console:
        """Lazily initialize and return the error console."""
        if self._error_console is None:
            self._error_console = Console(
                file=self._error_stream,
                width=self._width,
                stderr=True,
                no_color=not self._color,
                highlight=False,
            )
        return self._error_console

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    def write(self, markup: str) -> None:
        self._get_console().print(markup)

    def write_error(self, message: str) -> None:
        self._get_error_console().print(self.error_markup(message))

    def page(self, content: str | Sequence[str]) -> None:
        console = self._get_console()
        text = to_text(content)

        if not (self._pager and console.is_terminal):
            console.print(text)
            return

        with console.pager(styles=self._color):
            console.print(text)
