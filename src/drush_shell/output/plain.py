"""Plain text output sink."""

from drush_shell.config.schema import OutputFormat
from drush_shell.output.base import OutputSink, strip_markup


class PlainOutput(OutputSink):
    """Plain text output sink.

    Strips console markup and never pages, which keeps output suitable
    for piping to other commands and for tests.
    """

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def write(self, markup: str) -> None:
        print(strip_markup(markup), file=self._stream)

    def write_error(self, message: str) -> None:
        print(strip_markup(self.error_markup(message)), file=self._error_stream)
