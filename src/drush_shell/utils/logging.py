"""Logging setup for drush-shell.

Everything logs under the ``drush_shell`` logger. Structured context
(the forwarded command line, a subprocess's exit status) travels on the
record's ``extra`` attribute, set by ``log_with_context``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger("drush_shell")


def _context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, "extra", None)
    return context if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log files and log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class ConsoleFormatter(logging.Formatter):
    """``LEVEL name: message (key=value ...)``, colored by level on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        context = _context(record)
        if context:
            pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
            message = f"{message} ({pairs})"

        level = f"{record.levelname:8}"
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"
        return f"{level} {record.name}: {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool = True,
) -> logging.Logger:
    """Configure the ``drush_shell`` logger.

    Console records go to stderr, leaving stdout to the forwarded tool.
    A log file, when given, always gets JSON.

    Args:
        level: Log level name. Unknown names fall back to WARNING.
        log_file: Optional file to log to as well.
        json_format: Log JSON to the console too.
        use_color: Color console level names.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JSONFormatter() if json_format else ConsoleFormatter(use_color))
    handlers: list[logging.Handler] = [console]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` with ``context`` attached as structured fields."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra": context})
