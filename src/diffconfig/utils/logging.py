"""Logging setup for diffconfig.

Diagnostics go to stderr so that report output on stdout (dump paths,
``NAME=value`` listings, diff reports) stays clean for piping.
"""

import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class StructuredFormatter(logging.Formatter):
    """Formatter that appends context fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = getattr(record, "context_fields", None)
        if not fields:
            return message
        return message + " " + " ".join(f"{k}={v}" for k, v in fields.items())


def level_for_flags(verbose: bool = False, quiet: bool = False) -> str:
    """Map the global CLI flags to a log level name."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return "INFO"


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Configure the ``diffconfig`` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        structured: Include timestamps, logger names and context fields
    """
    if format_string is None:
        format_string = STRUCTURED_FORMAT if structured else DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    formatter_class = StructuredFormatter if structured else logging.Formatter
    handler.setFormatter(formatter_class(format_string))

    logger = logging.getLogger("diffconfig")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a diffconfig module.

    Args:
        name: Module name (will be prefixed with diffconfig)

    Returns:
        Logger under the ``diffconfig`` hierarchy
    """
    if not name.startswith("diffconfig"):
        name = f"diffconfig.{name}"
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that attaches fixed context fields to every record."""

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra["context_fields"] = self.extra
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextLogger:
    """Get a logger whose records carry ``context`` as extra fields."""
    return ContextLogger(get_logger(name), context)
