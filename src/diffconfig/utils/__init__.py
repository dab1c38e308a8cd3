"""Utility functions for diffconfig.

Configuration file support lives in :mod:`diffconfig.utils.config` and is
imported from there directly.
"""

from diffconfig.utils.logging import (
    configure_logging,
    get_logger,
    get_logger_with_context,
    level_for_flags,
)
from diffconfig.utils.errors import (
    ConfigurationError,
    DiffconfigError,
    DumpParseError,
    DumpReadError,
    DumpWriteError,
    ProducerError,
    ScanError,
    SnapshotError,
    UsageError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    "level_for_flags",
    # Errors
    "ConfigurationError",
    "DiffconfigError",
    "DumpParseError",
    "DumpReadError",
    "DumpWriteError",
    "ProducerError",
    "ScanError",
    "SnapshotError",
    "UsageError",
]
