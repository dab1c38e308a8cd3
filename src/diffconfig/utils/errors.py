"""Error handling utilities for diffconfig."""

from __future__ import annotations

from typing import Any

from diffconfig.models.common import ErrorInfo


class DiffconfigError(Exception):
    """Base exception for diffconfig."""

    exit_code: int = 4

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_info(self) -> ErrorInfo:
        """Convert to ErrorInfo model."""
        return ErrorInfo(code=self.code, message=self.message, details=self.details)


class UsageError(DiffconfigError):
    """Wrong arguments or a missing required value."""

    exit_code = 2

    def __init__(self, message: str, argument: str | None = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message, code="USAGE_ERROR", details=details)


class DumpReadError(DiffconfigError):
    """A dump file is missing or cannot be read."""

    exit_code = 1

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not read dump file {path}: {reason}",
            code="IO_ERROR",
            details={"path": path},
        )


class DumpWriteError(DiffconfigError):
    """A dump file cannot be written."""

    exit_code = 1

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not write dump file {path}: {reason}",
            code="IO_ERROR",
            details={"path": path},
        )


class DumpParseError(DiffconfigError):
    """A dump file was read but its content is not a valid snapshot."""

    exit_code = 3

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not parse dump file {path}: {reason}",
            code="PARSE_ERROR",
            details={"path": path},
        )


class ScanError(DiffconfigError):
    """Scanning configuration sources for variable names failed."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="SCAN_ERROR", details=details)


class ProducerError(DiffconfigError):
    """The configuration producer could not be loaded or failed."""

    def __init__(self, message: str, reference: str | None = None):
        details = {"reference": reference} if reference else {}
        super().__init__(message, code="PRODUCER_ERROR", details=details)


class SnapshotError(DiffconfigError):
    """A value cannot be represented in a configuration snapshot."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="SNAPSHOT_ERROR", details=details)


class ConfigurationError(DiffconfigError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)
