"""Data models for diffconfig.

Report models are Pydantic BaseModel with frozen=True for immutability;
snapshots themselves are plain dicts and lists.
"""

from diffconfig.models.common import ErrorInfo
from diffconfig.models.diff import ChangeKind, ChangeRecord, DiffReport, DiffResult
from diffconfig.models.snapshot import (
    ConfigPath,
    Snapshot,
    format_path,
    is_identifier,
    is_mapping,
    is_sequence,
)

__all__ = [
    # Common
    "ErrorInfo",
    # Diff
    "ChangeKind",
    "ChangeRecord",
    "DiffReport",
    "DiffResult",
    # Snapshot
    "ConfigPath",
    "Snapshot",
    "format_path",
    "is_identifier",
    "is_mapping",
    "is_sequence",
]
