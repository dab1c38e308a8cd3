"""Diff-related data models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from diffconfig.models.common import ErrorInfo
from diffconfig.models.snapshot import ConfigPath, format_path


class ChangeKind(str, Enum):
    """Kind of change detected at a path."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    # Never emitted; equal values produce no record.
    UNCHANGED = "unchanged"


class ChangeRecord(BaseModel):
    """A single difference between two snapshots."""

    model_config = {"frozen": True}

    kind: ChangeKind = Field(description="Kind of change")
    path: ConfigPath = Field(description="Keys and positions leading to the value")
    old_value: Any = Field(default=None, description="Value in the before snapshot")
    new_value: Any = Field(default=None, description="Value in the after snapshot")

    @classmethod
    def added(cls, path: ConfigPath, new_value: Any) -> "ChangeRecord":
        return cls(kind=ChangeKind.ADDED, path=path, new_value=new_value)

    @classmethod
    def removed(cls, path: ConfigPath, old_value: Any) -> "ChangeRecord":
        return cls(kind=ChangeKind.REMOVED, path=path, old_value=old_value)

    @classmethod
    def changed(cls, path: ConfigPath, old_value: Any, new_value: Any) -> "ChangeRecord":
        return cls(kind=ChangeKind.CHANGED, path=path, old_value=old_value, new_value=new_value)

    @property
    def path_str(self) -> str:
        """Human-readable form of the path."""
        return format_path(self.path)


class DiffReport(BaseModel):
    """Complete diff report between two snapshots."""

    model_config = {"frozen": True}

    source: str = Field(default="before", description="Label of the before snapshot")
    target: str = Field(default="after", description="Label of the after snapshot")
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Report generation timestamp",
    )

    entries: list[ChangeRecord] = Field(default_factory=list, description="Changes in engine order")

    total_changes: int = Field(default=0, description="Total number of changes")
    added_count: int = Field(default=0, description="Number of additions")
    removed_count: int = Field(default=0, description="Number of removals")
    changed_count: int = Field(default=0, description="Number of value changes")

    @property
    def identical(self) -> bool:
        return not self.entries


class DiffResult(BaseModel):
    """Result of a diff operation."""

    model_config = {"frozen": True}

    success: bool = Field(description="Whether the diff operation succeeded")
    report: DiffReport | None = Field(default=None, description="The diff report if successful")
    errors: list[ErrorInfo] = Field(default_factory=list, description="Errors that occurred")

    @classmethod
    def ok(cls, report: DiffReport) -> "DiffResult":
        """Create a successful result."""
        return cls(success=True, report=report)

    @classmethod
    def fail(cls, errors: list[ErrorInfo]) -> "DiffResult":
        """Create a failed result."""
        return cls(success=False, errors=errors)
