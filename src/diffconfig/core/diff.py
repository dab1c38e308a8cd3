"""DiffEngine for comparing configuration snapshots."""

from __future__ import annotations

from typing import Any

from diffconfig.models.diff import ChangeKind, ChangeRecord, DiffReport, DiffResult
from diffconfig.models.snapshot import ConfigPath, is_mapping, is_sequence
from diffconfig.models.common import ErrorInfo
from diffconfig.utils.logging import get_logger

logger = get_logger("diff")


def diff_snapshots(before: Any, after: Any) -> list[ChangeRecord]:
    """Compute every difference between two snapshots.

    Mappings are walked key by key: keys of ``before`` in their own order,
    then keys that only exist in ``after`` in theirs. A key missing on one
    side yields a single ``added``/``removed`` record carrying the whole
    subtree. Sequences are compared by position; surplus trailing elements
    are reported one record per index. Anything else, including two values
    of different kinds, is compared as an opaque scalar.

    Args:
        before: The before snapshot (or any nested value)
        after: The after snapshot (or any nested value)

    Returns:
        Change records in traversal order
    """
    out: list[ChangeRecord] = []
    _collect_changes(before, after, (), out)
    return out


def _collect_changes(before: Any, after: Any, path: ConfigPath, out: list[ChangeRecord]) -> None:
    if is_mapping(before) and is_mapping(after):
        for key, old in before.items():
            if key in after:
                _collect_changes(old, after[key], path + (key,), out)
            else:
                out.append(ChangeRecord.removed(path + (key,), old))
        for key, new in after.items():
            if key not in before:
                out.append(ChangeRecord.added(path + (key,), new))
        return

    if is_sequence(before) and is_sequence(after):
        common = min(len(before), len(after))
        for idx in range(common):
            _collect_changes(before[idx], after[idx], path + (idx,), out)
        for idx in range(common, len(before)):
            out.append(ChangeRecord.removed(path + (idx,), before[idx]))
        for idx in range(common, len(after)):
            out.append(ChangeRecord.added(path + (idx,), after[idx]))
        return

    if not values_equal(before, after):
        out.append(ChangeRecord.changed(path, before, after))


def values_equal(a: Any, b: Any) -> bool:
    """Strict scalar equality.

    ``True`` differs from ``1`` and ``1`` from ``1.0``; NaN equals NaN so
    that a snapshot never differs from itself.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, float) and a != a:
        return b != b
    return a == b


class DiffEngine:
    """Engine for comparing two configuration snapshots.

    Wraps :func:`diff_snapshots` and summarizes the records into a
    :class:`DiffReport`.

    Example:
        engine = DiffEngine()
        result = engine.diff(before, after, source="prod.yaml", target="staging.yaml")

        if result.success:
            for entry in result.report.entries:
                print(f"{entry.kind.value} {entry.path_str}")
    """

    def diff(
        self,
        before: dict[str, Any],
        after: dict[str, Any],
        source: str = "before",
        target: str = "after",
    ) -> DiffResult:
        """Compare two snapshots and generate a diff report.

        Args:
            before: The before snapshot
            after: The after snapshot
            source: Label for the before snapshot (usually its dump path)
            target: Label for the after snapshot

        Returns:
            DiffResult containing the report or errors
        """
        try:
            entries = diff_snapshots(before, after)
        except RecursionError as e:
            return DiffResult.fail(
                [
                    ErrorInfo(
                        code="DIFF_ERROR",
                        message=f"Snapshots are nested too deeply to compare: {e}",
                        details={"source": source, "target": target},
                    )
                ]
            )

        logger.debug(f"Compared {source} with {target}: {len(entries)} changes")

        report = DiffReport(
            source=source,
            target=target,
            entries=entries,
            total_changes=len(entries),
            added_count=sum(1 for e in entries if e.kind == ChangeKind.ADDED),
            removed_count=sum(1 for e in entries if e.kind == ChangeKind.REMOVED),
            changed_count=sum(1 for e in entries if e.kind == ChangeKind.CHANGED),
        )
        return DiffResult.ok(report)
