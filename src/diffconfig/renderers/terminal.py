"""Terminal renderer for diff reports and snapshots."""

from __future__ import annotations

import json
from typing import Any, Iterable

from rich.console import Console
from rich.text import Text

from diffconfig.models.diff import ChangeKind, ChangeRecord, DiffReport
from diffconfig.models.snapshot import format_path, is_identifier
from diffconfig.renderers.base import BaseRenderer, OutputFormat, RenderContext

# The three visual treatments used when color is on.
SYMBOL_STYLE = "blue"
TEXT_STYLE = "green"
NUMBER_STYLE = "red"

_KIND_WIDTH = max(len(kind.value) for kind in ChangeKind)


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Symbolic tokens (change kinds, paths, identifier keys, booleans and
    None) are blue, text values green and numbers red. With color off the
    same text is produced without any styling.

    Example:
        renderer = TerminalRenderer()
        renderer.render(diff_report, RenderContext(color=False))
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to print to. Creates a new one if None.
        """
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.TERMINAL

    def render(self, data: Any, context: RenderContext) -> str:
        """Print a diff report or a snapshot to the console.

        Returns:
            The rendered text without styling
        """
        if isinstance(data, DiffReport):
            text = self.report_text(data, color=context.color)
        else:
            text = self.snapshot_text(data, color=context.color)

        self._console.print(text, soft_wrap=True)
        return text.plain

    def report_text(self, report: DiffReport, color: bool = True) -> Text:
        """Build the full report: header, one line per change, summary."""
        text = Text()
        text.append(f"{report.source} -> {report.target}\n\n")
        if report.entries:
            text.append_text(self.changes_text(report.entries, color=color))
            text.append("\n\n")
        text.append(summary_line(report))
        return text

    def changes_text(self, changes: Iterable[ChangeRecord], color: bool = True) -> Text:
        """One line per change, in the order given."""
        lines = [self.change_line(change, color=color) for change in changes]
        return Text("\n").join(lines)

    def change_line(self, change: ChangeRecord, color: bool = True) -> Text:
        """Render ``kind  path: old -> new`` (only the relevant values)."""
        symbol = SYMBOL_STYLE if color else ""
        line = Text()
        line.append(change.kind.value.ljust(_KIND_WIDTH), style=symbol)
        line.append("  ")
        line.append(format_path(change.path), style=symbol)
        line.append(": ")
        if change.kind == ChangeKind.ADDED:
            line.append_text(value_text(change.new_value, color))
        elif change.kind == ChangeKind.REMOVED:
            line.append_text(value_text(change.old_value, color))
        else:
            line.append_text(value_text(change.old_value, color))
            line.append(" -> ")
            line.append_text(value_text(change.new_value, color))
        return line

    def snapshot_text(self, snapshot: dict[Any, Any], color: bool = True) -> Text:
        """Render a snapshot as an indented block, one setting per line."""
        lines: list[Text] = []
        _block_lines(snapshot, 0, color, lines)
        return Text("\n").join(lines)


def summary_line(report: DiffReport) -> str:
    if report.identical:
        return "No differences found."
    noun = "change" if report.total_changes == 1 else "changes"
    return (
        f"{report.total_changes} {noun}: {report.added_count} added, "
        f"{report.removed_count} removed, {report.changed_count} changed"
    )


def value_text(value: Any, color: bool = True) -> Text:
    """Render a value on a single line with per-type highlighting."""
    text = Text()
    _append_inline(text, value, color)
    return text


def _scalar_style(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return SYMBOL_STYLE
    if isinstance(value, (int, float)):
        return NUMBER_STYLE
    if isinstance(value, str):
        return TEXT_STYLE
    return ""


def _scalar_repr(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def _append_key(text: Text, key: Any, color: bool) -> None:
    if is_identifier(key):
        text.append(key, style=SYMBOL_STYLE if color else "")
    else:
        text.append(_scalar_repr(key), style=_scalar_style(key) if color else "")


def _append_inline(text: Text, value: Any, color: bool) -> None:
    if isinstance(value, dict):
        text.append("{")
        for idx, (key, item) in enumerate(value.items()):
            if idx:
                text.append(", ")
            _append_key(text, key, color)
            text.append(": ")
            _append_inline(text, item, color)
        text.append("}")
    elif isinstance(value, list):
        text.append("[")
        for idx, item in enumerate(value):
            if idx:
                text.append(", ")
            _append_inline(text, item, color)
        text.append("]")
    else:
        text.append(_scalar_repr(value), style=_scalar_style(value) if color else "")


def _block_lines(mapping: dict[Any, Any], depth: int, color: bool, lines: list[Text]) -> None:
    indent = "  " * depth
    for key, value in mapping.items():
        line = Text(indent)
        _append_key(line, key, color)
        line.append(":")
        if isinstance(value, dict) and value:
            lines.append(line)
            _block_lines(value, depth + 1, color, lines)
        elif isinstance(value, list) and any(isinstance(item, (dict, list)) for item in value):
            lines.append(line)
            for item in value:
                entry = Text(indent + "  - ")
                _append_inline(entry, item, color)
                lines.append(entry)
        else:
            line.append(" ")
            _append_inline(line, value, color)
            lines.append(line)
