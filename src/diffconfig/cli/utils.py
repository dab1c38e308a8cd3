"""Shared utilities for CLI commands."""

from __future__ import annotations

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from diffconfig.utils.errors import DiffconfigError

# Shared console instance
console = Console()


def fail(error: DiffconfigError) -> NoReturn:
    """Print a fatal error and exit with the status mapped to its kind.

    Usage errors exit with 2, I/O errors with 1, parse errors with 3 and
    any other diffconfig error with 4.
    """
    console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
    raise typer.Exit(error.exit_code)


def handle_result_errors(result: Any, error_message: str = "Operation failed") -> None:
    """Handle errors in a result object and exit if failed.

    Args:
        result: Result object with success and errors attributes
        error_message: Message to display on error
    """
    if not result.success:
        console.print(f"[red]Error:[/red] {escape(error_message)}")
        for error in result.errors:
            console.print(f"  {escape(str(error))}", soft_wrap=True)
        raise typer.Exit(4)


def output_console(color: bool | None) -> Console:
    """Console for report output.

    An explicit ``--color`` forces escape codes even when stdout is not a
    terminal; otherwise the shared console decides.
    """
    if color:
        return Console(force_terminal=True, color_system="standard", no_color=False)
    return console


def print_plain(text: str) -> None:
    """Print text verbatim: no markup, no highlighting, no wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)
