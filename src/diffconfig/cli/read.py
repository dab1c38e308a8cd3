"""CLI command for printing a configuration dump."""

from pathlib import Path
from typing import Optional

import typer

from diffconfig.cli.utils import fail, output_console
from diffconfig.utils.errors import DiffconfigError, UsageError


def read_cmd(
    dump_file: Optional[Path] = typer.Argument(
        None,
        help="Dump file to read",
        show_default=False,
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Enable syntax highlighting in the output (default: on)",
        show_default=False,
    ),
) -> None:
    """
    Read the contents of a diffconfig dump file.

    Example:
        diffconfig read diffconfig.dump.prod.20240101T000000Z.yaml --no-color
    """
    from diffconfig.core.dump import read_dump
    from diffconfig.renderers import RenderContext
    from diffconfig.renderers.terminal import TerminalRenderer
    from diffconfig.utils.config import get_config

    settings = get_config()
    try:
        if dump_file is None:
            raise UsageError("Please provide a path to the dump file", argument="dump_file")
        snapshot = read_dump(dump_file)
    except DiffconfigError as e:
        fail(e)

    context = RenderContext(color=settings.output.color if color is None else color)
    TerminalRenderer(output_console(color)).render(snapshot, context)
