"""CLI command for diffing two configuration dumps."""

from pathlib import Path
from typing import List, Optional

import typer

from diffconfig.cli.utils import fail, handle_result_errors, output_console, print_plain
from diffconfig.utils.errors import DiffconfigError, UsageError


def diff_cmd(
    files: Optional[List[Path]] = typer.Argument(
        None,
        help="The before and after dump files",
        show_default=False,
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Enable syntax highlighting in the output (default: on)",
        show_default=False,
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
) -> None:
    """
    Diff two configuration dumps and show the differences.

    Every added, removed and changed setting is listed with its path,
    in the order the settings appear in the dumps.

    Example:
        diffconfig diff diffconfig.dump.prod.20240101T000000Z.yaml diffconfig.dump.prod.20240201T000000Z.yaml
    """
    from diffconfig.core.diff import DiffEngine
    from diffconfig.core.dump import read_dump
    from diffconfig.renderers import OutputFormat, RenderContext, get_renderer
    from diffconfig.utils.config import get_config

    settings = get_config()
    try:
        if not files or len(files) != 2:
            raise UsageError(
                "Please provide exactly two configuration dump files to compare",
                argument="files",
            )
        try:
            output_format = OutputFormat(format or settings.output.default_format)
        except ValueError:
            raise UsageError(f"Invalid format: {format}", argument="--format")

        before_path, after_path = files
        before = read_dump(before_path)
        after = read_dump(after_path)
    except DiffconfigError as e:
        fail(e)

    result = DiffEngine().diff(before, after, source=str(before_path), target=str(after_path))
    handle_result_errors(result, "Failed to diff dumps")

    context = RenderContext(
        format=output_format,
        color=settings.output.color if color is None else color,
    )
    if output_format == OutputFormat.JSON:
        print_plain(get_renderer(output_format).render(result.report, context))
    else:
        from diffconfig.renderers.terminal import TerminalRenderer

        TerminalRenderer(output_console(color)).render(result.report, context)
