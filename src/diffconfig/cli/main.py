"""Main CLI entry point for diffconfig."""

from pathlib import Path
from typing import Optional

import typer

from diffconfig.cli import diff, dump, read
from diffconfig.cli.utils import console, fail

app = typer.Typer(
    name="diffconfig",
    help="Compare application configurations with support for setting environment variables.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register subcommands
app.command(name="dump")(dump.dump_cmd)
app.command(name="diff")(diff.diff_cmd)
app.command(name="read")(read.read_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    settings: Optional[Path] = typer.Option(
        None,
        "--settings",
        "-s",
        help="Settings file (default: .diffconfig.yaml in the current or home directory)",
    ),
) -> None:
    """
    diffconfig: capture and compare application configuration.

    - [bold]dump[/bold]: Dump the current configuration to a file
    - [bold]diff[/bold]: Diff two configuration dumps and show the differences
    - [bold]read[/bold]: Read the contents of a diffconfig dump file
    """
    from diffconfig.utils.config import load_config, set_config
    from diffconfig.utils.errors import ConfigurationError, DiffconfigError
    from diffconfig.utils.logging import configure_logging, level_for_flags

    configure_logging(level=level_for_flags(verbose=verbose, quiet=quiet))

    try:
        set_config(load_config(settings))
    except FileNotFoundError as e:
        fail(ConfigurationError(str(e), config_key="settings"))
    except DiffconfigError as e:
        fail(e)


@app.command()
def version() -> None:
    """Show the diffconfig version."""
    from diffconfig import __version__

    console.print(f"diffconfig version {__version__}")


if __name__ == "__main__":
    app()
