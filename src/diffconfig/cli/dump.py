"""CLI command for dumping the current configuration."""

from pathlib import Path
from typing import Optional

import typer

from diffconfig.cli.utils import fail, print_plain
from diffconfig.utils.errors import DiffconfigError, UsageError
from diffconfig.utils.logging import get_logger_with_context


def dump_cmd(
    output_path: Optional[Path] = typer.Argument(
        None,
        help="Where to write the dump (default: diffconfig.dump.{env}.{timestamp}.yaml)",
        show_default=False,
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Directory of configuration sources to scan for variable names (default: config)",
    ),
    static: Optional[bool] = typer.Option(
        None,
        "--static/--no-static",
        help="Set every detected variable to a placeholder value",
        show_default=False,
    ),
    show_env: bool = typer.Option(
        False,
        "--show-env",
        help="Print the detected variables and their values instead of dumping",
    ),
    dotenv: Optional[Path] = typer.Option(
        None,
        "--dotenv",
        help="Dotenv file whose values override detected or placeholder values",
    ),
    producer: Optional[str] = typer.Option(
        None,
        "--producer",
        "-p",
        help="Configuration producer: module:attr or path/to/file.py:attr",
    ),
    environment: Optional[str] = typer.Option(
        None,
        "--environment",
        "-e",
        help="Environment name used in the default output file name",
    ),
) -> None:
    """
    Dump the current configuration to a file.

    Environment variables referenced as "UPPER_CASE" strings in the
    configuration sources are detected first. With [bold]--static[/bold]
    they are all set to placeholders so that dumps are reproducible:

    - names ending in _PORT become "1234"
    - names ending in _POOL_SIZE become "3"
    - names ending in _IDS become "321,123"
    - names ending in _ID become "123"
    - names containing ENABLE become "true"
    - anything else becomes "LOREMIPSUM"

    Values from [bold]--dotenv[/bold] always win. The variables are exported
    before the producer runs, then its configuration is written out.

    Example:
        diffconfig dump --static --producer myapp.settings:collect
    """
    from diffconfig.core.dump import default_dump_path, write_dump
    from diffconfig.core.env import (
        apply_env,
        format_env,
        materialize_env,
        read_dotenv,
        scan_env_vars,
    )
    from diffconfig.core.producer import collect_snapshot, load_producer
    from diffconfig.utils.config import get_config, resolve_environment

    settings = get_config()
    use_static = settings.dump.static if static is None else static
    reference = producer or settings.dump.producer

    try:
        if not show_env and not reference:
            raise UsageError(
                "No configuration producer given; pass --producer module:attr "
                "or set dump.producer in .diffconfig.yaml",
                argument="--producer",
            )

        names = scan_env_vars(config_dir or settings.dump.config_dir, settings.dump.scan_patterns)
        values = materialize_env(names, static=use_static, overrides=read_dotenv(dotenv))

        if show_env:
            for line in format_env(values):
                print_plain(line)
            return

        target = output_path or default_dump_path(resolve_environment(environment, settings))
        logger = get_logger_with_context("cli.dump", output=str(target))

        applied = apply_env(values)
        logger.debug(f"Exported {len(applied)} of {len(values)} variables")

        snapshot = collect_snapshot(load_producer(reference))
        write_dump(snapshot, target)
    except DiffconfigError as e:
        fail(e)

    print_plain(str(target))
