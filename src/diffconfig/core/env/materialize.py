"""Turn scanned variable names into concrete values.

Two modes are supported. Live mode reads each variable from the process
environment. Static mode assigns deterministic placeholders so that two
dumps taken on different machines only differ where the configuration
itself differs. Override values from a dotenv file are layered on top in
both modes.
"""

from __future__ import annotations

import os
from typing import Callable, Iterable, Mapping, MutableMapping

from diffconfig.utils.logging import get_logger

logger = get_logger("env.materialize")

DEFAULT_PLACEHOLDER = "LOREMIPSUM"

# Evaluated top to bottom; the first matching rule wins.
PLACEHOLDER_RULES: list[tuple[Callable[[str], bool], str]] = [
    (lambda name: name.endswith("_PORT"), "1234"),
    (lambda name: name.endswith("_POOL_SIZE"), "3"),
    (lambda name: name.endswith("_IDS"), "321,123"),
    (lambda name: name.endswith("_ID"), "123"),
    (lambda name: "ENABLE" in name, "true"),
]


def static_value(name: str) -> str:
    """Return the placeholder value for ``name``.

    Example:
        >>> static_value("DB_PORT")
        '1234'
        >>> static_value("SECRET_KEY_BASE")
        'LOREMIPSUM'
    """
    for matches, value in PLACEHOLDER_RULES:
        if matches(name):
            return value
    return DEFAULT_PLACEHOLDER


def materialize_env(
    names: Iterable[str],
    static: bool = False,
    overrides: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str | None]:
    """Build the name -> value mapping for scanned variables.

    Args:
        names: Variable names found by the scanner
        static: Use placeholders instead of live values
        overrides: Explicit values that replace computed ones
        environ: Environment to read live values from (default: os.environ)

    Returns:
        Mapping of every name (and every override name) to its value;
        unset live variables map to None
    """
    if environ is None:
        environ = os.environ

    if static:
        values: dict[str, str | None] = {name: static_value(name) for name in names}
    else:
        values = {name: environ.get(name) for name in names}

    for name, value in (overrides or {}).items():
        values[name] = value

    logger.debug(
        f"Materialized {len(values)} variables "
        f"({'static' if static else 'live'}, {len(overrides or {})} overrides)"
    )
    return values


def apply_env(
    values: Mapping[str, str | None],
    environ: MutableMapping[str, str] | None = None,
) -> list[str]:
    """Write materialized values into the environment, skipping None.

    Returns:
        Names that were set
    """
    if environ is None:
        environ = os.environ

    applied = []
    for name, value in values.items():
        if value is None:
            continue
        environ[name] = value
        applied.append(name)
    return applied


def format_env(values: Mapping[str, str | None]) -> list[str]:
    """Format a mapping as sorted ``NAME=value`` lines (None prints empty)."""
    return [f"{name}={values[name] if values[name] is not None else ''}" for name in sorted(values)]
