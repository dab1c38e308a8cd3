"""Dotenv override files (``NAME=value`` per line)."""

from __future__ import annotations

from pathlib import Path

from diffconfig.utils.errors import ScanError
from diffconfig.utils.logging import get_logger

logger = get_logger("env.dotenv")


def parse_dotenv(text: str) -> dict[str, str]:
    """Parse dotenv text.

    Each line is stripped; blank lines, ``#`` comments and lines without
    ``=`` are ignored. The line is split at the first ``=`` and the value is
    kept verbatim (no quote handling). Later duplicates overwrite earlier ones.
    """
    env: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        env[key] = value
    return env


def read_dotenv(path: Path | str | None) -> dict[str, str]:
    """Read overrides from a dotenv file.

    Returns an empty mapping when ``path`` is None or does not exist; the
    latter is logged as a warning.

    Raises:
        ScanError: If the file exists but cannot be read
    """
    if path is None:
        return {}

    path = Path(path)
    if not path.exists():
        logger.warning(f"Dotenv file not found, no overrides loaded: {path}")
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"Could not read dotenv file {path}: {e}", path=str(path)) from e

    env = parse_dotenv(text)
    logger.debug(f"Loaded {len(env)} overrides from {path}")
    return env
