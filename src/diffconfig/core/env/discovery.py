"""Environment variable discovery from configuration source files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from diffconfig.utils.errors import ScanError
from diffconfig.utils.logging import get_logger

logger = get_logger("env.discovery")

DEFAULT_SCAN_PATTERNS = ("*.exs", "*.py", "*.toml", "*.yaml", "*.yml", "*.json", "*.ini", "*.cfg")

# A double-quoted token such as "DATABASE_URL". Purely textual, so string
# literals that merely look like variable names are picked up as well.
VAR_PATTERN = re.compile(r'"([A-Z][A-Z0-9_]+)"')


def find_source_files(root: Path, patterns: Iterable[str] = DEFAULT_SCAN_PATTERNS) -> list[Path]:
    """List files under ``root`` (any depth) matching any of ``patterns``.

    A missing ``root`` holds no files; it is logged as a warning.
    """
    if not root.is_dir():
        logger.warning(f"Configuration directory not found, no variables scanned: {root}")
        return []

    found: set[Path] = set()
    for pattern in patterns:
        found.update(p for p in root.rglob(pattern) if p.is_file())
    return sorted(found)


def extract_env_vars(text: str) -> set[str]:
    """Return every quoted upper-case identifier in ``text``."""
    return set(VAR_PATTERN.findall(text))


def scan_env_vars(
    root: Path | str,
    patterns: Iterable[str] = DEFAULT_SCAN_PATTERNS,
) -> list[str]:
    """Scan configuration sources for referenced environment variable names.

    Args:
        root: Directory holding the configuration sources
        patterns: Glob patterns selecting the files to scan

    Returns:
        Sorted, duplicate-free list of variable names

    Raises:
        ScanError: If any matching file cannot be read; no partial result is returned
    """
    root = Path(root)
    names: set[str] = set()
    files = find_source_files(root, patterns)

    for path in files:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ScanError(f"Could not read configuration source {path}: {e}", path=str(path)) from e
        names |= extract_env_vars(raw.decode("utf-8", errors="replace"))

    logger.debug(f"Scanned {len(files)} files under {root}, found {len(names)} variables")
    return sorted(names)
