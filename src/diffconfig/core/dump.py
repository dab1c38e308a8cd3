"""Reading and writing snapshot dump files.

A dump is a single YAML document holding one snapshot: a mapping of
component name to that component's settings. PyYAML's safe dumper and
loader are used, so a dump round-trips exactly (key order, element order,
non-ASCII text and ``null`` included) and loading never constructs
arbitrary Python objects.
"""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from diffconfig import __version__
from diffconfig.models.snapshot import SCALAR_TYPES, ConfigPath, Snapshot, format_path
from diffconfig.utils.errors import DumpParseError, DumpReadError, DumpWriteError, SnapshotError
from diffconfig.utils.logging import get_logger

logger = get_logger("dump")

DEFAULT_DUMP_TEMPLATE = "diffconfig.dump.{environment}.{timestamp}.yaml"

# YAML 1.1 line breaks beyond \n. Left raw in a plain scalar they load back as spaces.
_LINE_BREAKS = ("\x85", "\u2028", "\u2029")


class DumpDumper(yaml.SafeDumper):
    """Safe dumper that double-quotes strings holding YAML line breaks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if any(ch in data for ch in _LINE_BREAKS):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


DumpDumper.add_representer(str, _represent_str)


def default_dump_path(environment: str, now: datetime | None = None) -> Path:
    """Build the default dump file name.

    The timestamp is UTC, truncated to seconds, in ISO-8601 basic format.

    Example:
        >>> default_dump_path("prod", datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))
        PosixPath('diffconfig.dump.prod.20240115T120000Z.yaml')
    """
    if now is None:
        now = datetime.now(timezone.utc)
    timestamp = now.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return Path(DEFAULT_DUMP_TEMPLATE.format(environment=environment, timestamp=timestamp))


def dumps_snapshot(snapshot: Snapshot) -> str:
    """Serialize a snapshot to dump file text."""
    check_snapshot(snapshot)
    header = f"# diffconfig {__version__} configuration dump\n"
    body = yaml.dump(
        snapshot,
        Dumper=DumpDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )
    return header + body


def loads_snapshot(text: str, source: str = "<string>") -> Snapshot:
    """Parse dump file text back into a snapshot.

    Raises:
        DumpParseError: If the text is not a single YAML document holding a
            mapping of component name to settings mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DumpParseError(source, str(e)) from e

    try:
        check_snapshot(data)
    except SnapshotError as e:
        raise DumpParseError(source, e.message) from e
    return data


def write_dump(snapshot: Snapshot, path: Path | str) -> Path:
    """Write a snapshot to ``path``.

    The text goes to a temporary file next to ``path`` which then replaces
    the target, so a failed write never leaves a partial dump behind.

    Raises:
        SnapshotError: If the snapshot holds values a dump cannot represent
        DumpWriteError: If the file cannot be written
    """
    path = Path(path)
    text = dumps_snapshot(snapshot)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise DumpWriteError(str(path), str(e)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError as e:
        raise DumpWriteError(str(path), str(e)) from e
    finally:
        tmp_path.unlink(missing_ok=True)

    logger.info(f"Wrote {len(snapshot)} components to {path}")
    return path


def read_dump(path: Path | str) -> Snapshot:
    """Read a snapshot from a dump file.

    Raises:
        DumpReadError: If the file is missing or unreadable
        DumpParseError: If the content is not a valid dump
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DumpReadError(str(path), "file not found") from e
    except UnicodeDecodeError as e:
        raise DumpParseError(str(path), f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise DumpReadError(str(path), e.strerror or str(e)) from e

    snapshot = loads_snapshot(text, source=str(path))
    logger.debug(f"Read {len(snapshot)} components from {path}")
    return snapshot


def check_snapshot(data: Any) -> None:
    """Check that ``data`` has the snapshot shape and only snapshot values.

    Raises:
        SnapshotError: On the first offending value
    """
    if not isinstance(data, dict):
        raise SnapshotError(
            f"expected a mapping of components, got {_kind(data)}"
        )
    for component, settings in data.items():
        if not isinstance(component, str):
            raise SnapshotError(f"component names must be strings, got {component!r}")
        if not isinstance(settings, dict):
            raise SnapshotError(
                f"settings of component {component!r} must be a mapping, got {_kind(settings)}",
                path=component,
            )
        _check_value(settings, (component,))


def _check_value(value: Any, path: ConfigPath) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            # 1, True and 1.0 are the same dict key, so only str and int are allowed.
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise SnapshotError(
                    f"unsupported key {key!r} at {format_path(path)}", path=format_path(path)
                )
            _check_value(item, path + (key,))
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            _check_value(item, path + (idx,))
    elif not isinstance(value, SCALAR_TYPES):
        raise SnapshotError(
            f"unsupported value of type {_kind(value)} at {format_path(path)}",
            path=format_path(path),
        )


def _kind(value: Any) -> str:
    return "null" if value is None else type(value).__name__
