"""Snapshot value types and path helpers.

A snapshot is made of plain Python values: ``dict`` for mappings, ``list``
for sequences and ``str``/``int``/``float``/``bool``/``None`` for scalars.
The top level maps component names to that component's settings mapping.
"""

from __future__ import annotations

import json
import re
from typing import Any

Snapshot = dict[str, dict[Any, Any]]
# Keys are str or int; positions are int.
ConfigPath = tuple[Any, ...]

SCALAR_TYPES = (str, int, float, bool, type(None))

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_sequence(value: Any) -> bool:
    return isinstance(value, list)


def is_identifier(key: Any) -> bool:
    """True for keys that read as bare identifiers (``pool_size``, ``Repo``)."""
    return isinstance(key, str) and bool(_IDENTIFIER.match(key))


def format_path(path: ConfigPath) -> str:
    """Render a path as ``app.key[0]["dotted.key"]``.

    Identifier keys are joined with dots, integer positions are shown as
    ``[n]`` and any other key is quoted inside brackets.
    """
    parts: list[str] = []
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            parts.append(f"[{step}]")
        elif is_identifier(step):
            parts.append(f".{step}" if parts else step)
        else:
            parts.append(f"[{json.dumps(step, ensure_ascii=False, default=str)}]")
    return "".join(parts)
