"""Loading configuration producers and normalizing their output.

A producer is any Python object that yields an application's live
configuration: a mapping of component name to settings, or a callable
returning one. It is named by a reference of the form ``module:attr``
(imported) or ``path/to/file.py:attr`` (loaded from the file).
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from diffconfig.models.snapshot import SCALAR_TYPES, ConfigPath, Snapshot, format_path
from diffconfig.utils.errors import ProducerError, SnapshotError
from diffconfig.utils.logging import get_logger

logger = get_logger("producer")


def load_producer(reference: str) -> Any:
    """Resolve a producer reference.

    Args:
        reference: ``module:attr`` or ``path/to/file.py:attr``; a dotted
            attribute path after the colon is followed

    Returns:
        The referenced object

    Raises:
        ProducerError: If the module, file or attribute cannot be found
    """
    target, sep, attr = reference.rpartition(":")
    if not sep or not target or not attr:
        raise ProducerError(
            f"Invalid producer reference '{reference}', expected 'module:attr' or 'file.py:attr'",
            reference=reference,
        )

    if target.endswith(".py"):
        module = _load_module_from_path(Path(target), reference)
    else:
        try:
            module = importlib.import_module(target)
        except Exception as e:
            raise ProducerError(
                f"Failed to import producer module '{target}': {e}", reference=reference
            ) from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ProducerError(
                f"Producer '{reference}' not found: {target} has no attribute '{attr}'",
                reference=reference,
            ) from e

    logger.debug(f"Loaded producer {reference}")
    return obj


def _load_module_from_path(path: Path, reference: str) -> Any:
    if not path.exists():
        raise ProducerError(f"Producer file not found: {path}", reference=reference)

    module_name = f"diffconfig_producer_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ProducerError(f"Cannot load producer from: {path}", reference=reference)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise ProducerError(f"Failed to load producer file {path}: {e}", reference=reference) from e
    return module


def collect_snapshot(producer: Any) -> Snapshot:
    """Run a producer and normalize what it returns into a snapshot.

    Components are ordered by name; settings keep the producer's order.

    Raises:
        ProducerError: If a callable producer raises
        SnapshotError: If the result cannot be represented as a snapshot
    """
    if callable(producer):
        try:
            producer = producer()
        except Exception as e:
            raise ProducerError(f"Configuration producer failed: {e}") from e

    snapshot = normalize_snapshot(producer)
    return {name: snapshot[name] for name in sorted(snapshot)}


def normalize_snapshot(data: Any) -> Snapshot:
    """Convert producer output into plain snapshot values.

    Mappings become ``dict`` (keys must be ``str`` or ``int``), lists and
    tuples become ``list``; scalars pass through unchanged.

    Raises:
        SnapshotError: For a top level that is not a mapping of mappings, or
            for values of any other type
    """
    if not isinstance(data, Mapping):
        raise SnapshotError(
            f"Producer must return a mapping of components, got {type(data).__name__}"
        )

    snapshot: Snapshot = {}
    for component, settings in data.items():
        if not isinstance(component, str):
            raise SnapshotError(f"Component names must be strings, got {component!r}")
        if not isinstance(settings, Mapping):
            raise SnapshotError(
                f"Settings of component '{component}' must be a mapping, got {type(settings).__name__}",
                path=component,
            )
        component = str.__str__(component)
        snapshot[component] = _normalize(settings, (component,))
    return snapshot


def _normalize(value: Any, path: ConfigPath) -> Any:
    if isinstance(value, Mapping):
        out = {}
        for key, item in value.items():
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise SnapshotError(
                    f"Unsupported key {key!r} at {format_path(path)}", path=format_path(path)
                )
            key = str.__str__(key) if isinstance(key, str) else int(key)
            out[key] = _normalize(item, path + (key,))
        return out
    if isinstance(value, (list, tuple)):
        return [_normalize(item, path + (idx,)) for idx, item in enumerate(value)]
    if type(value) in SCALAR_TYPES:
        return value
    # Subclasses such as str or int enums are reduced to their plain base
    # type, which is all a dump can represent.
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str.__str__(value)
    raise SnapshotError(
        f"Unsupported value of type {type(value).__name__} at {format_path(path)}",
        path=format_path(path),
    )
