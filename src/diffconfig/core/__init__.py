"""Core domain logic for diffconfig.

This module provides the library API for capturing and comparing
configuration snapshots.
"""

from diffconfig.core.diff import DiffEngine, diff_snapshots, values_equal
from diffconfig.core.dump import (
    check_snapshot,
    default_dump_path,
    dumps_snapshot,
    loads_snapshot,
    read_dump,
    write_dump,
)
from diffconfig.core.producer import collect_snapshot, load_producer, normalize_snapshot
from diffconfig.core.env import (
    apply_env,
    format_env,
    materialize_env,
    parse_dotenv,
    read_dotenv,
    scan_env_vars,
    static_value,
)

__all__ = [
    "DiffEngine",
    "diff_snapshots",
    "values_equal",
    # Dump
    "check_snapshot",
    "default_dump_path",
    "dumps_snapshot",
    "loads_snapshot",
    "read_dump",
    "write_dump",
    # Producer
    "collect_snapshot",
    "load_producer",
    "normalize_snapshot",
    # Env
    "apply_env",
    "format_env",
    "materialize_env",
    "parse_dotenv",
    "read_dotenv",
    "scan_env_vars",
    "static_value",
]
