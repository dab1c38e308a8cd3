"""diffconfig: capture and compare application configuration.

This package snapshots the resolved configuration of an application and
compares two snapshots setting by setting:

- **Env Scanner**: Find the environment variables a configuration reads
- **Materializer**: Fill them from the live environment or with placeholders
- **Dumps**: Write and read snapshots as YAML dump files
- **Diff Engine**: List every added, removed and changed setting by path

Usage:
    # Library API
    from diffconfig import DiffEngine, read_dump

    before = read_dump("diffconfig.dump.prod.20240101T000000Z.yaml")
    after = read_dump("diffconfig.dump.prod.20240201T000000Z.yaml")

    result = DiffEngine().diff(before, after)
    for change in result.report.entries:
        print(change.kind, change.path_str)

    # Reproducible environment for a dump
    from diffconfig import materialize_env, scan_env_vars

    values = materialize_env(scan_env_vars("config"), static=True)

CLI:
    diffconfig dump [OUTPUT_PATH] --producer myapp.settings:collect [--static]
    diffconfig diff <before.yaml> <after.yaml>
    diffconfig read <dump.yaml>
"""

__version__ = "0.1.0"

# Core
from diffconfig.core.diff import DiffEngine, diff_snapshots
from diffconfig.core.dump import read_dump, write_dump
from diffconfig.core.env import apply_env, materialize_env, scan_env_vars
from diffconfig.core.producer import collect_snapshot, load_producer

# Models (commonly used)
from diffconfig.models.diff import ChangeKind, ChangeRecord, DiffReport, DiffResult
from diffconfig.models.snapshot import Snapshot

# Renderers
from diffconfig.renderers.base import OutputFormat, RenderContext, Renderer

__all__ = [
    # Version
    "__version__",
    # Core
    "DiffEngine",
    "diff_snapshots",
    "read_dump",
    "write_dump",
    "apply_env",
    "materialize_env",
    "scan_env_vars",
    "collect_snapshot",
    "load_producer",
    # Models
    "ChangeKind",
    "ChangeRecord",
    "DiffReport",
    "DiffResult",
    "Snapshot",
    # Renderers
    "Renderer",
    "RenderContext",
    "OutputFormat",
]
