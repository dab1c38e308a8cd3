"""Environment variable scanning and materialization."""

from diffconfig.core.env.discovery import DEFAULT_SCAN_PATTERNS, extract_env_vars, scan_env_vars
from diffconfig.core.env.dotenv import parse_dotenv, read_dotenv
from diffconfig.core.env.materialize import (
    PLACEHOLDER_RULES,
    apply_env,
    format_env,
    materialize_env,
    static_value,
)

__all__ = [
    "DEFAULT_SCAN_PATTERNS",
    "extract_env_vars",
    "scan_env_vars",
    "parse_dotenv",
    "read_dotenv",
    "PLACEHOLDER_RULES",
    "apply_env",
    "format_env",
    "materialize_env",
    "static_value",
]
