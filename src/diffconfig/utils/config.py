"""Configuration file support for diffconfig."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from diffconfig.core.env.discovery import DEFAULT_SCAN_PATTERNS
from diffconfig.utils.errors import ConfigurationError

ENVIRONMENT_VARIABLE = "DIFFCONFIG_ENV"
DEFAULT_ENVIRONMENT = "dev"


class DumpConfig(BaseModel):
    """Defaults for the ``dump`` command."""

    config_dir: str = Field(default="config", description="Directory scanned for variable names")
    scan_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SCAN_PATTERNS),
        description="Glob patterns of configuration source files",
    )
    producer: str | None = Field(
        default=None,
        description="Configuration producer reference (module:attr or file.py:attr)",
    )
    environment: str | None = Field(default=None, description="Environment identifier for dump names")
    static: bool = Field(default=False, description="Use placeholder values for scanned variables")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="terminal", description="Default diff output format")
    color: bool = Field(default=True, description="Enable color output")


class DiffconfigConfig(BaseModel):
    """Main configuration for diffconfig."""

    dump: DumpConfig = Field(default_factory=DumpConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths, in lookup order."""
    paths = [
        Path.cwd() / ".diffconfig.yaml",
        Path.cwd() / ".diffconfig.yml",
        Path.cwd() / "diffconfig.yaml",
    ]

    home = Path.home()
    paths.append(home / ".diffconfig.yaml")
    paths.append(home / ".config" / "diffconfig" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "diffconfig" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> DiffconfigConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigurationError: If the file is not valid YAML or has invalid settings
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return DiffconfigConfig()


def _load_config_file(path: Path) -> DiffconfigConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return DiffconfigConfig()

    try:
        return DiffconfigConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in config file {path}: {e}") from e


def resolve_environment(explicit: str | None, config: DiffconfigConfig) -> str:
    """Pick the environment identifier embedded in default dump names.

    The ``--environment`` option wins, then ``DIFFCONFIG_ENV``, then the
    config file, then ``dev``.
    """
    return (
        explicit
        or os.environ.get(ENVIRONMENT_VARIABLE)
        or config.dump.environment
        or DEFAULT_ENVIRONMENT
    )


_config: DiffconfigConfig | None = None


def get_config() -> DiffconfigConfig:
    """Get the global configuration instance, loading it on first call."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: DiffconfigConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
