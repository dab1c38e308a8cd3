"""Shared test fixtures for diffconfig tests."""

import logging
from pathlib import Path
from typing import Any

import pytest

from diffconfig.utils.config import set_config


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep user settings files and the environment name out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("DIFFCONFIG_ENV", raising=False)
    set_config(None)
    yield
    set_config(None)
    # CLI runs install a handler bound to the runner's stream
    logger = logging.getLogger("diffconfig")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def snapshot_v1() -> dict[str, Any]:
    """A snapshot with a single component."""
    return {"app_a": {"timeout": 30, "mode": "fast"}}


@pytest.fixture
def snapshot_v2() -> dict[str, Any]:
    """The same application after a timeout change and a new component."""
    return {
        "app_a": {"timeout": 60, "mode": "fast"},
        "app_b": {"enabled": True},
    }


@pytest.fixture
def rich_snapshot() -> dict[str, Any]:
    """A snapshot exercising every kind of value a dump can hold."""
    return {
        "my_app": {
            "url": {"host": "example.com", "port": 4000},
            "secret": "naïve ✓ 設定",
            "pool_size": 10,
            "ratio": 0.5,
            "debug": False,
            "api_key": None,
            "answer": "yes",
            "numeric_text": "0123",
            "hosts": ["b.example.com", "a.example.com"],
            "nested": [{"name": "primary", "weight": 1}, [1, 2]],
            "empty_map": {},
            "empty_list": [],
            1: "integer key",
            "dotted.key": "quoted in paths",
        },
        "Logger": {"level": "info"},
    }


@pytest.fixture
def config_tree(tmp_path: Path) -> Path:
    """A directory of configuration sources referencing environment variables."""
    root = tmp_path / "config"
    (root / "envs").mkdir(parents=True)
    (root / "config.exs").write_text(
        'config :my_app, api_key: System.get_env("API_KEY")\n', encoding="utf-8"
    )
    (root / "envs" / "prod.exs").write_text(
        'config :my_app,\n  api_key: System.get_env("API_KEY"),\n  host: System.get_env("DB_HOST")\n',
        encoding="utf-8",
    )
    return root


PRODUCER_SOURCE = '''
import os


def collect():
    return {
        "web": {
            "port": int(os.environ.get("WEB_PORT", "0")),
            "secret": os.environ.get("SECRET_KEY_BASE"),
            "hosts": ["a", "b"],
        },
        "db": {"pool_size": int(os.environ.get("DB_POOL_SIZE", "1"))},
    }


SETTINGS = {"web": {"port": 80}}
'''


@pytest.fixture
def producer_file(tmp_path: Path) -> Path:
    """A producer reading its settings from the environment."""
    path = tmp_path / "settings_producer.py"
    path.write_text(PRODUCER_SOURCE, encoding="utf-8")
    return path
