"""Unit tests for configuration producers."""

from collections import OrderedDict
from enum import Enum
from pathlib import Path
from types import MappingProxyType

import pytest

from diffconfig.core.producer import collect_snapshot, load_producer, normalize_snapshot
from diffconfig.utils.errors import ProducerError, SnapshotError


class Level(str, Enum):
    INFO = "info"


class TestLoadProducer:
    """Tests for load_producer."""

    def test_from_file(self, producer_file: Path):
        producer = load_producer(f"{producer_file}:collect")

        assert callable(producer)

    def test_from_file_attribute(self, producer_file: Path):
        assert load_producer(f"{producer_file}:SETTINGS") == {"web": {"port": 80}}

    def test_from_module(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        package = tmp_path / "acme_settings_pkg"
        package.mkdir()
        (package / "__init__.py").write_text("", encoding="utf-8")
        (package / "prod.py").write_text(
            "class Settings:\n    DATA = {'app': {'debug': False}}\n", encoding="utf-8"
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        assert load_producer("acme_settings_pkg.prod:Settings.DATA") == {"app": {"debug": False}}

    @pytest.mark.parametrize("reference", ["no_colon", ":attr", "module:", ""])
    def test_invalid_reference(self, reference: str):
        with pytest.raises(ProducerError, match="Invalid producer reference"):
            load_producer(reference)

    def test_missing_module(self):
        with pytest.raises(ProducerError, match="Failed to import"):
            load_producer("diffconfig_no_such_module_xyz:collect")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ProducerError, match="not found"):
            load_producer(f"{tmp_path / 'missing.py'}:collect")

    def test_missing_attribute(self, producer_file: Path):
        with pytest.raises(ProducerError, match="no attribute"):
            load_producer(f"{producer_file}:nothing_here")

    def test_broken_file(self, tmp_path: Path):
        path = tmp_path / "broken_producer.py"
        path.write_text("raise RuntimeError('boom')\n", encoding="utf-8")

        with pytest.raises(ProducerError, match="boom"):
            load_producer(f"{path}:collect")


class TestCollectSnapshot:
    """Tests for collect_snapshot."""

    def test_callable(self):
        snapshot = collect_snapshot(lambda: {"web": {"port": 80}, "db": {"pool": 2}})

        assert snapshot == {"db": {"pool": 2}, "web": {"port": 80}}
        assert list(snapshot) == ["db", "web"]

    def test_settings_keep_producer_order(self):
        snapshot = collect_snapshot({"app": {"z": 1, "a": 2}})

        assert list(snapshot["app"]) == ["z", "a"]

    def test_mapping(self):
        assert collect_snapshot({"a": {"x": 1}}) == {"a": {"x": 1}}

    def test_producer_failure(self):
        def producer():
            raise KeyError("DATABASE_URL")

        with pytest.raises(ProducerError, match="DATABASE_URL"):
            collect_snapshot(producer)

    def test_reads_environment(self, producer_file: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEB_PORT", "1234")
        monkeypatch.setenv("DB_POOL_SIZE", "3")
        monkeypatch.delenv("SECRET_KEY_BASE", raising=False)

        snapshot = collect_snapshot(load_producer(f"{producer_file}:collect"))

        assert snapshot == {
            "db": {"pool_size": 3},
            "web": {"port": 1234, "secret": None, "hosts": ["a", "b"]},
        }


class TestNormalizeSnapshot:
    """Tests for normalize_snapshot."""

    def test_plain_types(self):
        data = {
            "app": OrderedDict(
                [
                    ("hosts", ("a", "b")),
                    ("limits", MappingProxyType({"max": 3})),
                    ("level", Level.INFO),
                    (7, True),
                ]
            )
        }

        snapshot = normalize_snapshot(data)

        assert snapshot == {"app": {"hosts": ["a", "b"], "limits": {"max": 3}, "level": "info", 7: True}}
        assert type(snapshot["app"]) is dict
        assert type(snapshot["app"]["hosts"]) is list
        assert type(snapshot["app"]["level"]) is str

    def test_not_a_mapping(self):
        with pytest.raises(SnapshotError, match="mapping of components"):
            normalize_snapshot([("app", {})])

    def test_component_not_a_mapping(self):
        with pytest.raises(SnapshotError, match="must be a mapping"):
            normalize_snapshot({"app": "value"})

    def test_component_name_type(self):
        with pytest.raises(SnapshotError, match="Component names"):
            normalize_snapshot({1: {}})

    def test_unsupported_value(self):
        with pytest.raises(SnapshotError, match=r"app\.handler"):
            normalize_snapshot({"app": {"handler": object()}})

    def test_unsupported_key(self):
        with pytest.raises(SnapshotError, match="Unsupported key"):
            normalize_snapshot({"app": {(1, 2): "x"}})

    def test_bool_key_rejected(self):
        with pytest.raises(SnapshotError):
            normalize_snapshot({"app": {True: "x"}})
