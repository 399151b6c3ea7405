from __future__ import annotations

import json
from pathlib import Path

import pytest

from ffm.data.errors import PersistenceError
from ffm.data.save_store import STORAGE_KEY, SaveStore


def test_read_returns_none_without_save(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)

    assert store.exists() is False
    assert store.read() is None


def test_write_then_read(tmp_path: Path) -> None:
    store = SaveStore(tmp_path / "nested")

    store.write({"version": 1, "player": {"name": "Anvar"}})

    assert store.path.name == f"{STORAGE_KEY}.json"
    assert store.exists() is True
    assert store.read() == {"version": 1, "player": {"name": "Anvar"}}
    assert not store.path.with_name(f"{store.path.name}.tmp").exists()


def test_corrupt_file_raises_persistence_error(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)
    store.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        store.read()


def test_unserializable_payload_raises_persistence_error(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)

    with pytest.raises(PersistenceError):
        store.write({"bad": object()})


def test_invalid_utf8_raises_persistence_error(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)
    store.path.write_bytes(b'{"player": {"name": "\xff\xfe"}}')

    with pytest.raises(PersistenceError):
        store.read()


def test_deeply_nested_json_raises_persistence_error(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)
    store.path.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")

    with pytest.raises(PersistenceError):
        store.read()


def test_failed_replace_leaves_no_temp_file(tmp_path: Path) -> None:
    store = SaveStore(tmp_path)
    store.path.mkdir()

    with pytest.raises(PersistenceError):
        store.write({"version": 1})

    assert not store.path.with_name(f"{store.path.name}.tmp").exists()


def test_export_writes_timestamped_copy(tmp_path: Path) -> None:
    store = SaveStore(tmp_path / "saves")

    target = store.export({"version": 1}, tmp_path / "exports")

    assert target.parent == tmp_path / "exports"
    assert target.name.startswith("ff-save-")
    assert target.suffix == ".json"
    assert json.loads(target.read_text(encoding="utf-8")) == {"version": 1}
    assert store.exists() is False
