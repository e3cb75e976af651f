"""Tests for removing temp files left behind by failed writes."""
from __future__ import annotations

import os

from docstore_lite.options import Options
from docstore_lite.store.file_store import FileStore


def _leave_temp(db_root, collection: str, name: str) -> str:
    path = db_root / collection / f"{name}.json.tmp"
    path.write_text('{"half": ')
    return str(path)


def test_sweep_removes_stray_temp_files(store, db_root, recorder):
    store.write("a", "r", 1)
    store.write("b", "r", 2)
    stray = {_leave_temp(db_root, "a", "x"), _leave_temp(db_root, "b", "y")}

    removed = store.sweep_temp_files()

    assert set(removed) == stray
    assert not any(os.path.exists(p) for p in stray)
    assert store.read("a", "r") == 1
    assert store.read("b", "r") == 2
    assert len(recorder.messages("warn")) == 2


def test_sweep_leaves_other_files(store, db_root):
    store.write("a", "r", 1)
    (db_root / "a" / "notes.tmp").write_text("")
    assert store.sweep_temp_files() == []
    assert (db_root / "a" / "notes.tmp").exists()


def test_sweep_on_empty_store(store):
    assert store.sweep_temp_files() == []


def test_sweep_at_open(db_root, recorder):
    first = FileStore(db_root, Options(logger=recorder))
    first.write("a", "r", 1)
    stray = _leave_temp(db_root, "a", "r")

    FileStore(db_root, Options(logger=recorder, sweep_temp_files=True))

    assert not os.path.exists(stray)
    assert (db_root / "a" / "r.json").exists()


def test_no_sweep_at_open_by_default(db_root, recorder):
    first = FileStore(db_root, Options(logger=recorder))
    first.write("a", "r", 1)
    stray = _leave_temp(db_root, "a", "r")

    FileStore(db_root, Options(logger=recorder))

    assert os.path.exists(stray)


def test_sweep_skips_collection_deleted_since_listing(store, db_root, monkeypatch):
    store.write("a", "r", 1)
    stray = _leave_temp(db_root, "a", "x")
    listed = store.collections() + ["gone"]
    monkeypatch.setattr(store, "collections", lambda: listed)

    assert store.sweep_temp_files() == [stray]
