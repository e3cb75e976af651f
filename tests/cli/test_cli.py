"""Tests for the docstore-lite command line."""
from __future__ import annotations

import io
import json

from docstore_lite.cli import main


def _run(db_root, *args: str) -> int:
    return main(["--root", str(db_root), *args])


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_write_then_read(tmp_path, capsys):
    root = tmp_path / "db"
    assert _run(root, "write", "users", "john", '{"Name": "John", "Age": 23}') == 0
    assert (root / "users" / "john.json").is_file()

    assert _run(root, "read", "users", "john") == 0
    assert json.loads(capsys.readouterr().out) == {"Name": "John", "Age": 23}


def test_write_from_stdin(tmp_path, monkeypatch):
    root = tmp_path / "db"
    monkeypatch.setattr("sys.stdin", io.StringIO('[1, 2, 3]'))
    assert _run(root, "write", "nums", "a", "-") == 0
    assert json.loads((root / "nums" / "a.json").read_text()) == [1, 2, 3]


def test_read_all_prints_one_record_per_line(tmp_path, capsys):
    root = tmp_path / "db"
    _run(root, "write", "users", "john", '{"Name": "John"}')
    _run(root, "write", "users", "paul", '{"Name": "Paul"}')
    capsys.readouterr()

    assert _run(root, "read-all", "users") == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(json.loads(line)["Name"] for line in lines) == ["John", "Paul"]


def test_delete_resource_and_collection(tmp_path):
    root = tmp_path / "db"
    _run(root, "write", "users", "john", "{}")
    _run(root, "write", "users", "paul", "{}")

    assert _run(root, "delete", "users", "john") == 0
    assert not (root / "users" / "john.json").exists()

    assert _run(root, "delete", "users") == 0
    assert not (root / "users").exists()


def test_missing_resource_exits_1(tmp_path, capsys):
    root = tmp_path / "db"
    assert _run(root, "read", "users", "nobody") == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_json_value_exits_1(tmp_path, capsys):
    root = tmp_path / "db"
    assert _run(root, "write", "users", "john", "{oops") == 1
    assert "not valid JSON" in capsys.readouterr().err
    assert not (root / "users").exists()


def test_empty_resource_name_exits_1(tmp_path, capsys):
    root = tmp_path / "db"
    assert _run(root, "write", "users", "", "{}") == 1
    assert "resource" in capsys.readouterr().err


def test_sweep_command(tmp_path, capsys):
    root = tmp_path / "db"
    _run(root, "write", "users", "john", "{}")
    stray = root / "users" / "paul.json.tmp"
    stray.write_text("{")
    capsys.readouterr()

    assert _run(root, "sweep") == 0
    assert str(stray) in capsys.readouterr().out
    assert not stray.exists()


def test_sweep_flag_at_open(tmp_path):
    root = tmp_path / "db"
    _run(root, "write", "users", "john", "{}")
    stray = root / "users" / "paul.json.tmp"
    stray.write_text("{")

    assert _run(root, "--sweep", "read", "users", "john") == 0
    assert not stray.exists()


def test_deeply_nested_record_exits_1(tmp_path, capsys):
    root = tmp_path / "db"
    _run(root, "write", "c", "r", "[]")
    (root / "c" / "r.json").write_text("[" * 200000)
    capsys.readouterr()

    assert _run(root, "read", "c", "r") == 1
    assert _run(root, "read-all", "c") == 1
    assert "error:" in capsys.readouterr().err
