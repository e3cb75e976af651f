"""Shared fixtures: a store rooted in tmp_path and a logger that records."""
from __future__ import annotations

from typing import Any

import pytest

from docstore_lite.options import Options
from docstore_lite.store.file_store import FileStore


class RecordingLogger:
    """Logger that keeps (level, message) pairs instead of printing."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _emit(self, level: str, msg: str, args: tuple[Any, ...]) -> None:
        self.records.append((level, msg % args if args else msg))

    def fatal(self, msg: str, *args: Any) -> None:
        self._emit("fatal", msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._emit("error", msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._emit("warn", msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._emit("info", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._emit("debug", msg, args)

    def trace(self, msg: str, *args: Any) -> None:
        self._emit("trace", msg, args)

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def db_root(tmp_path):
    return tmp_path / "db"


@pytest.fixture
def store(db_root, recorder) -> FileStore:
    return FileStore(db_root, Options(logger=recorder))


# Pool of test users, taken from the seed data of the old user API
USERS = [
    {"Name": "John", "Age": "23", "Contact": "23344333", "Company": "Myrl Tech",
     "Address": {"City": "bangalore", "State": "karnataka", "Country": "india", "Pincode": "410013"}},
    {"Name": "Paul", "Age": "25", "Contact": "23344333", "Company": "Google",
     "Address": {"City": "san francisco", "State": "california", "Country": "USA", "Pincode": "410013"}},
    {"Name": "Robert", "Age": "27", "Contact": "23344333", "Company": "Microsoft",
     "Address": {"City": "bangalore", "State": "karnataka", "Country": "india", "Pincode": "410013"}},
]


@pytest.fixture
def users_data() -> list[dict[str, Any]]:
    return [dict(u, Address=dict(u["Address"])) for u in USERS]
