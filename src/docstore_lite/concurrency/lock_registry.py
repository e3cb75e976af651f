"""Per-collection lock registry.

One threading.Lock per collection name, created on first touch and kept
for the lifetime of the registry. Writers and deleters of the same
collection serialize on it; different collections never block each other.

The get-or-create step runs under a single registry-wide lock. That
critical section is a dict lookup, so it is short, and it guarantees two
threads touching a new collection at the same moment get the same lock:

    registry = CollectionLockRegistry()

    with registry.hold("users"):
        ...  # exclusive against every other holder of "users"

Entries are never removed. The intended workload is a small, known set of
collections, so the map stays bounded in practice.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class CollectionLockRegistry:
    """Maps collection name -> threading.Lock, growing monotonically."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, collection: str) -> threading.Lock:
        """Get the collection's lock, creating it on first use."""
        with self._guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.Lock()
                self._locks[collection] = lock
            return lock

    @contextmanager
    def hold(self, collection: str) -> Iterator[None]:
        """Hold the collection's lock for the body of a with-block.

        Released on every exit path, exceptions included.
        """
        with self.lock_for(collection):
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def __contains__(self, collection: object) -> bool:
        with self._guard:
            return collection in self._locks
