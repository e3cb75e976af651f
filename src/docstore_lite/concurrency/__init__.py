"""Locking for concurrent writers.

  - CollectionLockRegistry: one lock per collection, get-or-create under
    a registry-wide guard
"""
from docstore_lite.concurrency.lock_registry import CollectionLockRegistry

__all__ = [
    "CollectionLockRegistry",
]
