"""Abstract base for document stores.

This is the whole surface a caller needs: write, read, read_all, delete.
Request handlers and services depend on this interface, not on where the
records actually live.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from docstore_lite.domain.types import CollectionName, ResourceName


class DocumentStoreBase(ABC):
    """Interface every store implements."""

    @abstractmethod
    def write(self, collection: CollectionName, resource: ResourceName, value: Any) -> None:
        """Persist value as the named resource, replacing any previous version."""
        ...

    @abstractmethod
    def read(self, collection: CollectionName, resource: ResourceName) -> Any:
        """Return the decoded value of a resource."""
        ...

    @abstractmethod
    def read_all(self, collection: CollectionName) -> list[str]:
        """Return the raw JSON text of every resource in a collection."""
        ...

    @abstractmethod
    def delete(self, collection: CollectionName, resource: ResourceName = "") -> None:
        """Remove one resource, or the whole collection when resource is empty."""
        ...
