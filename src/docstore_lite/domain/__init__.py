"""Domain types for docstore-lite.

Re-exports the public types for convenient access:
    from docstore_lite.domain import User, Address, CollectionName
"""
from docstore_lite.domain.types import (
    CollectionName,
    RawRecord,
    ResourceName,
)
from docstore_lite.domain.user import Address, User

__all__ = [
    "Address",
    "User",
    "CollectionName",
    "RawRecord",
    "ResourceName",
]
