"""Shared type aliases used across the store."""
from __future__ import annotations

from typing import TypeAlias

CollectionName: TypeAlias = str
ResourceName: TypeAlias = str    # without the .json suffix
RawRecord: TypeAlias = str       # undecoded JSON text as stored
