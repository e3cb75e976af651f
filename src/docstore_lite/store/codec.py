"""JSON encoding for stored records.

Records are written tab-indented with a trailing newline so they diff
and cat cleanly. Encoding is strict: NaN and Infinity are not JSON and
are rejected rather than written as bare tokens other parsers choke on.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from docstore_lite.errors import EncodingFailure

INDENT = "\t"
ENCODING = "utf-8"


def _default(obj: Any) -> Any:
    # Dataclass instances encode as their field mapping.
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: Any) -> bytes:
    """Serialize a value to the on-disk form, or raise EncodingFailure."""
    try:
        text = json.dumps(value, indent=INDENT, allow_nan=False, default=_default)
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingFailure(f"value is not representable as JSON: {exc}") from exc
    return (text + "\n").encode(ENCODING)


def decode(data: bytes | str, source: str = "<record>") -> Any:
    """Parse stored JSON, or raise EncodingFailure naming the source."""
    try:
        return json.loads(data)
    except (ValueError, RecursionError) as exc:
        raise EncodingFailure(f"{source}: invalid JSON: {exc}") from exc
