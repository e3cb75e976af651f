"""User and Address records, the typed side of the "users" collection.

The store itself is schema-free; these types are how a caller turns the
raw JSON back into something structured. Field names on disk keep their
capitalized form (Name, Age, ...) so existing data files stay readable.

Age and Pincode are kept as strings: the stored files carry them as
either JSON numbers or strings, and both forms decode to the same value.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from docstore_lite.domain.types import RawRecord


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True, slots=True)
class Address:
    city: str = ""
    state: str = ""
    country: str = ""
    pincode: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "City": self.city,
            "State": self.state,
            "Country": self.country,
            "Pincode": self.pincode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        return cls(
            city=_text(data.get("City")),
            state=_text(data.get("State")),
            country=_text(data.get("Country")),
            pincode=_text(data.get("Pincode")),
        )


@dataclass(frozen=True, slots=True)
class User:
    name: str
    age: str = ""
    contact: str = ""
    company: str = ""
    address: Address = field(default_factory=Address)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Age": self.age,
            "Contact": self.contact,
            "Company": self.company,
            "Address": self.address.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Build a User from a decoded record. Missing fields default empty."""
        if not isinstance(data, dict):
            raise ValueError(f"user record must be a JSON object, got {type(data).__name__}")
        address = data.get("Address") or {}
        if not isinstance(address, dict):
            raise ValueError(f"Address must be a JSON object, got {type(address).__name__}")
        return cls(
            name=_text(data.get("Name")),
            age=_text(data.get("Age")),
            contact=_text(data.get("Contact")),
            company=_text(data.get("Company")),
            address=Address.from_dict(address),
        )

    @classmethod
    def from_json(cls, raw: RawRecord) -> User:
        """Decode one entry of read_all()."""
        return cls.from_dict(json.loads(raw))
