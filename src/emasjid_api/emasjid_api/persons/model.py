from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import optional_int, require_non_empty


@dataclass(frozen=True)
class Person:
    """Biographical data shared by members and their dependents.

    Note: Identity (``id``) is assigned by the database on first save and
    never changes afterwards.
    """

    name: str
    ic_number: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Person":
        return cls(
            id=optional_int(data.get("id")),
            name=require_non_empty(data.get("name"), "Nama"),
            ic_number=data.get("icNumber"),
            address=data.get("address"),
            phone=data.get("phone"),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icNumber": self.ic_number,
            "address": self.address,
            "phone": self.phone,
        }
