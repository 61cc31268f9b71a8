from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import optional_int


@dataclass(frozen=True)
class Tag:
    name: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Tag":
        return cls(id=optional_int(data.get("id")), name=data.get("name"))

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name}
