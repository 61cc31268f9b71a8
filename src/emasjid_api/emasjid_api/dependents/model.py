from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import optional_int
from ..persons.model import Person


@dataclass(frozen=True)
class Dependent:
    """A person (spouse, child, ...) covered by a member's khairat."""

    person: Person
    member_id: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Dependent":
        return cls(
            id=optional_int(data.get("id")),
            person=Person.from_json(data.get("person") or {}),
            member_id=optional_int(data.get("memberId")),
        )

    def to_json(self) -> dict:
        return {"id": self.id, "person": self.person.to_json(), "memberId": self.member_id}
