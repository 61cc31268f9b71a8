from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..common.validators import optional_int
from ..dependents.model import Dependent
from ..payments.model import PaymentHistory
from ..persons.model import Person
from ..tags.model import Tag


@dataclass(frozen=True)
class MemberTag:
    """Link row between a member and a tag."""

    tag: Tag
    member_id: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "MemberTag":
        tag = data.get("tag")
        if not isinstance(tag, dict):
            tag = {"id": data.get("tagId")}
        return cls(id=optional_int(data.get("id")), tag=Tag.from_json(tag))

    def to_json(self) -> dict:
        return {"id": self.id, "tag": self.tag.to_json()}


@dataclass(frozen=True)
class Member:
    """Khairat member aggregate.

    A member owns exactly one person; tags, dependents and payment history
    hang off the member id.
    """

    person: Person
    member_tags: list[MemberTag] = field(default_factory=list)
    dependents: list[Dependent] = field(default_factory=list)
    payment_histories: list[PaymentHistory] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Member":
        return cls(
            id=optional_int(data.get("id")),
            person=Person.from_json(data.get("person") or {}),
            member_tags=[MemberTag.from_json(t) for t in data.get("memberTags") or []],
            dependents=[Dependent.from_json(d) for d in data.get("dependents") or []],
            payment_histories=[PaymentHistory.from_json(p) for p in data.get("paymentHistories") or []],
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "person": self.person.to_json(),
            "memberTags": [t.to_json() for t in self.member_tags],
            "dependents": [d.to_json() for d in self.dependents],
            "paymentHistories": [p.to_json() for p in self.payment_histories],
        }


@dataclass(frozen=True)
class MemberPage:
    content: Sequence[Member]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return (self.total_elements + self.size - 1) // self.size

    def to_json(self) -> dict:
        return {
            "content": [m.to_json() for m in self.content],
            "page": self.page,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
        }
