from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SortDirection
from .model import Member, MemberTag


class MemberRepository(Protocol):
    """Member rows with their person; children are loaded by the service."""

    def save(self, member: Member) -> Member:
        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def list_ordered_by_name(self) -> Sequence[Member]:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[Member]:
        """Case-insensitive substring match on name, IC number, phone or address."""
        raise NotImplementedError

    def find_by_tag_ids(self, tag_ids: Sequence[int]) -> Sequence[Member]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int, sort: str, direction: SortDirection) -> Sequence[Member]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class MemberTagRepository(Protocol):
    def save_all(self, member_tags: Sequence[MemberTag]) -> list[MemberTag]:
        raise NotImplementedError

    def delete_by_member_id(self, member_id: int) -> int:
        raise NotImplementedError

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[MemberTag]:
        raise NotImplementedError
