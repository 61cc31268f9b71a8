from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Kutipan, Tabung, TabungType


class TabungTypeRepository(Protocol):
    def list_all(self) -> Sequence[TabungType]:
        raise NotImplementedError

    def get_by_id(self, type_id: int) -> Optional[TabungType]:
        raise NotImplementedError

    def save(self, tabung_type: TabungType) -> TabungType:
        raise NotImplementedError

    def delete_by_id(self, type_id: int) -> bool:
        raise NotImplementedError


class TabungRepository(Protocol):
    """Tabung rows loaded together with their type."""

    def list_all(self) -> Sequence[Tabung]:
        raise NotImplementedError

    def get_by_id(self, tabung_id: int) -> Optional[Tabung]:
        raise NotImplementedError

    def save(self, tabung: Tabung) -> Tabung:
        raise NotImplementedError

    def delete_by_id(self, tabung_id: int) -> bool:
        raise NotImplementedError


class KutipanRepository(Protocol):
    def list_by_tabung_id(self, tabung_id: int) -> Sequence[Kutipan]:
        """Newest first."""
        raise NotImplementedError

    def list_between(
        self,
        *,
        tabung_id: int,
        from_date: int,
        to_date: int,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[Kutipan]:
        """Kutipan with ``from_date <= create_date <= to_date``, oldest id first.

        Without ``limit`` every matching row is returned.
        """
        raise NotImplementedError

    def count_between(self, *, tabung_id: int, from_date: int, to_date: int) -> int:
        raise NotImplementedError

    def get_by_id(self, kutipan_id: int) -> Optional[Kutipan]:
        raise NotImplementedError

    def save(self, kutipan: Kutipan) -> Kutipan:
        """Insert, or update counts and date of an existing row (tabung is kept)."""
        raise NotImplementedError

    def delete_by_id(self, kutipan_id: int) -> bool:
        raise NotImplementedError
