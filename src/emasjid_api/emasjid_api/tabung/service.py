from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_utc, to_epoch_millis
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Kutipan, KutipanPage, Tabung, TabungType
from .repository import KutipanRepository, TabungRepository, TabungTypeRepository

logger = logging.getLogger(__name__)


class TabungService:
    """Use case: maintain collection boxes and their types."""

    def __init__(self, tabung_types: TabungTypeRepository, tabung: TabungRepository):
        self._tabung_types = tabung_types
        self._tabung = tabung

    # -------- Tabung types --------
    def find_all_types(self) -> Sequence[TabungType]:
        return self._tabung_types.list_all()

    def save_type(self, tabung_type: TabungType) -> TabungType:
        return self._tabung_types.save(replace(tabung_type, name=require_non_empty(tabung_type.name, "Jenis tabung")))

    def delete_type(self, type_id: int) -> None:
        self._tabung_types.delete_by_id(int(type_id))

    # -------- Tabung --------
    def find_all(self) -> Sequence[Tabung]:
        return self._tabung.list_all()

    def find_by_id(self, tabung_id: int) -> Tabung:
        found = self._tabung.get_by_id(int(tabung_id))
        if found is None:
            raise NotFoundError("Tabung tidak wujud")
        return found

    def save(self, tabung: Tabung) -> Tabung:
        name = require_non_empty(tabung.name, "Nama tabung")
        if tabung.tabung_type is None or tabung.tabung_type.id is None:
            raise ValidationError("Jenis tabung tidak sah")
        tabung_type = self._tabung_types.get_by_id(int(tabung.tabung_type.id))
        if tabung_type is None:
            raise ValidationError("Jenis tabung tidak wujud")

        saved = self._tabung.save(replace(tabung, name=name, tabung_type=tabung_type))
        logger.info("Saved tabung %s (%s)", saved.id, tabung_type.name)
        return self.find_by_id(saved.id)

    def delete(self, tabung_id: int) -> None:
        self._tabung.delete_by_id(int(tabung_id))


class KutipanService:
    """Use case: record and report counted collections of a tabung.

    Paging over a date range is 1-based; ``page=0`` together with ``size=0``
    returns every match.
    """

    def __init__(
        self,
        kutipan: KutipanRepository,
        tabung: TabungRepository,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._kutipan = kutipan
        self._tabung = tabung
        self._clock = clock

    def find_all_by_tabung_id(self, tabung_id: int) -> Sequence[Kutipan]:
        return self._kutipan.list_by_tabung_id(int(tabung_id))

    def find_all_between(
        self,
        *,
        tabung_id: int,
        from_date: int,
        to_date: int,
        page: int = 0,
        size: int = 0,
    ) -> KutipanPage:
        if from_date > to_date:
            raise ValidationError("Julat tarikh tidak sah")

        if page == 0 and size == 0:
            content = self._kutipan.list_between(tabung_id=tabung_id, from_date=from_date, to_date=to_date)
        else:
            if page < 1 or size < 1:
                raise ValidationError("Muka surat tidak sah")
            content = self._kutipan.list_between(
                tabung_id=tabung_id,
                from_date=from_date,
                to_date=to_date,
                offset=(page - 1) * size,
                limit=size,
            )
        total = self._kutipan.count_between(tabung_id=tabung_id, from_date=from_date, to_date=to_date)
        return KutipanPage(content=content, total=total)

    def find_by_id(self, kutipan_id: int) -> Kutipan:
        found = self._kutipan.get_by_id(int(kutipan_id))
        if found is None:
            raise NotFoundError("Kutipan tidak wujud")
        return found

    def create(self, kutipan: Kutipan) -> Kutipan:
        if kutipan.tabung.id is None or self._tabung.get_by_id(int(kutipan.tabung.id)) is None:
            raise ValidationError("Tabung tidak wujud")
        _require_counts(kutipan)

        create_date = kutipan.create_date if kutipan.create_date is not None else to_epoch_millis(self._clock())
        saved = self._kutipan.save(replace(kutipan, id=None, create_date=create_date))
        logger.info("Recorded kutipan %s for tabung %s", saved.id, kutipan.tabung.id)
        return self.find_by_id(saved.id)

    def update(self, kutipan_id: int, kutipan: Kutipan) -> Kutipan:
        existing = self.find_by_id(kutipan_id)
        _require_counts(kutipan)

        self._kutipan.save(
            replace(
                kutipan,
                id=existing.id,
                tabung=existing.tabung,
                create_date=kutipan.create_date if kutipan.create_date is not None else existing.create_date,
            )
        )
        return self.find_by_id(existing.id)

    def delete(self, kutipan_id: int) -> str:
        if not self._kutipan.delete_by_id(int(kutipan_id)):
            raise NotFoundError("Kutipan tidak wujud")
        return f"Kutipan id: {int(kutipan_id)} is removed"


def _require_counts(kutipan: Kutipan) -> None:
    for field_name, count in kutipan.counts().items():
        if count < 0:
            raise ValidationError(f"{field_name} tidak sah")
