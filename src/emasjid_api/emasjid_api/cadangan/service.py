from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, to_epoch_millis
from ..common.validators import require_non_empty
from ..core.constants import CADANGAN_DEFAULT_PAGE, CADANGAN_DEFAULT_PAGE_SIZE
from ..core.enums import CadanganTypeId
from ..core.exceptions import NotFoundError, ValidationError
from .model import Cadangan, CadanganCount, CadanganPage, CadanganType
from .repository import CadanganRepository

logger = logging.getLogger(__name__)


class CadanganService:
    """Use case: suggestion box (public submission, admin triage)."""

    def __init__(self, cadangan: CadanganRepository, *, clock: Callable[[], datetime] = now_utc):
        self._cadangan = cadangan
        self._clock = clock

    def get_one(self, cadangan_id: int) -> Cadangan:
        found = self._cadangan.get_by_id(int(cadangan_id))
        if found is None:
            raise NotFoundError("Cadangan tidak wujud")
        return found

    def list_by(
        self,
        *,
        is_open: bool,
        cadangan_type_id: Optional[int] = None,
        page: int = CADANGAN_DEFAULT_PAGE,
        size: int = CADANGAN_DEFAULT_PAGE_SIZE,
    ) -> CadanganPage:
        if page < 1:
            raise ValidationError("Muka surat tidak sah")
        if size <= 0:
            raise ValidationError("Saiz muka surat tidak sah")

        content = self._cadangan.list_by(
            is_open=is_open,
            cadangan_type_id=cadangan_type_id,
            offset=(page - 1) * size,
            limit=size,
        )
        total = self._cadangan.count_by(is_open=is_open, cadangan_type_id=cadangan_type_id)
        return CadanganPage(content=content, total=total)

    def count_by_type(self) -> CadanganCount:
        return self._cadangan.count_by_type()

    def submit(self, cadangan: Cadangan) -> Cadangan:
        text = require_non_empty(cadangan.cadangan_text, "Cadangan")
        saved = self._cadangan.save(
            replace(
                cadangan,
                id=None,
                cadangan_text=text,
                cadangan_type=cadangan.cadangan_type or CadanganType(id=CadanganTypeId.BARU.value),
                tindakan_text=None,
                create_date=to_epoch_millis(self._clock()),
                is_open=True,
            )
        )
        logger.info("New cadangan %s submitted", saved.id)
        return saved

    def save(self, cadangan_id: int, cadangan: Cadangan) -> Cadangan:
        existing = self.get_one(cadangan_id)
        text = require_non_empty(cadangan.cadangan_text, "Cadangan")
        return self._cadangan.save(
            replace(
                cadangan,
                id=existing.id,
                cadangan_text=text,
                cadangan_type=cadangan.cadangan_type or existing.cadangan_type,
                create_date=cadangan.create_date if cadangan.create_date is not None else existing.create_date,
            )
        )

    def delete(self, cadangan_id: int) -> None:
        if not self._cadangan.delete_by_id(int(cadangan_id)):
            raise NotFoundError("Cadangan tidak wujud")
