from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Tetapan, TetapanType
from .repository import TetapanRepository, TetapanTypeRepository


class TetapanService:
    """Use case: read and write mosque settings."""

    def __init__(self, tetapan: TetapanRepository):
        self._tetapan = tetapan

    def find_all(self) -> Sequence[Tetapan]:
        return self._tetapan.list_all()

    def find_by_kunci(self, kunci: str) -> Tetapan:
        found = self._tetapan.get_by_kunci(kunci)
        if found is None:
            raise NotFoundError(f"Tetapan {kunci} tidak wujud")
        return found

    def save(self, tetapan: Tetapan) -> None:
        self._tetapan.upsert(replace(tetapan, kunci=require_non_empty(tetapan.kunci, "Kunci")))

    def save_all(self, tetapan_list: Sequence[Tetapan]) -> None:
        for tetapan in tetapan_list:
            self.save(tetapan)

    def delete(self, kunci: str) -> None:
        self._tetapan.delete(kunci)


class TetapanTypeService:
    """Read-only catalogue of setting keys grouped for the settings screens."""

    def __init__(self, tetapan_types: TetapanTypeRepository):
        self._tetapan_types = tetapan_types

    def find_all_group_names(self) -> Sequence[str]:
        return self._tetapan_types.list_group_names()

    def find_by_group_name(self, group_name: str) -> Sequence[TetapanType]:
        return self._tetapan_types.list_by_group_name(group_name)
