from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Tetapan, TetapanType


class TetapanRepository(Protocol):
    def list_all(self) -> Sequence[Tetapan]:
        raise NotImplementedError

    def get_by_kunci(self, kunci: str) -> Optional[Tetapan]:
        raise NotImplementedError

    def upsert(self, tetapan: Tetapan) -> None:
        raise NotImplementedError

    def delete(self, kunci: str) -> bool:
        raise NotImplementedError


class TetapanTypeRepository(Protocol):
    def list_group_names(self) -> Sequence[str]:
        raise NotImplementedError

    def list_by_group_name(self, group_name: str) -> Sequence[TetapanType]:
        raise NotImplementedError
