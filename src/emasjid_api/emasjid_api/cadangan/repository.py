from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Cadangan, CadanganCount


class CadanganRepository(Protocol):
    def get_by_id(self, cadangan_id: int) -> Optional[Cadangan]:
        raise NotImplementedError

    def list_by(
        self,
        *,
        is_open: bool,
        cadangan_type_id: Optional[int],
        offset: int,
        limit: int,
    ) -> Sequence[Cadangan]:
        raise NotImplementedError

    def count_by(self, *, is_open: bool, cadangan_type_id: Optional[int]) -> int:
        raise NotImplementedError

    def count_by_type(self) -> CadanganCount:
        raise NotImplementedError

    def save(self, cadangan: Cadangan) -> Cadangan:
        raise NotImplementedError

    def delete_by_id(self, cadangan_id: int) -> bool:
        raise NotImplementedError
