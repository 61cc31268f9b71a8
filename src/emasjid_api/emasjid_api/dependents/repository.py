from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Dependent


class DependentRepository(Protocol):
    def save(self, dependent: Dependent) -> Dependent:
        raise NotImplementedError

    def save_all(self, dependents: Sequence[Dependent]) -> list[Dependent]:
        raise NotImplementedError

    def get_by_id(self, dependent_id: int) -> Optional[Dependent]:
        raise NotImplementedError

    def delete_by_id(self, dependent_id: int) -> bool:
        raise NotImplementedError

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[Dependent]:
        raise NotImplementedError
