from __future__ import annotations

from typing import Protocol, Sequence

from .model import Tag


class TagRepository(Protocol):
    def list_all(self) -> Sequence[Tag]:
        raise NotImplementedError

    def save(self, tag: Tag) -> Tag:
        raise NotImplementedError

    def delete_by_id(self, tag_id: int) -> bool:
        raise NotImplementedError
