from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import require_non_empty
from .model import Tag
from .repository import TagRepository


class TagService:
    """Use case: maintain the tag lookup list."""

    def __init__(self, tags: TagRepository):
        self._tags = tags

    def list_all(self) -> Sequence[Tag]:
        return self._tags.list_all()

    def save(self, tag: Tag) -> Tag:
        name = require_non_empty(tag.name, "Nama tag")
        return self._tags.save(replace(tag, name=name))

    def delete(self, tag_id: int) -> None:
        # Deleting an unknown id is a no-op, like the other delete endpoints.
        self._tags.delete_by_id(int(tag_id))
