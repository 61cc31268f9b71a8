from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Tag
from .repository import TagRepository


class MySQLTagRepository(TagRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Tag]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM khairat_tag ORDER BY name")
            rows = fetchall(cur)
            return [Tag(id=int(r["id"]), name=r["name"]) for r in rows]

    def save(self, tag: Tag) -> Tag:
        with db_cursor(self._conn_factory) as (_, cur):
            if tag.id is None:
                cur.execute("INSERT INTO khairat_tag(name) VALUES(%s)", (tag.name,))
                return replace(tag, id=int(cur.lastrowid))
            cur.execute("UPDATE khairat_tag SET name=%s WHERE id=%s", (tag.name, int(tag.id)))
            return tag

    def delete_by_id(self, tag_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM khairat_tag WHERE id=%s", (int(tag_id),))
            return cur.rowcount > 0
