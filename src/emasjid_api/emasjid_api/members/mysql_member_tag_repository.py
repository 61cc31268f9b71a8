from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from ..tags.model import Tag
from .model import MemberTag
from .repository import MemberTagRepository


class MySQLMemberTagRepository(MemberTagRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_all(self, member_tags: Sequence[MemberTag]) -> list[MemberTag]:
        saved: list[MemberTag] = []
        with db_cursor(self._conn_factory) as (_, cur):
            for mt in member_tags:
                cur.execute(
                    "INSERT INTO khairat_member_tag(member_id, tag_id) VALUES(%s,%s)",
                    (int(mt.member_id), int(mt.tag.id)),
                )
                saved.append(replace(mt, id=int(cur.lastrowid)))
        return saved

    def delete_by_member_id(self, member_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM khairat_member_tag WHERE member_id=%s", (int(member_id),))
            return int(cur.rowcount)

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[MemberTag]:
        if not member_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT mt.id, mt.member_id, t.id AS tag_id, t.name AS tag_name
                FROM khairat_member_tag mt
                JOIN khairat_tag t ON t.id = mt.tag_id
                WHERE mt.member_id IN ({in_clause(member_ids)})
                ORDER BY t.name, mt.id
                """,
                tuple(int(i) for i in member_ids),
            )
            return [
                MemberTag(
                    id=int(r["id"]),
                    member_id=int(r["member_id"]),
                    tag=Tag(id=int(r["tag_id"]), name=r["tag_name"]),
                )
                for r in fetchall(cur)
            ]
