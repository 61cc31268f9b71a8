from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import SortDirection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from ..persons.mysql_person_repository import row_to_person
from .model import Member
from .repository import MemberRepository

_SELECT = """
    SELECT m.id,
           p.id AS person_id, p.name AS person_name, p.ic_number AS person_ic_number,
           p.address AS person_address, p.phone AS person_phone
    FROM khairat_member m
    JOIN khairat_person p ON p.id = m.person_id
"""

SORT_COLUMNS = {
    "id": "m.id",
    "name": "p.name",
}


def _row_to_member(r: dict) -> Member:
    return Member(id=int(r["id"]), person=row_to_person(r, prefix="person_"))


def _like_pattern(query: str) -> str:
    escaped = query.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, member: Member) -> Member:
        with db_cursor(self._conn_factory) as (_, cur):
            if member.id is None:
                cur.execute("INSERT INTO khairat_member(person_id) VALUES(%s)", (int(member.person.id),))
                return replace(member, id=int(cur.lastrowid))

            cur.execute(
                "UPDATE khairat_member SET person_id=%s WHERE id=%s",
                (int(member.person.id), int(member.id)),
            )
            return member

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE m.id=%s", (int(member_id),))
            r = fetchone(cur)
            return _row_to_member(r) if r else None

    def list_ordered_by_name(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY p.name ASC, m.id ASC")
            return [_row_to_member(r) for r in fetchall(cur)]

    def search(self, query: str) -> Sequence[Member]:
        like = _like_pattern(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE LOWER(p.name) LIKE %s
                   OR LOWER(p.ic_number) LIKE %s
                   OR LOWER(p.phone) LIKE %s
                   OR LOWER(p.address) LIKE %s
                ORDER BY p.name ASC, m.id ASC
                """,
                (like, like, like, like),
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def find_by_tag_ids(self, tag_ids: Sequence[int]) -> Sequence[Member]:
        if not tag_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + f"""
                WHERE m.id IN (
                    SELECT mt.member_id FROM khairat_member_tag mt
                    WHERE mt.tag_id IN ({in_clause(tag_ids)})
                )
                ORDER BY p.name ASC, m.id ASC
                """,
                tuple(int(i) for i in tag_ids),
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def list_page(self, *, offset: int, limit: int, sort: str, direction: SortDirection) -> Sequence[Member]:
        column = SORT_COLUMNS[sort]
        order = "DESC" if direction == SortDirection.DESC else "ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" ORDER BY {column} {order}, m.id {order} LIMIT %s OFFSET %s",
                (int(limit), int(offset)),
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM khairat_member")
            r = fetchone(cur)
            return int(r["total"]) if r else 0
