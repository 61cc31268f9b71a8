from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from ..persons.mysql_person_repository import row_to_person
from .model import Dependent
from .repository import DependentRepository

_SELECT = """
    SELECT d.id, d.member_id,
           p.id AS person_id, p.name AS person_name, p.ic_number AS person_ic_number,
           p.address AS person_address, p.phone AS person_phone
    FROM khairat_dependent d
    JOIN khairat_person p ON p.id = d.person_id
"""


def _row_to_dependent(r: dict) -> Dependent:
    member_id = r.get("member_id")
    return Dependent(
        id=int(r["id"]),
        member_id=int(member_id) if member_id is not None else None,
        person=row_to_person(r, prefix="person_"),
    )


class MySQLDependentRepository(DependentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, dependent: Dependent) -> Dependent:
        with db_cursor(self._conn_factory) as (_, cur):
            if dependent.id is None:
                cur.execute(
                    "INSERT INTO khairat_dependent(person_id, member_id) VALUES(%s,%s)",
                    (int(dependent.person.id), dependent.member_id),
                )
                return replace(dependent, id=int(cur.lastrowid))

            cur.execute(
                "UPDATE khairat_dependent SET person_id=%s, member_id=%s WHERE id=%s",
                (int(dependent.person.id), dependent.member_id, int(dependent.id)),
            )
            return dependent

    def save_all(self, dependents: Sequence[Dependent]) -> list[Dependent]:
        return [self.save(d) for d in dependents]

    def get_by_id(self, dependent_id: int) -> Optional[Dependent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE d.id=%s", (int(dependent_id),))
            r = fetchone(cur)
            return _row_to_dependent(r) if r else None

    def delete_by_id(self, dependent_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM khairat_dependent WHERE id=%s", (int(dependent_id),))
            return cur.rowcount > 0

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[Dependent]:
        if not member_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE d.member_id IN ({in_clause(member_ids)}) ORDER BY p.name, d.id",
                tuple(int(i) for i in member_ids),
            )
            return [_row_to_dependent(r) for r in fetchall(cur)]
