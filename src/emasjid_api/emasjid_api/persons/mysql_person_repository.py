from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Person
from .repository import PersonRepository


def row_to_person(r: dict, *, prefix: str = "") -> Person:
    return Person(
        id=int(r[f"{prefix}id"]),
        name=r[f"{prefix}name"],
        ic_number=r.get(f"{prefix}ic_number"),
        address=r.get(f"{prefix}address"),
        phone=r.get(f"{prefix}phone"),
    )


class MySQLPersonRepository(PersonRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, person: Person) -> Person:
        with db_cursor(self._conn_factory) as (_, cur):
            if person.id is None:
                cur.execute(
                    """
                    INSERT INTO khairat_person(name, ic_number, address, phone)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (person.name, person.ic_number, person.address, person.phone),
                )
                return replace(person, id=int(cur.lastrowid))

            cur.execute(
                """
                UPDATE khairat_person
                SET name=%s, ic_number=%s, address=%s, phone=%s
                WHERE id=%s
                """,
                (person.name, person.ic_number, person.address, person.phone, int(person.id)),
            )
            return person

    def get_by_id(self, person_id: int) -> Optional[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, ic_number, address, phone FROM khairat_person WHERE id=%s",
                (int(person_id),),
            )
            r = fetchone(cur)
            return row_to_person(r) if r else None

    def delete_by_id(self, person_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM khairat_person WHERE id=%s", (int(person_id),))
            return cur.rowcount > 0
