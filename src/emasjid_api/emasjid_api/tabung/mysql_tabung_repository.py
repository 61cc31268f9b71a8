from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Tabung, TabungType
from .repository import TabungRepository, TabungTypeRepository

_SELECT_TABUNG = """
    SELECT t.id, t.name, t.cents, tt.id AS type_id, tt.name AS type_name
    FROM tabung t
    LEFT JOIN tabung_types tt ON tt.id = t.tabung_types_id
"""


def row_to_tabung(r: dict, prefix: str = "") -> Tabung:
    type_id = r.get("type_id")
    return Tabung(
        id=int(r[f"{prefix}id"]),
        name=r[f"{prefix}name"],
        cents=bool(r[f"{prefix}cents"]),
        tabung_type=TabungType(id=int(type_id), name=r.get("type_name")) if type_id is not None else None,
    )


class MySQLTabungTypeRepository(TabungTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TabungType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM tabung_types ORDER BY id")
            return [TabungType(id=int(r["id"]), name=r["name"]) for r in fetchall(cur)]

    def get_by_id(self, type_id: int) -> Optional[TabungType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM tabung_types WHERE id=%s", (int(type_id),))
            r = fetchone(cur)
            return TabungType(id=int(r["id"]), name=r["name"]) if r else None

    def save(self, tabung_type: TabungType) -> TabungType:
        with db_cursor(self._conn_factory) as (_, cur):
            if tabung_type.id is None:
                cur.execute("INSERT INTO tabung_types(name) VALUES(%s)", (tabung_type.name,))
                return replace(tabung_type, id=int(cur.lastrowid))
            cur.execute("UPDATE tabung_types SET name=%s WHERE id=%s", (tabung_type.name, int(tabung_type.id)))
            return tabung_type

    def delete_by_id(self, type_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tabung_types WHERE id=%s", (int(type_id),))
            return cur.rowcount > 0


class MySQLTabungRepository(TabungRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Tabung]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_TABUNG + " ORDER BY t.id")
            return [row_to_tabung(r) for r in fetchall(cur)]

    def get_by_id(self, tabung_id: int) -> Optional[Tabung]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_TABUNG + " WHERE t.id=%s", (int(tabung_id),))
            r = fetchone(cur)
            return row_to_tabung(r) if r else None

    def save(self, tabung: Tabung) -> Tabung:
        values = (tabung.name, bool(tabung.cents), int(tabung.tabung_type.id))
        with db_cursor(self._conn_factory) as (_, cur):
            if tabung.id is None:
                cur.execute("INSERT INTO tabung(name, cents, tabung_types_id) VALUES(%s,%s,%s)", values)
                return replace(tabung, id=int(cur.lastrowid))
            cur.execute(
                "UPDATE tabung SET name=%s, cents=%s, tabung_types_id=%s WHERE id=%s",
                values + (int(tabung.id),),
            )
            return tabung

    def delete_by_id(self, tabung_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tabung WHERE id=%s", (int(tabung_id),))
            return cur.rowcount > 0
