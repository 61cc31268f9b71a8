from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DENOMINATIONS, Kutipan
from .mysql_tabung_repository import row_to_tabung
from .repository import KutipanRepository

_COUNT_COLUMNS = [f for f, _, _ in DENOMINATIONS]

_SELECT = f"""
    SELECT k.id, k.create_date, {", ".join("k." + c for c in _COUNT_COLUMNS)},
           t.id AS tabung_id, t.name AS tabung_name, t.cents AS tabung_cents,
           tt.id AS type_id, tt.name AS type_name
    FROM kutipan k
    JOIN tabung t ON t.id = k.tabung_id
    LEFT JOIN tabung_types tt ON tt.id = t.tabung_types_id
"""

_BETWEEN = "k.tabung_id=%s AND k.create_date BETWEEN %s AND %s"


def _row_to_kutipan(r: dict) -> Kutipan:
    return Kutipan(
        id=int(r["id"]),
        tabung=row_to_tabung(r, prefix="tabung_"),
        create_date=int(r["create_date"]) if r.get("create_date") is not None else None,
        **{c: int(r.get(c) or 0) for c in _COUNT_COLUMNS},
    )


class MySQLKutipanRepository(KutipanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_tabung_id(self, tabung_id: int) -> Sequence[Kutipan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE k.tabung_id=%s ORDER BY k.id DESC", (int(tabung_id),))
            return [_row_to_kutipan(r) for r in fetchall(cur)]

    def list_between(
        self,
        *,
        tabung_id: int,
        from_date: int,
        to_date: int,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[Kutipan]:
        sql = _SELECT + f" WHERE {_BETWEEN} ORDER BY k.id"
        params: tuple = (int(tabung_id), int(from_date), int(to_date))
        if limit is not None:
            sql += " LIMIT %s OFFSET %s"
            params += (int(limit), int(offset or 0))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_kutipan(r) for r in fetchall(cur)]

    def count_between(self, *, tabung_id: int, from_date: int, to_date: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS total FROM kutipan k WHERE {_BETWEEN}",
                (int(tabung_id), int(from_date), int(to_date)),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def get_by_id(self, kutipan_id: int) -> Optional[Kutipan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE k.id=%s", (int(kutipan_id),))
            r = fetchone(cur)
            return _row_to_kutipan(r) if r else None

    def save(self, kutipan: Kutipan) -> Kutipan:
        counts = tuple(kutipan.counts()[c] for c in _COUNT_COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            if kutipan.id is None:
                cur.execute(
                    f"""
                    INSERT INTO kutipan(tabung_id, create_date, {", ".join(_COUNT_COLUMNS)})
                    VALUES({", ".join(["%s"] * (len(_COUNT_COLUMNS) + 2))})
                    """,
                    (int(kutipan.tabung.id), kutipan.create_date) + counts,
                )
                return replace(kutipan, id=int(cur.lastrowid))

            # tabung_id is fixed once the kutipan exists.
            cur.execute(
                f"""
                UPDATE kutipan
                SET create_date=%s, {", ".join(c + "=%s" for c in _COUNT_COLUMNS)}
                WHERE id=%s
                """,
                (kutipan.create_date,) + counts + (int(kutipan.id),),
            )
            return kutipan

    def delete_by_id(self, kutipan_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kutipan WHERE id=%s", (int(kutipan_id),))
            return cur.rowcount > 0
