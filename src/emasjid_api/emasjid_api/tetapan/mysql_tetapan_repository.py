from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Tetapan, TetapanType
from .repository import TetapanRepository, TetapanTypeRepository


class MySQLTetapanRepository(TetapanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Tetapan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT kunci, nilai FROM tetapan ORDER BY kunci")
            return [Tetapan(kunci=r["kunci"], nilai=r.get("nilai")) for r in fetchall(cur)]

    def get_by_kunci(self, kunci: str) -> Optional[Tetapan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT kunci, nilai FROM tetapan WHERE kunci=%s", (kunci,))
            r = fetchone(cur)
            return Tetapan(kunci=r["kunci"], nilai=r.get("nilai")) if r else None

    def upsert(self, tetapan: Tetapan) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tetapan(kunci, nilai)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE nilai=VALUES(nilai)
                """,
                (tetapan.kunci, tetapan.nilai),
            )

    def delete(self, kunci: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tetapan WHERE kunci=%s", (kunci,))
            return cur.rowcount > 0


class MySQLTetapanTypeRepository(TetapanTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_group_names(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT group_name FROM tetapan_types ORDER BY group_name")
            return [r["group_name"] for r in fetchall(cur)]

    def list_by_group_name(self, group_name: str) -> Sequence[TetapanType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, kunci, group_name, keterangan FROM tetapan_types WHERE group_name=%s ORDER BY id",
                (group_name,),
            )
            return [
                TetapanType(
                    id=int(r["id"]),
                    kunci=r["kunci"],
                    group_name=r["group_name"],
                    keterangan=r.get("keterangan"),
                )
                for r in fetchall(cur)
            ]
