from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import CadanganTypeId
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Cadangan, CadanganCount, CadanganType
from .repository import CadanganRepository

_SELECT = """
    SELECT c.id, c.cadangan_text, c.cadangan_nama, c.cadangan_email, c.cadangan_phone,
           c.tindakan_text, c.create_date, c.is_open, c.score,
           ct.id AS type_id, ct.name AS type_name
    FROM cadangan c
    LEFT JOIN cadangan_types ct ON ct.id = c.cadangan_types_id
"""


def _row_to_cadangan(r: dict) -> Cadangan:
    type_id = r.get("type_id")
    return Cadangan(
        id=int(r["id"]),
        cadangan_type=CadanganType(id=int(type_id), name=r.get("type_name")) if type_id is not None else None,
        cadangan_text=r["cadangan_text"],
        cadangan_nama=r.get("cadangan_nama"),
        cadangan_email=r.get("cadangan_email"),
        cadangan_phone=r.get("cadangan_phone"),
        tindakan_text=r.get("tindakan_text"),
        create_date=int(r["create_date"]) if r.get("create_date") is not None else None,
        is_open=bool(r["is_open"]),
        score=int(r.get("score") or 0),
    )


def _where(is_open: bool, cadangan_type_id: Optional[int]) -> tuple[str, list[object]]:
    clauses = ["c.is_open=%s"]
    params: list[object] = [bool(is_open)]
    if cadangan_type_id is not None:
        clauses.append("c.cadangan_types_id=%s")
        params.append(int(cadangan_type_id))
    return " AND ".join(clauses), params


class MySQLCadanganRepository(CadanganRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, cadangan_id: int) -> Optional[Cadangan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE c.id=%s", (int(cadangan_id),))
            r = fetchone(cur)
            return _row_to_cadangan(r) if r else None

    def list_by(
        self,
        *,
        is_open: bool,
        cadangan_type_id: Optional[int],
        offset: int,
        limit: int,
    ) -> Sequence[Cadangan]:
        where, params = _where(is_open, cadangan_type_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {where} ORDER BY c.id LIMIT %s OFFSET %s",
                tuple(params + [int(limit), int(offset)]),
            )
            return [_row_to_cadangan(r) for r in fetchall(cur)]

    def count_by(self, *, is_open: bool, cadangan_type_id: Optional[int]) -> int:
        where, params = _where(is_open, cadangan_type_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM cadangan c WHERE {where}", tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def count_by_type(self) -> CadanganCount:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    SUM(CASE WHEN c.cadangan_types_id = %s AND c.is_open = TRUE THEN 1 ELSE 0 END) AS total_new,
                    SUM(CASE WHEN c.cadangan_types_id = %s AND c.is_open = TRUE THEN 1 ELSE 0 END) AS total_cadangan,
                    SUM(CASE WHEN c.cadangan_types_id = %s AND c.is_open = TRUE THEN 1 ELSE 0 END) AS total_aduan,
                    SUM(CASE WHEN c.cadangan_types_id = %s AND c.is_open = TRUE THEN 1 ELSE 0 END) AS total_lain,
                    SUM(CASE WHEN c.is_open = FALSE THEN 1 ELSE 0 END) AS total_closed
                FROM cadangan c
                """,
                (
                    CadanganTypeId.BARU.value,
                    CadanganTypeId.CADANGAN.value,
                    CadanganTypeId.ADUAN.value,
                    CadanganTypeId.LAIN_LAIN.value,
                ),
            )
            r = fetchone(cur) or {}
            # SUM over an empty table yields NULL.
            return CadanganCount(
                total_new=int(r.get("total_new") or 0),
                total_cadangan=int(r.get("total_cadangan") or 0),
                total_aduan=int(r.get("total_aduan") or 0),
                total_lain=int(r.get("total_lain") or 0),
                total_closed=int(r.get("total_closed") or 0),
            )

    def save(self, cadangan: Cadangan) -> Cadangan:
        type_id = cadangan.cadangan_type.id if cadangan.cadangan_type else CadanganTypeId.BARU.value
        values = (
            int(type_id),
            cadangan.cadangan_text,
            cadangan.cadangan_nama,
            cadangan.cadangan_email,
            cadangan.cadangan_phone,
            cadangan.tindakan_text,
            cadangan.create_date,
            bool(cadangan.is_open),
            int(cadangan.score),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            if cadangan.id is None:
                cur.execute(
                    """
                    INSERT INTO cadangan(
                        cadangan_types_id, cadangan_text, cadangan_nama, cadangan_email, cadangan_phone,
                        tindakan_text, create_date, is_open, score
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    values,
                )
                return replace(cadangan, id=int(cur.lastrowid))

            cur.execute(
                """
                UPDATE cadangan
                SET cadangan_types_id=%s, cadangan_text=%s, cadangan_nama=%s, cadangan_email=%s,
                    cadangan_phone=%s, tindakan_text=%s, create_date=%s, is_open=%s, score=%s
                WHERE id=%s
                """,
                values + (int(cadangan.id),),
            )
            return cadangan

    def delete_by_id(self, cadangan_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM cadangan WHERE id=%s", (int(cadangan_id),))
            return cur.rowcount > 0
