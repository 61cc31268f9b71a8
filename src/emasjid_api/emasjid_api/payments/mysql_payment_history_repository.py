from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, normalize_decimal
from .model import PaymentHistory
from .repository import PaymentHistoryRepository


def _row_to_payment(r: dict) -> PaymentHistory:
    return PaymentHistory(
        id=int(r["id"]),
        member_id=int(r["member_id"]),
        amount=normalize_decimal(r["amount"]) or 0.0,
        payment_date=int(r["payment_date"]),
        no_resit=r.get("no_resit"),
    )


class MySQLPaymentHistoryRepository(PaymentHistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, payment: PaymentHistory) -> PaymentHistory:
        with db_cursor(self._conn_factory) as (_, cur):
            if payment.id is None:
                cur.execute(
                    """
                    INSERT INTO khairat_payment_history(member_id, amount, payment_date, no_resit)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(payment.member_id), payment.amount, int(payment.payment_date), payment.no_resit),
                )
                return replace(payment, id=int(cur.lastrowid))

            cur.execute(
                """
                UPDATE khairat_payment_history
                SET member_id=%s, amount=%s, payment_date=%s, no_resit=%s
                WHERE id=%s
                """,
                (
                    int(payment.member_id),
                    payment.amount,
                    int(payment.payment_date),
                    payment.no_resit,
                    int(payment.id),
                ),
            )
            return payment

    def save_all(self, payments: Sequence[PaymentHistory]) -> list[PaymentHistory]:
        return [self.save(p) for p in payments]

    def find_since(self, *, member_id: int, since_millis: int) -> Optional[PaymentHistory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, member_id, amount, payment_date, no_resit
                FROM khairat_payment_history
                WHERE member_id=%s AND payment_date >= %s
                ORDER BY payment_date DESC, id DESC
                LIMIT 1
                """,
                (int(member_id), int(since_millis)),
            )
            r = fetchone(cur)
            return _row_to_payment(r) if r else None

    def delete_since(self, *, member_id: int, since_millis: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM khairat_payment_history WHERE member_id=%s AND payment_date >= %s",
                (int(member_id), int(since_millis)),
            )
            return int(cur.rowcount)

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[PaymentHistory]:
        if not member_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, member_id, amount, payment_date, no_resit
                FROM khairat_payment_history
                WHERE member_id IN ({in_clause(member_ids)})
                ORDER BY payment_date DESC, id DESC
                """,
                tuple(int(i) for i in member_ids),
            )
            return [_row_to_payment(r) for r in fetchall(cur)]

    def count_members_paid_since(self, since_millis: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(DISTINCT member_id) AS total
                FROM khairat_payment_history
                WHERE payment_date >= %s
                """,
                (int(since_millis),),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0
