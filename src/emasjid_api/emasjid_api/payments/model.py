from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import now_utc, to_epoch_millis
from ..common.validators import optional_int


@dataclass(frozen=True)
class PaymentHistory:
    """One khairat payment of a member.

    ``payment_date`` is stored as epoch milliseconds.
    """

    amount: float
    payment_date: int
    no_resit: Optional[str] = None
    member_id: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "PaymentHistory":
        member_id = data.get("memberId")
        member = data.get("member")
        if member_id is None and isinstance(member, dict):
            member_id = member.get("id")

        payment_date = data.get("paymentDate")
        return cls(
            id=optional_int(data.get("id")),
            amount=float(data.get("amount") or 0),
            payment_date=int(payment_date) if payment_date is not None else to_epoch_millis(now_utc()),
            no_resit=data.get("noResit"),
            member_id=optional_int(member_id),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "paymentDate": self.payment_date,
            "noResit": self.no_resit,
            "memberId": self.member_id,
        }
