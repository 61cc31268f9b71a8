from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PaymentHistory


class PaymentHistoryRepository(Protocol):
    def save(self, payment: PaymentHistory) -> PaymentHistory:
        raise NotImplementedError

    def save_all(self, payments: Sequence[PaymentHistory]) -> list[PaymentHistory]:
        raise NotImplementedError

    def find_since(self, *, member_id: int, since_millis: int) -> Optional[PaymentHistory]:
        """Return a payment of the member dated at or after ``since_millis``."""
        raise NotImplementedError

    def delete_since(self, *, member_id: int, since_millis: int) -> int:
        """Delete every payment of the member dated at or after ``since_millis``."""
        raise NotImplementedError

    def list_for_members(self, member_ids: Sequence[int]) -> Sequence[PaymentHistory]:
        raise NotImplementedError

    def count_members_paid_since(self, since_millis: int) -> int:
        raise NotImplementedError
