from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, start_of_year_millis
from ..core.exceptions import ValidationError
from .model import PaymentHistory
from .repository import PaymentHistoryRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Use case: keep at most one current-year payment per member.

    "Current year" means ``payment_date`` at or after Jan 1 00:00 UTC of the
    current year, with no upper bound.
    """

    def __init__(self, payments: PaymentHistoryRepository, *, clock: Callable[[], datetime] = now_utc):
        self._payments = payments
        self._clock = clock

    def current_year_start(self) -> int:
        return start_of_year_millis(self._clock())

    def find_current_year(self, member_id: int) -> Optional[PaymentHistory]:
        return self._payments.find_since(member_id=int(member_id), since_millis=self.current_year_start())

    def save(self, payment: PaymentHistory) -> PaymentHistory:
        """Set the member's current-year payment (delete, then insert)."""
        if payment.member_id is None:
            raise ValidationError("Ahli tidak sah")

        self.delete_current_year(payment.member_id)
        saved = self._payments.save(replace(payment, id=None))
        logger.info("Recorded payment %s for member %s", saved.id, saved.member_id)
        return saved

    def delete_current_year(self, member_id: int) -> bool:
        removed = self._payments.delete_since(member_id=int(member_id), since_millis=self.current_year_start())
        if removed > 1:
            logger.info("Removed %d current-year payments for member %s", removed, member_id)
        return removed > 0

    def is_current_year_payment_exist(self, member_id: int) -> bool:
        return self.find_current_year(member_id) is not None

    def total_members_paid_for_current_year(self) -> int:
        return self._payments.count_members_paid_since(self.current_year_start())
