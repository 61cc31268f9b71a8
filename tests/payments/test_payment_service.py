from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.emasjid_api.emasjid_api.common.datetime_utils import to_epoch_millis
from src.emasjid_api.emasjid_api.core.exceptions import ValidationError
from src.emasjid_api.emasjid_api.payments.model import PaymentHistory


def _millis(*args):
    return to_epoch_millis(datetime(*args, tzinfo=timezone.utc))


def test_current_year_starts_at_new_year_utc(khairat):
    assert khairat.payment_service.current_year_start() == _millis(2026, 1, 1)


def test_save_replaces_current_year_payment(khairat):
    svc = khairat.payment_service
    old = svc.save(PaymentHistory(amount=50.0, payment_date=_millis(2026, 2, 1), member_id=1))
    last_year = khairat.payments.save(PaymentHistory(amount=40.0, payment_date=_millis(2025, 7, 1), member_id=1))

    new = svc.save(PaymentHistory(id=old.id, amount=60.0, payment_date=_millis(2026, 5, 1), member_id=1))

    assert new.id != old.id
    assert sorted(p.id for p in khairat.payments.rows.values()) == sorted([last_year.id, new.id])


def test_save_requires_member(khairat):
    with pytest.raises(ValidationError):
        khairat.payment_service.save(PaymentHistory(amount=1.0, payment_date=_millis(2026, 1, 2)))


def test_window_boundary_and_future_dates(khairat):
    svc = khairat.payment_service
    khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2025, 12, 31, 23, 59, 59), member_id=1))
    khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2026, 1, 1), member_id=2))
    khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2027, 3, 1), member_id=3))

    assert svc.is_current_year_payment_exist(1) is False
    assert svc.is_current_year_payment_exist(2) is True
    # Future-dated payments fall inside the open-ended window.
    assert svc.is_current_year_payment_exist(3) is True


def test_delete_current_year_only_touches_window(khairat):
    svc = khairat.payment_service
    khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2025, 6, 1), member_id=7))

    assert svc.delete_current_year(7) is False
    assert len(khairat.payments.rows) == 1

    svc.save(PaymentHistory(amount=1.0, payment_date=_millis(2026, 6, 1), member_id=7))
    assert svc.delete_current_year(7) is True
    assert [p.payment_date for p in khairat.payments.rows.values()] == [_millis(2025, 6, 1)]


def test_delete_current_year_removes_every_row_in_window(khairat):
    for month in (2, 3):
        khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2026, month, 1), member_id=8))
    khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(2026, 3, 1), member_id=9))

    assert khairat.payment_service.delete_current_year(8) is True
    assert [p.member_id for p in khairat.payments.rows.values()] == [9]


def test_total_members_paid_counts_distinct_members(khairat):
    for member_id, when in [(1, (2026, 2, 1)), (1, (2026, 3, 1)), (2, (2026, 4, 1)), (3, (2025, 4, 1))]:
        khairat.payments.save(PaymentHistory(amount=1.0, payment_date=_millis(*when), member_id=member_id))

    assert khairat.payment_service.total_members_paid_for_current_year() == 2


def test_payment_json_accepts_nested_member():
    payment = PaymentHistory.from_json({"amount": "25.5", "paymentDate": 1700000000000, "member": {"id": 4}})

    assert payment.member_id == 4
    assert payment.amount == 25.5
    assert payment.to_json()["paymentDate"] == 1700000000000
