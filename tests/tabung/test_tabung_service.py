from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.emasjid_api.emasjid_api.common.datetime_utils import to_epoch_millis
from src.emasjid_api.emasjid_api.core.exceptions import NotFoundError, ValidationError
from src.emasjid_api.emasjid_api.tabung.model import Kutipan, Tabung, TabungType


def _tabung(khairat, name="Tabung Jumaat", cents=False) -> Tabung:
    svc = khairat.tabung_service
    ttype = svc.save_type(TabungType(name="Derma"))
    return svc.save(Tabung(name=name, tabung_type=TabungType(id=ttype.id), cents=cents))


def test_kutipan_total_sums_every_denomination():
    kutipan = Kutipan(tabung=Tabung(id=1, name="t"), total_1c=3, total_50c=1, total_50d=2)

    assert kutipan.total == 100.53
    assert kutipan.to_json()["total"] == 100.53
    assert kutipan.to_json()["total50d"] == 2


def test_kutipan_json_accepts_tabung_id():
    kutipan = Kutipan.from_json({"tabungId": 4, "createDate": 1000, "total10d": "7"})

    assert kutipan.tabung.id == 4
    assert kutipan.create_date == 1000
    assert kutipan.total_10d == 7
    assert kutipan.total_1c == 0


def test_save_tabung_loads_type(khairat):
    saved = _tabung(khairat, cents=True)

    assert saved.id is not None
    assert saved.tabung_type.name == "Derma"
    assert saved.cents is True
    assert [t.name for t in khairat.tabung_service.find_all()] == ["Tabung Jumaat"]


def test_save_tabung_requires_existing_type(khairat):
    svc = khairat.tabung_service
    with pytest.raises(ValidationError):
        svc.save(Tabung(name="Tabung Masjid"))
    with pytest.raises(ValidationError):
        svc.save(Tabung(name="Tabung Masjid", tabung_type=TabungType(id=99)))
    with pytest.raises(ValidationError):
        svc.save_type(TabungType(name=" "))


def test_find_missing_tabung(khairat):
    with pytest.raises(NotFoundError):
        khairat.tabung_service.find_by_id(5)


def test_create_kutipan_defaults_create_date(khairat):
    tabung = _tabung(khairat)

    saved = khairat.kutipan_service.create(Kutipan(tabung=Tabung(id=tabung.id, name=""), total_1d=12))

    assert saved.id is not None
    assert saved.tabung.name == "Tabung Jumaat"
    assert saved.create_date == to_epoch_millis(datetime(2026, 6, 15, 8, 30, tzinfo=timezone.utc))
    assert saved.total == 12.0


def test_create_kutipan_for_unknown_tabung(khairat):
    with pytest.raises(ValidationError):
        khairat.kutipan_service.create(Kutipan(tabung=Tabung(id=42, name="")))


def test_create_kutipan_rejects_negative_count(khairat):
    tabung = _tabung(khairat)

    with pytest.raises(ValidationError):
        khairat.kutipan_service.create(Kutipan(tabung=tabung, total_5d=-1))


def test_update_kutipan_keeps_tabung_and_create_date(khairat):
    first = _tabung(khairat, name="Tabung A")
    second = khairat.tabung_service.save(Tabung(name="Tabung B", tabung_type=first.tabung_type))
    svc = khairat.kutipan_service
    original = svc.create(Kutipan(tabung=first, create_date=500, total_1d=1))

    updated = svc.update(original.id, Kutipan(tabung=second, total_1d=4, total_10d=1))

    assert updated.tabung.id == first.id
    assert updated.create_date == 500
    assert updated.total == 14.0
    with pytest.raises(NotFoundError):
        svc.update(99, Kutipan(tabung=first))


def test_list_by_tabung_newest_first(khairat):
    tabung = _tabung(khairat)
    other = khairat.tabung_service.save(Tabung(name="Lain", tabung_type=tabung.tabung_type))
    svc = khairat.kutipan_service
    for day in (1, 2, 3):
        svc.create(Kutipan(tabung=tabung, create_date=day * 1000))
    svc.create(Kutipan(tabung=other, create_date=1000))

    assert [k.create_date for k in svc.find_all_by_tabung_id(tabung.id)] == [3000, 2000, 1000]


def test_between_create_date_pages_from_one(khairat):
    tabung = _tabung(khairat)
    svc = khairat.kutipan_service
    for day in range(1, 6):
        svc.create(Kutipan(tabung=tabung, create_date=day * 1000, total_1d=day))

    page = svc.find_all_between(tabung_id=tabung.id, from_date=2000, to_date=5000, page=2, size=3)
    everything = svc.find_all_between(tabung_id=tabung.id, from_date=2000, to_date=5000)

    assert [k.total_1d for k in page.content] == [5]
    assert page.total == 4
    assert [k.total_1d for k in everything.content] == [2, 3, 4, 5]
    assert everything.to_json()["total"] == 4


def test_between_create_date_rejects_bad_range_and_page(khairat):
    svc = khairat.kutipan_service
    with pytest.raises(ValidationError):
        svc.find_all_between(tabung_id=1, from_date=5000, to_date=1000)
    with pytest.raises(ValidationError):
        svc.find_all_between(tabung_id=1, from_date=0, to_date=1000, page=0, size=10)


def test_delete_kutipan_reports_message(khairat):
    tabung = _tabung(khairat)
    svc = khairat.kutipan_service
    saved = svc.create(Kutipan(tabung=tabung))

    assert svc.delete(saved.id) == f"Kutipan id: {saved.id} is removed"
    with pytest.raises(NotFoundError):
        svc.delete(saved.id)
