from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.emasjid_api.emasjid_api.cadangan.model import Cadangan, CadanganType
from src.emasjid_api.emasjid_api.common.datetime_utils import to_epoch_millis
from src.emasjid_api.emasjid_api.core.exceptions import NotFoundError, ValidationError


def test_submit_forces_open_new_and_timestamp(khairat):
    saved = khairat.cadangan_service.submit(
        Cadangan(cadangan_text="  Tambah kipas  ", is_open=False, tindakan_text="sudah", create_date=1)
    )

    assert saved.id is not None
    assert saved.is_open is True
    assert saved.cadangan_text == "Tambah kipas"
    assert saved.cadangan_type.id == 1
    assert saved.tindakan_text is None
    assert saved.create_date == to_epoch_millis(datetime(2026, 6, 15, 8, 30, tzinfo=timezone.utc))


def test_submit_requires_text(khairat):
    with pytest.raises(ValidationError):
        khairat.cadangan_service.submit(Cadangan(cadangan_text="   "))


def test_list_by_filters_and_pages(khairat):
    svc = khairat.cadangan_service
    for i in range(5):
        svc.submit(Cadangan(cadangan_text=f"aduan {i}", cadangan_type=CadanganType(id=3)))
    svc.submit(Cadangan(cadangan_text="cadangan", cadangan_type=CadanganType(id=2)))

    page = svc.list_by(is_open=True, cadangan_type_id=3, page=2, size=2)

    assert [c.cadangan_text for c in page.content] == ["aduan 2", "aduan 3"]
    assert page.total == 5
    assert svc.list_by(is_open=True).total == 6


def test_list_by_rejects_zero_page(khairat):
    with pytest.raises(ValidationError):
        khairat.cadangan_service.list_by(is_open=True, page=0)


def test_count_by_type_splits_open_by_type_and_closed(khairat):
    svc = khairat.cadangan_service
    svc.submit(Cadangan(cadangan_text="a"))
    svc.submit(Cadangan(cadangan_text="b", cadangan_type=CadanganType(id=2)))
    closed = svc.submit(Cadangan(cadangan_text="c", cadangan_type=CadanganType(id=3)))
    svc.save(closed.id, Cadangan(cadangan_text="c", tindakan_text="Selesai", is_open=False))

    assert svc.count_by_type().to_json() == [1, 1, 0, 0, 1]


def test_save_keeps_type_and_create_date_when_omitted(khairat):
    svc = khairat.cadangan_service
    original = svc.submit(Cadangan(cadangan_text="x", cadangan_type=CadanganType(id=4)))

    updated = svc.save(original.id, Cadangan(cadangan_text="x", tindakan_text="Dalam tindakan"))

    assert updated.id == original.id
    assert updated.cadangan_type.id == 4
    assert updated.create_date == original.create_date
    assert updated.tindakan_text == "Dalam tindakan"


def test_save_and_delete_missing_raise_not_found(khairat):
    with pytest.raises(NotFoundError):
        khairat.cadangan_service.save(5, Cadangan(cadangan_text="x"))
    with pytest.raises(NotFoundError):
        khairat.cadangan_service.delete(5)
    with pytest.raises(NotFoundError):
        khairat.cadangan_service.get_one(5)
