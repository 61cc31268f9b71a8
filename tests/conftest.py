from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Optional

import pytest

from src.emasjid_api.emasjid_api.cadangan.model import Cadangan, CadanganCount
from src.emasjid_api.emasjid_api.cadangan.service import CadanganService
from src.emasjid_api.emasjid_api.container import Container
from src.emasjid_api.emasjid_api.core.enums import SortDirection
from src.emasjid_api.emasjid_api.dependents.model import Dependent
from src.emasjid_api.emasjid_api.dependents.service import DependentService
from src.emasjid_api.emasjid_api.members.model import Member, MemberTag
from src.emasjid_api.emasjid_api.members.service import MemberService
from src.emasjid_api.emasjid_api.payments.model import PaymentHistory
from src.emasjid_api.emasjid_api.payments.service import PaymentService
from src.emasjid_api.emasjid_api.persons.model import Person
from src.emasjid_api.emasjid_api.tabung.model import Kutipan, Tabung, TabungType
from src.emasjid_api.emasjid_api.tabung.service import KutipanService, TabungService
from src.emasjid_api.emasjid_api.tags.model import Tag
from src.emasjid_api.emasjid_api.tags.service import TagService
from src.emasjid_api.emasjid_api.tetapan.model import Tetapan, TetapanType
from src.emasjid_api.emasjid_api.tetapan.service import TetapanService, TetapanTypeService

FIXED_NOW = datetime(2026, 6, 15, 8, 30, tzinfo=timezone.utc)


class InMemoryPersons:
    def __init__(self):
        self.rows: dict[int, Person] = {}
        self._id = 0

    def save(self, person: Person) -> Person:
        if person.id is None:
            self._id += 1
            person = replace(person, id=self._id)
        self.rows[int(person.id)] = person
        return person

    def get_by_id(self, person_id: int) -> Optional[Person]:
        return self.rows.get(int(person_id))

    def delete_by_id(self, person_id: int) -> bool:
        return self.rows.pop(int(person_id), None) is not None


class InMemoryTags:
    def __init__(self):
        self.rows: dict[int, Tag] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.rows.values(), key=lambda t: (t.name or "", t.id))

    def save(self, tag: Tag) -> Tag:
        if tag.id is None:
            self._id += 1
            tag = replace(tag, id=self._id)
        self.rows[int(tag.id)] = tag
        return tag

    def delete_by_id(self, tag_id: int) -> bool:
        return self.rows.pop(int(tag_id), None) is not None


class InMemoryMemberTags:
    def __init__(self, tags: InMemoryTags):
        self.rows: dict[int, MemberTag] = {}
        self._tags = tags
        self._id = 0

    def save_all(self, member_tags):
        saved = []
        for mt in member_tags:
            self._id += 1
            mt = replace(mt, id=self._id)
            self.rows[mt.id] = mt
            saved.append(mt)
        return saved

    def delete_by_member_id(self, member_id: int) -> int:
        doomed = [k for k, mt in self.rows.items() if mt.member_id == int(member_id)]
        for k in doomed:
            del self.rows[k]
        return len(doomed)

    def list_for_members(self, member_ids):
        wanted = set(member_ids)
        return [
            replace(mt, tag=self._tags.rows.get(mt.tag.id, mt.tag))
            for mt in sorted(self.rows.values(), key=lambda r: r.id)
            if mt.member_id in wanted
        ]


class InMemoryDependents:
    def __init__(self, persons: InMemoryPersons):
        self.rows: dict[int, Dependent] = {}
        self._persons = persons
        self._id = 0

    def save(self, dependent: Dependent) -> Dependent:
        if dependent.id is None:
            self._id += 1
            dependent = replace(dependent, id=self._id)
        self.rows[int(dependent.id)] = dependent
        return dependent

    def save_all(self, dependents):
        return [self.save(d) for d in dependents]

    def get_by_id(self, dependent_id: int) -> Optional[Dependent]:
        return self.rows.get(int(dependent_id))

    def delete_by_id(self, dependent_id: int) -> bool:
        return self.rows.pop(int(dependent_id), None) is not None

    def list_for_members(self, member_ids):
        wanted = set(member_ids)
        return [d for d in sorted(self.rows.values(), key=lambda r: r.id) if d.member_id in wanted]


class InMemoryPayments:
    def __init__(self):
        self.rows: dict[int, PaymentHistory] = {}
        self._id = 0

    def save(self, payment: PaymentHistory) -> PaymentHistory:
        if payment.id is None:
            self._id += 1
            payment = replace(payment, id=self._id)
        self.rows[int(payment.id)] = payment
        return payment

    def save_all(self, payments):
        return [self.save(p) for p in payments]

    def find_since(self, *, member_id: int, since_millis: int) -> Optional[PaymentHistory]:
        found = [p for p in self.rows.values() if p.member_id == member_id and p.payment_date >= since_millis]
        found.sort(key=lambda p: p.payment_date, reverse=True)
        return found[0] if found else None

    def delete_since(self, *, member_id: int, since_millis: int) -> int:
        doomed = [k for k, p in self.rows.items() if p.member_id == member_id and p.payment_date >= since_millis]
        for k in doomed:
            del self.rows[k]
        return len(doomed)

    def list_for_members(self, member_ids):
        wanted = set(member_ids)
        return [p for p in sorted(self.rows.values(), key=lambda r: r.id) if p.member_id in wanted]

    def count_members_paid_since(self, since_millis: int) -> int:
        return len({p.member_id for p in self.rows.values() if p.payment_date >= since_millis})


class InMemoryMembers:
    def __init__(self, persons: InMemoryPersons, member_tags: InMemoryMemberTags):
        self.rows: dict[int, Member] = {}
        self._persons = persons
        self._member_tags = member_tags
        self._id = 0

    def _load(self, member: Member) -> Member:
        return replace(member, person=self._persons.rows.get(member.person.id, member.person))

    def _by_name(self, members):
        return sorted(members, key=lambda m: (m.person.name, m.id))

    def save(self, member: Member) -> Member:
        if member.id is None:
            self._id += 1
            member = replace(member, id=self._id)
        self.rows[int(member.id)] = replace(member, member_tags=[], dependents=[], payment_histories=[])
        return member

    def get_by_id(self, member_id: int) -> Optional[Member]:
        member = self.rows.get(int(member_id))
        return self._load(member) if member else None

    def list_ordered_by_name(self):
        return self._by_name(self._load(m) for m in self.rows.values())

    def search(self, query: str):
        q = query.lower()

        def matches(p: Person) -> bool:
            return any(q in (v or "").lower() for v in (p.name, p.ic_number, p.phone, p.address))

        return self._by_name(m for m in self.list_ordered_by_name() if matches(m.person))

    def find_by_tag_ids(self, tag_ids):
        wanted = set(tag_ids)
        member_ids = {mt.member_id for mt in self._member_tags.rows.values() if mt.tag.id in wanted}
        return self._by_name(self._load(self.rows[i]) for i in member_ids)

    def list_page(self, *, offset: int, limit: int, sort: str, direction: SortDirection):
        members = [self._load(m) for m in self.rows.values()]
        key = (lambda m: (m.person.name, m.id)) if sort == "name" else (lambda m: m.id)
        members.sort(key=key, reverse=direction == SortDirection.DESC)
        return members[offset : offset + limit]

    def count(self) -> int:
        return len(self.rows)


class InMemoryCadangan:
    def __init__(self):
        self.rows: dict[int, Cadangan] = {}
        self._id = 0

    def get_by_id(self, cadangan_id: int) -> Optional[Cadangan]:
        return self.rows.get(int(cadangan_id))

    def _filter(self, is_open, cadangan_type_id):
        return [
            c
            for c in sorted(self.rows.values(), key=lambda r: r.id)
            if c.is_open == is_open
            and (cadangan_type_id is None or (c.cadangan_type and c.cadangan_type.id == cadangan_type_id))
        ]

    def list_by(self, *, is_open, cadangan_type_id, offset, limit):
        return self._filter(is_open, cadangan_type_id)[offset : offset + limit]

    def count_by(self, *, is_open, cadangan_type_id):
        return len(self._filter(is_open, cadangan_type_id))

    def count_by_type(self) -> CadanganCount:
        def open_of(type_id):
            return len(self._filter(True, type_id))

        return CadanganCount(
            total_new=open_of(1),
            total_cadangan=open_of(2),
            total_aduan=open_of(3),
            total_lain=open_of(4),
            total_closed=len([c for c in self.rows.values() if not c.is_open]),
        )

    def save(self, cadangan: Cadangan) -> Cadangan:
        if cadangan.id is None:
            self._id += 1
            cadangan = replace(cadangan, id=self._id)
        self.rows[int(cadangan.id)] = cadangan
        return cadangan

    def delete_by_id(self, cadangan_id: int) -> bool:
        return self.rows.pop(int(cadangan_id), None) is not None


class InMemoryTetapan:
    def __init__(self):
        self.rows: dict[str, Tetapan] = {}

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def get_by_kunci(self, kunci: str) -> Optional[Tetapan]:
        return self.rows.get(kunci)

    def upsert(self, tetapan: Tetapan) -> None:
        self.rows[tetapan.kunci] = tetapan

    def delete(self, kunci: str) -> bool:
        return self.rows.pop(kunci, None) is not None


class InMemoryTetapanTypes:
    def __init__(self, rows=()):
        self.rows: list[TetapanType] = list(rows)

    def list_group_names(self):
        return sorted({t.group_name for t in self.rows})

    def list_by_group_name(self, group_name: str):
        return [t for t in self.rows if t.group_name == group_name]


class InMemoryTabungTypes:
    def __init__(self):
        self.rows: dict[int, TabungType] = {}
        self._id = 0

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def get_by_id(self, type_id: int) -> Optional[TabungType]:
        return self.rows.get(int(type_id))

    def save(self, tabung_type: TabungType) -> TabungType:
        if tabung_type.id is None:
            self._id += 1
            tabung_type = replace(tabung_type, id=self._id)
        self.rows[int(tabung_type.id)] = tabung_type
        return tabung_type

    def delete_by_id(self, type_id: int) -> bool:
        return self.rows.pop(int(type_id), None) is not None


class InMemoryTabung:
    def __init__(self, tabung_types: InMemoryTabungTypes):
        self.rows: dict[int, Tabung] = {}
        self._tabung_types = tabung_types
        self._id = 0

    def _load(self, tabung: Tabung) -> Tabung:
        return replace(tabung, tabung_type=self._tabung_types.get_by_id(tabung.tabung_type.id))

    def list_all(self):
        return [self._load(self.rows[k]) for k in sorted(self.rows)]

    def get_by_id(self, tabung_id: int) -> Optional[Tabung]:
        tabung = self.rows.get(int(tabung_id))
        return self._load(tabung) if tabung else None

    def save(self, tabung: Tabung) -> Tabung:
        if tabung.id is None:
            self._id += 1
            tabung = replace(tabung, id=self._id)
        self.rows[int(tabung.id)] = tabung
        return tabung

    def delete_by_id(self, tabung_id: int) -> bool:
        return self.rows.pop(int(tabung_id), None) is not None


class InMemoryKutipan:
    def __init__(self, tabung: InMemoryTabung):
        self.rows: dict[int, Kutipan] = {}
        self._tabung = tabung
        self._id = 0

    def _load(self, kutipan: Kutipan) -> Kutipan:
        return replace(kutipan, tabung=self._tabung.get_by_id(kutipan.tabung.id))

    def _between(self, tabung_id, from_date, to_date):
        return [
            self._load(k)
            for k in sorted(self.rows.values(), key=lambda r: r.id)
            if k.tabung.id == tabung_id and from_date <= k.create_date <= to_date
        ]

    def list_by_tabung_id(self, tabung_id: int):
        return [self._load(k) for k in sorted(self.rows.values(), key=lambda r: -r.id) if k.tabung.id == tabung_id]

    def list_between(self, *, tabung_id, from_date, to_date, offset=None, limit=None):
        found = self._between(tabung_id, from_date, to_date)
        if limit is None:
            return found
        return found[offset : offset + limit]

    def count_between(self, *, tabung_id, from_date, to_date):
        return len(self._between(tabung_id, from_date, to_date))

    def get_by_id(self, kutipan_id: int) -> Optional[Kutipan]:
        kutipan = self.rows.get(int(kutipan_id))
        return self._load(kutipan) if kutipan else None

    def save(self, kutipan: Kutipan) -> Kutipan:
        if kutipan.id is None:
            self._id += 1
            kutipan = replace(kutipan, id=self._id)
        else:
            kutipan = replace(kutipan, tabung=self.rows[int(kutipan.id)].tabung)
        self.rows[int(kutipan.id)] = kutipan
        return kutipan

    def delete_by_id(self, kutipan_id: int) -> bool:
        return self.rows.pop(int(kutipan_id), None) is not None


class FakeConnection:
    def __init__(self):
        self.transactions = 0

    @contextmanager
    def transaction(self):
        self.transactions += 1
        yield None


@pytest.fixture
def khairat():
    persons = InMemoryPersons()
    tags = InMemoryTags()
    member_tags = InMemoryMemberTags(tags)
    members = InMemoryMembers(persons, member_tags)
    dependents = InMemoryDependents(persons)
    payments = InMemoryPayments()
    cadangan = InMemoryCadangan()
    tetapan = InMemoryTetapan()
    tetapan_types = InMemoryTetapanTypes(
        [
            TetapanType(id=1, group_name="masjid", kunci="nama_masjid", keterangan="Nama masjid"),
            TetapanType(id=2, group_name="masjid", kunci="alamat", keterangan="Alamat masjid"),
            TetapanType(id=3, group_name="khairat", kunci="yuran", keterangan="Yuran tahunan"),
        ]
    )
    tabung_types = InMemoryTabungTypes()
    tabung = InMemoryTabung(tabung_types)
    kutipan = InMemoryKutipan(tabung)

    payment_service = PaymentService(payments, clock=lambda: FIXED_NOW)
    return SimpleNamespace(
        persons=persons,
        tags=tags,
        member_tags=member_tags,
        members=members,
        dependents=dependents,
        payments=payments,
        cadangan=cadangan,
        tetapan=tetapan,
        tabung_types=tabung_types,
        tabung=tabung,
        kutipan=kutipan,
        payment_service=payment_service,
        member_service=MemberService(members, persons, member_tags, dependents, payments, payment_service),
        dependent_service=DependentService(dependents, members, persons),
        tag_service=TagService(tags),
        cadangan_service=CadanganService(cadangan, clock=lambda: FIXED_NOW),
        tetapan_service=TetapanService(tetapan),
        tetapan_type_service=TetapanTypeService(tetapan_types),
        tabung_service=TabungService(tabung_types, tabung),
        kutipan_service=KutipanService(kutipan, tabung, clock=lambda: FIXED_NOW),
    )


@pytest.fixture
def container(khairat):
    return Container(
        conn=FakeConnection(),
        member_service=khairat.member_service,
        dependent_service=khairat.dependent_service,
        payment_service=khairat.payment_service,
        tag_service=khairat.tag_service,
        cadangan_service=khairat.cadangan_service,
        tetapan_service=khairat.tetapan_service,
        tetapan_type_service=khairat.tetapan_type_service,
        tabung_service=khairat.tabung_service,
        kutipan_service=khairat.kutipan_service,
    )


@pytest.fixture
def app(monkeypatch, container):
    from src.emasjid_api.emasjid_api.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("DEPLOY_URL", "/api/")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
