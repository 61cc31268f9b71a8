from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Sequence

from ..core.constants import (
    DEFAULT_DIRECTION,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT,
    MEMBER_SORT_KEYS,
    WILDCARD_QUERY,
)
from ..core.enums import SortDirection
from ..core.exceptions import NotFoundError, ValidationError
from ..dependents.repository import DependentRepository
from ..payments.model import PaymentHistory
from ..payments.repository import PaymentHistoryRepository
from ..payments.service import PaymentService
from ..persons.repository import PersonRepository
from .model import Member, MemberPage
from .repository import MemberRepository, MemberTagRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: create, update and query the member aggregate.

    Create persists person, member, tags, dependents and payments in that
    order so every child row points at an existing member id. Update
    replaces the tag set wholesale, leaves dependents alone and reconciles
    the current-year payment.
    """

    def __init__(
        self,
        members: MemberRepository,
        persons: PersonRepository,
        member_tags: MemberTagRepository,
        dependents: DependentRepository,
        payments: PaymentHistoryRepository,
        payment_service: PaymentService,
    ):
        self._members = members
        self._persons = persons
        self._member_tags = member_tags
        self._dependents = dependents
        self._payments = payments
        self._payment_service = payment_service

    # -------- Commands --------
    def save(self, member: Member) -> Member:
        if member.id is None:
            return self._create(member)
        return self._update(member)

    def save_bulk(self, members: Sequence[Member]) -> bool:
        for member in members:
            self.save(member)
        return True

    def _create(self, member: Member) -> Member:
        person = self._persons.save(member.person)
        saved = self._members.save(
            replace(member, person=person, member_tags=[], dependents=[], payment_histories=[])
        )
        member_id = int(saved.id)

        tags = self._member_tags.save_all([replace(t, member_id=member_id) for t in member.member_tags])

        dependents = [
            replace(d, person=self._persons.save(d.person), member_id=member_id) for d in member.dependents
        ]
        dependents = self._dependents.save_all(dependents)

        payments = self._payments.save_all([replace(p, member_id=member_id) for p in member.payment_histories])

        logger.info(
            "Created member %s (tags=%d, dependents=%d, payments=%d)",
            member_id,
            len(tags),
            len(dependents),
            len(payments),
        )
        return replace(saved, member_tags=tags, dependents=dependents, payment_histories=payments)

    def _update(self, member: Member) -> Member:
        member_id = int(member.id)

        person = self._persons.save(member.person)
        self._members.save(replace(member, person=person))

        self._member_tags.delete_by_member_id(member_id)
        self._member_tags.save_all([replace(t, member_id=member_id) for t in member.member_tags])

        # Dependents are maintained through DependentService only.
        self._reconcile_payments(member.payment_histories, member_id)

        logger.info("Updated member %s", member_id)
        return self.find_one(member_id)

    def _reconcile_payments(self, payments: Sequence[PaymentHistory], member_id: int) -> None:
        if not payments:
            self._payment_service.delete_current_year(member_id)
            return

        if self._payment_service.is_current_year_payment_exist(member_id):
            return

        for payment in payments:
            if payment.id is None:
                self._payment_service.save(replace(payment, member_id=member_id))
                break

    # -------- Queries --------
    def find_one(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if member is None:
            raise NotFoundError("Ahli tidak wujud")
        return self._hydrate([member])[0]

    def find_by_query(self, query: str) -> list[Member]:
        if query == WILDCARD_QUERY:
            return self._hydrate(self._members.list_ordered_by_name())
        return self._hydrate(self._members.search(query))

    def find_by_tag_ids(self, tag_ids: Sequence[int]) -> list[Member]:
        return self._hydrate(self._members.find_by_tag_ids(list(dict.fromkeys(tag_ids))))

    def find_all(
        self,
        *,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        direction: str = DEFAULT_DIRECTION,
    ) -> MemberPage:
        if page < 0:
            raise ValidationError("Muka surat tidak sah")
        if size <= 0:
            raise ValidationError("Saiz muka surat tidak sah")
        if sort not in MEMBER_SORT_KEYS:
            raise ValidationError("Susunan tidak sah")
        try:
            order = SortDirection(direction.lower())
        except ValueError:
            raise ValidationError("Arah susunan tidak sah")

        members = self._members.list_page(offset=page * size, limit=size, sort=sort, direction=order)
        return MemberPage(
            content=self._hydrate(members),
            page=page,
            size=size,
            total_elements=self._members.count(),
        )

    def count(self) -> int:
        return self._members.count()

    def _hydrate(self, members: Sequence[Member]) -> list[Member]:
        ids = [int(m.id) for m in members]
        if not ids:
            return []

        tags = defaultdict(list)
        for mt in self._member_tags.list_for_members(ids):
            tags[mt.member_id].append(mt)
        dependents = defaultdict(list)
        for d in self._dependents.list_for_members(ids):
            dependents[d.member_id].append(d)
        payments = defaultdict(list)
        for p in self._payments.list_for_members(ids):
            payments[p.member_id].append(p)

        return [
            replace(
                m,
                member_tags=tags[m.id],
                dependents=dependents[m.id],
                payment_histories=payments[m.id],
            )
            for m in members
        ]
