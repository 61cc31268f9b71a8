from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..core.exceptions import DomainError
from ..members.repository import MemberRepository
from ..persons.repository import PersonRepository
from .model import Dependent
from .repository import DependentRepository

logger = logging.getLogger(__name__)


class DependentService:
    """Use case: add or remove a member's dependents one at a time."""

    def __init__(self, dependents: DependentRepository, members: MemberRepository, persons: PersonRepository):
        self._dependents = dependents
        self._members = members
        self._persons = persons

    def save(self, dependent: Dependent, member_id: int) -> Dependent:
        person = self._persons.save(dependent.person)
        # An unknown member id leaves the dependent unattached.
        member = self._members.get_by_id(int(member_id))
        saved = self._dependents.save(
            replace(dependent, person=person, member_id=member.id if member else None)
        )
        logger.info("Saved dependent %s for member %s", saved.id, saved.member_id)
        return saved

    def delete_by_id(self, dependent_id: int) -> None:
        dependent = self._dependents.get_by_id(int(dependent_id))
        if dependent is None:
            # Reported as a generic failure, not as not-found.
            raise DomainError(f"Tanggungan {dependent_id} tidak wujud")

        person = self._persons.get_by_id(int(dependent.person.id))
        self._dependents.delete_by_id(int(dependent.id))
        if person is not None:
            self._persons.delete_by_id(int(person.id))

    def find_by_member_id(self, member_id: int) -> Sequence[Dependent]:
        return self._dependents.list_for_members([int(member_id)])
