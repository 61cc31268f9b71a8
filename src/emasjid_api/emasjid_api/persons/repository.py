from __future__ import annotations

from typing import Optional, Protocol

from .model import Person


class PersonRepository(Protocol):
    def save(self, person: Person) -> Person:
        """Insert when ``person.id`` is None, update in place otherwise."""
        raise NotImplementedError

    def get_by_id(self, person_id: int) -> Optional[Person]:
        raise NotImplementedError

    def delete_by_id(self, person_id: int) -> bool:
        raise NotImplementedError
