"""In-memory implementation of the Model port (no persistence)."""

import logging

from cohort.application.ports import GroupPredicate, PersonPredicate
from cohort.domain import (
    DuplicateGroupError,
    DuplicatePersonError,
    Group,
    GroupNotFoundError,
    Person,
    PersonNotFoundError,
)
from cohort.infrastructure.phone import canonical_phone

logger = logging.getLogger(__name__)


class InMemoryModel:
    """Stores persons and groups in memory. Order preserved by insertion.
    Filtered views are recomputed from the canonical lists on every read, so a
    replaced group keeps its position in the displayed list.
    """

    def __init__(self, *, default_region: str | None = None) -> None:
        self._default_region = default_region
        self._persons: list[Person] = []
        self._groups: list[Group] = []
        self._person_filter: PersonPredicate | None = None
        self._group_filter: GroupPredicate | None = None

    @property
    def persons(self) -> list[Person]:
        return list(self._persons)

    @property
    def groups(self) -> list[Group]:
        return list(self._groups)

    # --- persons ---

    def _find_person(self, name: str) -> Person | None:
        for person in self._persons:
            if person.name == name:
                return person
        return None

    def has_person(self, person: Person) -> bool:
        if self._find_person(person.name) is not None:
            return True
        phone = canonical_phone(person.phone_number, self._default_region)
        if phone is None:
            return False
        return any(p.phone_number == phone for p in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(f"Person already exists: {person.name}")
        phone = canonical_phone(person.phone_number, self._default_region)
        stored = person if phone == person.phone_number else Person(name=person.name, phone_number=phone)
        self._persons.append(stored)
        logger.debug("Stored person %r (phone=%s)", stored.name, stored.phone_number)

    def get_person(self, name: str) -> Person:
        person = self._find_person(name)
        if person is None:
            raise PersonNotFoundError(name)
        return person

    def delete_person(self, person: Person) -> None:
        stored = self.get_person(person.name)
        for group in self._groups:
            if group.has_member(stored):
                group.remove_member(stored)
                logger.debug("Removed %r from group %r", stored.name, group.name)
        self._persons.remove(stored)
        logger.debug("Deleted person %r", stored.name)

    # --- groups ---

    def _group_position(self, name: str) -> int | None:
        for pos, group in enumerate(self._groups):
            if group.name == name:
                return pos
        return None

    def has_group(self, group: Group) -> bool:
        return self._group_position(group.name) is not None

    def add_group(self, group: Group) -> None:
        if self.has_group(group):
            raise DuplicateGroupError(f"Group already exists: {group.name}")
        self._groups.append(group)
        logger.debug("Stored group %r", group.name)

    def get_group(self, name: str) -> Group:
        pos = self._group_position(name)
        if pos is None:
            raise GroupNotFoundError(name)
        return self._groups[pos]

    def delete_group(self, group: Group) -> None:
        pos = self._group_position(group.name)
        if pos is None:
            raise GroupNotFoundError(group.name)
        del self._groups[pos]
        logger.debug("Deleted group %r", group.name)

    def set_group(self, target: Group, edited: Group) -> None:
        pos = self._group_position(target.name)
        if pos is None:
            raise GroupNotFoundError(target.name)
        if not target.is_same_group(edited) and self.has_group(edited):
            raise DuplicateGroupError(f"Group already exists: {edited.name}")
        self._groups[pos] = edited
        logger.debug("Replaced group %r with %r", target.name, edited.name)

    # --- filtered views ---

    def get_filtered_person_list(self) -> list[Person]:
        if self._person_filter is None:
            return list(self._persons)
        return [p for p in self._persons if self._person_filter(p)]

    def get_filtered_group_list(self) -> list[Group]:
        if self._group_filter is None:
            return list(self._groups)
        return [g for g in self._groups if self._group_filter(g)]

    def update_filtered_person_list(self, predicate: PersonPredicate | None) -> None:
        self._person_filter = predicate

    def update_filtered_group_list(self, predicate: GroupPredicate | None) -> None:
        self._group_filter = predicate
