"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from cohort.domain import Group, Person

PersonPredicate = Callable[[Person], bool]
GroupPredicate = Callable[[Group], bool]


class Model(Protocol):
    """
    The in-memory store of all persons and groups for the session.
    Passed into every Command.execute call. Not thread-safe: a host that
    submits commands from several threads must serialize access itself.
    """

    @property
    def persons(self) -> list[Person]:
        """All persons in insertion order."""
        ...

    @property
    def groups(self) -> list[Group]:
        """All groups in insertion order."""
        ...

    def has_person(self, person: Person) -> bool:
        """True if a person with the same name or phone number exists."""
        ...

    def add_person(self, person: Person) -> None:
        """Store a person. Raises DuplicatePersonError."""
        ...

    def delete_person(self, person: Person) -> None:
        """Remove a person and their membership in every group. Raises PersonNotFoundError."""
        ...

    def get_person(self, name: str) -> Person:
        """Return the person with this exact name. Raises PersonNotFoundError."""
        ...

    def has_group(self, group: Group) -> bool:
        """True if a group with the same name exists."""
        ...

    def add_group(self, group: Group) -> None:
        """Store a group. Raises DuplicateGroupError."""
        ...

    def delete_group(self, group: Group) -> None:
        """Remove a group. Raises GroupNotFoundError."""
        ...

    def get_group(self, name: str) -> Group:
        """Return the group with this exact name. Raises GroupNotFoundError."""
        ...

    def set_group(self, target: Group, edited: Group) -> None:
        """Replace target with edited at the same position.
        Raises GroupNotFoundError, or DuplicateGroupError if edited collides with another group.
        """
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Persons matching the current display filter, in insertion order."""
        ...

    def get_filtered_group_list(self) -> list[Group]:
        """Groups matching the current display filter, in insertion order."""
        ...

    def update_filtered_person_list(self, predicate: PersonPredicate | None) -> None:
        """Set the person display filter. None shows all persons."""
        ...

    def update_filtered_group_list(self, predicate: GroupPredicate | None) -> None:
        """Set the group display filter. None shows all groups."""
        ...
