"""Domain layer: entities and domain exceptions. No dependencies on outer layers."""

from cohort.domain.entities import Group, GroupMemberDetail, Person, Tag
from cohort.domain.exceptions import (
    DuplicateGroupError,
    DuplicateMemberError,
    DuplicatePersonError,
    GroupNotFoundError,
    ModelError,
    NotAMemberError,
    PersonNotFoundError,
)

__all__ = [
    "DuplicateGroupError",
    "DuplicateMemberError",
    "DuplicatePersonError",
    "Group",
    "GroupMemberDetail",
    "GroupNotFoundError",
    "ModelError",
    "NotAMemberError",
    "Person",
    "PersonNotFoundError",
    "Tag",
]
