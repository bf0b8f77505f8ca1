"""Model lookups shared by commands, translating domain errors into CommandException."""

from cohort.application.command import CommandException, ErrorKind
from cohort.application.ports import Model
from cohort.domain import (
    Group,
    GroupMemberDetail,
    GroupNotFoundError,
    NotAMemberError,
    Person,
    PersonNotFoundError,
)

MESSAGE_INVALID_GROUP_INDEX = "Invalid Group"


def find_person(model: Model, name: str) -> Person:
    try:
        return model.get_person(name)
    except PersonNotFoundError as err:
        raise CommandException(str(err), ErrorKind.NOT_FOUND) from err


def find_group(model: Model, name: str) -> Group:
    try:
        return model.get_group(name)
    except GroupNotFoundError as err:
        raise CommandException(str(err), ErrorKind.NOT_FOUND) from err


def find_member_detail(group: Group, person: Person) -> GroupMemberDetail:
    try:
        return group.get_group_member_detail(person)
    except NotAMemberError as err:
        raise CommandException(str(err), ErrorKind.NOT_A_MEMBER) from err


def group_at(model: Model, index: int) -> Group:
    """Return the group at a 1-based index of the filtered group list."""
    shown = model.get_filtered_group_list()
    if index > len(shown):
        raise CommandException(MESSAGE_INVALID_GROUP_INDEX, ErrorKind.INVALID_INDEX)
    return shown[index - 1]
