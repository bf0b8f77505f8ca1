"""Commands that create, edit, delete, find and populate groups."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cohort.application.command import (
    Command,
    CommandException,
    CommandResult,
    ErrorKind,
    require_index,
    require_model,
    require_text,
)
from cohort.application.lookup import find_group, find_member_detail, find_person, group_at
from cohort.application.ports import Model
from cohort.domain import DuplicateGroupError, DuplicateMemberError, Group, Tag

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_GROUP = "This group already exists in the address book."


def _normalize_tags(tags: Iterable[Tag] | None) -> frozenset[Tag]:
    return frozenset(tags) if tags is not None else frozenset()


@dataclass(frozen=True)
class AddGroupCommand(Command):
    group_name: str
    tags: frozenset[Tag] | None = None

    COMMAND_WORD = "add-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a group to the address book.\n"
        "Parameters: g/GROUP_NAME [t/TAG]...\n"
        f"Example: {COMMAND_WORD} g/CS2103T T12-1 t/tutorial"
    )
    MESSAGE_SUCCESS = "New group added: {}"

    def __post_init__(self):
        object.__setattr__(self, "group_name", require_text(self.group_name, "group_name"))
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        group = Group(name=self.group_name, tags=self.tags)
        if model.has_group(group):
            raise CommandException(MESSAGE_DUPLICATE_GROUP, ErrorKind.DUPLICATE_ENTITY)
        model.add_group(group)
        logger.info("Added group %r", group.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(group.name))


@dataclass(frozen=True)
class DeleteGroupCommand(Command):
    index: int

    COMMAND_WORD = "delete-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the group identified by the index number "
        "used in the displayed group list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS = "Deleted Group: {}"

    def __post_init__(self):
        object.__setattr__(self, "index", require_index(self.index))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        group = group_at(model, self.index)
        model.delete_group(group)
        logger.info("Deleted group %r", group.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(group.name))


@dataclass(frozen=True)
class EditGroupCommand(Command):
    """
    Rename the group at an index of the displayed group list.
    Members and their grades carry over unchanged. Supplied tags replace the
    group's tags; when none are supplied the existing tags are kept.
    """

    index: int
    new_group_name: str
    tags: frozenset[Tag] | None = None

    COMMAND_WORD = "edit-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the group identified "
        "by the index number used in the displayed group list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) n/NAME [t/TAG]...\n"
        f"Example: {COMMAND_WORD} 1 n/CS2103T T12-1"
    )
    MESSAGE_SUCCESS = "Edited Group: {}"

    def __post_init__(self):
        object.__setattr__(self, "index", require_index(self.index))
        object.__setattr__(
            self, "new_group_name", require_text(self.new_group_name, "new_group_name")
        )
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        target = group_at(model, self.index)
        edited = self._create_edited_group(target)

        if not target.is_same_group(edited) and model.has_group(edited):
            raise CommandException(MESSAGE_DUPLICATE_GROUP, ErrorKind.DUPLICATE_ENTITY)

        try:
            model.set_group(target, edited)
        except DuplicateGroupError as err:
            raise CommandException(MESSAGE_DUPLICATE_GROUP, ErrorKind.DUPLICATE_ENTITY) from err

        logger.info("Edited group %r -> %r", target.name, edited.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited.name))

    def _create_edited_group(self, target: Group) -> Group:
        # Same GroupMemberDetail objects, same order: grades survive the edit.
        return Group(
            name=self.new_group_name,
            members=list(target.members),
            tags=self.tags or target.tags,
        )


@dataclass(frozen=True)
class FindGroupCommand(Command):
    """Show groups whose name contains any keyword (case-insensitive)."""

    keywords: tuple[str, ...] = field(default_factory=tuple)

    COMMAND_WORD = "find-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all groups whose names contain any of "
        "the specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} cs2103t tutorial"
    )
    MESSAGE_SUCCESS = "{} groups listed!"

    def __post_init__(self):
        if self.keywords is None:
            raise ValueError("keywords is required.")
        cleaned = tuple(k.strip() for k in self.keywords if k and k.strip())
        if not cleaned:
            raise ValueError("keywords is required.")
        object.__setattr__(self, "keywords", cleaned)

    def matches(self, group: Group) -> bool:
        name = group.name.lower()
        return any(keyword.lower() in name for keyword in self.keywords)

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        model.update_filtered_group_list(self.matches)
        count = len(model.get_filtered_group_list())
        return CommandResult(self.MESSAGE_SUCCESS.format(count))


@dataclass(frozen=True)
class ListGroupsCommand(Command):
    COMMAND_WORD = "list-groups"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all groups."
    MESSAGE_SUCCESS = "Listed all groups"

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        model.update_filtered_group_list(None)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class AddToGroupCommand(Command):
    person_name: str
    group_name: str

    COMMAND_WORD = "add-to-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to a group.\n"
        "Parameters: p/NAME g/GROUP_NAME\n"
        f"Example: {COMMAND_WORD} p/John Doe g/CS2103T"
    )
    MESSAGE_SUCCESS = "{} added to {}"
    MESSAGE_ALREADY_MEMBER = "{} is already in {}"

    def __post_init__(self):
        object.__setattr__(self, "person_name", require_text(self.person_name, "person_name"))
        object.__setattr__(self, "group_name", require_text(self.group_name, "group_name"))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        person = find_person(model, self.person_name)
        group = find_group(model, self.group_name)
        try:
            group.add_member(person)
        except DuplicateMemberError as err:
            raise CommandException(
                self.MESSAGE_ALREADY_MEMBER.format(person.name, group.name),
                ErrorKind.DUPLICATE_ENTITY,
            ) from err
        logger.info("Added %r to group %r", person.name, group.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name, group.name))


@dataclass(frozen=True)
class RemoveFromGroupCommand(Command):
    """Remove a person from a group. Their grades in that group are discarded."""

    person_name: str
    group_name: str

    COMMAND_WORD = "remove-from-group"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes a person from a group.\n"
        "Parameters: p/NAME g/GROUP_NAME\n"
        f"Example: {COMMAND_WORD} p/John Doe g/CS2103T"
    )
    MESSAGE_SUCCESS = "{} removed from {}"

    def __post_init__(self):
        object.__setattr__(self, "person_name", require_text(self.person_name, "person_name"))
        object.__setattr__(self, "group_name", require_text(self.group_name, "group_name"))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        person = find_person(model, self.person_name)
        group = find_group(model, self.group_name)
        find_member_detail(group, person)
        group.remove_member(person)
        logger.info("Removed %r from group %r", person.name, group.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name, group.name))
