"""
Cohort core: clean-architecture layout.

- domain: entities (Person, Group, GroupMemberDetail, Tag) and domain errors. No outer dependencies.
- application: commands, CommandResult, CommandException, and the Model port.
- infrastructure: adapters (InMemoryModel), phone canonicalization, settings.
"""

from cohort.application import (
    AddGroupCommand,
    AddPersonCommand,
    AddToGroupCommand,
    Command,
    CommandException,
    CommandResult,
    DeleteGroupCommand,
    DeletePersonCommand,
    EditGroupCommand,
    ErrorKind,
    FindGroupCommand,
    GradeAssignmentCommand,
    ListGroupsCommand,
    ListPersonsCommand,
    Model,
    RemoveFromGroupCommand,
    ShowGradesCommand,
)
from cohort.domain import Group, GroupMemberDetail, Person, Tag
from cohort.infrastructure import InMemoryModel

__all__ = [
    "AddGroupCommand",
    "AddPersonCommand",
    "AddToGroupCommand",
    "Command",
    "CommandException",
    "CommandResult",
    "DeleteGroupCommand",
    "DeletePersonCommand",
    "EditGroupCommand",
    "ErrorKind",
    "FindGroupCommand",
    "GradeAssignmentCommand",
    "Group",
    "GroupMemberDetail",
    "InMemoryModel",
    "ListGroupsCommand",
    "ListPersonsCommand",
    "Model",
    "Person",
    "RemoveFromGroupCommand",
    "ShowGradesCommand",
    "Tag",
]
