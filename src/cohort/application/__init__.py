"""Application layer: commands, results, errors and the Model port. Depends only on domain."""

from cohort.application.command import Command, CommandException, CommandResult, ErrorKind
from cohort.application.grade_commands import GradeAssignmentCommand, ShowGradesCommand
from cohort.application.group_commands import (
    AddGroupCommand,
    AddToGroupCommand,
    DeleteGroupCommand,
    EditGroupCommand,
    FindGroupCommand,
    ListGroupsCommand,
    RemoveFromGroupCommand,
)
from cohort.application.person_commands import (
    AddPersonCommand,
    DeletePersonCommand,
    ListPersonsCommand,
)
from cohort.application.ports import Model

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
    "ListGroupsCommand",
    "ListPersonsCommand",
    "Model",
    "RemoveFromGroupCommand",
    "ShowGradesCommand",
]
