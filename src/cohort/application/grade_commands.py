"""Commands that grade and report assignment scores of group members."""

import logging
import math
from dataclasses import dataclass

from cohort.application.command import (
    Command,
    CommandException,
    CommandResult,
    ErrorKind,
    require_model,
    require_text,
)
from cohort.application.lookup import find_group, find_member_detail, find_person
from cohort.application.ports import Model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeAssignmentCommand(Command):
    """Grade one assignment of a person within a group. Re-grading overwrites."""

    person_name: str
    group_name: str
    assignment_name: str
    score: float

    COMMAND_WORD = "grade-assignment"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Grade the assignment of a person in a group "
        "by their name, their group, the assignment name and a score.\n"
        "Parameters: p/NAME g/GROUP_NAME a/ASSIGNMENT_NAME s/SCORE\n"
        f"Example: {COMMAND_WORD} p/John Doe g/CS2103T a/Submit UML s/95"
    )
    MESSAGE_SUCCESS = "Graded Assignment {} for {}, {} with {:f} score"
    MESSAGE_INVALID_SCORE = "Score must be a finite number."

    def __post_init__(self):
        object.__setattr__(self, "person_name", require_text(self.person_name, "person_name"))
        object.__setattr__(self, "group_name", require_text(self.group_name, "group_name"))
        object.__setattr__(
            self, "assignment_name", require_text(self.assignment_name, "assignment_name")
        )
        if self.score is None or isinstance(self.score, bool):
            raise ValueError("score is required.")
        object.__setattr__(self, "score", float(self.score))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        if not math.isfinite(self.score):
            raise CommandException(self.MESSAGE_INVALID_SCORE, ErrorKind.INVALID_ARGUMENT)

        person = find_person(model, self.person_name)
        group = find_group(model, self.group_name)
        detail = find_member_detail(group, person)
        detail.grade_assignment(self.assignment_name, self.score)

        logger.info(
            "Graded %r for %r in %r: %s",
            self.assignment_name,
            self.person_name,
            self.group_name,
            self.score,
        )
        return CommandResult(
            self.MESSAGE_SUCCESS.format(
                self.assignment_name, self.person_name, self.group_name, self.score
            )
        )


@dataclass(frozen=True)
class ShowGradesCommand(Command):
    """List a member's assignment scores in the order they were first graded."""

    person_name: str
    group_name: str

    COMMAND_WORD = "show-grades"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the graded assignments of a person in a group.\n"
        "Parameters: p/NAME g/GROUP_NAME\n"
        f"Example: {COMMAND_WORD} p/John Doe g/CS2103T"
    )
    MESSAGE_NO_GRADES = "No assignments graded for {} in {}"

    def __post_init__(self):
        object.__setattr__(self, "person_name", require_text(self.person_name, "person_name"))
        object.__setattr__(self, "group_name", require_text(self.group_name, "group_name"))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        person = find_person(model, self.person_name)
        group = find_group(model, self.group_name)
        detail = find_member_detail(group, person)

        if not detail.grades:
            return CommandResult(self.MESSAGE_NO_GRADES.format(person.name, group.name))
        lines = [f"Grades for {person.name} in {group.name}:"]
        lines.extend(f"{name}: {score:f}" for name, score in detail.grades.items())
        return CommandResult("\n".join(lines))
