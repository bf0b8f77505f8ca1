"""Turn one line of user input into a Command.

Syntax: COMMAND_WORD [PREAMBLE] [prefix/value]...
Prefixes: n/ name, ph/ phone, p/ person, g/ group, a/ assignment, s/ score, t/ tag.
"""

import re
from collections.abc import Callable

from cohort.application import (
    AddGroupCommand,
    AddPersonCommand,
    AddToGroupCommand,
    Command,
    DeleteGroupCommand,
    DeletePersonCommand,
    EditGroupCommand,
    FindGroupCommand,
    GradeAssignmentCommand,
    ListGroupsCommand,
    ListPersonsCommand,
    RemoveFromGroupCommand,
    ShowGradesCommand,
)
from cohort.domain import Tag

PREFIX_NAME = "n/"
PREFIX_PHONE = "ph/"
PREFIX_PERSON = "p/"
PREFIX_GROUP = "g/"
PREFIX_ASSIGNMENT = "a/"
PREFIX_SCORE = "s/"
PREFIX_TAG = "t/"

# ph/ before p/ so the longer prefix wins
_PREFIX_RE = re.compile(r"(?:^|\s)(ph/|n/|p/|g/|a/|s/|t/)")

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_FORMAT = "Invalid command format!\n{}"


class ParseError(ValueError):
    """Input could not be turned into a command. Message is shown to the user."""


class ArgumentMap:
    """Preamble text plus all values given for each prefix, in order."""

    def __init__(self, args: str) -> None:
        self._values: dict[str, list[str]] = {}
        matches = list(_PREFIX_RE.finditer(args))
        end_of_preamble = matches[0].start() if matches else len(args)
        self.preamble = args[:end_of_preamble].strip()
        for i, match in enumerate(matches):
            stop = matches[i + 1].start() if i + 1 < len(matches) else len(args)
            value = args[match.end():stop].strip()
            self._values.setdefault(match.group(1), []).append(value)

    def value(self, prefix: str) -> str | None:
        values = self._values.get(prefix)
        return values[-1] if values else None

    def all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def require(self, usage: str, *prefixes: str) -> list[str]:
        out = []
        for prefix in prefixes:
            value = self.value(prefix)
            if not value:
                raise ParseError(MESSAGE_INVALID_FORMAT.format(usage))
            out.append(value)
        return out


def _parse_index(text: str, usage: str) -> int:
    if not text.isdigit() or int(text) < 1:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(usage))
    return int(text)


def _parse_score(text: str, usage: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(usage)) from None


def _parse_tags(values: list[str]) -> frozenset[Tag]:
    try:
        return frozenset(Tag(label) for label in values)
    except ValueError as err:
        raise ParseError(str(err)) from err


def _add_person(args: ArgumentMap) -> Command:
    (name,) = args.require(AddPersonCommand.MESSAGE_USAGE, PREFIX_NAME)
    return AddPersonCommand(name=name, phone_number=args.value(PREFIX_PHONE))


def _delete_person(args: ArgumentMap) -> Command:
    (name,) = args.require(DeletePersonCommand.MESSAGE_USAGE, PREFIX_NAME)
    return DeletePersonCommand(name=name)


def _add_group(args: ArgumentMap) -> Command:
    (group,) = args.require(AddGroupCommand.MESSAGE_USAGE, PREFIX_GROUP)
    return AddGroupCommand(group_name=group, tags=_parse_tags(args.all_values(PREFIX_TAG)))


def _delete_group(args: ArgumentMap) -> Command:
    return DeleteGroupCommand(index=_parse_index(args.preamble, DeleteGroupCommand.MESSAGE_USAGE))


def _edit_group(args: ArgumentMap) -> Command:
    usage = EditGroupCommand.MESSAGE_USAGE
    index = _parse_index(args.preamble, usage)
    (name,) = args.require(usage, PREFIX_NAME)
    return EditGroupCommand(
        index=index,
        new_group_name=name,
        tags=_parse_tags(args.all_values(PREFIX_TAG)),
    )


def _find_group(args: ArgumentMap) -> Command:
    keywords = tuple(args.preamble.split())
    if not keywords:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(FindGroupCommand.MESSAGE_USAGE))
    return FindGroupCommand(keywords=keywords)


def _add_to_group(args: ArgumentMap) -> Command:
    person, group = args.require(AddToGroupCommand.MESSAGE_USAGE, PREFIX_PERSON, PREFIX_GROUP)
    return AddToGroupCommand(person_name=person, group_name=group)


def _remove_from_group(args: ArgumentMap) -> Command:
    person, group = args.require(
        RemoveFromGroupCommand.MESSAGE_USAGE, PREFIX_PERSON, PREFIX_GROUP
    )
    return RemoveFromGroupCommand(person_name=person, group_name=group)


def _grade_assignment(args: ArgumentMap) -> Command:
    usage = GradeAssignmentCommand.MESSAGE_USAGE
    person, group, assignment, score = args.require(
        usage, PREFIX_PERSON, PREFIX_GROUP, PREFIX_ASSIGNMENT, PREFIX_SCORE
    )
    return GradeAssignmentCommand(
        person_name=person,
        group_name=group,
        assignment_name=assignment,
        score=_parse_score(score, usage),
    )


def _show_grades(args: ArgumentMap) -> Command:
    person, group = args.require(ShowGradesCommand.MESSAGE_USAGE, PREFIX_PERSON, PREFIX_GROUP)
    return ShowGradesCommand(person_name=person, group_name=group)


_PARSERS: dict[str, Callable[[ArgumentMap], Command]] = {
    AddPersonCommand.COMMAND_WORD: _add_person,
    DeletePersonCommand.COMMAND_WORD: _delete_person,
    ListPersonsCommand.COMMAND_WORD: lambda _args: ListPersonsCommand(),
    AddGroupCommand.COMMAND_WORD: _add_group,
    DeleteGroupCommand.COMMAND_WORD: _delete_group,
    EditGroupCommand.COMMAND_WORD: _edit_group,
    FindGroupCommand.COMMAND_WORD: _find_group,
    ListGroupsCommand.COMMAND_WORD: lambda _args: ListGroupsCommand(),
    AddToGroupCommand.COMMAND_WORD: _add_to_group,
    RemoveFromGroupCommand.COMMAND_WORD: _remove_from_group,
    GradeAssignmentCommand.COMMAND_WORD: _grade_assignment,
    ShowGradesCommand.COMMAND_WORD: _show_grades,
}

COMMAND_WORDS = tuple(_PARSERS)


def parse_command(text: str) -> Command:
    """Parse a line of input. Raises ParseError on unknown or malformed input."""
    stripped = (text or "").strip()
    if not stripped:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    word, _, rest = stripped.partition(" ")
    parser = _PARSERS.get(word)
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    args = ArgumentMap(" " + rest)
    try:
        return parser(args)
    except ParseError:
        raise
    except ValueError as err:
        raise ParseError(str(err)) from err
