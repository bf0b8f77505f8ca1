"""Tests for the console command parser."""

import pytest

from cohort.application import (
    AddGroupCommand,
    AddPersonCommand,
    AddToGroupCommand,
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
from console.parser import ArgumentMap, ParseError, parse_command


def test_argument_map_splits_preamble_and_prefixes() -> None:
    args = ArgumentMap(" 2 n/CS2103T T12-1 t/lab t/friday ph/+1 202")
    assert args.preamble == "2"
    assert args.value("n/") == "CS2103T T12-1"
    assert args.all_values("t/") == ["lab", "friday"]
    assert args.value("ph/") == "+1 202"
    assert args.value("p/") is None


def test_parse_grade_assignment() -> None:
    cmd = parse_command("grade-assignment p/John Doe g/CS2103T a/Submit UML s/95")
    assert cmd == GradeAssignmentCommand("John Doe", "CS2103T", "Submit UML", 95.0)


def test_parse_grade_assignment_bad_score() -> None:
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command("grade-assignment p/John g/G a/A s/ninety")


def test_parse_grade_assignment_missing_prefix() -> None:
    with pytest.raises(ParseError, match="grade-assignment"):
        parse_command("grade-assignment p/John g/G a/A")


def test_parse_edit_group() -> None:
    cmd = parse_command("edit-group 1 n/CS2103T T12-1 t/lab")
    assert cmd == EditGroupCommand(1, "CS2103T T12-1", {Tag("lab")})
    assert parse_command("edit-group 3 n/X") == EditGroupCommand(3, "X")


@pytest.mark.parametrize(
    "line",
    ["edit-group n/X", "edit-group 0 n/X", "edit-group -1 n/X", "edit-group one n/X", "edit-group 1"],
)
def test_parse_edit_group_invalid(line) -> None:
    with pytest.raises(ParseError):
        parse_command(line)


def test_parse_person_commands() -> None:
    assert parse_command("add-person n/Alice ph/+1 202 555 1234") == AddPersonCommand(
        "Alice", "+1 202 555 1234"
    )
    assert parse_command("add-person n/Bob") == AddPersonCommand("Bob")
    assert parse_command("delete-person n/Bob") == DeletePersonCommand("Bob")
    assert parse_command("list-persons") == ListPersonsCommand()


def test_parse_group_commands() -> None:
    assert parse_command("add-group g/CS2101 t/comms") == AddGroupCommand("CS2101", {Tag("comms")})
    assert parse_command("delete-group 2") == DeleteGroupCommand(2)
    assert parse_command("find-group cs ma") == FindGroupCommand(("cs", "ma"))
    assert parse_command("list-groups") == ListGroupsCommand()
    assert parse_command("add-to-group p/Alice g/CS2101") == AddToGroupCommand("Alice", "CS2101")
    assert parse_command("remove-from-group p/Alice g/CS2101") == RemoveFromGroupCommand(
        "Alice", "CS2101"
    )
    assert parse_command("show-grades p/Alice g/CS2101") == ShowGradesCommand("Alice", "CS2101")


def test_parse_bad_tag() -> None:
    with pytest.raises(ParseError, match="Tag"):
        parse_command("add-group g/G t/")


def test_parse_unknown_or_empty() -> None:
    with pytest.raises(ParseError, match="Unknown command"):
        parse_command("frobnicate now")
    with pytest.raises(ParseError, match="Unknown command"):
        parse_command("   ")


def test_parse_find_group_without_keywords() -> None:
    with pytest.raises(ParseError):
        parse_command("find-group")
