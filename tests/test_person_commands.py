"""Unit tests for person commands, including cascade removal from groups."""

import pytest

from cohort.application import (
    AddPersonCommand,
    AddToGroupCommand,
    CommandException,
    DeletePersonCommand,
    ErrorKind,
    GradeAssignmentCommand,
    ListPersonsCommand,
)
from cohort.domain import Group
from cohort.infrastructure import InMemoryModel


def _model() -> InMemoryModel:
    return InMemoryModel(default_region="US")


def test_add_person_normalizes_phone() -> None:
    model = _model()
    result = AddPersonCommand("Alice", "202 555 1234").execute(model)
    assert result.feedback == "New person added: Alice"
    assert model.get_person("Alice").phone_number == "+12025551234"


def test_add_person_without_phone() -> None:
    model = _model()
    AddPersonCommand("Bob").execute(model)
    assert model.get_person("Bob").phone_number is None


def test_add_duplicate_name_fails() -> None:
    model = _model()
    AddPersonCommand("Alice").execute(model)
    with pytest.raises(CommandException) as exc:
        AddPersonCommand("Alice", "+12025551234").execute(model)
    assert exc.value.kind is ErrorKind.DUPLICATE_ENTITY
    assert len(model.persons) == 1


def test_add_duplicate_phone_in_other_format_fails() -> None:
    model = _model()
    AddPersonCommand("Alice", "+1 202 555 1234").execute(model)
    with pytest.raises(CommandException, match="already exists") as exc:
        AddPersonCommand("Alice Other", "(202) 555-1234").execute(model)
    assert exc.value.kind is ErrorKind.DUPLICATE_ENTITY


def test_same_name_different_case_allowed() -> None:
    model = _model()
    AddPersonCommand("alice").execute(model)
    AddPersonCommand("Alice").execute(model)
    assert [p.name for p in model.persons] == ["alice", "Alice"]


def test_delete_person_cascades_out_of_groups() -> None:
    model = _model()
    AddPersonCommand("Alice").execute(model)
    AddPersonCommand("Bob").execute(model)
    model.add_group(Group(name="CS2103T"))
    model.add_group(Group(name="CS2101"))
    for group in ("CS2103T", "CS2101"):
        AddToGroupCommand("Alice", group).execute(model)
        AddToGroupCommand("Bob", group).execute(model)
    GradeAssignmentCommand("Alice", "CS2103T", "Quiz", 9.0).execute(model)

    result = DeletePersonCommand("Alice").execute(model)

    assert result.feedback == "Deleted Person: Alice"
    assert [p.name for p in model.persons] == ["Bob"]
    for group in model.groups:
        assert [p.name for p in group.persons] == ["Bob"]
    with pytest.raises(CommandException) as exc:
        GradeAssignmentCommand("Alice", "CS2103T", "Quiz", 1.0).execute(model)
    assert exc.value.kind is ErrorKind.NOT_FOUND


def test_delete_unknown_person_fails() -> None:
    model = _model()
    with pytest.raises(CommandException) as exc:
        DeletePersonCommand("Ghost").execute(model)
    assert exc.value.kind is ErrorKind.NOT_FOUND


def test_list_persons_resets_filter() -> None:
    model = _model()
    AddPersonCommand("Alice").execute(model)
    AddPersonCommand("Bob").execute(model)
    model.update_filtered_person_list(lambda p: p.name == "Bob")
    assert [p.name for p in model.get_filtered_person_list()] == ["Bob"]

    assert ListPersonsCommand().execute(model).feedback == "Listed all persons"
    assert [p.name for p in model.get_filtered_person_list()] == ["Alice", "Bob"]


def test_construction_requires_name() -> None:
    with pytest.raises(ValueError, match="name"):
        AddPersonCommand(None)
    with pytest.raises(ValueError, match="name"):
        DeletePersonCommand("")


def test_blank_phone_normalized_to_none() -> None:
    assert AddPersonCommand("Alice", "  ") == AddPersonCommand("Alice")
