"""Commands that add, delete and list persons."""

import logging
from dataclasses import dataclass

from cohort.application.command import (
    Command,
    CommandException,
    CommandResult,
    ErrorKind,
    require_model,
    require_text,
)
from cohort.application.lookup import find_person
from cohort.application.ports import Model
from cohort.domain import DuplicatePersonError, Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddPersonCommand(Command):
    name: str
    phone_number: str | None = None

    COMMAND_WORD = "add-person"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book.\n"
        "Parameters: n/NAME [ph/PHONE]\n"
        f"Example: {COMMAND_WORD} n/John Doe ph/+1 202 555 1234"
    )
    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."

    def __post_init__(self):
        object.__setattr__(self, "name", require_text(self.name, "name"))
        if self.phone_number is not None:
            object.__setattr__(self, "phone_number", self.phone_number.strip() or None)

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        person = Person(name=self.name, phone_number=self.phone_number)
        if model.has_person(person):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON, ErrorKind.DUPLICATE_ENTITY)
        try:
            model.add_person(person)
        except DuplicatePersonError as err:
            raise CommandException(
                self.MESSAGE_DUPLICATE_PERSON, ErrorKind.DUPLICATE_ENTITY
            ) from err
        logger.info("Added person %r", person.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name))


@dataclass(frozen=True)
class DeletePersonCommand(Command):
    """Delete a person. They are also removed from every group they belonged to."""

    name: str

    COMMAND_WORD = "delete-person"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes a person and removes them from all groups.\n"
        "Parameters: n/NAME\n"
        f"Example: {COMMAND_WORD} n/John Doe"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    def __post_init__(self):
        object.__setattr__(self, "name", require_text(self.name, "name"))

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        person = find_person(model, self.name)
        model.delete_person(person)
        logger.info("Deleted person %r", person.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name))


@dataclass(frozen=True)
class ListPersonsCommand(Command):
    COMMAND_WORD = "list-persons"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all persons."
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model = require_model(model)
        model.update_filtered_person_list(None)
        return CommandResult(self.MESSAGE_SUCCESS)
