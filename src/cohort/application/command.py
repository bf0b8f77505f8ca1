"""Command contract: Command base class, CommandResult, and CommandException."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from cohort.application.ports import Model


class ErrorKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_A_MEMBER = "NOT_A_MEMBER"
    INVALID_INDEX = "INVALID_INDEX"
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class CommandException(Exception):
    """
    Raised by Command.execute when a precondition fails.
    The model is left unchanged whenever this is raised.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INVALID_ARGUMENT) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"CommandException({self.message!r}, {self.kind.value})"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command: the message shown to the user."""

    feedback: str


class Command(ABC):
    """
    One user intent. Inputs are captured at construction; execute validates
    them against the model, applies the change and returns a CommandResult,
    or raises CommandException without touching the model.
    """

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        ...


def require_text(value: str | None, field_name: str) -> str:
    """Return value stripped; raise ValueError if missing or blank."""
    if value is None or not str(value).strip():
        raise ValueError(f"{field_name} is required.")
    return str(value).strip()


def require_index(value: int | None, field_name: str = "index") -> int:
    """Return a 1-based index; raise ValueError if missing or not positive."""
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be a positive integer.")
    if value < 1:
        raise ValueError(f"{field_name} must be a positive integer.")
    return value


def require_model(model: Model | None) -> Model:
    if model is None:
        raise ValueError("model is required.")
    return model
