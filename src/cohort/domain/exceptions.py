"""Domain exceptions raised by entities and the model store.

Commands translate these into CommandException; nothing outside the
application layer should need to catch them.
"""


class ModelError(Exception):
    """Base class for all model and entity errors."""


class PersonNotFoundError(ModelError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Person not found: {name}")
        self.name = name


class GroupNotFoundError(ModelError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Group not found: {name}")
        self.name = name


class NotAMemberError(ModelError):
    def __init__(self, person_name: str, group_name: str) -> None:
        super().__init__(f"{person_name} is not a member of {group_name}")
        self.person_name = person_name
        self.group_name = group_name


class DuplicatePersonError(ModelError):
    """A person with the same name or phone number already exists."""


class DuplicateGroupError(ModelError):
    """A group with the same name already exists."""


class DuplicateMemberError(ModelError):
    """The person is already a member of the group."""
