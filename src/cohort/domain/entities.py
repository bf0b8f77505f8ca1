"""Domain entities: Person, Tag, GroupMemberDetail, and Group."""

from dataclasses import dataclass, field

from cohort.domain.exceptions import DuplicateMemberError, NotAMemberError


@dataclass(frozen=True)
class Person:
    """
    Represents an individual tracked in the address book.
    Identity is the name (exact, case-sensitive match).
    """

    name: str = field(default="")
    phone_number: str | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Person name must be non-empty.")
        object.__setattr__(self, "name", self.name.strip())
        if self.phone_number is not None:
            object.__setattr__(self, "phone_number", self.phone_number.strip() or None)

    def is_same_person(self, other: "Person | None") -> bool:
        return other is not None and other.name == self.name


@dataclass(frozen=True)
class Tag:
    """A label attached to a Group. Equal by label."""

    label: str

    def __post_init__(self):
        if not self.label or not self.label.strip():
            raise ValueError("Tag label must be non-empty.")
        label = self.label.strip()
        if any(ch.isspace() for ch in label):
            raise ValueError("Tag label must be a single word.")
        object.__setattr__(self, "label", label)

    def __str__(self) -> str:
        return f"[{self.label}]"


@dataclass
class GroupMemberDetail:
    """
    One Person's participation record within one Group.
    Holds a reference to the Person (not owned) and the assignment grades.
    """

    person: Person
    grades: dict[str, float] = field(default_factory=dict)

    def grade_assignment(self, assignment_name: str, score: float) -> None:
        """Record a score, overwriting any previous score for the assignment."""
        self.grades[assignment_name] = float(score)

    def get_grade(self, assignment_name: str) -> float | None:
        return self.grades.get(assignment_name)

    @property
    def assignments(self) -> list[str]:
        return list(self.grades)


@dataclass
class Group:
    """
    A named collection of persons with shared tags.
    The name is the group's identity and is unique within the model.
    No two member entries may refer to the same person.
    """

    name: str
    members: list[GroupMemberDetail] = field(default_factory=list)
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Group name must be non-empty.")
        self.name = self.name.strip()
        self.tags = frozenset(self.tags)
        seen: set[str] = set()
        for detail in self.members:
            if detail.person.name in seen:
                raise DuplicateMemberError(
                    f"{detail.person.name} appears twice in group {self.name}"
                )
            seen.add(detail.person.name)

    @property
    def persons(self) -> list[Person]:
        return [detail.person for detail in self.members]

    def is_same_group(self, other: "Group | None") -> bool:
        return other is not None and other.name == self.name

    def has_member(self, person: Person) -> bool:
        return any(detail.person.is_same_person(person) for detail in self.members)

    def get_group_member_detail(self, person: Person) -> GroupMemberDetail:
        for detail in self.members:
            if detail.person.is_same_person(person):
                return detail
        raise NotAMemberError(person.name, self.name)

    def add_member(self, person: Person) -> GroupMemberDetail:
        if self.has_member(person):
            raise DuplicateMemberError(f"{person.name} is already in {self.name}")
        detail = GroupMemberDetail(person=person)
        self.members.append(detail)
        return detail

    def remove_member(self, person: Person) -> GroupMemberDetail:
        detail = self.get_group_member_detail(person)
        self.members.remove(detail)
        return detail

    def __str__(self) -> str:
        tags = " ".join(str(tag) for tag in sorted(self.tags, key=lambda t: t.label))
        return f"{self.name} {tags}".rstrip()
