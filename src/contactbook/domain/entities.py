"""Domain entities: Contact aggregate and its value objects (Age, Email, Sex)."""

from dataclasses import dataclass, field
from enum import Enum

# Accepted adult age range, inclusive on both ends.
MIN_AGE = 18
MAX_AGE = 120


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class Age:
    """
    Age of a contact in whole years.
    Only adults within [MIN_AGE, MAX_AGE] are representable.
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Age must be an integer.")
        if self.value < MIN_AGE or self.value > MAX_AGE:
            raise ValueError(
                f"Age must be between {MIN_AGE} and {MAX_AGE}, got {self.value}."
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """An email address, stored verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Contact:
    """
    Represents a person in the address book.
    A Contact is immutable; changes replace the whole aggregate.
    id == 0 means the store has not assigned an identity yet.
    """

    first_name: str = field(default="")
    last_name: str = field(default="")
    sex: Sex = Sex.MALE
    emails: tuple[Email, ...] = field(default=None)
    age: Age = field(default=None)
    id: int = 0

    def __post_init__(self):
        for label, name in (("first", self.first_name), ("last", self.last_name)):
            if name is not None and not isinstance(name, str):
                raise ValueError(f"Contact {label} name must be a string.")
            if not name or not name.strip():
                raise ValueError(f"Contact {label} name must be non-empty.")
        if self.emails is None:
            raise ValueError("Contact must have an emails collection.")
        if self.age is None:
            raise ValueError("Contact must have an age.")
        object.__setattr__(self, "sex", Sex(self.sex))
        object.__setattr__(self, "emails", tuple(self.emails))
