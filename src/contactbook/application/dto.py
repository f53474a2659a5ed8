"""Application DTOs: flat contact projection and use-case result types."""

from dataclasses import dataclass, field

from contactbook.domain import Age, Contact, Email, Sex


@dataclass(frozen=True)
class ContactDTO:
    """Flat, wire-friendly projection of a Contact (emails as plain strings)."""

    first_name: str
    last_name: str
    sex: Sex
    age: int
    emails: list[str] = field(default_factory=list)
    id: int = 0


def to_entity(dto: ContactDTO) -> Contact:
    """Build a Contact from a DTO. Raises ValueError when any value is invalid."""
    return Contact(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        sex=dto.sex,
        emails=tuple(Email(email) for email in dto.emails),
        age=Age(dto.age),
    )


def to_dto(contact: Contact) -> ContactDTO:
    return ContactDTO(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        sex=contact.sex,
        age=int(contact.age),
        emails=[str(email) for email in contact.emails],
    )


@dataclass(frozen=True)
class ContactNotFound:
    contact_id: int


@dataclass(frozen=True)
class IdMismatch:
    """Path id and body id of an update disagree."""

    path_id: int
    body_id: int


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class Duplicate:
    """A contact with this id is already stored."""

    contact_id: int


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: int
