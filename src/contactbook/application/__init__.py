"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactDeleted,
    ContactDTO,
    ContactNotFound,
    Duplicate,
    IdMismatch,
    Invalid,
    to_dto,
    to_entity,
)
from contactbook.application.filters import FIELD_ACCESSORS, filter_contacts
from contactbook.application.ports import ContactRepository, DuplicateContactId

__all__ = [
    "FIELD_ACCESSORS",
    "ContactDTO",
    "ContactDeleted",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "Duplicate",
    "DuplicateContactId",
    "IdMismatch",
    "Invalid",
    "filter_contacts",
    "to_dto",
    "to_entity",
]
