"""Contact CRUD and field filter use cases."""

import logging

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
from contactbook.application.filters import filter_contacts
from contactbook.application.ports import ContactRepository, DuplicateContactId

logger = logging.getLogger(__name__)


class ContactService:
    """Create, read, replace, delete and filter contacts. Works on DTOs at the boundary."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def list_contacts(self) -> list[ContactDTO]:
        """Return all contacts in insertion order."""
        return [to_dto(contact) for contact in self._repo.list_all()]

    def get_contact(self, contact_id: int) -> ContactDTO | ContactNotFound:
        contact = self._repo.get_by_id(contact_id)
        if contact is None:
            return ContactNotFound(contact_id=contact_id)
        return to_dto(contact)

    def create_contact(self, dto: ContactDTO) -> ContactDTO | Invalid | Duplicate:
        """Validate and store a new contact. An id of 0 lets the store assign one."""
        try:
            contact = to_entity(dto)
        except ValueError as e:
            return Invalid(reason=str(e))
        try:
            stored = self._repo.add(contact)
        except DuplicateContactId as e:
            return Duplicate(contact_id=e.contact_id)
        logger.info("Created contact %s", stored.id)
        return to_dto(stored)

    def update_contact(
        self, contact_id: int, dto: ContactDTO
    ) -> ContactDTO | IdMismatch | Invalid | ContactNotFound:
        """Replace a stored contact wholesale. The body id must equal the path id."""
        if contact_id != dto.id:
            return IdMismatch(path_id=contact_id, body_id=dto.id)
        try:
            contact = to_entity(dto)
        except ValueError as e:
            return Invalid(reason=str(e))
        if not self._repo.update(contact):
            return ContactNotFound(contact_id=contact_id)
        logger.info("Updated contact %s", contact_id)
        return to_dto(contact)

    def delete_contact(self, contact_id: int) -> ContactDeleted | ContactNotFound:
        if not self._repo.delete(contact_id):
            return ContactNotFound(contact_id=contact_id)
        logger.info("Deleted contact %s", contact_id)
        return ContactDeleted(contact_id=contact_id)

    def filter_contacts(self, field_name: str, value: str) -> list[ContactDTO]:
        """Return contacts whose field contains value (case-sensitive). Unknown fields give []."""
        return [
            to_dto(contact)
            for contact in filter_contacts(self._repo.list_all(), field_name, value)
        ]
