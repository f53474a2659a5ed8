"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class DuplicateContactId(ValueError):
    """Raised by add() when the supplied id is already stored."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact with id {contact_id} already exists.")
        self.contact_id = contact_id


class ContactRepository(Protocol):
    """Stores and queries Contact aggregates keyed by integer id."""

    def add(self, contact: Contact) -> Contact:
        """Store a contact and return it with its assigned id.
        id == 0 gets the next free id; any other id is kept or raises DuplicateContactId.
        """
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def update(self, contact: Contact) -> bool:
        """Replace the stored contact with the same id. Returns False if not found."""
        ...

    def delete(self, contact_id: int) -> bool:
        """Remove the contact. Returns True if removed, False if not found."""
        ...
