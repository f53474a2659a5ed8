"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact) and value objects (Age, Email, Sex). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs, field filter.
- infrastructure: adapters (InMemoryContactRepository) and the YAML seed loader.
"""

from contactbook.application import (
    ContactDeleted,
    ContactDTO,
    ContactNotFound,
    ContactRepository,
    ContactService,
    Duplicate,
    IdMismatch,
    Invalid,
    to_dto,
    to_entity,
)
from contactbook.domain import Age, Contact, Email, Sex
from contactbook.infrastructure import InMemoryContactRepository, seed_repository

__all__ = [
    "Age",
    "Contact",
    "ContactDTO",
    "ContactDeleted",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "Duplicate",
    "Email",
    "IdMismatch",
    "InMemoryContactRepository",
    "Invalid",
    "Sex",
    "seed_repository",
    "to_dto",
    "to_entity",
]
