"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.seed import (
    get_seed_path,
    load_seed_contacts,
    seed_repository,
)

__all__ = [
    "InMemoryContactRepository",
    "get_seed_path",
    "load_seed_contacts",
    "seed_repository",
]
