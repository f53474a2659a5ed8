"""Load sample contacts from YAML into a repository. Used at startup in development."""

import logging
import os
from pathlib import Path

import yaml

from contactbook.application.dto import ContactDTO, to_entity
from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def get_seed_path() -> Path:
    """Return path to the seed YAML (SEED_PATH env or seeds/contacts.yaml)."""
    default = _repo_root() / "seeds" / "contacts.yaml"
    path = os.environ.get("SEED_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_seed_contacts(path: Path | None = None) -> list[Contact]:
    """Load seed YAML and return validated Contacts. Raises ValueError on bad structure."""
    if path is None:
        path = get_seed_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must be a dict")
    entries = data.get("contacts")
    if not isinstance(entries, list):
        raise ValueError("Seed must have a 'contacts' list")
    contacts = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed contact #{i} must be a mapping")
        for key in ("first_name", "last_name"):
            if not isinstance(entry.get(key), str):
                raise ValueError(f"Seed contact #{i} '{key}' must be a string")
        emails = entry.get("emails") or []
        if not isinstance(emails, list) or not all(isinstance(e, str) for e in emails):
            raise ValueError(f"Seed contact #{i} 'emails' must be a list of strings")
        try:
            dto = ContactDTO(
                id=int(entry.get("id", 0)),
                first_name=entry["first_name"],
                last_name=entry["last_name"],
                sex=entry.get("sex"),
                age=entry.get("age"),
                emails=list(emails),
            )
            contacts.append(to_entity(dto))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Seed contact #{i} is invalid: {e}") from e
    return contacts


def seed_repository(repository: ContactRepository, path: Path | None = None) -> int:
    """Insert seed contacts into the repository. Returns how many were added."""
    contacts = load_seed_contacts(path)
    for contact in contacts:
        repository.add(contact)
    logger.info("Seeded %d contacts", len(contacts))
    return len(contacts)
