"""In-memory implementation of ContactRepository (no DB)."""

import threading
from dataclasses import replace

from contactbook.application.ports import DuplicateContactId
from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    Ids are assigned from a counter that always stays above every stored id.
    All access goes through one lock; handlers may run on a thread pool.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[int, Contact] = {}
        self._order: list[int] = []
        self._next_id = 1

    def add(self, contact: Contact) -> Contact:
        with self._lock:
            if contact.id == 0:
                stored = replace(contact, id=self._next_id)
            elif contact.id in self._by_id:
                raise DuplicateContactId(contact.id)
            else:
                stored = contact
            self._by_id[stored.id] = stored
            self._order.append(stored.id)
            self._next_id = max(self._next_id, stored.id + 1)
            return stored

    def get_by_id(self, contact_id: int) -> Contact | None:
        with self._lock:
            return self._by_id.get(contact_id)

    def list_all(self) -> list[Contact]:
        with self._lock:
            return [self._by_id[cid] for cid in self._order if cid in self._by_id]

    def update(self, contact: Contact) -> bool:
        with self._lock:
            if contact.id not in self._by_id:
                return False
            self._by_id[contact.id] = contact
            return True

    def delete(self, contact_id: int) -> bool:
        with self._lock:
            if self._by_id.pop(contact_id, None) is None:
                return False
            self._order.remove(contact_id)
            return True
