"""Tests for InMemoryContactRepository."""

import threading

import pytest

from contactbook.application import ContactRepository, DuplicateContactId
from contactbook.domain import Age, Contact, Email, Sex
from contactbook.infrastructure import InMemoryContactRepository


def _contact(first_name: str = "Ala", contact_id: int = 0) -> Contact:
    return Contact(
        id=contact_id,
        first_name=first_name,
        last_name="Kot",
        sex=Sex.FEMALE,
        emails=(Email(f"{first_name.lower()}@przyklad.pl"),),
        age=Age(30),
    )


def test_add_assigns_sequential_ids_and_preserves_order() -> None:
    repo = InMemoryContactRepository()
    a = repo.add(_contact("Ala"))
    b = repo.add(_contact("Ola"))
    assert (a.id, b.id) == (1, 2)
    assert [c.first_name for c in repo.list_all()] == ["Ala", "Ola"]
    assert repo.get_by_id(2) == b


def test_add_keeps_explicit_id_and_skips_past_it() -> None:
    repo = InMemoryContactRepository()
    explicit = repo.add(_contact("Ala", contact_id=10))
    assert explicit.id == 10
    assert repo.add(_contact("Ola")).id == 11


def test_add_duplicate_id_raises_and_keeps_state() -> None:
    repo = InMemoryContactRepository()
    repo.add(_contact("Ala", contact_id=5))
    with pytest.raises(DuplicateContactId) as exc_info:
        repo.add(_contact("Ola", contact_id=5))
    assert exc_info.value.contact_id == 5
    assert [c.first_name for c in repo.list_all()] == ["Ala"]


def test_get_by_id_missing_returns_none() -> None:
    assert InMemoryContactRepository().get_by_id(1) is None


def test_update_replaces_wholesale() -> None:
    repo = InMemoryContactRepository()
    stored = repo.add(_contact("Ala"))
    assert repo.update(_contact("Alicja", contact_id=stored.id)) is True
    assert repo.get_by_id(stored.id).first_name == "Alicja"
    assert len(repo.list_all()) == 1


def test_update_missing_returns_false() -> None:
    repo = InMemoryContactRepository()
    assert repo.update(_contact("Ala", contact_id=3)) is False
    assert repo.list_all() == []


def test_delete_then_delete_again() -> None:
    repo = InMemoryContactRepository()
    stored = repo.add(_contact("Ala"))
    assert repo.delete(stored.id) is True
    assert repo.get_by_id(stored.id) is None
    assert repo.delete(stored.id) is False
    assert repo.list_all() == []


def test_concurrent_adds_get_unique_ids() -> None:
    repo = InMemoryContactRepository()

    def worker() -> None:
        for _ in range(50):
            repo.add(_contact("Ala"))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    ids = [c.id for c in repo.list_all()]
    assert len(ids) == 200
    assert len(set(ids)) == 200


def test_public_methods_match_port() -> None:
    port_methods = {n for n in vars(ContactRepository) if not n.startswith("_")}
    repo_methods = {n for n in vars(InMemoryContactRepository) if not n.startswith("_")}
    assert repo_methods == port_methods
