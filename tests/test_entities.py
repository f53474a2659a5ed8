"""Unit tests for domain value objects and the Contact aggregate."""

import dataclasses

import pytest

from contactbook.domain import Age, Contact, Email, Sex


def _contact(**overrides) -> Contact:
    fields = {
        "first_name": "Ala",
        "last_name": "Kot",
        "sex": Sex.FEMALE,
        "emails": (Email("ala.kot@przyklad.pl"),),
        "age": Age(23),
    }
    fields.update(overrides)
    return Contact(**fields)


def test_age_boundaries() -> None:
    assert int(Age(18)) == 18
    assert int(Age(120)) == 120
    with pytest.raises(ValueError, match="between 18 and 120"):
        Age(17)
    with pytest.raises(ValueError, match="between 18 and 120"):
        Age(121)


def test_age_rejects_non_integer() -> None:
    with pytest.raises(ValueError):
        Age(None)
    with pytest.raises(ValueError):
        Age(True)


def test_age_and_email_convert_to_plain_values() -> None:
    assert str(Age(34)) == "34"
    assert str(Email("anything, not validated")) == "anything, not validated"
    assert Email("a@b.pl") == Email("a@b.pl")


def test_contact_valid() -> None:
    contact = _contact(emails=[Email("x@gmail.com")])
    assert contact.id == 0
    assert contact.first_name == "Ala"
    assert contact.emails == (Email("x@gmail.com"),)
    assert contact.sex is Sex.FEMALE


@pytest.mark.parametrize("field", ["first_name", "last_name"])
@pytest.mark.parametrize("value", ["", "   ", None])
def test_contact_blank_names_rejected(field: str, value) -> None:
    with pytest.raises(ValueError, match="must be non-empty"):
        _contact(**{field: value})


@pytest.mark.parametrize("field", ["first_name", "last_name"])
def test_contact_non_string_names_rejected(field: str) -> None:
    with pytest.raises(ValueError, match="must be a string"):
        _contact(**{field: 123})


def test_contact_requires_emails_and_age() -> None:
    with pytest.raises(ValueError, match="emails"):
        _contact(emails=None)
    with pytest.raises(ValueError, match="age"):
        _contact(age=None)


def test_contact_sex_accepts_wire_value() -> None:
    assert _contact(sex="Male").sex is Sex.MALE
    with pytest.raises(ValueError):
        _contact(sex="Other")


def test_contact_is_immutable() -> None:
    contact = _contact()
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.first_name = "Ola"
