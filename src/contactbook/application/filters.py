"""Field filter: match contacts by a named field containing a substring.

Field names are a closed table mapping to accessors. An accessor returns either
a single string (scalar fields) or a list of strings (the emails collection).
Scalar fields match when the stringified value contains the needle; collection
fields match when any element does. Matching is case-sensitive. Unknown field
names match nothing.
"""

from collections.abc import Callable, Iterable

from contactbook.domain import Contact

FieldAccessor = Callable[[Contact], str | list[str]]

FIELD_ACCESSORS: dict[str, FieldAccessor] = {
    "Id": lambda c: str(c.id),
    "FirstName": lambda c: c.first_name,
    "LastName": lambda c: c.last_name,
    "Sex": lambda c: c.sex.value,
    "Emails": lambda c: [str(email) for email in c.emails],
    "Age": lambda c: str(c.age),
}

# camelCase names as they appear on the wire.
FIELD_ALIASES: dict[str, str] = {
    "id": "Id",
    "firstName": "FirstName",
    "lastName": "LastName",
    "sex": "Sex",
    "emails": "Emails",
    "age": "Age",
}


def get_accessor(field_name: str) -> FieldAccessor | None:
    """Return the accessor for a field name (or its camelCase alias), or None."""
    name = FIELD_ALIASES.get(field_name, field_name)
    return FIELD_ACCESSORS.get(name)


def matches(contact: Contact, field_name: str, value: str) -> bool:
    accessor = get_accessor(field_name)
    if accessor is None:
        return False
    field_value = accessor(contact)
    if isinstance(field_value, list):
        return any(value in item for item in field_value)
    return value in field_value


def filter_contacts(
    contacts: Iterable[Contact], field_name: str, value: str
) -> list[Contact]:
    """Return contacts whose field contains value, preserving input order."""
    if get_accessor(field_name) is None:
        return []
    return [c for c in contacts if matches(c, field_name, value)]
