"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import MAX_AGE, MIN_AGE, Age, Contact, Email, Sex

__all__ = ["MAX_AGE", "MIN_AGE", "Age", "Contact", "Email", "Sex"]
