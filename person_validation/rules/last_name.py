"""Validate last name presence and forbidden values"""

from typing import Iterator

from .base import ValidationRule
from ..fields import PersonField


class Rule(ValidationRule):
    """Validates that the last name is present and not a forbidden placeholder."""

    def validates(self) -> PersonField:
        return PersonField.LAST_NAME

    def description(self) -> str:
        return f"Last name is mandatory and must not be one of {self.forbidden_values}"

    @property
    def forbidden_values(self) -> list:
        return self.settings.get("forbidden_values", ["Doe"])

    def run(self, person) -> Iterator[str]:
        field = self.validates()
        value = person.last_name

        if not value:
            yield f"{field} is mandatory"
        elif value in self.forbidden_values:
            yield f"{field} cannot be '{value}'"
