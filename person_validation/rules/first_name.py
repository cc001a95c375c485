"""
First name rule

Checks, in order, stopping at the first that applies:
- First name is present
- First name is not a reserved value
- First name is at least min_length characters long
"""

from typing import Iterator

from .base import ValidationRule
from ..fields import PersonField


class Rule(ValidationRule):
    """Validates that the first name is present, not reserved and long enough."""

    def validates(self) -> PersonField:
        return PersonField.FIRST_NAME

    def description(self) -> str:
        return (
            f"First name is mandatory, must not be one of {self.reserved_values} "
            f"and must have at least {self.min_length} characters"
        )

    @property
    def min_length(self) -> int:
        return self.settings.get("min_length", 2)

    @property
    def reserved_values(self) -> list:
        return self.settings.get("reserved_values", ["Q"])

    def run(self, person) -> Iterator[str]:
        field = self.validates()
        value = person.first_name

        if not value:
            yield f"{field} is mandatory"
        elif value in self.reserved_values:
            yield f"{field} '{value}' is reserved for extra-dimensional beings!"
        elif len(value) < self.min_length:
            yield f"{field} '{value}' is too short."
