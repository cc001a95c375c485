"""Validate minimum age"""

from typing import Iterator

from .base import ValidationRule
from ..fields import PersonField


class Rule(ValidationRule):

    def validates(self) -> PersonField:
        return PersonField.AGE

    def description(self) -> str:
        return f"Age must be at least {self.min_age}"

    @property
    def min_age(self) -> int:
        return self.settings.get("min_age", 18)

    def run(self, person) -> Iterator[str]:
        if person.age < self.min_age:
            yield f"{self.validates()} should be at least {self.min_age}"
