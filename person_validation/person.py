"""
Person entity with embedded field validation.

A Person holds raw form values and never blocks invalid ones. Validation is a
pure evaluation over the current values, re-run on every query:

    person = Person(first_name="Al", last_name="Doe", age=20)
    list(person.get_errors())        # ["lastName cannot be 'Doe'"]
    person.errors_for("firstName")   # None
    person.has_errors()              # True
"""

import json
from importlib.resources import files
from typing import Any, Dict, Iterator, List, Optional, Union

from jsonschema import Draft7Validator

from .events import ErrorsChanged
from .fields import PersonField
from .rule_loader import get_default_rules
from .rules.base import ValidationRule

FieldSelector = Union[PersonField, str, None]

_schema_validator: Optional[Draft7Validator] = None


def _get_schema_validator() -> Draft7Validator:
    """Load the bundled person.schema.json once."""
    global _schema_validator
    if _schema_validator is None:
        schema_file = files("person_validation").joinpath("person.schema.json")
        with schema_file.open("r") as f:
            _schema_validator = Draft7Validator(json.load(f))
    return _schema_validator


def normalize_field(field: FieldSelector) -> Optional[PersonField]:
    """Map a selector to a PersonField (None means all fields)."""
    if field is None:
        return None
    try:
        return PersonField(field)
    except ValueError:
        raise ValueError(
            f"Unknown field {field!r}. Expected one of: "
            f"{', '.join(f.value for f in PersonField)}"
        ) from None


class ErrorReport:
    """
    Restartable view over the findings of a person.

    Each iteration re-runs the rules against the person's current values,
    so a report obtained earlier reflects later field changes.
    """

    def __init__(self, person: "Person", field: Optional[PersonField]):
        self._person = person
        self._field = field

    @property
    def field(self) -> Optional[PersonField]:
        return self._field

    def __iter__(self) -> Iterator[str]:
        return self._person._evaluate(self._field)

    def first(self) -> Optional[str]:
        """Return the first finding, or None when there is none."""
        return next(iter(self), None)

    def __bool__(self) -> bool:
        return self.first() is not None

    def __repr__(self) -> str:
        return f"ErrorReport(field={self._field!r}, errors={list(self)!r})"


class Person:
    """A person as entered on a form, with on-demand validation."""

    def __init__(
        self,
        first_name: Optional[str] = "",
        last_name: Optional[str] = "",
        age: int = 0,
        rules: Optional[List[ValidationRule]] = None,
    ):
        """
        Args:
            first_name: First name (may be empty or None)
            last_name: Last name (may be empty or None)
            age: Age in years
            rules: Rules to evaluate, in report order. Defaults to the rules
                configured in the bundled local-config.yaml.
        """
        if rules is None:
            rules = get_default_rules()

        self.first_name = first_name
        self.last_name = last_name
        self.age = age
        self._rules = list(rules)
        self.errors_changed = ErrorsChanged(self)

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], rules: Optional[List[ValidationRule]] = None
    ) -> "Person":
        """
        Build a person from a form payload keyed by form names.

        Missing keys keep their defaults. Only types are checked here;
        business rules are reported by get_errors(). JSON Schema treats an
        integral float (17.0) as an integer, so age is stored as int.

        Raises:
            ValueError: If the payload does not match person.schema.json
        """
        errors = sorted(
            _get_schema_validator().iter_errors(data), key=lambda e: list(e.path)
        )
        if errors:
            error = errors[0]
            error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
            raise ValueError(f"Person data invalid at {error_path}: {error.message}")

        values = {
            field.attribute: data[field.value]
            for field in PersonField
            if field.value in data
        }
        if PersonField.AGE.attribute in values:
            values[PersonField.AGE.attribute] = int(values[PersonField.AGE.attribute])
        return cls(rules=rules, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the form payload for this person."""
        return {field.value: getattr(self, field.attribute) for field in PersonField}

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"

    @property
    def rules(self) -> List[ValidationRule]:
        return list(self._rules)

    def get_errors(self, field: FieldSelector = None) -> ErrorReport:
        """
        Get the findings for one field, or for all fields when field is None.

        Args:
            field: PersonField or its form name ("firstName", "lastName", "age")

        Returns:
            ErrorReport; iterate it for messages in field declaration order

        Raises:
            ValueError: If field is not a known field name
        """
        return ErrorReport(self, normalize_field(field))

    def errors_for(self, field: FieldSelector) -> Optional[str]:
        """Return the first finding for field, or None when it is valid."""
        return self.get_errors(field).first()

    def has_errors(self) -> bool:
        """True if any field currently has a finding."""
        return bool(self.get_errors())

    def _evaluate(self, field: Optional[PersonField]) -> Iterator[str]:
        for rule in self._rules:
            if field is None or rule.validates() == field:
                yield from rule.run(self)

    def __repr__(self) -> str:
        return (
            f"Person(first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, age={self.age!r})"
        )
