"""Field identifiers shared by the entity, the rules and the evaluator."""

from enum import Enum


class PersonField(str, Enum):
    """
    Form fields of a person, in declaration order.

    The value is the form name used in selectors and in error messages,
    so plain strings ("firstName") are accepted wherever a field is expected.
    """

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    AGE = "age"

    @property
    def attribute(self) -> str:
        """Name of the Person attribute holding this field's value."""
        return _ATTRIBUTES[self]

    def __str__(self) -> str:
        return self.value


_ATTRIBUTES = {
    PersonField.FIRST_NAME: "first_name",
    PersonField.LAST_NAME: "last_name",
    PersonField.AGE: "age",
}
