"""
person-validation: field-level validation for a person data entry form

This library provides:
- A Person entity that reports (never blocks) invalid field values
- Per-field rules configured in a bundled local-config.yaml
- Lazy, restartable error reports for one field or all fields
- A change notification subscription point for UI bindings
- A small shim for calling into the host environment

Example:
    from person_validation import Person

    person = Person(first_name="Al", last_name="Doe", age=20)
    person.errors_for("lastName")   # "lastName cannot be 'Doe'"
    person.has_errors()             # True
"""

from .api import ValidationService
from .fields import PersonField
from .host_interop import HostInterop, HostInteropError
from .person import ErrorReport, Person

__version__ = "0.1.0"
__all__ = [
    "ValidationService",
    "Person",
    "PersonField",
    "ErrorReport",
    "HostInterop",
    "HostInteropError",
]
