"""
Abstract base class for field validation rules.

Every rule checks exactly one field of a person and yields the messages
(findings) that apply to the field's current value. The rule loader injects
the rule ID (the module name) and the rule's settings from configuration.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional

from ..fields import PersonField


class ValidationRule(ABC):
    """
    Abstract base class for all field rules.

    Rules are stateless with respect to the entity: the person is passed to
    run() on every evaluation, so one rule instance can serve any number of
    people.
    """

    def __init__(self, rule_id: str, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the rule with its identifier and settings.

        Args:
            rule_id: Unique rule identifier (derived from module name by loader)
            settings: Rule-specific settings from local-config.yaml
        """
        self._rule_id = rule_id
        self.settings = dict(settings or {})

    def get_id(self) -> str:
        """Return unique rule identifier (e.g. 'first_name')."""
        return self._rule_id

    @abstractmethod
    def validates(self) -> PersonField:
        """Return the field this rule checks."""

    @abstractmethod
    def description(self) -> str:
        """Return plain English description of what this rule checks."""

    @abstractmethod
    def run(self, person) -> Iterator[str]:
        """
        Evaluate the rule against the person's current field value.

        Yields:
            Human-readable messages; nothing when the field is valid
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id='{self._rule_id}', field='{self.validates()}')"
