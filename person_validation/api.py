"""
Public API for person-validation

This is the "front door": configuration, rule loading, entity construction
and the host interop shim wired together.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .config_loader import ConfigLoader
from .host_interop import HostInterop
from .person import Person, FieldSelector, normalize_field
from .rule_executor import RuleExecutor
from .rule_loader import RuleLoader

logger = logging.getLogger(__name__)

PersonOrData = Union[Person, Dict[str, Any]]


class ValidationService:
    """
    Main validation service class.

    Example:
        from person_validation import ValidationService

        service = ValidationService()
        results = service.validate({"firstName": "Al", "lastName": "Doe", "age": 20})

        for result in results:
            if result['status'] == 'FAIL':
                print(f"{result['field']}: {result['message']}")
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize validation service.

        Args:
            config_path: Alternative local-config.yaml; the bundled one by default

        Raises:
            FileNotFoundError: If config_path does not exist
            ValueError: If the configuration is malformed
            ImportError: If a configured rule module cannot be imported
        """
        self.config_loader = ConfigLoader(config_path)
        self.rule_loader = RuleLoader()
        self.rules = self.rule_loader.load_rules(self.config_loader.get_rule_configs())
        self.executor = RuleExecutor(self.rules)
        self.host = HostInterop(self.config_loader.get_host_interop_config())

        logger.info(
            f"Validation service ready with {len(self.rules)} rules",
            extra={'config_path': self.config_loader.local_config_path}
        )

    def new_person(self, **fields) -> Person:
        """
        Create a person validated by this service's rules.

        Args:
            **fields: first_name, last_name, age

        Example:
            person = service.new_person(first_name="Alice", last_name="Smith", age=30)
        """
        return Person(rules=self.rules, **fields)

    def load_person(self, entity_data: Dict[str, Any]) -> Person:
        """
        Create a person from a form payload ({"firstName": ..., "lastName": ..., "age": ...}).

        Raises:
            ValueError: If the payload does not match the person schema
        """
        return Person.from_dict(entity_data, rules=self.rules)

    def validate(
        self, person: PersonOrData, field: FieldSelector = None
    ) -> List[Dict[str, Any]]:
        """
        Run the rules for one field (or all fields) and return structured results.

        Args:
            person: Person instance or form payload dict
            field: Field to check; None checks every field

        Returns:
            List of validation result dicts, each containing:
                - rule_id: Rule identifier
                - field: Form name of the checked field
                - description: Rule description
                - status: "PASS", "FAIL" or "ERROR"
                - message: First finding (empty string for PASS)
                - findings: All findings
                - execution_time_ms: Execution time

        Raises:
            ValueError: If field is unknown or payload data is invalid
        """
        selected = normalize_field(field)
        return self.executor.execute(self._as_person(person), selected)

    def get_errors(self, person: PersonOrData, field: FieldSelector = None) -> List[str]:
        """Return the findings for one field (or all fields) as a list of messages."""
        return list(self._as_person(person).get_errors(field))

    def discover_rules(self) -> Dict[str, Dict[str, Any]]:
        """
        Discover the loaded rules and their metadata.

        Returns:
            Dict mapping rule_id to {rule_id, field, description, settings}
        """
        return {
            rule.get_id(): {
                "rule_id": rule.get_id(),
                "field": rule.validates().value,
                "description": rule.description(),
                "settings": dict(rule.settings),
            }
            for rule in self.rules
        }

    def prompt(self, message: str) -> str:
        """Ask the host environment for text input (see HostInterop)."""
        return self.host.prompt(message)

    def _as_person(self, person: PersonOrData) -> Person:
        if isinstance(person, Person):
            return person
        return self.load_person(person)
