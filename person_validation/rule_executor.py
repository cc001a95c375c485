import time
from typing import Any, Dict, List, Optional

from .fields import PersonField
from .rules.base import ValidationRule


class RuleExecutor:
    """Runs field rules against a person and reports one structured result per rule"""

    def __init__(self, rules: List[ValidationRule]):
        """
        Initialize rule executor.

        Args:
            rules: List of rule objects to execute, in report order
        """
        self.rules = list(rules)

    def execute(
        self, person, field: Optional[PersonField] = None
    ) -> List[Dict[str, Any]]:
        """
        Execute the rules for one field, or every rule when field is None.

        Returns:
            List of result dicts:
            [{
                "rule_id": str,
                "field": str,
                "description": str,
                "status": "PASS" | "FAIL" | "ERROR",
                "message": str,
                "findings": [str, ...],
                "execution_time_ms": float
            }, ...]
        """
        return [
            self._execute_rule(rule, person)
            for rule in self.rules
            if field is None or rule.validates() == field
        ]

    def _execute_rule(self, rule: ValidationRule, person) -> Dict[str, Any]:
        """Execute a single rule with timing."""
        start = time.time()
        try:
            findings = list(rule.run(person))
            status = "FAIL" if findings else "PASS"
            message = findings[0] if findings else ""
        except Exception as e:
            findings = []
            status = "ERROR"
            message = f"{type(e).__name__}: {e}"
        elapsed_ms = round((time.time() - start) * 1000, 2)

        return {
            "rule_id": rule.get_id(),
            "field": rule.validates().value,
            "description": rule.description(),
            "status": status,
            "message": message,
            "findings": findings,
            "execution_time_ms": elapsed_ms,
        }
