"""
Rule Loader - Convention-based rule loading

Loads field rules named in configuration. The rule ID is the module name:

- Config: `{"rule_id": "first_name", "settings": {...}}`
- Module: `person_validation/rules/first_name.py`
- Contains: `class Rule(ValidationRule)`
- Instantiation: `Rule(rule_id="first_name", settings={...})`

Rules are returned in the order configuration lists them; that order is the
order findings are reported in.
"""

import importlib
import logging
from typing import Any, Dict, List, Optional

from .config_loader import ConfigLoader
from .rules.base import ValidationRule

logger = logging.getLogger(__name__)

RULES_PACKAGE = "person_validation.rules"


class RuleLoader:
    """Loads validation rules from the rules package"""

    def __init__(self):
        self.loaded_rules = {}  # Cache: rule_id -> rule_class

    def load_rules(self, rule_configs: List[Dict[str, Any]]) -> List[ValidationRule]:
        """
        Load rules from configuration.

        Args:
            rule_configs: List of rule config dicts with rule_id and optional settings

        Returns:
            List of instantiated rule objects, in config order
        """
        rules = []
        for config in rule_configs:
            rule_id = config["rule_id"]
            rule = self._load_single_rule(rule_id, config.get("settings"))
            rules.append(rule)

        logger.debug(f"Loaded {len(rules)} rules: {[r.get_id() for r in rules]}")
        return rules

    def _load_single_rule(
        self, rule_id: str, settings: Optional[Dict[str, Any]] = None
    ) -> ValidationRule:
        """
        Load a single rule by ID.

        Raises:
            ImportError: If no rule module exists for rule_id
            AttributeError: If the module does not define a Rule class
        """
        if rule_id in self.loaded_rules:
            return self.loaded_rules[rule_id](rule_id, settings)

        module_name = f"{RULES_PACKAGE}.{rule_id}"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            raise ImportError(f"Failed to import rule {rule_id}: {e}") from e

        # Rule class is always named "Rule"
        class_name = "Rule"
        if not hasattr(module, class_name):
            raise AttributeError(
                f"Rule class '{class_name}' not found in {module_name}. "
                f"All rules must define a class named 'Rule'."
            )

        rule_class = getattr(module, class_name)
        self.loaded_rules[rule_id] = rule_class

        return rule_class(rule_id, settings)


_default_rules: Optional[List[ValidationRule]] = None


def get_default_rules() -> List[ValidationRule]:
    """Get or load the rules configured in the bundled local-config.yaml."""
    global _default_rules
    if _default_rules is None:
        config_loader = ConfigLoader()
        _default_rules = RuleLoader().load_rules(config_loader.get_rule_configs())
    return _default_rules


def reset_default_rules():
    """Reset the default rule set (for testing)."""
    global _default_rules
    _default_rules = None
