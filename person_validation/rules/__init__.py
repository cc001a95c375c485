"""
Field validation rules.

One module per rule, each defining a class named ``Rule``. The module name is
the rule ID referenced from local-config.yaml.
"""

from .base import ValidationRule

__all__ = ["ValidationRule"]
