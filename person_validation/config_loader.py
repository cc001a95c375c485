"""Configuration loading for rule settings and the host interop bridge."""

import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads local-config.yaml (bundled, or from an explicit path)."""

    CONFIG_FILENAME = "local-config.yaml"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to an alternative config file. When omitted, the
                local-config.yaml bundled in the person_validation package is used.

        Raises:
            FileNotFoundError: If config_path does not exist
            ValueError: If the config is malformed
        """
        if config_path is None:
            config_file = files("person_validation").joinpath(self.CONFIG_FILENAME)
            self.local_config_path = str(config_file)
            with config_file.open("r") as f:
                self.local_config = yaml.safe_load(f) or {}
        else:
            path = Path(config_path)
            if not path.is_file():
                raise FileNotFoundError(f"Config file not found: {path}")
            self.local_config_path = str(path)
            self.local_config = self._load_yaml(path)

        rules = self._check_structure()

        logger.debug(
            f"Loaded config from {self.local_config_path}",
            extra={"rule_count": len(rules)},
        )

    def _check_structure(self) -> List[Dict[str, Any]]:
        """
        Check the shape of the loaded config.

        Returns:
            The rules list

        Raises:
            ValueError: If the config is not a mapping, the rules list or one of
                its entries is malformed, or host_interop is not a mapping
        """
        source = self.local_config_path
        if not isinstance(self.local_config, dict):
            raise ValueError(
                f"Config {source} must be a mapping, "
                f"got {type(self.local_config).__name__}"
            )

        rules = self.local_config.get("rules")
        if not isinstance(rules, list):
            raise ValueError(f"Config {source} must define a 'rules' list")

        for index, rule_config in enumerate(rules):
            if not isinstance(rule_config, dict):
                raise ValueError(f"Config {source}: rules[{index}] must be a mapping")
            if not isinstance(rule_config.get("rule_id"), str):
                raise ValueError(
                    f"Config {source}: rules[{index}] must have a string 'rule_id'"
                )
            settings = rule_config.get("settings")
            if settings is not None and not isinstance(settings, dict):
                raise ValueError(
                    f"Config {source}: settings of rule "
                    f"'{rule_config['rule_id']}' must be a mapping"
                )

        if "host_interop" in self.local_config and not isinstance(
            self.local_config["host_interop"], dict
        ):
            raise ValueError(f"Config {source}: 'host_interop' must be a mapping")

        return rules

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file from disk."""
        with open(path) as f:
            return yaml.safe_load(f) or {}

    def get_local_config(self) -> Dict[str, Any]:
        """Get the full configuration."""
        return self.local_config

    def get_rule_configs(self) -> List[Dict[str, Any]]:
        """
        Get rule configs in evaluation order.

        Returns:
            List of dicts: [{"rule_id": "first_name", "settings": {...}}, ...]
        """
        return self.local_config["rules"]

    def get_host_interop_config(self) -> Dict[str, Any]:
        """Get host interop configuration (disabled when absent)."""
        return self.local_config.get("host_interop", {"enabled": False})
