"""
Tests for rule loading, configuration and rule execution.
"""
import pytest
import yaml

from person_validation import Person, PersonField
from person_validation.config_loader import ConfigLoader
from person_validation.rule_executor import RuleExecutor
from person_validation.rule_loader import (
    RuleLoader,
    get_default_rules,
    reset_default_rules,
)
from person_validation.rules.base import ValidationRule


@pytest.fixture
def write_config(tmp_path):
    """Write a config dict to a temporary local-config.yaml and return its path."""
    def _write(config):
        path = tmp_path / "local-config.yaml"
        path.write_text(yaml.safe_dump(config))
        return str(path)
    return _write


@pytest.fixture
def strict_rules():
    """Rules with non-default settings."""
    return RuleLoader().load_rules([
        {"rule_id": "first_name", "settings": {"min_length": 3, "reserved_values": ["Q", "Zod"]}},
        {"rule_id": "last_name", "settings": {"forbidden_values": ["Doe", "Roe"]}},
        {"rule_id": "age", "settings": {"min_age": 21}},
    ])


class TestConfigLoader:
    """Test ConfigLoader."""

    def test_bundled_config_lists_rules_in_field_order(self):
        config_loader = ConfigLoader()
        rule_ids = [c["rule_id"] for c in config_loader.get_rule_configs()]
        assert rule_ids == ["first_name", "last_name", "age"]

    def test_bundled_host_interop_disabled(self):
        config_loader = ConfigLoader()
        assert config_loader.get_host_interop_config()["enabled"] is False

    def test_custom_config_path(self, write_config):
        path = write_config({"rules": [{"rule_id": "age", "settings": {"min_age": 21}}]})
        config_loader = ConfigLoader(path)
        assert config_loader.local_config_path == path
        assert config_loader.get_rule_configs() == [
            {"rule_id": "age", "settings": {"min_age": 21}}
        ]

    def test_missing_host_interop_section_is_disabled(self, write_config):
        path = write_config({"rules": []})
        assert ConfigLoader(path).get_host_interop_config() == {"enabled": False}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(str(tmp_path / "nope.yaml"))

    def test_config_without_rules_raises(self, write_config):
        path = write_config({"host_interop": {"enabled": False}})
        with pytest.raises(ValueError, match="rules"):
            ConfigLoader(path)

    def test_top_level_list_raises(self, tmp_path):
        path = tmp_path / "local-config.yaml"
        path.write_text("- rule_id: age\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            ConfigLoader(str(path))

    def test_rule_without_rule_id_raises(self, write_config):
        path = write_config({"rules": [{"settings": {"min_age": 21}}]})
        with pytest.raises(ValueError, match=r"rules\[0\].*rule_id"):
            ConfigLoader(path)

    def test_rule_entry_not_a_mapping_raises(self, write_config):
        path = write_config({"rules": ["age"]})
        with pytest.raises(ValueError, match=r"rules\[0\]"):
            ConfigLoader(path)

    def test_rule_settings_not_a_mapping_raises(self, write_config):
        path = write_config({"rules": [{"rule_id": "age", "settings": [18]}]})
        with pytest.raises(ValueError, match="settings"):
            ConfigLoader(path)

    def test_null_host_interop_raises(self, tmp_path):
        path = tmp_path / "local-config.yaml"
        path.write_text("rules:\n  - rule_id: age\nhost_interop:\n")
        with pytest.raises(ValueError, match="host_interop"):
            ConfigLoader(str(path))

    def test_error_names_config_path(self, write_config):
        path = write_config({"rules": [{"settings": {}}]})
        with pytest.raises(ValueError) as exc_info:
            ConfigLoader(path)
        assert path in str(exc_info.value)


class TestRuleLoader:
    """Test RuleLoader."""

    def test_load_rules_in_config_order(self):
        rules = RuleLoader().load_rules([
            {"rule_id": "age"},
            {"rule_id": "first_name"},
        ])
        assert [r.get_id() for r in rules] == ["age", "first_name"]
        assert [r.validates() for r in rules] == [PersonField.AGE, PersonField.FIRST_NAME]

    def test_rules_are_validation_rules(self):
        rules = RuleLoader().load_rules([{"rule_id": "last_name"}])
        assert isinstance(rules[0], ValidationRule)

    def test_settings_are_injected(self):
        rules = RuleLoader().load_rules([{"rule_id": "age", "settings": {"min_age": 65}}])
        assert rules[0].settings == {"min_age": 65}
        assert "65" in rules[0].description()

    def test_class_cache_gives_fresh_instances(self):
        loader = RuleLoader()
        first = loader.load_rules([{"rule_id": "age", "settings": {"min_age": 1}}])[0]
        second = loader.load_rules([{"rule_id": "age", "settings": {"min_age": 2}}])[0]
        assert "age" in loader.loaded_rules
        assert first is not second
        assert second.settings == {"min_age": 2}

    def test_unknown_rule_raises(self):
        with pytest.raises(ImportError, match="middle_name"):
            RuleLoader().load_rules([{"rule_id": "middle_name"}])

    def test_module_without_rule_class_raises(self):
        # rules.base exists but defines no Rule class
        with pytest.raises(AttributeError, match="Rule"):
            RuleLoader().load_rules([{"rule_id": "base"}])

    def test_default_rules_are_shared(self):
        reset_default_rules()
        try:
            assert get_default_rules() is get_default_rules()
            assert [r.get_id() for r in get_default_rules()] == [
                "first_name", "last_name", "age"
            ]
        finally:
            reset_default_rules()


class TestConfiguredRules:
    """Test rules built from non-default settings."""

    def test_min_length(self, strict_rules):
        person = Person(first_name="Al", last_name="Smith", age=30, rules=strict_rules)
        assert person.errors_for("firstName") == "firstName 'Al' is too short."

    def test_reserved_values(self, strict_rules):
        person = Person(first_name="Zod", last_name="Smith", age=30, rules=strict_rules)
        assert person.errors_for("firstName") == (
            "firstName 'Zod' is reserved for extra-dimensional beings!"
        )

    def test_forbidden_values(self, strict_rules):
        person = Person(first_name="Alice", last_name="Roe", age=30, rules=strict_rules)
        assert list(person.get_errors()) == ["lastName cannot be 'Roe'"]

    def test_min_age(self, strict_rules):
        person = Person(first_name="Alice", last_name="Smith", age=20, rules=strict_rules)
        assert list(person.get_errors()) == ["age should be at least 21"]

    def test_no_rules_means_no_errors(self):
        person = Person(rules=[])
        assert person.has_errors() is False


class TestRuleExecutor:
    """Test RuleExecutor."""

    def test_results_per_rule(self):
        person = Person(first_name="Al", last_name="Doe", age=20)
        results = RuleExecutor(get_default_rules()).execute(person)

        assert [r["rule_id"] for r in results] == ["first_name", "last_name", "age"]
        assert [r["status"] for r in results] == ["PASS", "FAIL", "PASS"]

        last_name = results[1]
        assert last_name["field"] == "lastName"
        assert last_name["message"] == "lastName cannot be 'Doe'"
        assert last_name["findings"] == ["lastName cannot be 'Doe'"]
        assert last_name["description"]
        assert last_name["execution_time_ms"] >= 0

    def test_pass_has_empty_message(self):
        person = Person(first_name="Alice", last_name="Smith", age=18)
        results = RuleExecutor(get_default_rules()).execute(person)
        assert all(r["status"] == "PASS" and r["message"] == "" for r in results)

    def test_single_field(self):
        person = Person()
        results = RuleExecutor(get_default_rules()).execute(person, PersonField.AGE)
        assert len(results) == 1
        assert results[0]["rule_id"] == "age"
        assert results[0]["status"] == "FAIL"

    def test_rule_exception_is_reported_as_error(self):
        person = Person(first_name="Alice", last_name="Smith", age=None)
        results = RuleExecutor(get_default_rules()).execute(person, PersonField.AGE)
        assert results[0]["status"] == "ERROR"
        assert results[0]["message"].startswith("TypeError:")
        assert results[0]["findings"] == []
