"""Tests for the configuration manager."""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from storefront.config.manager import ConfigurationManager
from storefront.domain.catalog.value_objects import DuplicatePolicy
from storefront.domain.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment():
    with patch.dict(os.environ, {}, clear=True):
        yield


def test_defaults_without_file():
    manager = ConfigurationManager()

    assert manager.config.catalog.duplicate_policy == DuplicatePolicy.REJECT
    assert manager.config.catalog.enforce_discount_range is True
    assert manager.config.logging.level == "WARNING"
    assert manager.config.logging.file_path == "logs/storefront.log"
    assert manager.config.cli.default_format == "table"


def test_environment_overrides_defaults():
    with patch.dict(os.environ, {"STOREFRONT_DUPLICATE_POLICY": "allow",
                                 "STOREFRONT_LOG_LEVEL": "debug"}):
        manager = ConfigurationManager()

    assert manager.config.catalog.duplicate_policy == DuplicatePolicy.ALLOW
    assert manager.config.logging.level == "DEBUG"


def test_json_file_merged_over_defaults(tmp_path):
    config_file = tmp_path / "storefront.json"
    config_file.write_text(json.dumps({"catalog": {"enforce_discount_range": False}}))

    manager = ConfigurationManager(str(config_file))

    assert manager.config.catalog.enforce_discount_range is False
    assert manager.config.catalog.duplicate_policy == DuplicatePolicy.REJECT
    assert manager.get("logging.destination") == "stdout"


def test_yaml_file(tmp_path):
    config_file = tmp_path / "storefront.yaml"
    config_file.write_text(yaml.dump({"cli": {"default_format": "json", "prompt": "? "}}))

    manager = ConfigurationManager(str(config_file))

    assert manager.config.cli.default_format == "json"
    assert manager.config.cli.prompt == "? "


def test_empty_yaml_file_uses_defaults(tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")

    assert ConfigurationManager(str(config_file)).config.cli.default_format == "table"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        ConfigurationManager(str(tmp_path / "missing.json"))


def test_malformed_file_raises(tmp_path):
    config_file = tmp_path / "broken.json"
    config_file.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Failed to read"):
        ConfigurationManager(str(config_file))


def test_non_mapping_file_raises(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        ConfigurationManager(str(config_file))


def test_invalid_values_raise(tmp_path):
    config_file = tmp_path / "bad.json"
    config_file.write_text(json.dumps({"logging": {"destination": "syslog"}}))

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        ConfigurationManager(str(config_file))


def test_get_with_dotted_keys_and_defaults():
    manager = ConfigurationManager()

    assert manager.get("catalog.duplicate_policy") == "reject"
    assert manager.get("catalog.missing", "fallback") == "fallback"
    assert manager.get_bool("catalog.enforce_discount_range") is True
    assert manager.get_bool("missing.flag") is False


def test_raw_config_is_a_copy():
    manager = ConfigurationManager()
    raw = manager.get_raw_config()
    raw["catalog"]["duplicate_policy"] = "allow"

    assert manager.get("catalog.duplicate_policy") == "reject"


def test_instances_are_independent(tmp_path):
    config_file = tmp_path / "storefront.json"
    config_file.write_text(json.dumps({"cli": {"default_format": "yaml"}}))

    assert ConfigurationManager(str(config_file)).config.cli.default_format == "yaml"
    assert ConfigurationManager().config.cli.default_format == "table"


def test_duplicate_policy_is_case_insensitive():
    with patch.dict(os.environ, {"STOREFRONT_DUPLICATE_POLICY": "ALLOW"}):
        manager = ConfigurationManager()

    assert manager.config.catalog.duplicate_policy == DuplicatePolicy.ALLOW
