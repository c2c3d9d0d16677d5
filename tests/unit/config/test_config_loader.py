"""Tests for configuration loading."""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from orderflow.config.loader import ConfigurationLoader
from orderflow.domain.core.exceptions import ConfigurationError
from orderflow.domain.core.value_objects import Role


@pytest.fixture
def loader():
    return ConfigurationLoader()


def test_load_defaults_without_file(loader):
    config = loader.load()

    assert config.gateway.api_key == "default-key"
    assert config.gateway.timeout == 3000
    assert config.proxy.role == "admin"


def test_load_yaml_file(loader, tmp_path):
    # Arrange
    config_file = tmp_path / "orderflow.yml"
    config_file.write_text(yaml.safe_dump({
        "environment": "testing",
        "gateway": {"api_key": "yaml-key", "timeout": 1500},
        "pricing": {"tax_rate": 7.5},
    }))

    # Act
    config = loader.load(str(config_file))

    # Assert
    assert config.environment == "testing"
    assert config.gateway.api_key == "yaml-key"
    assert config.gateway.timeout == 1500
    assert config.pricing.tax_rate == 7.5


def test_load_json_file(loader, tmp_path):
    config_file = tmp_path / "orderflow.json"
    config_file.write_text(json.dumps({"proxy": {"role": "guest", "cache_enabled": False}}))

    config = loader.load(str(config_file))

    assert config.proxy.role == "guest"
    assert config.proxy.cache_enabled is False


def test_empty_file_gives_defaults(loader, tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")

    assert loader.load(str(config_file)).gateway.api_key == "default-key"


def test_missing_file_raises(loader, tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        loader.load(str(tmp_path / "missing.yml"))


def test_malformed_yaml_raises(loader, tmp_path):
    config_file = tmp_path / "bad.yml"
    config_file.write_text("gateway: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        loader.load(str(config_file))


def test_top_level_list_raises(loader, tmp_path):
    config_file = tmp_path / "list.yml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        loader.load(str(config_file))


def test_invalid_values_report_fields(loader):
    with pytest.raises(ConfigurationError) as exc_info:
        loader.validate({"gateway": {"timeout": -1}})

    assert "gateway.timeout" in exc_info.value.missing_fields


def test_environment_overrides_file_values(loader, tmp_path):
    # Arrange
    config_file = tmp_path / "orderflow.yml"
    config_file.write_text(yaml.safe_dump({"gateway": {"api_key": "file-key", "timeout": 1000}}))
    overrides = {
        "ORDERFLOW_GATEWAY_API_KEY": "env-key",
        "ORDERFLOW_GATEWAY_TIMEOUT": "2500",
        "ORDERFLOW_LOG_LEVEL": "debug",
        "ORDERFLOW_PROXY_ROLE": "user",
    }

    # Act
    with patch.dict(os.environ, overrides):
        config = loader.load(str(config_file))

    # Assert
    assert config.gateway.api_key == "env-key"
    assert config.gateway.timeout == 2500
    assert config.logging.level == "DEBUG"
    assert config.proxy.role == "user"


def test_file_values_expand_environment(loader, tmp_path):
    config_file = tmp_path / "orderflow.yml"
    config_file.write_text("gateway:\n  api_key: ${ORDERFLOW_TEST_KEY:fallback-key}\n")

    assert loader.load(str(config_file)).gateway.api_key == "fallback-key"


def test_override_into_empty_section(loader, tmp_path):
    config_file = tmp_path / "orderflow.yml"
    config_file.write_text("gateway:\n")

    with patch.dict(os.environ, {"ORDERFLOW_GATEWAY_API_KEY": "k"}):
        config = loader.load(str(config_file))

    assert config.gateway.api_key == "k"


def test_override_into_non_mapping_section_raises(loader, tmp_path):
    config_file = tmp_path / "orderflow.yml"
    config_file.write_text("gateway: stripe\n")

    with patch.dict(os.environ, {"ORDERFLOW_GATEWAY_API_KEY": "k"}):
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load(str(config_file))

    assert exc_info.value.missing_fields == ["gateway"]


def test_unknown_proxy_role_rejected_at_load(loader):
    with patch.dict(os.environ, {"ORDERFLOW_PROXY_ROLE": "superuser"}):
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load()

    assert "proxy.role" in exc_info.value.missing_fields


def test_proxy_roles_coerced_to_enum(loader):
    with patch.dict(os.environ, {"ORDERFLOW_PROXY_ROLE": "GUEST"}):
        config = loader.load()

    assert config.proxy.role is Role.GUEST
    assert config.proxy.roles == [Role.ADMIN, Role.USER, Role.GUEST]
