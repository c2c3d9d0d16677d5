"""Configuration loading from files and environment."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from orderflow.config.schemas import AppConfig
from orderflow.config.utils import expand_config_env_vars
from orderflow.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "ORDERFLOW_GATEWAY_API_KEY": ("gateway", "api_key"),
    "ORDERFLOW_GATEWAY_TIMEOUT": ("gateway", "timeout"),
    "ORDERFLOW_LOG_LEVEL": ("logging", "level"),
    "ORDERFLOW_PROXY_ROLE": ("proxy", "role"),
}


class ConfigurationLoader:
    """Loads raw configuration data and validates it into AppConfig."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """Read a YAML or JSON configuration file."""
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        logger.debug("Loaded configuration from %s", config_file)
        return expand_config_env_vars(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ORDERFLOW_* environment variables on top of file values."""
        result = {key: dict(value) if isinstance(value, dict) else value
                  for key, value in config_data.items()}
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            section_data = result.get(section)
            if section_data is None:
                section_data = result[section] = {}
            elif not isinstance(section_data, dict):
                raise ConfigurationError(f"Section '{section}' must be a mapping", [section])
            section_data[key] = value
            logger.debug("Configuration override from %s", env_var)
        return result

    def load(self, config_file: Optional[str] = None) -> AppConfig:
        """Load, override and validate configuration."""
        config_data: Dict[str, Any] = {}
        if config_file:
            config_data = self.load_from_file(config_file)
        config_data = self.apply_environment_overrides(config_data)
        return self.validate(config_data)

    @staticmethod
    def validate(config_data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", fields)
