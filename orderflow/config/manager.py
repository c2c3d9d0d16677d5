"""Configuration management for the application.

There is no process-wide configuration slot. A ConfigurationManager is built
once at startup and handed to whatever needs it; two managers never share
state.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from orderflow.config.loader import ConfigurationLoader
from orderflow.config.schemas import AppConfig, GatewayConfig, LoggingConfig, PricingConfig, ProxyConfig
from orderflow.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Owns one application configuration.

    Args:
        app_config: Already-built configuration. When omitted the manager
            loads one from ``config_file`` (if given) and the environment.
        config_file: YAML or JSON file path.
    """

    def __init__(self, app_config: Optional[AppConfig] = None,
                 config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        if app_config is None:
            app_config = self._loader.load(config_file)
        # Private copy so the caller's object cannot change behind our back
        self._app_config = app_config.model_copy(deep=True)

    @classmethod
    def from_gateway_settings(cls, api_key: str, timeout: int) -> "ConfigurationManager":
        """Build a manager around explicit gateway settings."""
        try:
            gateway = GatewayConfig(api_key=api_key, timeout=timeout)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid gateway configuration: {e}", ["api_key", "timeout"])
        return cls(AppConfig(gateway=gateway))

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def get_config(self) -> GatewayConfig:
        """Return a copy of the gateway settings."""
        return self._app_config.gateway.model_copy()

    def set_config(self, api_key: str, timeout: int) -> None:
        """Replace the gateway settings held by this manager only."""
        try:
            self._app_config.gateway = GatewayConfig(api_key=api_key, timeout=timeout)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid gateway configuration: {e}", ["api_key", "timeout"])
        logger.debug("Gateway configuration updated (timeout=%s)", timeout)

    def get_logging_config(self) -> LoggingConfig:
        return self._app_config.logging

    def get_proxy_config(self) -> ProxyConfig:
        return self._app_config.proxy

    def get_pricing_config(self) -> PricingConfig:
        return self._app_config.pricing

    def get(self, section: str, default: Any = None) -> Any:
        """Get a configuration section as a dictionary."""
        value = getattr(self._app_config, section, None)
        if value is None:
            return default
        if hasattr(value, "model_dump"):
            return value.model_dump(mode="json")
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self._app_config.to_dict()
