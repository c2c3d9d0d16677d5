"""Configuration package."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import AppConfig, GatewayConfig, LoggingConfig, PricingConfig, ProxyConfig

__all__ = [
    "AppConfig",
    "GatewayConfig",
    "LoggingConfig",
    "PricingConfig",
    "ProxyConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
]
