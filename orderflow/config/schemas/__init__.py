"""Configuration schemas."""

from .app_schema import AppConfig
from .gateway_schema import GatewayConfig
from .logging_schema import LoggingConfig
from .pricing_schema import PricingConfig
from .proxy_schema import ProxyConfig

__all__ = ["AppConfig", "GatewayConfig", "LoggingConfig", "PricingConfig", "ProxyConfig"]
