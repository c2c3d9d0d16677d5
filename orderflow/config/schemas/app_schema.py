"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .gateway_schema import GatewayConfig
from .logging_schema import LoggingConfig
from .pricing_schema import PricingConfig
from .proxy_schema import ProxyConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    gateway: GatewayConfig = Field(default_factory=lambda: GatewayConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    proxy: ProxyConfig = Field(default_factory=lambda: ProxyConfig())
    pricing: PricingConfig = Field(default_factory=lambda: PricingConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
