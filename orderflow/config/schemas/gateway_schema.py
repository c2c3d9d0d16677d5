"""Payment gateway configuration schema."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GatewayConfig(BaseModel):
    """API credentials and timeout handed to payment gateways."""
    model_config = ConfigDict(validate_assignment=True)

    api_key: str = Field("default-key", description="Gateway API key")
    timeout: int = Field(3000, description="Gateway timeout in milliseconds")
    currency: str = Field("BRL", description="Charge currency")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout."""
        if v < 0:
            raise ValueError("Timeout must not be negative")
        return v
