"""Payment proxy configuration schema."""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from orderflow.domain.core.value_objects import Role


class ProxyConfig(BaseModel):
    """Access and caching settings for the payment proxy."""

    role: Role = Field(Role.ADMIN, description="Role the CLI proxy scenario runs as")
    cache_enabled: bool = Field(True, description="Memoise successful payments")
    roles: List[Role] = Field(
        default_factory=lambda: list(Role),
        description="Roles exercised by the proxy scenario",
    )

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: Any) -> Any:
        """Accept role names in any case."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("roles", mode="before")
    @classmethod
    def normalize_roles(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [item.lower() if isinstance(item, str) else item for item in v]
        return v
