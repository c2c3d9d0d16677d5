"""Pricing configuration schema."""

from pydantic import BaseModel, Field, field_validator


class PricingConfig(BaseModel):
    """Default discount and tax applied by the pricing scenarios."""

    discount_percentage: float = Field(10.0, description="Default discount percentage")
    fixed_discount: float = Field(10.0, description="Default fixed discount")
    tax_rate: float = Field(5.0, description="Default tax rate percentage")

    @field_validator("discount_percentage")
    @classmethod
    def validate_percentage(cls, v: float) -> float:
        if v < 0 or v > 100:
            raise ValueError("Percentage must be between 0 and 100")
        return v

    @field_validator("fixed_discount", "tax_rate")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Value must not be negative")
        return v
