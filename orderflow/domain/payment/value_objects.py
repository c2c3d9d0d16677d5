"""Payment value objects.

PaymentResult is the single result shape returned by every payment
collaborator (facade, proxy, template method and gateway adapters).
"""
from __future__ import annotations

import time
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentStatus(str, Enum):
    """Payment outcome."""
    SUCCESS = "success"
    COMPLETED = "completed"
    FAILED = "failed"


class PaymentMethod(str, Enum):
    """Payment method used by the template-method payments."""
    CREDIT = "credit"
    DEBIT = "debit"


class TransactionId:
    """Transaction identifier factory."""

    @staticmethod
    def generate(prefix: str = "txn", separator: str = "_") -> str:
        """Build ``<prefix><separator><epoch millis>``."""
        return f"{prefix}{separator}{int(time.time() * 1000)}"


class PaymentResult(BaseModel):
    """Outcome of a processing call."""
    model_config = ConfigDict(frozen=True)

    transaction_id: str
    status: PaymentStatus
    message: Optional[str] = None

    @field_validator("transaction_id")
    @classmethod
    def validate_transaction_id(cls, v: str) -> str:
        if not v:
            raise ValueError("Transaction ID cannot be empty")
        return v

    @classmethod
    def success(cls, transaction_id: str) -> "PaymentResult":
        return cls(transaction_id=transaction_id, status=PaymentStatus.SUCCESS)

    @classmethod
    def completed(cls, transaction_id: str) -> "PaymentResult":
        return cls(transaction_id=transaction_id, status=PaymentStatus.COMPLETED)

    @classmethod
    def failure(cls, transaction_id: str, message: str) -> "PaymentResult":
        return cls(transaction_id=transaction_id, status=PaymentStatus.FAILED, message=message)

    @property
    def is_successful(self) -> bool:
        return self.status in (PaymentStatus.SUCCESS, PaymentStatus.COMPLETED)

    def to_dict(self) -> Dict[str, Any]:
        """Console/output representation."""
        result: Dict[str, Any] = {
            "transactionId": self.transaction_id,
            "status": self.status.value,
        }
        if self.message:
            result["message"] = self.message
        return result


class PaymentDetails(BaseModel):
    """Prepared payment handed from preparation to execution."""
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., gt=0)
    method: PaymentMethod


def format_amount(amount: float) -> str:
    """Render an amount without a trailing ``.0`` for whole values."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)
