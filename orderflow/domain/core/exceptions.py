# orderflow/domain/core/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for output."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class InvalidArgumentError(ValidationError):
    """Raised when an argument is outside its allowed range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_ARGUMENT", details)


class MissingIdentifierError(ValidationError):
    """Raised when a required identifier is empty or absent."""

    def __init__(self, entity_type: str = "Order"):
        super().__init__(
            f"{entity_type} ID is required",
            "MISSING_IDENTIFIER",
            {"entity_type": entity_type},
        )
        self.entity_type = entity_type


class AccessDeniedError(DomainException):
    """Raised when a caller's role does not allow the operation."""

    def __init__(self, role: str, operation: str):
        super().__init__(
            f"Access denied: role '{role}' cannot {operation}",
            "ACCESS_DENIED",
            {"role": role, "operation": operation},
        )
        self.role = role
        self.operation = operation


class PaymentFailedError(DomainException):
    """Raised when a payment collaborator reports failure."""

    def __init__(self, message: str = "Payment processing failed",
                 order_id: Optional[str] = None):
        super().__init__(message, "PAYMENT_FAILED", {"order_id": order_id})
        self.order_id = order_id


class OutOfStockError(DomainException):
    """Raised when inventory cannot satisfy an order."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Inventory check failed for order {order_id}",
            "OUT_OF_STOCK",
            {"order_id": order_id},
        )
        self.order_id = order_id


class InsufficientFundsError(DomainException):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: float, available: float, message: str = "Insufficient funds"):
        super().__init__(
            message,
            "INSUFFICIENT_FUNDS",
            {"requested": requested, "available": available},
        )
        self.requested = requested
        self.available = available


class MinimumDepositError(ValidationError):
    """Raised when a deposit is below the account minimum."""

    def __init__(self, amount: float, minimum: float):
        super().__init__(
            f"Minimum deposit is {minimum:.2f}",
            "MINIMUM_DEPOSIT",
            {"amount": amount, "minimum": minimum},
        )
        self.amount = amount
        self.minimum = minimum


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"fields": missing_fields or []})
        self.missing_fields = missing_fields or []
