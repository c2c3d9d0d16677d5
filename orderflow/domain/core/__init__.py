"""Core domain kernel - exceptions and events shared by every bounded context."""

from .events import DomainEvent, OrderCreatedEvent, OrderStatusChangedEvent
from .value_objects import Role
from .exceptions import (
    AccessDeniedError,
    ConfigurationError,
    DomainException,
    InsufficientFundsError,
    InvalidArgumentError,
    MinimumDepositError,
    MissingIdentifierError,
    OutOfStockError,
    PaymentFailedError,
    ValidationError,
)

__all__ = [
    "Role",
    "DomainEvent",
    "OrderCreatedEvent",
    "OrderStatusChangedEvent",
    "DomainException",
    "ValidationError",
    "InvalidArgumentError",
    "MissingIdentifierError",
    "AccessDeniedError",
    "PaymentFailedError",
    "OutOfStockError",
    "InsufficientFundsError",
    "MinimumDepositError",
    "ConfigurationError",
]
