"""Simulated services."""

from .fulfillment_services import InventoryService, PaymentService, ShippingService
from .order_steps import InventoryChecker, OrderCalculator, PaymentProcessor

__all__ = [
    "PaymentService",
    "InventoryService",
    "ShippingService",
    "InventoryChecker",
    "PaymentProcessor",
    "OrderCalculator",
]
