"""Order bounded context."""

from .order_aggregate import Order
from .value_objects import OrderItem, OrderStatus

__all__ = ["Order", "OrderItem", "OrderStatus"]
