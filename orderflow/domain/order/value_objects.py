"""Order value objects."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from orderflow.domain.core.exceptions import InvalidArgumentError, MissingIdentifierError


class OrderStatus(str, Enum):
    """Order status values.

    Statuses only ever move forward in practice, but no transition table is
    enforced; any status may overwrite any other.
    """
    PENDING = "pending"
    OPEN = "open"
    COMPLETED = "completed"
    CLOSED = "closed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    @classmethod
    def from_value(cls, value: Union["OrderStatus", str]) -> "OrderStatus":
        """Coerce a string into an OrderStatus."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [status.value for status in cls]
            raise InvalidArgumentError(
                f"Invalid order status: {value}",
                {"valid_statuses": valid},
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderItem:
    """A single line on an order."""
    id: str
    product_id: str
    price: float
    quantity: int = 1

    def __post_init__(self):
        if not self.id:
            raise MissingIdentifierError("OrderItem")
        if self.price < 0:
            raise InvalidArgumentError(
                f"Invalid item price: {self.price}", {"item_id": self.id}
            )
        if self.quantity <= 0:
            raise InvalidArgumentError(
                f"Invalid item quantity: {self.quantity}", {"item_id": self.id}
            )

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "price": self.price,
            "quantity": self.quantity,
        }
