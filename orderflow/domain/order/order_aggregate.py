# orderflow/domain/order/order_aggregate.py
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any, Union

from orderflow.domain.core.events import DomainEvent, OrderCreatedEvent, OrderStatusChangedEvent
from orderflow.domain.core.exceptions import InvalidArgumentError, MissingIdentifierError
from orderflow.domain.order.value_objects import OrderItem, OrderStatus


@dataclass(eq=False)
class Order:
    """Order aggregate root.

    The identifier is fixed at construction; amount and status stay mutable.
    Construction rejects a negative amount and an empty identifier.
    """
    id: str
    amount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    customer_id: Optional[str] = None
    items: List[OrderItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    _events: List[DomainEvent] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.id:
            raise MissingIdentifierError("Order")
        if self.amount is None or math.isnan(self.amount) or self.amount < 0:
            raise InvalidArgumentError(
                f"Invalid amount: {self.amount}. Amount must not be negative",
                {"order_id": self.id, "amount": self.amount},
            )
        self.status = OrderStatus.from_value(self.status)
        if self.items:
            self._recalculate_amount()

        self._events.append(
            OrderCreatedEvent(order_id=self.id, amount=self.amount)
        )

    def __setattr__(self, name: str, value: Any) -> None:
        # id is write-once
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Order id cannot be changed after construction")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__, self.id))

    @classmethod
    def open(cls, order_id: str, amount: float = 0.0, **kwargs: Any) -> 'Order':
        """Create an order whose lifecycle starts in the open state."""
        return cls(id=order_id, amount=amount, status=OrderStatus.OPEN, **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """Create an Order instance from a dictionary."""
        items = [
            OrderItem(
                id=item['id'],
                product_id=item.get('productId', item.get('product_id', '')),
                price=item['price'],
                quantity=item.get('quantity', 1),
            ) if isinstance(item, dict) else item
            for item in data.get('items', [])
        ]
        return cls(
            id=data.get('id', data.get('orderId', '')),
            amount=data.get('amount', 0.0),
            status=data.get('status', OrderStatus.PENDING),
            customer_id=data.get('customerId', data.get('customer_id')),
            items=items,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to dictionary."""
        result = {
            "orderId": self.id,
            "amount": self.amount,
            "status": self.status.value,
        }
        if self.customer_id:
            result["customerId"] = self.customer_id
        if self.items:
            result["items"] = [item.to_dict() for item in self.items]
        return result

    @property
    def total(self) -> float:
        return self.amount

    def complete(self) -> None:
        """Mark the order completed. Calling it again leaves it completed."""
        self.update_status(OrderStatus.COMPLETED)

    def close(self) -> None:
        """Mark the order closed. Calling it again leaves it closed."""
        self.update_status(OrderStatus.CLOSED)

    def update_status(self, new_status: Union[OrderStatus, str]) -> None:
        """Overwrite the status and record the change."""
        new_status = OrderStatus.from_value(new_status)
        old_status = self.status
        self.status = new_status
        self.updated_at = datetime.now()

        if old_status != new_status:
            self._events.append(
                OrderStatusChangedEvent(
                    order_id=self.id,
                    old_status=old_status.value,
                    new_status=new_status.value,
                )
            )

    def add_item(self, item: OrderItem) -> None:
        """Add an item and recalculate the amount from the item list."""
        self.items.append(item)
        self._recalculate_amount()
        self.updated_at = datetime.now()

    def remove_item(self, item_id: str) -> None:
        """Remove every item with the given id and recalculate the amount."""
        self.items = [item for item in self.items if item.id != item_id]
        self._recalculate_amount()
        self.updated_at = datetime.now()

    def _recalculate_amount(self) -> None:
        self.amount = sum(item.subtotal for item in self.items)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get all recorded domain events."""
        return self._events.copy()

    def clear_domain_events(self) -> None:
        self._events.clear()
