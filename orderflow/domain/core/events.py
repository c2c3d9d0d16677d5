from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import uuid


@dataclass(frozen=True)
class OrderCreatedEvent:
    """Event raised when a new order is created."""
    order_id: str
    amount: float
    details: Optional[Dict[str, Any]] = None
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class OrderStatusChangedEvent:
    """Event raised when an order's status changes."""
    order_id: str
    old_status: str
    new_status: str
    details: Optional[Dict[str, Any]] = None
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


# Type alias for all event types
DomainEvent = OrderCreatedEvent | OrderStatusChangedEvent
