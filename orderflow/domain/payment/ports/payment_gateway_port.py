"""Payment gateway port for order checkout."""

from abc import ABC, abstractmethod

from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.value_objects import PaymentResult


class PaymentGatewayPort(ABC):
    """Port for charging an order through an external payment provider."""

    @abstractmethod
    def pay(self, order: Order) -> PaymentResult:
        """Charge the order's total."""
