"""Single-purpose steps used by the order processor."""

from orderflow.domain.order.order_aggregate import Order
from orderflow.infrastructure.logging.logger import get_logger


class InventoryChecker:
    """Checks stock for an order."""

    def __init__(self, available: bool = True):
        self._available = available
        self._logger = get_logger(__name__)

    def check(self, order: Order) -> bool:
        self._logger.debug("Checking inventory", order_id=order.id, available=self._available)
        return self._available


class PaymentProcessor:
    """Charges an order; reports success as a boolean."""

    def __init__(self, approve: bool = True):
        self._approve = approve
        self._logger = get_logger(__name__)

    def process(self, order: Order) -> bool:
        self._logger.debug("Processing payment", order_id=order.id, approved=self._approve)
        return self._approve


class OrderCalculator:
    """Computes the amount to charge."""

    def calculate(self, order: Order) -> float:
        return order.total
