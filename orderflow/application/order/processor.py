"""Order processor composed of single-responsibility collaborators."""
from typing import Protocol

from orderflow.domain.core.exceptions import OutOfStockError, PaymentFailedError
from orderflow.domain.order.order_aggregate import Order
from orderflow.infrastructure.logging.logger import get_logger


class InventoryCheckerProtocol(Protocol):
    def check(self, order: Order) -> bool: ...


class PaymentProcessorProtocol(Protocol):
    def process(self, order: Order) -> bool: ...


class OrderCalculatorProtocol(Protocol):
    def calculate(self, order: Order) -> float: ...


class OrderProcessorService:
    """Sequences stock check, total calculation and payment, then closes the order."""

    def __init__(self,
                 inventory_checker: InventoryCheckerProtocol,
                 payment_processor: PaymentProcessorProtocol,
                 order_calculator: OrderCalculatorProtocol):
        self._inventory_checker = inventory_checker
        self._payment_processor = payment_processor
        self._order_calculator = order_calculator
        self._logger = get_logger(__name__)

    def process_order(self, order: Order) -> float:
        """
        Process an order.

        Returns:
            The calculated total that was charged.

        Raises:
            OutOfStockError: If the inventory check fails
            PaymentFailedError: If the payment is declined
        """
        if not self._inventory_checker.check(order):
            raise OutOfStockError(order.id)

        total = self._order_calculator.calculate(order)

        if not self._payment_processor.process(order):
            raise PaymentFailedError("Payment processing failed", order.id)

        order.close()
        self._logger.debug("Order closed", order_id=order.id, total=total)
        return total
