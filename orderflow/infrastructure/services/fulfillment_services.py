"""Simulated fulfillment services used behind the order facade."""

from orderflow.domain.payment.ports import FulfillmentServicePort
from orderflow.domain.payment.value_objects import TransactionId, format_amount
from orderflow.infrastructure.logging.logger import get_logger


class PaymentService(FulfillmentServicePort):
    """Charges the order and returns the transaction id."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def process(self, order_id: str, amount: float) -> str:
        print(f"Processing payment for order ID: {order_id} with value: {format_amount(amount)}")
        transaction_id = TransactionId.generate()
        self._logger.debug("Payment processed", order_id=order_id, transaction_id=transaction_id)
        return transaction_id


class InventoryService(FulfillmentServicePort):
    """Reserves stock for the order."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def process(self, order_id: str, amount: float) -> str:
        print(f"Processing inventory for order ID: {order_id} with value: {format_amount(amount)}")
        self._logger.debug("Inventory updated", order_id=order_id)
        return "inventory-updated"


class ShippingService(FulfillmentServicePort):
    """Schedules shipment of the order."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def process(self, order_id: str, amount: float) -> str:
        print(f"Processing shipping for order ID: {order_id} with value: {format_amount(amount)}")
        self._logger.debug("Shipping scheduled", order_id=order_id)
        return "shipping-processed"
