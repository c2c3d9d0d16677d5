# orderflow/application/order/facade.py
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.ports import FulfillmentServicePort
from orderflow.domain.payment.value_objects import PaymentResult
from orderflow.infrastructure.logging.logger import get_logger


class OrderFacade:
    """Single entry point over payment, inventory and shipping.

    Collaborators run in a fixed order: payment first (its return value is
    the transaction id), then inventory and shipping for their side effects.
    A collaborator that raises stops processing immediately; steps that
    already ran are not undone.
    """

    def __init__(self,
                 payment_service: FulfillmentServicePort,
                 inventory_service: FulfillmentServicePort,
                 shipping_service: FulfillmentServicePort):
        self._payment_service = payment_service
        self._inventory_service = inventory_service
        self._shipping_service = shipping_service
        self._logger = get_logger(__name__)

    def process_order(self, order: Order) -> PaymentResult:
        """Run every fulfillment step and complete the order."""
        self._logger.debug("Processing order", order_id=order.id, amount=order.amount)

        transaction_id = self._payment_service.process(order.id, order.amount)
        self._inventory_service.process(order.id, order.amount)
        self._shipping_service.process(order.id, order.amount)

        order.complete()
        self._logger.debug("Order completed", order_id=order.id, transaction_id=transaction_id)
        return PaymentResult.completed(transaction_id)
