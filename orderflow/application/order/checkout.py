"""Checkout that depends only on the payment gateway port."""

from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.ports import PaymentGatewayPort
from orderflow.domain.payment.value_objects import PaymentResult
from orderflow.infrastructure.logging.logger import get_logger


class OrderPaymentService:
    """Charges orders through whichever gateway it was given."""

    def __init__(self, gateway: PaymentGatewayPort):
        self._gateway = gateway
        self._logger = get_logger(__name__)

    def process(self, order: Order) -> PaymentResult:
        self._logger.debug("Charging order", order_id=order.id, gateway=type(self._gateway).__name__)
        return self._gateway.pay(order)
