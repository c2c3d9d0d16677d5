"""Template-method payment processing."""
from abc import ABC, abstractmethod

from orderflow.domain.core.exceptions import InvalidArgumentError
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.value_objects import (
    PaymentDetails,
    PaymentMethod,
    PaymentResult,
    TransactionId,
    format_amount,
)
from orderflow.infrastructure.logging.logger import get_logger


class PaymentTemplate(ABC):
    """Fixed payment workflow with method-specific preparation and execution.

    process_payment always validates, prepares, executes and then completes
    the order, in that order. Subclasses supply prepare_payment and
    execute_payment and may override the two hooks.
    """

    def __init__(self):
        self._logger = get_logger(__name__)

    def process_payment(self, order: Order) -> PaymentResult:
        self.validate_order(order)
        payment_details = self.prepare_payment(order.amount)
        transaction = self.execute_payment(payment_details)
        self.update_order_status(order)
        self._logger.debug(
            "Payment processed",
            order_id=order.id,
            method=payment_details.method.value,
            transaction_id=transaction.transaction_id,
        )
        return transaction

    def validate_order(self, order: Order) -> None:
        if order.amount <= 0:
            raise InvalidArgumentError(
                "Invalid payment amount",
                {"order_id": order.id, "amount": order.amount},
            )

    @abstractmethod
    def prepare_payment(self, amount: float) -> PaymentDetails:
        pass

    @abstractmethod
    def execute_payment(self, details: PaymentDetails) -> PaymentResult:
        pass

    def update_order_status(self, order: Order) -> None:
        order.complete()


class _CardPayment(PaymentTemplate):
    method: PaymentMethod

    def prepare_payment(self, amount: float) -> PaymentDetails:
        return PaymentDetails(amount=amount, method=self.method)

    def execute_payment(self, details: PaymentDetails) -> PaymentResult:
        transaction_id = TransactionId.generate(separator="-")
        print(
            f"Processing {details.method.value} payment of "
            f"{format_amount(details.amount)} using {details.method.value}"
        )
        return PaymentResult.success(transaction_id)


class CreditPayment(_CardPayment):
    method = PaymentMethod.CREDIT


class DebitPayment(_CardPayment):
    method = PaymentMethod.DEBIT
