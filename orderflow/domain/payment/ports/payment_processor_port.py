"""Payment processor port used by the access-controlled proxy."""

from abc import ABC, abstractmethod

from orderflow.domain.payment.value_objects import PaymentResult


class PaymentProcessorPort(ABC):
    """Port for processing a payment identified by order id and amount."""

    @abstractmethod
    def process_payment(self, amount: float, order_id: str) -> PaymentResult:
        """Process a payment and return its result."""
