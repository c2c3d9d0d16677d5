"""Access-controlled, caching payment proxy."""
from typing import Dict, Union

from orderflow.domain.core.exceptions import AccessDeniedError
from orderflow.domain.core.value_objects import Role
from orderflow.domain.payment.ports import PaymentProcessorPort
from orderflow.domain.payment.value_objects import PaymentResult, format_amount
from orderflow.infrastructure.logging.logger import get_logger


class RealPaymentProcessor(PaymentProcessorPort):
    """The processor the proxy guards."""

    def process_payment(self, amount: float, order_id: str) -> PaymentResult:
        print(f"Processing payment of {format_amount(amount)} for order {order_id}")
        return PaymentResult.success(f"txn_{order_id}")


class PaymentProxy(PaymentProcessorPort):
    """
    Guards a payment processor with a role check and memoises its results.

    Only privileged roles may pay; others are refused before the wrapped
    processor is touched. Results are cached per ``<order_id>_<amount>`` for
    the proxy's lifetime, with no size bound or expiry.
    """

    def __init__(self, real_processor: PaymentProcessorPort, user_role: Union[Role, str],
                 cache_enabled: bool = True):
        self._real_processor = real_processor
        self._user_role = Role.from_value(user_role)
        self._cache_enabled = cache_enabled
        self._cache: Dict[str, PaymentResult] = {}
        self._logger = get_logger(__name__)

    @property
    def user_role(self) -> Role:
        return self._user_role

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def process_payment(self, amount: float, order_id: str) -> PaymentResult:
        if not self._user_role.can_process_payments:
            self._logger.warning("Payment refused", role=self._user_role.value, order_id=order_id)
            raise AccessDeniedError(self._user_role.value, "process payments")

        cache_key = f"{order_id}_{format_amount(amount)}"
        if self._cache_enabled and cache_key in self._cache:
            print(f"Returning cached result for order {order_id}")
            return self._cache[cache_key]

        result = self._real_processor.process_payment(amount, order_id)
        if self._cache_enabled:
            self._cache[cache_key] = result
        self._logger.debug("Payment forwarded", order_id=order_id, amount=format_amount(amount))
        return result
