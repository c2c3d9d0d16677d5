"""Simulated Stripe SDK client."""
from dataclasses import dataclass

from orderflow.domain.payment.value_objects import TransactionId
from orderflow.infrastructure.logging.logger import get_logger


@dataclass(frozen=True)
class StripeChargeParams:
    amount: int  # cents
    currency: str
    source: str
    description: str


class StripeClient:
    """Stand-in for the Stripe client; prints instead of calling the API."""

    def __init__(self, api_key: str, timeout: int = 3000):
        self._api_key = api_key
        self._timeout = timeout
        self._logger = get_logger(__name__)
        self._logger.debug("Stripe client initialized", timeout=timeout)

    def create_charge(self, params: StripeChargeParams) -> str:
        """Create a charge and return its id."""
        print("Stripe: processing payment...")
        print(f"   Amount: R$ {params.amount / 100:.2f}")
        print(f"   Currency: {params.currency}")
        print(f"   Description: {params.description}")
        print("   Payment processed successfully!")
        return TransactionId.generate(prefix="ch")
