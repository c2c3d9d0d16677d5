"""Simulated Mercado Pago SDK client."""
from dataclasses import dataclass

from orderflow.domain.payment.value_objects import TransactionId
from orderflow.infrastructure.logging.logger import get_logger


@dataclass(frozen=True)
class MercadoPagoConfig:
    access_token: str
    base_url: str = "https://api.mercadopago.com"
    timeout: int = 3000


@dataclass(frozen=True)
class MercadoPagoPayer:
    email: str
    identification_number: str
    identification_type: str = "CPF"


@dataclass(frozen=True)
class MercadoPagoPaymentParams:
    description: str
    installments: int
    payer: MercadoPagoPayer
    payment_method_id: str
    token: str
    transaction_amount: float


class MercadoPagoAPI:
    """Stand-in for the Mercado Pago SDK; prints instead of calling the API."""

    def __init__(self, config: MercadoPagoConfig):
        self._config = config
        self._logger = get_logger(__name__)
        self._logger.debug("Mercado Pago client initialized", base_url=config.base_url)

    def create_payment(self, params: MercadoPagoPaymentParams) -> str:
        """Create a payment and return its id."""
        print("Mercado Pago: processing payment...")
        print(f"   Amount: R$ {params.transaction_amount:.2f}")
        print(f"   Installments: {params.installments}x")
        print(f"   Method: {params.payment_method_id}")
        print(f"   Customer: {params.payer.email}")
        print(f"   Description: {params.description}")
        print("   Payment processed successfully!")
        return TransactionId.generate(prefix="mp")
