"""Payment gateway adapters.

Each adapter translates an Order into the call shape a specific provider
SDK expects and translates the SDK's answer back into a PaymentResult.
"""
from typing import Optional

from orderflow.config.schemas import GatewayConfig
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.ports import PaymentGatewayPort
from orderflow.domain.payment.value_objects import PaymentResult
from orderflow.infrastructure.gateways.mercado_pago_client import (
    MercadoPagoAPI,
    MercadoPagoConfig,
    MercadoPagoPayer,
    MercadoPagoPaymentParams,
)
from orderflow.infrastructure.gateways.stripe_client import StripeChargeParams, StripeClient
from orderflow.infrastructure.logging.logger import get_logger


def _order_description(order: Order) -> str:
    customer = order.customer_id or "anonymous"
    return f"Order {order.id} - Customer {customer}"


class StripeGatewayPayment(PaymentGatewayPort):
    """Adapts StripeClient to PaymentGatewayPort."""

    def __init__(self, config: Optional[GatewayConfig] = None,
                 client: Optional[StripeClient] = None):
        self._config = config or GatewayConfig()
        self._client = client or StripeClient(self._config.api_key, self._config.timeout)
        self._logger = get_logger(__name__)

    def pay(self, order: Order) -> PaymentResult:
        charge_id = self._client.create_charge(
            StripeChargeParams(
                amount=round(order.total * 100),
                currency=self._config.currency,
                source="tok_visa",
                description=_order_description(order),
            )
        )
        self._logger.debug("Stripe charge created", order_id=order.id, charge_id=charge_id)
        return PaymentResult.success(charge_id)


class MercadoPagoPaymentGateway(PaymentGatewayPort):
    """Adapts MercadoPagoAPI to PaymentGatewayPort."""

    def __init__(self, config: Optional[GatewayConfig] = None,
                 client: Optional[MercadoPagoAPI] = None,
                 payer_email: str = "customer@example.com"):
        self._config = config or GatewayConfig()
        self._client = client or MercadoPagoAPI(
            MercadoPagoConfig(access_token=self._config.api_key, timeout=self._config.timeout)
        )
        self._payer_email = payer_email
        self._logger = get_logger(__name__)

    def pay(self, order: Order) -> PaymentResult:
        payment_id = self._client.create_payment(
            MercadoPagoPaymentParams(
                description=_order_description(order),
                installments=1,
                payer=MercadoPagoPayer(
                    email=self._payer_email,
                    identification_number="12345678",
                ),
                payment_method_id="visa",
                token="card-token",
                transaction_amount=order.total,
            )
        )
        self._logger.debug("Mercado Pago payment created", order_id=order.id, payment_id=payment_id)
        return PaymentResult.success(payment_id)
