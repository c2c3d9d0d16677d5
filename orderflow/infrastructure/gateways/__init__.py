"""Payment gateway adapters and the simulated provider SDKs they wrap."""

from .adapters import MercadoPagoPaymentGateway, StripeGatewayPayment
from .mercado_pago_client import MercadoPagoAPI
from .stripe_client import StripeClient

__all__ = ["StripeGatewayPayment", "MercadoPagoPaymentGateway", "StripeClient", "MercadoPagoAPI"]
