"""Payment ports."""

from .fulfillment_port import FulfillmentServicePort
from .payment_gateway_port import PaymentGatewayPort
from .payment_method_port import DocumentGeneratorPort, PaymentMethodPort, QrCodeGeneratorPort
from .payment_processor_port import PaymentProcessorPort

__all__ = [
    "FulfillmentServicePort",
    "PaymentGatewayPort",
    "PaymentProcessorPort",
    "PaymentMethodPort",
    "DocumentGeneratorPort",
    "QrCodeGeneratorPort",
]
