"""Payment coordinators."""

from .methods import Boleto, CreditCard, Pix
from .proxy import PaymentProxy, RealPaymentProcessor
from .template import CreditPayment, DebitPayment, PaymentTemplate

__all__ = [
    "PaymentTemplate",
    "CreditPayment",
    "DebitPayment",
    "PaymentProxy",
    "RealPaymentProcessor",
    "CreditCard",
    "Boleto",
    "Pix",
]
