"""Payment bounded context - result types and ports."""

from .value_objects import PaymentDetails, PaymentMethod, PaymentResult, PaymentStatus, TransactionId, format_amount

__all__ = [
    "PaymentDetails",
    "PaymentMethod",
    "PaymentResult",
    "PaymentStatus",
    "TransactionId",
    "format_amount",
]
