"""Order coordinators."""

from .checkout import OrderPaymentService
from .facade import OrderFacade
from .processor import OrderProcessorService

__all__ = ["OrderFacade", "OrderProcessorService", "OrderPaymentService"]
