"""Application bootstrap - builds configuration and logging once and wires services."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from orderflow.application.notification import EmailNotifier, OrderObserver, OrderSubject, SmsNotifier
from orderflow.application.order import OrderFacade, OrderPaymentService, OrderProcessorService
from orderflow.application.payment import CreditPayment, DebitPayment, PaymentProxy, PaymentTemplate, RealPaymentProcessor
from orderflow.config import AppConfig, ConfigurationManager
from orderflow.domain.core.exceptions import InvalidArgumentError
from orderflow.domain.core.value_objects import Role
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.ports import PaymentGatewayPort, PaymentProcessorPort
from orderflow.domain.payment.value_objects import PaymentMethod
from orderflow.infrastructure.gateways import MercadoPagoPaymentGateway, StripeGatewayPayment
from orderflow.infrastructure.logging.logger import get_logger, setup_logging
from orderflow.infrastructure.services import (
    InventoryChecker,
    InventoryService,
    OrderCalculator,
    PaymentProcessor,
    PaymentService,
    ShippingService,
)

GATEWAYS = ("stripe", "mercadopago")


class Application:
    """Composition root.

    Owns the one ConfigurationManager for the process and passes the
    relevant configuration into every service it builds.
    """

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None,
                 log_level: Optional[str] = None) -> None:
        self.config_path = config_path
        self._config_manager = config_manager or ConfigurationManager(config_file=config_path)
        self._log_level = log_level
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        return self._config_manager.app_config

    def initialize(self) -> bool:
        """Configure logging. Safe to call more than once."""
        if self._initialized:
            return True
        logging_config = self.config.logging
        if self._log_level:
            logging_config = logging_config.model_copy(update={"level": self._log_level.upper()})
        setup_logging(logging_config)
        self._initialized = True
        self.logger.debug("Application initialized", environment=self.config.environment)
        return True

    def create_order_facade(self) -> OrderFacade:
        return OrderFacade(
            payment_service=PaymentService(),
            inventory_service=InventoryService(),
            shipping_service=ShippingService(),
        )

    def create_order_processor(self, in_stock: bool = True, approve_payment: bool = True) -> OrderProcessorService:
        return OrderProcessorService(
            inventory_checker=InventoryChecker(available=in_stock),
            payment_processor=PaymentProcessor(approve=approve_payment),
            order_calculator=OrderCalculator(),
        )

    def create_payment_gateway(self, name: str) -> PaymentGatewayPort:
        gateway_config = self._config_manager.get_config()
        if name == "stripe":
            return StripeGatewayPayment(gateway_config)
        if name == "mercadopago":
            return MercadoPagoPaymentGateway(gateway_config)
        raise InvalidArgumentError(f"Unknown gateway: {name}", {"valid_gateways": list(GATEWAYS)})

    def create_checkout(self, gateway_name: str) -> OrderPaymentService:
        return OrderPaymentService(self.create_payment_gateway(gateway_name))

    def create_payment_proxy(self, role: Union[Role, str, None] = None,
                             processor: Optional[PaymentProcessorPort] = None) -> PaymentProxy:
        proxy_config = self._config_manager.get_proxy_config()
        return PaymentProxy(
            processor or RealPaymentProcessor(),
            role if role is not None else proxy_config.role,
            cache_enabled=proxy_config.cache_enabled,
        )

    def create_payment_template(self, method: Union[PaymentMethod, str]) -> PaymentTemplate:
        try:
            method = PaymentMethod(method)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown payment method: {method}",
                {"valid_methods": [m.value for m in PaymentMethod]},
            )
        if method == PaymentMethod.CREDIT:
            return CreditPayment()
        return DebitPayment()

    def create_order_subject(self, order: Order,
                             observers: Optional[Iterable[OrderObserver]] = None) -> OrderSubject:
        subject = OrderSubject(order)
        for observer in observers if observers is not None else (EmailNotifier(), SmsNotifier()):
            subject.add_observer(observer)
        return subject
