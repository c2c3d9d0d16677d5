import os
import pytest
from unittest.mock import Mock, patch

from orderflow.bootstrap import Application
from orderflow.config import AppConfig, ConfigurationManager, LoggingConfig
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.payment.ports import FulfillmentServicePort, PaymentProcessorPort
from orderflow.domain.payment.value_objects import PaymentResult
from orderflow.infrastructure.logging.logger import setup_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep log records off stdout so console assertions only see printed lines."""
    setup_logging(LoggingConfig(destination="none"))


@pytest.fixture(autouse=True)
def clean_environment():
    """Strip ORDERFLOW_* overrides that would leak into configuration loading."""
    overrides = {key: value for key, value in os.environ.items() if key.startswith("ORDERFLOW_")}
    with patch.dict(os.environ, {}, clear=False):
        for key in overrides:
            del os.environ[key]
        yield


@pytest.fixture
def order():
    return Order("order123", 100)


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def app(app_config):
    return Application(config_manager=ConfigurationManager(app_config))


@pytest.fixture
def mock_payment_service():
    service = Mock(spec=FulfillmentServicePort)
    service.process.return_value = "txn_1700000000000"
    return service


@pytest.fixture
def mock_inventory_service():
    service = Mock(spec=FulfillmentServicePort)
    service.process.return_value = "inventory-updated"
    return service


@pytest.fixture
def mock_shipping_service():
    service = Mock(spec=FulfillmentServicePort)
    service.process.return_value = "shipping-processed"
    return service


@pytest.fixture
def mock_payment_processor():
    processor = Mock(spec=PaymentProcessorPort)
    processor.process_payment.return_value = PaymentResult.success("txn_order123")
    return processor
