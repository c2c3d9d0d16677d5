import re

from orderflow.domain.order.order_aggregate import Order
from orderflow.infrastructure.services import (
    InventoryChecker,
    InventoryService,
    OrderCalculator,
    PaymentProcessor,
    PaymentService,
    ShippingService,
)


def test_payment_service_returns_transaction_id(capsys):
    transaction_id = PaymentService().process("order123", 99.5)

    assert re.fullmatch(r"txn_\d{13}", transaction_id)
    assert capsys.readouterr().out == "Processing payment for order ID: order123 with value: 99.5\n"


def test_inventory_and_shipping_services(capsys):
    assert InventoryService().process("order123", 100.0) == "inventory-updated"
    assert ShippingService().process("order123", 100.0) == "shipping-processed"

    assert capsys.readouterr().out.splitlines() == [
        "Processing inventory for order ID: order123 with value: 100",
        "Processing shipping for order ID: order123 with value: 100",
    ]


def test_order_steps():
    order = Order("123", 100)

    assert InventoryChecker().check(order) is True
    assert InventoryChecker(available=False).check(order) is False
    assert PaymentProcessor().process(order) is True
    assert PaymentProcessor(approve=False).process(order) is False
    assert OrderCalculator().calculate(order) == 100
