import pytest
from orderflow.domain.core.events import OrderCreatedEvent, OrderStatusChangedEvent
from orderflow.domain.core.exceptions import InvalidArgumentError, MissingIdentifierError
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.order.value_objects import OrderItem, OrderStatus


@pytest.mark.parametrize("amount", [0, 0.01, 100, 99999.99])
def test_create_order_starts_pending(amount):
    # Act
    order = Order("order123", amount)

    # Assert
    assert order.id == "order123"
    assert order.amount == amount
    assert order.status == OrderStatus.PENDING
    assert order.status == "pending"


def test_open_order_starts_open():
    # Act
    order = Order.open("123", 100)

    # Assert
    assert order.status == OrderStatus.OPEN


@pytest.mark.parametrize("amount", [-1, -0.01, -100])
def test_negative_amount_is_rejected(amount):
    # Act & Assert
    with pytest.raises(InvalidArgumentError) as exc_info:
        Order("invalid", amount)

    assert "Invalid amount" in str(exc_info.value)
    assert exc_info.value.error_code == "INVALID_ARGUMENT"


@pytest.mark.parametrize("order_id", ["", None])
def test_missing_identifier_is_rejected(order_id):
    # Act & Assert
    with pytest.raises(MissingIdentifierError) as exc_info:
        Order(order_id, 100)

    assert str(exc_info.value) == "Order ID is required"


def test_identifier_checked_before_amount():
    with pytest.raises(MissingIdentifierError):
        Order("", -1)


def test_identifier_is_immutable():
    order = Order("order123", 100)

    with pytest.raises(AttributeError):
        order.id = "other"

    assert order.id == "order123"


def test_complete_sets_completed_and_is_idempotent():
    # Arrange
    order = Order("order123", 100)

    # Act
    order.complete()
    order.complete()

    # Assert
    assert order.status == OrderStatus.COMPLETED


def test_close_sets_closed_and_is_idempotent():
    order = Order.open("123", 100)

    order.close()
    order.close()

    assert order.status == OrderStatus.CLOSED


def test_update_status_accepts_strings():
    order = Order("12345", 100)

    order.update_status("shipped")

    assert order.status == OrderStatus.SHIPPED


def test_update_status_rejects_unknown_status():
    order = Order("12345", 100)

    with pytest.raises(InvalidArgumentError):
        order.update_status("teleported")

    assert order.status == OrderStatus.PENDING


def test_no_transition_table_is_enforced():
    order = Order("12345", 100)
    order.complete()

    order.update_status(OrderStatus.PENDING)

    assert order.status == OrderStatus.PENDING


def test_status_changes_are_recorded_as_events():
    # Arrange
    order = Order("order123", 100)

    # Act
    order.update_status("shipped")
    order.update_status("shipped")
    order.complete()

    # Assert
    events = order.get_domain_events()
    assert isinstance(events[0], OrderCreatedEvent)
    changes = [e for e in events if isinstance(e, OrderStatusChangedEvent)]
    assert [(e.old_status, e.new_status) for e in changes] == [
        ("pending", "shipped"),
        ("shipped", "completed"),
    ]


def test_clear_domain_events():
    order = Order("order123", 100)

    order.clear_domain_events()

    assert order.get_domain_events() == []


def test_add_item_recalculates_amount():
    # Arrange
    order = Order("order123", customer_id="user456")

    # Act
    order.add_item(OrderItem("item1", "prod123", 50.0, 2))
    order.add_item(OrderItem("item2", "prod456", 25.0, 1))

    # Assert
    assert order.amount == 125.0
    assert len(order.items) == 2


def test_remove_item_recalculates_amount():
    order = Order("order123")
    order.add_item(OrderItem("item1", "prod123", 50.0, 2))
    order.add_item(OrderItem("item2", "prod456", 25.0, 1))

    order.remove_item("item1")

    assert order.amount == 25.0
    assert [item.id for item in order.items] == ["item2"]


def test_remove_unknown_item_keeps_amount():
    order = Order("order123")
    order.add_item(OrderItem("item1", "prod123", 10.0, 3))

    order.remove_item("missing")

    assert order.amount == 30.0


@pytest.mark.parametrize("price,quantity", [(-1.0, 1), (10.0, 0), (10.0, -2)])
def test_invalid_items_are_rejected(price, quantity):
    with pytest.raises(InvalidArgumentError):
        OrderItem("item1", "prod123", price, quantity)


def test_to_dict_and_from_dict():
    # Arrange
    order = Order("order123", customer_id="user456")
    order.add_item(OrderItem("item1", "prod123", 50.0, 2))
    order.complete()

    # Act
    data = order.to_dict()
    restored = Order.from_dict(data)

    # Assert
    assert data["orderId"] == "order123"
    assert data["status"] == "completed"
    assert restored == order
    assert restored.status == OrderStatus.COMPLETED
    assert restored.amount == 100.0
    assert restored.customer_id == "user456"


def test_orders_compare_by_identifier():
    assert Order("a", 1) == Order("a", 2)
    assert Order("a", 1) != Order("b", 1)
    assert len({Order("a", 1), Order("a", 5)}) == 1


def test_nan_amount_is_rejected():
    with pytest.raises(InvalidArgumentError) as exc_info:
        Order("o1", float("nan"))

    assert "Invalid amount: nan" in str(exc_info.value)
