import pytest
from orderflow.application.payment.proxy import PaymentProxy, RealPaymentProcessor
from orderflow.domain.core.exceptions import AccessDeniedError, InvalidArgumentError
from orderflow.domain.core.value_objects import Role
from orderflow.domain.payment.value_objects import PaymentStatus


class TestPaymentProxy:
    """Tests for the access-controlled caching proxy."""

    def test_admin_payment_forwarded(self, mock_payment_processor):
        # Arrange
        proxy = PaymentProxy(mock_payment_processor, "admin")

        # Act
        result = proxy.process_payment(100, "order123")

        # Assert
        assert result.transaction_id == "txn_order123"
        assert result.status == PaymentStatus.SUCCESS
        mock_payment_processor.process_payment.assert_called_once_with(100, "order123")

    def test_repeat_payment_served_from_cache(self, mock_payment_processor, capsys):
        # Arrange
        proxy = PaymentProxy(mock_payment_processor, Role.ADMIN)

        # Act
        first = proxy.process_payment(100, "order123")
        second = proxy.process_payment(100, "order123")

        # Assert
        assert first == second
        assert mock_payment_processor.process_payment.call_count == 1
        assert "Returning cached result for order order123" in capsys.readouterr().out
        assert proxy.cache_size == 1

    def test_integral_amounts_share_cache_entry(self, mock_payment_processor):
        proxy = PaymentProxy(mock_payment_processor, "admin")

        proxy.process_payment(100, "order123")
        proxy.process_payment(100.0, "order123")

        assert mock_payment_processor.process_payment.call_count == 1

    def test_different_amount_not_cached(self, mock_payment_processor):
        proxy = PaymentProxy(mock_payment_processor, "admin")

        proxy.process_payment(100, "order123")
        proxy.process_payment(200, "order123")

        assert mock_payment_processor.process_payment.call_count == 2
        assert proxy.cache_size == 2

    def test_cache_disabled_always_forwards(self, mock_payment_processor):
        proxy = PaymentProxy(mock_payment_processor, "admin", cache_enabled=False)

        proxy.process_payment(100, "order123")
        proxy.process_payment(100, "order123")

        assert mock_payment_processor.process_payment.call_count == 2
        assert proxy.cache_size == 0

    @pytest.mark.parametrize("role", ["user", "guest"])
    def test_unprivileged_role_denied(self, mock_payment_processor, role):
        # Arrange
        proxy = PaymentProxy(mock_payment_processor, role)

        # Act & Assert
        with pytest.raises(AccessDeniedError) as exc_info:
            proxy.process_payment(100, "order123")

        assert str(exc_info.value) == f"Access denied: role '{role}' cannot process payments"
        mock_payment_processor.process_payment.assert_not_called()

    def test_denial_checked_before_cache(self, mock_payment_processor):
        proxy = PaymentProxy(mock_payment_processor, "guest")

        for _ in range(2):
            with pytest.raises(AccessDeniedError):
                proxy.process_payment(100, "order123")

        assert proxy.cache_size == 0

    def test_unknown_role_rejected(self, mock_payment_processor):
        with pytest.raises(InvalidArgumentError):
            PaymentProxy(mock_payment_processor, "superuser")


def test_real_processor_output(capsys):
    result = RealPaymentProcessor().process_payment(100, "order123")

    assert result.transaction_id == "txn_order123"
    assert capsys.readouterr().out == "Processing payment of 100 for order order123\n"
