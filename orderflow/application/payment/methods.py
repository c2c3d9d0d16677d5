"""Payment methods implementing only the capabilities they support."""
from datetime import datetime, timedelta

from orderflow.domain.core.exceptions import InvalidArgumentError
from orderflow.domain.payment.ports import DocumentGeneratorPort, PaymentMethodPort, QrCodeGeneratorPort
from orderflow.infrastructure.logging.logger import get_logger

BENEFICIARY = "Example Company Ltd"


def _validate_amount(amount: float) -> None:
    if amount <= 0:
        raise InvalidArgumentError(
            f"Invalid amount: {amount}. Amount must be greater than zero",
            {"amount": amount},
        )


class CreditCard(PaymentMethodPort, DocumentGeneratorPort):

    def __init__(self):
        self._logger = get_logger(__name__)

    def pay(self, amount: float, description: str) -> None:
        _validate_amount(amount)
        print(f"Credit card payment of R$ {amount:.2f} approved: {description}")
        self._logger.debug("Credit card charged", amount=amount)

    def generate_document(self, amount: float, description: str) -> str:
        _validate_amount(amount)
        return "\n".join([
            "=== PAYMENT RECEIPT ===",
            "Method: Credit Card",
            f"Amount: R$ {amount:.2f}",
            f"Description: {description}",
            f"Date: {datetime.now():%Y-%m-%d %H:%M:%S}",
            "Status: Approved",
            "=======================",
        ])


class Boleto(PaymentMethodPort, DocumentGeneratorPort):
    """Bank slip payable within three days."""

    DUE_IN_DAYS = 3

    def __init__(self):
        self._logger = get_logger(__name__)

    def pay(self, amount: float, description: str) -> None:
        _validate_amount(amount)
        print(f"Boleto of R$ {amount:.2f} issued: {description}")
        self._logger.debug("Boleto issued", amount=amount)

    def generate_document(self, amount: float, description: str) -> str:
        _validate_amount(amount)
        due_date = datetime.now() + timedelta(days=self.DUE_IN_DAYS)
        return "\n".join([
            "=== BANK SLIP ===",
            "Barcode: 12345.67890 12345.678901 12345.678901 1 12345678901234",
            f"Amount: R$ {amount:.2f}",
            f"Due date: {due_date:%Y-%m-%d}",
            f"Description: {description}",
            f"Beneficiary: {BENEFICIARY}",
            "=================",
        ])


class Pix(PaymentMethodPort, QrCodeGeneratorPort):
    """Instant transfer paid through a QR code."""

    PIX_KEY = "123e4567-e12b-12d1-a456-426614174000"

    def __init__(self):
        self._logger = get_logger(__name__)

    def pay(self, amount: float, description: str) -> None:
        _validate_amount(amount)
        print(f"PIX transfer of R$ {amount:.2f} sent: {description}")
        self._logger.debug("PIX transfer sent", amount=amount)

    def generate_qr_code(self, amount: float, description: str) -> str:
        _validate_amount(amount)
        return "\n".join([
            "=== PIX QR CODE ===",
            f"00020126580014br.gov.bcb.pix0136{self.PIX_KEY}5204000053039865405{amount:.2f}5802BR",
            f"Amount: R$ {amount:.2f}",
            f"Description: {description}",
            "===================",
        ])
