"""Segregated payment method ports.

A payment method implements only the capabilities it supports: every
method can pay, some produce a printable document, others a QR code.
"""

from abc import ABC, abstractmethod


class PaymentMethodPort(ABC):
    """Port for paying an amount."""

    @abstractmethod
    def pay(self, amount: float, description: str) -> None:
        """Pay the given amount."""


class DocumentGeneratorPort(ABC):
    """Port for generating a payment document."""

    @abstractmethod
    def generate_document(self, amount: float, description: str) -> str:
        """Render the payment document."""


class QrCodeGeneratorPort(ABC):
    """Port for generating a payment QR code."""

    @abstractmethod
    def generate_qr_code(self, amount: float, description: str) -> str:
        """Render the QR code payload."""
