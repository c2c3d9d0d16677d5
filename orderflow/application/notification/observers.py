"""Order status observers."""
from abc import ABC, abstractmethod

from orderflow.infrastructure.logging.logger import get_logger


class OrderObserver(ABC):
    """Receives order status changes."""

    @abstractmethod
    def update(self, status: str) -> None:
        pass


class EmailNotifier(OrderObserver):

    def __init__(self):
        self._logger = get_logger(__name__)

    def update(self, status: str) -> None:
        print(f"Email notification sent: Order status changed to {status}")
        self._logger.debug("Email notification sent", status=status)


class SmsNotifier(OrderObserver):

    def __init__(self):
        self._logger = get_logger(__name__)

    def update(self, status: str) -> None:
        print(f"SMS sent: Order status updated to {status}")
        self._logger.debug("SMS sent", status=status)
