"""Order notifications."""

from .observers import EmailNotifier, OrderObserver, SmsNotifier
from .subject import OrderSubject

__all__ = ["OrderObserver", "EmailNotifier", "SmsNotifier", "OrderSubject"]
