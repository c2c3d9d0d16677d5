"""Order subject that fans status changes out to observers."""
from typing import List, Union

from orderflow.application.notification.observers import OrderObserver
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.order.value_objects import OrderStatus
from orderflow.infrastructure.logging.logger import get_logger


class OrderSubject:
    """
    Holds one order and an ordered list of observers.

    Observers are notified synchronously in registration order. An observer
    that raises stops the remaining observers from being notified and the
    error reaches the caller of set_status.
    """

    def __init__(self, order: Order):
        self._order = order
        self._observers: List[OrderObserver] = []
        self._logger = get_logger(__name__)

    @property
    def order(self) -> Order:
        return self._order

    @property
    def observers(self) -> List[OrderObserver]:
        return list(self._observers)

    def add_observer(self, observer: OrderObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: OrderObserver) -> None:
        """Remove the first registration of this exact observer, if any."""
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return

    def notify(self) -> None:
        status = self._order.status.value
        self._logger.debug("Notifying observers", order_id=self._order.id,
                           status=status, observers=len(self._observers))
        for observer in list(self._observers):
            observer.update(status)

    def set_status(self, status: Union[OrderStatus, str]) -> None:
        self._order.update_status(status)
        self.notify()
