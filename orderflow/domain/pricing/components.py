"""Order pricing components and their decorators.

Each decorator wraps any OrderComponent, so discount and tax layers can be
stacked in any order and any number of times.
"""
from abc import ABC, abstractmethod

from orderflow.domain.core.exceptions import InvalidArgumentError


class OrderComponent(ABC):
    """A priced, described order."""

    @abstractmethod
    def get_price(self) -> float:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass


class BasicOrder(OrderComponent):
    """Undecorated single-item order."""

    def __init__(self, item: str, base_price: float):
        if base_price < 0:
            raise InvalidArgumentError(
                f"Invalid price: {base_price}. Price must not be negative",
                {"item": item},
            )
        self._item = item
        self._base_price = base_price

    def get_price(self) -> float:
        return self._base_price

    def get_description(self) -> str:
        return f"Order: {self._item}, Price: {self._base_price:g}"


class OrderComponentDecorator(OrderComponent):
    """Base decorator delegating to the wrapped component."""

    def __init__(self, wrapped: OrderComponent):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> OrderComponent:
        return self._wrapped

    def get_price(self) -> float:
        return self._wrapped.get_price()

    def get_description(self) -> str:
        return self._wrapped.get_description()


class DiscountDecorator(OrderComponentDecorator):

    def __init__(self, wrapped: OrderComponent, discount_percentage: float):
        if discount_percentage < 0 or discount_percentage > 100:
            raise InvalidArgumentError(
                "Percentage must be between 0 and 100",
                {"percentage": discount_percentage},
            )
        super().__init__(wrapped)
        self._discount_percentage = discount_percentage

    def get_price(self) -> float:
        original_price = self._wrapped.get_price()
        return original_price * (1 - self._discount_percentage / 100)

    def get_description(self) -> str:
        return f"{self._wrapped.get_description()} with {self._discount_percentage:g}% discount"


class TaxDecorator(OrderComponentDecorator):

    def __init__(self, wrapped: OrderComponent, tax_rate: float):
        if tax_rate < 0:
            raise InvalidArgumentError(
                f"Invalid tax rate: {tax_rate}. Tax rate must not be negative",
                {"tax_rate": tax_rate},
            )
        super().__init__(wrapped)
        self._tax_rate = tax_rate

    def get_price(self) -> float:
        original_price = self._wrapped.get_price()
        return original_price * (1 + self._tax_rate / 100)

    def get_description(self) -> str:
        return f"{self._wrapped.get_description()} + {self._tax_rate:g}% tax"
