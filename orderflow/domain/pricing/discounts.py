"""Discount policies.

New discount kinds are added as new DiscountPolicy subclasses; the order
pricing code never changes to accommodate them.
"""
from abc import ABC, abstractmethod
from typing import Optional

from orderflow.domain.core.exceptions import InvalidArgumentError


class DiscountPolicy(ABC):
    """Transforms an order amount into a discounted amount."""

    @abstractmethod
    def apply(self, order_amount: float) -> float:
        """Return the discounted amount."""

    @property
    def description(self) -> str:
        return self.__class__.__name__


class NoDiscount(DiscountPolicy):

    def apply(self, order_amount: float) -> float:
        return order_amount

    @property
    def description(self) -> str:
        return "no discount"


class FixedDiscount(DiscountPolicy):
    """Subtracts a fixed value."""

    def __init__(self, discount: float):
        if discount < 0:
            raise InvalidArgumentError(
                f"Invalid discount: {discount}. Discount must not be negative",
                {"discount": discount},
            )
        self._discount = discount

    def apply(self, order_amount: float) -> float:
        return order_amount - self._discount

    @property
    def description(self) -> str:
        return f"{self._discount:.2f} off"


class PercentageDiscount(DiscountPolicy):
    """Subtracts a percentage of the amount."""

    def __init__(self, percentage: float):
        self._percentage = percentage
        self._validate()

    def _validate(self) -> None:
        if self._percentage < 0 or self._percentage > 100:
            raise InvalidArgumentError(
                "Percentage must be between 0 and 100",
                {"percentage": self._percentage},
            )

    def apply(self, order_amount: float) -> float:
        self._validate()
        return order_amount - (order_amount * self._percentage) / 100

    @property
    def description(self) -> str:
        return f"{self._percentage:g}% off"


class DiscountedOrder:
    """Order amount with an interchangeable discount policy."""

    def __init__(self, amount: float, discount: Optional[DiscountPolicy] = None):
        if amount < 0:
            raise InvalidArgumentError(
                f"Invalid amount: {amount}. Amount must not be negative",
                {"amount": amount},
            )
        self._amount = amount
        self._discount = discount

    @property
    def base_amount(self) -> float:
        return self._amount

    @property
    def discount(self) -> Optional[DiscountPolicy]:
        return self._discount

    def set_discount(self, discount: DiscountPolicy) -> None:
        self._discount = discount

    def get_amount(self) -> float:
        if self._discount:
            return self._discount.apply(self._amount)
        return self._amount
