"""Pricing - discount strategies and decorated order components."""

from .components import BasicOrder, DiscountDecorator, OrderComponent, OrderComponentDecorator, TaxDecorator
from .discounts import DiscountedOrder, DiscountPolicy, FixedDiscount, NoDiscount, PercentageDiscount

__all__ = [
    "OrderComponent",
    "OrderComponentDecorator",
    "BasicOrder",
    "DiscountDecorator",
    "TaxDecorator",
    "DiscountPolicy",
    "NoDiscount",
    "FixedDiscount",
    "PercentageDiscount",
    "DiscountedOrder",
]
