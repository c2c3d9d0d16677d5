"""Fulfillment service port for facade collaborators."""

from abc import ABC, abstractmethod


class FulfillmentServicePort(ABC):
    """Port for a single fulfillment step (payment, inventory, shipping)."""

    @abstractmethod
    def process(self, order_id: str, amount: float) -> str:
        """Run the step and return a tag describing its outcome."""
