"""
Interfaces/Protocols for shipping services (Interface Segregation Principle).

Shipping has its own contract, separate from payment processing.
"""

from typing import Protocol

from solid_orders.domain.models import Order


class IShippingService(Protocol):
    """Protocol for shipping services."""

    def ship_order(self, order: Order) -> None:
        """Ship the given order."""
        ...
