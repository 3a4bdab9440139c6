"""
Interfaces/Protocols for payment services (Dependency Inversion Principle).

Consumers depend on this contract, not on concrete payment methods.
"""

from decimal import Decimal
from typing import Protocol


class IPaymentProcessor(Protocol):
    """Protocol for payment processing services."""

    def process_payment(self, amount: Decimal) -> None:
        """Process a payment of the given amount."""
        ...
