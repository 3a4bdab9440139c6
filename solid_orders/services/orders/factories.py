"""
OrderFactory - Factory pattern for creating orders.

This factory encapsulates order creation, including the sample order
used by the entry routine.
"""

from decimal import Decimal
from typing import Iterable

from solid_orders.domain.models import Order

SAMPLE_ORDER_ID = 101
SAMPLE_CUSTOMER_NAME = "Ali"
SAMPLE_ITEMS = ("Laptop", "Mouse", "Keyboard")
SAMPLE_TOTAL = Decimal("1200")


class OrderFactory:
    """Factory for creating Order objects."""

    @staticmethod
    def create_order(
        order_id: int,
        customer_name: str,
        items: Iterable[str],
        total_amount: Decimal | int | float | str,
    ) -> Order:
        """
        Create an Order.

        Args:
            order_id: Order identifier
            customer_name: Customer name
            items: Ordered items, kept in the given order
            total_amount: Total order cost

        Returns:
            Order: Created order
        """
        return Order(
            order_id=order_id,
            customer_name=customer_name,
            items=list(items),
            total_amount=total_amount,
        )

    @staticmethod
    def create_sample_order() -> Order:
        """Create the sample order processed by the entry routine."""
        return OrderFactory.create_order(SAMPLE_ORDER_ID, SAMPLE_CUSTOMER_NAME, SAMPLE_ITEMS, SAMPLE_TOTAL)
