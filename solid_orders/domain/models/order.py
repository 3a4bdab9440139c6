"""
Order domain model.

Represents a customer's purchase request. The order only holds data
(single responsibility): paying for it and shipping it are the job of
the payment and shipping services.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Order:
    """
    Immutable order record.

    Fields cannot be reassigned after construction. Orders are not
    hashable because the item list is kept exactly as supplied.

    No business rules are enforced: any identifier, customer name,
    item list or total is accepted as supplied, and the total is never
    derived from the items.

    Attributes:
        order_id: Caller-assigned order identifier
        customer_name: Name of the customer
        items: Ordered items, in insertion order
        total_amount: Total order cost

    Example:
        >>> order = Order(101, "Ali", ["Laptop", "Mouse"], Decimal("1200"))
        >>> order.items_count
        2
    """

    order_id: int
    customer_name: str
    items: list[str]
    total_amount: Decimal

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Normalize the total to Decimal for currency precision."""
        if not isinstance(self.total_amount, Decimal):
            object.__setattr__(self, "total_amount", Decimal(str(self.total_amount)))

    @property
    def items_count(self) -> int:
        """Get number of ordered items."""
        return len(self.items)

    def to_dict(self) -> dict[str, Any]:
        """Convert order to dictionary."""
        return {
            "order_id": self.order_id,
            "customer_name": self.customer_name,
            "items": list(self.items),
            "total_amount": self.total_amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Order":
        """Create order from dictionary."""
        return cls(
            order_id=data["order_id"],
            customer_name=data["customer_name"],
            items=list(data.get("items", [])),
            total_amount=data["total_amount"],
        )
