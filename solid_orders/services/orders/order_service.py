"""OrderService - Dependency Inversion Principle.

Depends on the IShippingService abstraction instead of concrete carriers.
"""

import logging

from solid_orders.domain.models import Order
from solid_orders.services.shipping.interfaces import IShippingService

logger = logging.getLogger(__name__)


class OrderService:
    """Ships orders through an injected shipping service."""

    def __init__(self, shipping_service: IShippingService):
        self.shipping_service = shipping_service

    def ship(self, order: Order) -> None:
        """Ship the order with the configured shipping service."""
        logger.info(f"Shipping order {order.order_id} with {type(self.shipping_service).__name__}")
        self.shipping_service.ship_order(order)
