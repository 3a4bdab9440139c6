"""Shipping services, one class per shipping method."""

import logging

from solid_orders.domain.models import Order

logger = logging.getLogger(__name__)


class BaseShippingService:
    """Announces a shipment on stdout under the method's label."""

    label: str = "Shipping"

    def ship_order(self, order: Order) -> None:
        """Ship the given order."""
        logger.debug(f"{type(self).__name__} shipping order {order.order_id} ({order.items_count} items)")
        print(f"Shipping Order #{order.order_id} via {self.label}")


class StandardShipping(BaseShippingService):
    """Standard shipping service."""

    label = "Standard Shipping"


class ExpressShipping(BaseShippingService):
    """Express shipping service."""

    label = "Express Shipping"
